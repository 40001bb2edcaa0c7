"""Pydantic schemas for API request/response validation"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from tender_crm.domain.models import AssignmentStatus, InstrumentMode


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    def to_columns(self) -> Dict[str, Any]:
        """
        Explicitly-set fields keyed by attribute name.

        Nested models and lists become JSON-ready camelCase documents;
        scalars such as datetimes are passed through for the ORM columns.
        """
        dumped = self.model_dump(mode="json", by_alias=True, exclude_unset=True)
        columns: Dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            key = field.alias or name
            if key not in dumped:
                continue
            value = getattr(self, name)
            columns[name] = dumped[key] if isinstance(value, (BaseModel, list, dict)) else value
        return columns


class DocumentModel(CamelModel):
    """Embedded document that keeps fields it does not declare"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class MessageResponse(BaseModel):
    message: str


# Financial requests

class InstrumentDetails(DocumentModel):
    """Instrument data supplied when a request is processed"""

    mode: Optional[InstrumentMode] = None
    processed_date: Optional[str] = None
    expiry_date: Optional[str] = None
    issuing_bank: Optional[str] = None
    document_url: Optional[str] = None


class FinancialRequestCreate(CamelModel):
    """Request body for POST /api/v1/financials"""

    # Required fields are checked by the ledger so the error names the field
    tender_id: Optional[str] = None
    type: Optional[str] = None
    amount: Any = None
    notes: Optional[str] = None
    expiry_date: Optional[str] = None


class FinancialRequestUpdate(CamelModel):
    """Request body for PUT /api/v1/financials/{id}"""

    status: Optional[str] = None
    reason: Optional[str] = None
    instrument: Optional[InstrumentDetails] = None


class FinancialRequestResponse(CamelModel):
    id: str
    tender_id: str
    type: str
    amount: float
    status: str
    requested_by_id: str
    request_date: datetime
    notes: Optional[str] = None
    approver_id: Optional[str] = None
    approval_date: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    expiry_date: Optional[str] = None
    instrument_details: Optional[Dict[str, Any]] = None
    created_at: datetime
    updated_at: datetime


# Tenders

class HistoryEntry(CamelModel):
    """Single audit entry"""

    user_id: str
    user: str
    action: str
    timestamp: str
    details: Optional[str] = None


class FinancialRecord(DocumentModel):
    amount: Optional[float] = None
    mode: Optional[InstrumentMode] = None
    submitted_date: Optional[str] = None
    document_url: Optional[str] = None


class EmdRecord(FinancialRecord):
    expiry_date: Optional[str] = None
    refund_status: Optional[str] = None


class PbgRecord(FinancialRecord):
    issuing_bank: Optional[str] = None
    expiry_date: Optional[str] = None
    status: Optional[str] = None


class SdRecord(FinancialRecord):
    expiry_date: Optional[str] = None
    status: Optional[str] = None


class AssignmentResponse(CamelModel):
    status: AssignmentStatus
    notes: Optional[str] = None
    responded_at: Optional[str] = None


class ChecklistItem(CamelModel):
    id: str
    text: str
    completed: bool = False


class TenderDocument(DocumentModel):
    id: Optional[str] = None
    name: Optional[str] = None
    url: Optional[str] = None
    type: Optional[str] = None
    mime_type: Optional[str] = None
    uploaded_at: Optional[str] = None
    uploaded_by_id: Optional[str] = None


class ProcessStageLog(CamelModel):
    user_id: str
    user_name: str
    timestamp: str
    action: str


class ProcessStage(DocumentModel):
    status: Optional[str] = None
    notes: Optional[str] = None
    documents: List[TenderDocument] = Field(default_factory=list)
    history: List[ProcessStageLog] = Field(default_factory=list)
    updated_at: Optional[str] = None
    updated_by_id: Optional[str] = None


class Competitor(CamelModel):
    name: str
    price: Optional[float] = None
    notes: Optional[str] = None


class TenderFields(CamelModel):
    """Tender fields that callers may set directly"""

    tender_number: Optional[str] = None
    jurisdiction: Optional[str] = None
    department: Optional[str] = None
    status: Optional[str] = None
    workflow_stage: Optional[str] = None
    opening_date: Optional[datetime] = None
    description: Optional[str] = None
    source: Optional[str] = None
    oem_id: Optional[str] = None
    product_id: Optional[str] = None
    item_category: Optional[str] = None
    total_quantity: Optional[int] = None
    emd_amount: Optional[float] = None
    epbg_percentage: Optional[float] = None
    epbg_duration: Optional[int] = None
    contract_status: Optional[str] = None
    payment_status: Optional[str] = None
    reason_for_loss: Optional[str] = None
    cost: Optional[float] = None
    amount_paid: Optional[float] = None
    assigned_to: Optional[List[str]] = None
    checklists: Optional[Dict[str, List[ChecklistItem]]] = None
    tender_fee: Optional[FinancialRecord] = None
    emd: Optional[EmdRecord] = None
    pbg: Optional[PbgRecord] = None
    sd: Optional[SdRecord] = None
    gem_fee: Optional[Dict[str, Any]] = None
    negotiation_details: Optional[Dict[str, Any]] = None
    competitors: Optional[List[Competitor]] = None
    documents: Optional[List[TenderDocument]] = None
    post_award_process: Optional[Dict[str, ProcessStage]] = None


class TenderCreate(TenderFields):
    """Request body for POST /api/v1/tenders"""

    client_id: Optional[str] = None
    title: str = Field(..., min_length=1)
    department: str = Field(..., min_length=1)
    deadline: datetime
    value: float = Field(..., ge=0)


class TenderUpdate(TenderFields):
    """Request body for PUT /api/v1/tenders/{id}; history is not writable"""

    title: Optional[str] = None
    deadline: Optional[datetime] = None
    value: Optional[float] = None


class AssignmentReply(CamelModel):
    """Request body for POST /api/v1/tenders/{id}/respond"""

    status: AssignmentStatus
    notes: Optional[str] = None


class TenderResponse(CamelModel):
    id: str
    tender_number: Optional[str] = None
    jurisdiction: Optional[str] = None
    title: str
    department: str
    client_name: str
    client_id: str
    status: str
    workflow_stage: str
    deadline: datetime
    opening_date: Optional[datetime] = None
    value: float
    description: Optional[str] = None
    source: Optional[str] = None
    oem_id: Optional[str] = None
    product_id: Optional[str] = None
    item_category: Optional[str] = None
    total_quantity: Optional[int] = None
    emd_amount: Optional[float] = None
    epbg_percentage: Optional[float] = None
    epbg_duration: Optional[int] = None
    contract_status: Optional[str] = None
    payment_status: Optional[str] = None
    reason_for_loss: Optional[str] = None
    cost: Optional[float] = None
    amount_paid: Optional[float] = None
    assigned_to: List[str] = Field(default_factory=list)
    assignment_responses: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    history: List[HistoryEntry] = Field(default_factory=list)
    checklists: Dict[str, List[Dict[str, Any]]] = Field(default_factory=dict)
    tender_fee: Optional[Dict[str, Any]] = None
    emd: Optional[Dict[str, Any]] = None
    pbg: Optional[Dict[str, Any]] = None
    sd: Optional[Dict[str, Any]] = None
    gem_fee: Optional[Dict[str, Any]] = None
    negotiation_details: Optional[Dict[str, Any]] = None
    competitors: List[Dict[str, Any]] = Field(default_factory=list)
    documents: List[Dict[str, Any]] = Field(default_factory=list)
    post_award_process: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime


# Clients

class Contact(CamelModel):
    id: str
    name: str
    role: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    is_primary: bool = False


class Interaction(CamelModel):
    id: str
    type: Optional[str] = Field(None, pattern="^(Call|Email|Meeting)$")
    notes: Optional[str] = None
    user_id: Optional[str] = None
    user: Optional[str] = None
    timestamp: Optional[str] = None


class ClientCreate(CamelModel):
    """Request body for POST /api/v1/clients"""

    name: str = Field(..., min_length=1)
    industry: Optional[str] = None
    gstin: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
    notes: Optional[str] = None
    potential_value: Optional[float] = None
    source: Optional[str] = None


class ClientUpdate(CamelModel):
    """Request body for PUT /api/v1/clients/{id}; history is not writable"""

    name: Optional[str] = None
    industry: Optional[str] = None
    gstin: Optional[str] = None
    revenue: Optional[float] = None
    joined_date: Optional[datetime] = None
    category: Optional[str] = None
    status: Optional[str] = None
    notes: Optional[str] = None
    potential_value: Optional[float] = None
    source: Optional[str] = None
    contacts: Optional[List[Contact]] = None
    interactions: Optional[List[Interaction]] = None


class ClientResponse(CamelModel):
    id: str
    name: str
    industry: Optional[str] = None
    gstin: Optional[str] = None
    revenue: Optional[float] = None
    joined_date: Optional[datetime] = None
    status: Optional[str] = None
    category: Optional[str] = None
    source: Optional[str] = None
    notes: Optional[str] = None
    potential_value: Optional[float] = None
    contacts: List[Dict[str, Any]] = Field(default_factory=list)
    interactions: List[Dict[str, Any]] = Field(default_factory=list)
    history: List[HistoryEntry] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


# Users

class LoginRequest(CamelModel):
    username: str
    password: str


class UserCreate(CamelModel):
    """Request body for POST /api/v1/users"""

    name: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1)
    avatar_url: Optional[str] = None
    department: Optional[str] = None
    designation: Optional[str] = None
    specializations: Any = None


class UserUpdate(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    avatar_url: Optional[str] = None
    status: Optional[str] = None
    department: Optional[str] = None
    designation: Optional[str] = None
    specializations: Any = None


class UserResponse(CamelModel):
    id: str
    name: str
    username: str
    email: str
    role: str
    avatar_url: Optional[str] = None
    status: Optional[str] = None
    department: Optional[str] = None
    designation: Optional[str] = None
    specializations: List[str] = Field(default_factory=list)


# OEMs and products

class OemCreate(CamelModel):
    name: str = Field(..., min_length=1)
    contact_person: str
    email: str
    phone: str
    website: Optional[str] = None
    area: Optional[str] = None
    region: Optional[str] = None
    account_manager: Optional[str] = None
    account_manager_status: Optional[str] = None


class OemUpdate(CamelModel):
    name: Optional[str] = None
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    area: Optional[str] = None
    region: Optional[str] = None
    account_manager: Optional[str] = None
    account_manager_status: Optional[str] = None


class OemResponse(OemCreate):
    id: str
    created_at: datetime
    updated_at: datetime


class ProductCreate(CamelModel):
    name: str = Field(..., min_length=1)
    documents: List[TenderDocument] = Field(default_factory=list)


class ProductUpdate(CamelModel):
    name: Optional[str] = None
    documents: Optional[List[TenderDocument]] = None


class ProductResponse(CamelModel):
    id: str
    name: str
    documents: List[Dict[str, Any]] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


# Admin lookups

class NamedItemCreate(CamelModel):
    name: str = Field(..., min_length=1)


class NamedItemResponse(CamelModel):
    id: str
    name: str


class TemplateCreate(CamelModel):
    name: str = Field(..., min_length=1)
    content: str


class TemplateUpdate(CamelModel):
    name: Optional[str] = None
    content: Optional[str] = None


class TemplateResponse(CamelModel):
    id: str
    name: str
    content: str
