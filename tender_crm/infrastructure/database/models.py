"""SQLAlchemy ORM models for CRM documents"""

from sqlalchemy import Column, String, Float, Integer, DateTime, Text, JSON
from sqlalchemy.orm import declarative_base
from tender_crm.utils.date_utils import utcnow

Base = declarative_base()


class TimestampMixin:
    """createdAt / updatedAt bookkeeping"""

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


class FinancialRequest(TimestampMixin, Base):
    """Request for a financial instrument (EMD, PBG, SD) against a tender"""

    __tablename__ = "financial_request"

    id = Column(String(64), primary_key=True)
    tender_id = Column(String(64), nullable=False, index=True)  # not a foreign key
    type = Column(Text, nullable=False)
    amount = Column(Float, nullable=False)
    status = Column(Text, nullable=False, default="Pending Approval")
    requested_by_id = Column(Text, nullable=False)
    request_date = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    notes = Column(Text, nullable=True)
    approver_id = Column(Text, nullable=True)
    approval_date = Column(DateTime(timezone=True), nullable=True)
    rejection_reason = Column(Text, nullable=True)
    expiry_date = Column(Text, nullable=True)
    instrument_details = Column(JSON, nullable=True)


class Tender(TimestampMixin, Base):
    """Tender with embedded financial slots and audit history"""

    __tablename__ = "tender"

    id = Column(String(64), primary_key=True)
    tender_number = Column(Text, nullable=True)
    jurisdiction = Column(Text, nullable=True)
    title = Column(Text, nullable=False)
    department = Column(Text, nullable=False)
    client_name = Column(Text, nullable=False)
    client_id = Column(String(64), nullable=False, index=True)
    status = Column(Text, nullable=False)
    workflow_stage = Column(Text, nullable=False)
    deadline = Column(DateTime(timezone=True), nullable=False)
    opening_date = Column(DateTime(timezone=True), nullable=True)
    value = Column(Float, nullable=False)
    description = Column(Text, nullable=True)
    source = Column(Text, nullable=True)
    oem_id = Column(Text, nullable=True)
    product_id = Column(Text, nullable=True)
    item_category = Column(Text, nullable=True)
    total_quantity = Column(Integer, nullable=True)
    emd_amount = Column(Float, nullable=True)
    epbg_percentage = Column(Float, nullable=True)
    epbg_duration = Column(Integer, nullable=True)
    contract_status = Column(Text, nullable=True)
    payment_status = Column(Text, nullable=True)
    reason_for_loss = Column(Text, nullable=True)
    cost = Column(Float, nullable=True)
    amount_paid = Column(Float, nullable=True)

    # Embedded documents
    assigned_to = Column(JSON, nullable=False, default=list)
    assignment_responses = Column(JSON, nullable=False, default=dict)
    history = Column(JSON, nullable=False, default=list)
    checklists = Column(JSON, nullable=False, default=dict)
    tender_fee = Column(JSON, nullable=True)
    emd = Column(JSON, nullable=True)
    pbg = Column(JSON, nullable=True)
    sd = Column(JSON, nullable=True)
    gem_fee = Column(JSON, nullable=True)
    negotiation_details = Column(JSON, nullable=True)
    competitors = Column(JSON, nullable=False, default=list)
    documents = Column(JSON, nullable=False, default=list)
    post_award_process = Column(JSON, nullable=False, default=dict)


class Client(TimestampMixin, Base):
    """Customer organisation"""

    __tablename__ = "client"

    id = Column(String(64), primary_key=True)
    name = Column(Text, nullable=False)
    industry = Column(Text, nullable=True)
    gstin = Column(Text, nullable=True)
    revenue = Column(Float, nullable=True)
    joined_date = Column(DateTime(timezone=True), nullable=True)
    status = Column(Text, nullable=True)
    category = Column(Text, nullable=True)
    source = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    potential_value = Column(Float, nullable=True)
    contacts = Column(JSON, nullable=False, default=list)
    interactions = Column(JSON, nullable=False, default=list)
    history = Column(JSON, nullable=False, default=list)


class User(TimestampMixin, Base):
    """CRM user"""

    __tablename__ = "crm_user"

    id = Column(String(64), primary_key=True)
    name = Column(Text, nullable=False)
    username = Column(String(255), nullable=False, unique=True)
    email = Column(String(255), nullable=False, unique=True)
    role = Column(Text, nullable=False)
    avatar_url = Column(Text, nullable=True)
    status = Column(Text, nullable=True)
    department = Column(Text, nullable=True)
    designation = Column(Text, nullable=True)
    specializations = Column(JSON, nullable=False, default=list)


class Oem(TimestampMixin, Base):
    """Original equipment manufacturer"""

    __tablename__ = "oem"

    id = Column(String(64), primary_key=True)
    name = Column(Text, nullable=False)
    contact_person = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    phone = Column(Text, nullable=False)
    website = Column(Text, nullable=True)
    area = Column(Text, nullable=True)
    region = Column(Text, nullable=True)
    account_manager = Column(Text, nullable=True)
    account_manager_status = Column(Text, nullable=True)


class Product(TimestampMixin, Base):
    __tablename__ = "product"

    id = Column(String(64), primary_key=True)
    name = Column(Text, nullable=False)
    documents = Column(JSON, nullable=False, default=list)


class Department(Base):
    __tablename__ = "department"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False, unique=True)


class Designation(Base):
    __tablename__ = "designation"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False, unique=True)


class BiddingTemplate(Base):
    __tablename__ = "bidding_template"

    id = Column(String(64), primary_key=True)
    name = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
