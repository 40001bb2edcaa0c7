"""Financial request ledger and tender synchronization"""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from tender_crm.api.v1.schemas import FinancialRequestCreate, FinancialRequestUpdate
from tender_crm.domain.exceptions import NotFoundError
from tender_crm.domain.ledger import apply_status_update, validate_new_request
from tender_crm.domain.models import Actor, FinancialRequestStatus, InstrumentSlot
from tender_crm.domain.projection import apply_projection, project_instrument
from tender_crm.infrastructure.database.models import FinancialRequest
from tender_crm.infrastructure.database.repositories import FinancialRequestRepository, TenderRepository
from tender_crm.infrastructure.observability.logging import log_projection
from tender_crm.infrastructure.observability.metrics import record_projection, record_status
from tender_crm.utils import ids

logger = logging.getLogger(__name__)


class FinancialLedger:
    """
    Owns financial requests and projects processed instruments onto tenders.

    The request and the tender are committed separately. If the process
    dies between the two commits the request stays Processed while the
    tender slot is unchanged; there is no replay.
    """

    def __init__(self, db: Session):
        self.db = db
        self.requests = FinancialRequestRepository(db)
        self.tenders = TenderRepository(db)

    def list(self) -> List[FinancialRequest]:
        return self.requests.list_recent_first()

    def get(self, request_id: str) -> FinancialRequest:
        request = self.requests.find_one(id=request_id)
        if request is None:
            raise NotFoundError(f"Financial request not found: {request_id}")
        return request

    def create(self, payload: FinancialRequestCreate, actor: Actor) -> FinancialRequest:
        """Record a new request as Pending Approval; the tender is not touched"""
        request_type = validate_new_request(payload.tender_id, payload.type, payload.amount)

        request = self.requests.insert(
            id=ids.new_id(ids.FINANCIAL_REQUEST),
            tender_id=payload.tender_id,
            type=request_type.value,
            amount=payload.amount,
            notes=payload.notes,
            expiry_date=payload.expiry_date,
            requested_by_id=actor.user_id,
            status=FinancialRequestStatus.PENDING_APPROVAL.value,
        )
        self.db.commit()
        self.db.refresh(request)

        record_status(request.status)
        logger.info(
            "Financial request created",
            extra={"financial_request_id": request.id, "tender_id": request.tender_id, "type": request.type},
        )
        return request

    def update(self, request_id: str, payload: FinancialRequestUpdate, actor: Actor) -> FinancialRequest:
        """
        Apply a status change and, for Processed, sync the tender slot.

        Flow:
        1. Load the request (NotFoundError if absent)
        2. Apply the status rules
        3. Commit the request
        4. Project the instrument onto the tender and commit it separately
        """
        request = self.get(request_id)

        instrument = None
        if payload.instrument is not None:
            instrument = payload.instrument.model_dump(mode="json", by_alias=True, exclude_unset=True)

        slot = apply_status_update(
            request,
            payload.status,
            actor,
            reason=payload.reason,
            instrument=instrument,
        )
        self.requests.save(request)
        self.db.commit()
        self.db.refresh(request)
        record_status(request.status)

        if request.status == FinancialRequestStatus.PROCESSED.value:
            self._project(request, slot)

        return request

    def _project(self, request: FinancialRequest, slot: Optional[InstrumentSlot]) -> None:
        if slot is None:
            record_projection(None, "skipped_other")
            log_projection(request.id, request.tender_id, None, "skipped_other")
            return

        tender = self.tenders.find_one(id=request.tender_id)
        if tender is None:
            record_projection(slot.value, "tender_missing")
            log_projection(request.id, request.tender_id, slot.value, "tender_missing")
            return

        record = project_instrument(request.amount, request.instrument_details or {}, slot)
        apply_projection(tender, slot, record)
        self.tenders.save(tender)
        self.db.commit()

        record_projection(slot.value, "applied")
        log_projection(request.id, request.tender_id, slot.value, "applied")
