"""/api/v1/financials - financial instrument requests"""

import time
from typing import List
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from tender_crm.api.v1.schemas import FinancialRequestCreate, FinancialRequestResponse, FinancialRequestUpdate
from tender_crm.api.dependencies import get_actor, get_request_id
from tender_crm.domain.models import Actor
from tender_crm.infrastructure.database.session import get_db
from tender_crm.infrastructure.observability.logging import log_request_update
from tender_crm.services.financials import FinancialLedger

router = APIRouter()


@router.get("/financials", response_model=List[FinancialRequestResponse])
def list_financial_requests(db: Session = Depends(get_db)):
    """All financial requests, newest request date first"""
    return [FinancialRequestResponse.model_validate(r) for r in FinancialLedger(db).list()]


@router.get("/financials/{request_id}", response_model=FinancialRequestResponse)
def get_financial_request(request_id: str, db: Session = Depends(get_db)):
    return FinancialRequestResponse.model_validate(FinancialLedger(db).get(request_id))


@router.post("/financials", response_model=FinancialRequestResponse, status_code=201)
def create_financial_request(
    request_body: FinancialRequestCreate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_actor),
):
    """Raise a new request; it starts as Pending Approval"""
    created = FinancialLedger(db).create(request_body, actor)
    return FinancialRequestResponse.model_validate(created)


@router.put("/financials/{request_id}", response_model=FinancialRequestResponse)
def update_financial_request(
    request_id: str,
    request_body: FinancialRequestUpdate,
    request: Request,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_actor),
):
    """
    Change a request's status.

    Flow:
    1. Approved stamps the approver, Rejected stores the reason
    2. Processed stores the instrument details
    3. Processed requests (except type Other) are copied onto the
       tender's emd / pbg / sd slot when the tender exists
    """
    start_time = time.time()
    request_id_header = get_request_id(request)

    updated = FinancialLedger(db).update(request_id, request_body, actor)

    duration_ms = (time.time() - start_time) * 1000
    log_request_update(request_id_header, updated.id, updated.status, actor.user_id, duration_ms)
    return FinancialRequestResponse.model_validate(updated)
