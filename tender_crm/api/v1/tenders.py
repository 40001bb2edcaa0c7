"""/api/v1/tenders - tenders and assignment responses"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tender_crm.api.v1.schemas import AssignmentReply, MessageResponse, TenderCreate, TenderResponse, TenderUpdate
from tender_crm.api.dependencies import get_actor
from tender_crm.domain.models import Actor
from tender_crm.infrastructure.database.session import get_db
from tender_crm.services.tenders import TenderService

router = APIRouter()


@router.get("/tenders", response_model=List[TenderResponse])
def list_tenders(db: Session = Depends(get_db)):
    return [TenderResponse.model_validate(t) for t in TenderService(db).list()]


@router.get("/tenders/{tender_id}", response_model=TenderResponse)
def get_tender(tender_id: str, db: Session = Depends(get_db)):
    return TenderResponse.model_validate(TenderService(db).get(tender_id))


@router.post("/tenders", response_model=TenderResponse, status_code=201)
def create_tender(
    request_body: TenderCreate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_actor),
):
    return TenderResponse.model_validate(TenderService(db).create(request_body, actor))


@router.put("/tenders/{tender_id}", response_model=TenderResponse)
def update_tender(tender_id: str, request_body: TenderUpdate, db: Session = Depends(get_db)):
    return TenderResponse.model_validate(TenderService(db).update(tender_id, request_body))


@router.delete("/tenders/{tender_id}", response_model=MessageResponse)
def delete_tender(tender_id: str, db: Session = Depends(get_db)):
    TenderService(db).delete(tender_id)
    return MessageResponse(message="Tender removed")


@router.post("/tenders/{tender_id}/respond", response_model=TenderResponse)
def respond_to_assignment(
    tender_id: str,
    request_body: AssignmentReply,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_actor),
):
    """Accept or decline an assignment as the acting user"""
    tender = TenderService(db).respond_to_assignment(tender_id, request_body, actor)
    return TenderResponse.model_validate(tender)
