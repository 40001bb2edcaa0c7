"""/api/v1/oems"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tender_crm.api.v1.schemas import OemCreate, OemResponse, OemUpdate
from tender_crm.infrastructure.database.session import get_db
from tender_crm.services.catalog import OemService

router = APIRouter()


@router.get("/oems", response_model=List[OemResponse])
def list_oems(db: Session = Depends(get_db)):
    return [OemResponse.model_validate(o) for o in OemService(db).list()]


@router.post("/oems", response_model=OemResponse, status_code=201)
def create_oem(request_body: OemCreate, db: Session = Depends(get_db)):
    return OemResponse.model_validate(OemService(db).create(request_body))


@router.put("/oems/{oem_id}", response_model=OemResponse)
def update_oem(oem_id: str, request_body: OemUpdate, db: Session = Depends(get_db)):
    return OemResponse.model_validate(OemService(db).update(oem_id, request_body))
