"""/api/v1/clients"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tender_crm.api.v1.schemas import ClientCreate, ClientResponse, ClientUpdate
from tender_crm.api.dependencies import get_actor
from tender_crm.domain.models import Actor
from tender_crm.infrastructure.database.session import get_db
from tender_crm.services.clients import ClientService

router = APIRouter()


@router.get("/clients", response_model=List[ClientResponse])
def list_clients(db: Session = Depends(get_db)):
    return [ClientResponse.model_validate(c) for c in ClientService(db).list()]


@router.get("/clients/{client_id}", response_model=ClientResponse)
def get_client(client_id: str, db: Session = Depends(get_db)):
    return ClientResponse.model_validate(ClientService(db).get(client_id))


@router.post("/clients", response_model=ClientResponse, status_code=201)
def create_client(
    request_body: ClientCreate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_actor),
):
    return ClientResponse.model_validate(ClientService(db).create(request_body, actor))


@router.put("/clients/{client_id}", response_model=ClientResponse)
def update_client(client_id: str, request_body: ClientUpdate, db: Session = Depends(get_db)):
    return ClientResponse.model_validate(ClientService(db).update(client_id, request_body))
