"""Tender CRUD and assignment responses"""

import logging
from typing import List
from sqlalchemy.orm import Session

from tender_crm.api.v1.schemas import AssignmentReply, TenderCreate, TenderUpdate
from tender_crm.domain.exceptions import NotFoundError, ValidationError
from tender_crm.domain.models import Actor
from tender_crm.infrastructure.database.models import Tender
from tender_crm.infrastructure.database.repositories import ClientRepository, TenderRepository
from tender_crm.services.history import record_history
from tender_crm.utils import ids
from tender_crm.utils.date_utils import isoformat_utc

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "Drafting"
DEFAULT_WORKFLOW_STAGE = "Tender Identification"


class TenderService:
    """Repository-backed tender operations"""

    def __init__(self, db: Session):
        self.db = db
        self.tenders = TenderRepository(db)
        self.clients = ClientRepository(db)

    def list(self) -> List[Tender]:
        return self.tenders.list_recent_first()

    def get(self, tender_id: str) -> Tender:
        tender = self.tenders.find_one(id=tender_id)
        if tender is None:
            raise NotFoundError(f"Tender not found: {tender_id}")
        return tender

    def create(self, payload: TenderCreate, actor: Actor) -> Tender:
        """
        Create a tender for an existing client.

        The client name is copied onto the tender and the first history
        entry records the creation.

        Raises:
            ValidationError: clientId missing
            NotFoundError: clientId does not match a client
        """
        data = payload.to_columns()
        client_id = data.pop("client_id", None)
        if not client_id:
            raise ValidationError("Client ID is required.", field="clientId")

        client = self.clients.find_one(id=client_id)
        if client is None:
            raise NotFoundError(f"Client not found for ID: {client_id}")

        data["status"] = data.get("status") or DEFAULT_STATUS
        data["workflow_stage"] = data.get("workflow_stage") or DEFAULT_WORKFLOW_STAGE

        tender = Tender(id=ids.new_id(ids.TENDER), client_id=client.id, client_name=client.name, history=[])
        self.tenders.assign(tender, data)
        record_history(tender, actor, "Created Tender")
        self.tenders.add(tender)
        self.db.commit()

        created = self.get(tender.id)
        logger.info("Tender created", extra={"tender_id": created.id, "client_id": client.id})
        return created

    def update(self, tender_id: str, payload: TenderUpdate) -> Tender:
        """Merge the supplied fields into the tender"""
        tender = self.get(tender_id)
        self.tenders.assign(tender, payload.to_columns())
        self.tenders.save(tender)
        self.db.commit()
        self.db.refresh(tender)
        return tender

    def delete(self, tender_id: str) -> None:
        if self.tenders.delete(id=tender_id) == 0:
            raise NotFoundError(f"Tender not found: {tender_id}")
        self.db.commit()

    def respond_to_assignment(self, tender_id: str, reply: AssignmentReply, actor: Actor) -> Tender:
        """
        Store the actor's assignment response and log it.

        Responses are keyed by user id; the first response from a user
        creates the entry and later ones replace it.
        """
        tender = self.get(tender_id)

        responses = dict(tender.assignment_responses or {})
        responses[actor.user_id] = {
            "status": reply.status.value,
            "notes": reply.notes,
            "respondedAt": isoformat_utc(),
        }
        tender.assignment_responses = responses

        record_history(
            tender,
            actor,
            "Responded to Assignment",
            details=f"Set status to {reply.status.value}.",
        )
        self.tenders.save(tender)
        self.db.commit()
        self.db.refresh(tender)
        return tender

