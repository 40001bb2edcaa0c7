"""Client CRUD"""

from typing import List
from sqlalchemy.orm import Session

from tender_crm.api.v1.schemas import ClientCreate, ClientUpdate
from tender_crm.domain.exceptions import NotFoundError
from tender_crm.domain.models import Actor
from tender_crm.infrastructure.database.models import Client
from tender_crm.infrastructure.database.repositories import ClientRepository
from tender_crm.services.history import record_history
from tender_crm.utils import ids
from tender_crm.utils.date_utils import utcnow


class ClientService:
    def __init__(self, db: Session):
        self.db = db
        self.clients = ClientRepository(db)

    def list(self) -> List[Client]:
        return self.clients.find(order_by=Client.name.asc())

    def get(self, client_id: str) -> Client:
        client = self.clients.find_one(id=client_id)
        if client is None:
            raise NotFoundError(f"Client not found: {client_id}")
        return client

    def create(self, payload: ClientCreate, actor: Actor) -> Client:
        """New clients start with zero revenue, no contacts and a creation entry"""
        client = Client(
            id=ids.new_id(ids.CLIENT),
            revenue=0,
            joined_date=utcnow(),
            contacts=[],
            history=[],
        )
        self.clients.assign(client, payload.to_columns())
        record_history(client, actor, "Created Client")
        self.clients.add(client)
        self.db.commit()
        return self.get(client.id)

    def update(self, client_id: str, payload: ClientUpdate) -> Client:
        client = self.get(client_id)
        self.clients.assign(client, payload.to_columns())
        self.clients.save(client)
        self.db.commit()
        self.db.refresh(client)
        return client
