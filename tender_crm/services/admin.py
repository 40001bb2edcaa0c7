"""Admin lookup tables: departments, designations and bidding templates"""

from typing import List
from sqlalchemy.orm import Session

from tender_crm.api.v1.schemas import TemplateCreate, TemplateUpdate
from tender_crm.domain.exceptions import NotFoundError
from tender_crm.infrastructure.database.models import BiddingTemplate
from tender_crm.infrastructure.database.repositories import (
    BiddingTemplateRepository,
    DepartmentRepository,
    DesignationRepository,
    DocumentRepository,
)
from tender_crm.utils import ids


class LookupService:
    """Named lookup entries with add / list / delete"""

    def __init__(self, repository: DocumentRepository, id_prefix: str, label: str):
        self.repository = repository
        self.id_prefix = id_prefix
        self.label = label

    def list(self) -> List:
        return self.repository.find(order_by=self.repository.model.name.asc())

    def add(self, name: str):
        item = self.repository.insert(id=ids.new_id(self.id_prefix), name=name)
        self.repository.db.commit()
        return item

    def delete(self, item_id: str) -> None:
        if self.repository.delete(id=item_id) == 0:
            raise NotFoundError(f"{self.label} not found")
        self.repository.db.commit()


def department_service(db: Session) -> LookupService:
    return LookupService(DepartmentRepository(db), ids.DEPARTMENT, "Department")


def designation_service(db: Session) -> LookupService:
    return LookupService(DesignationRepository(db), ids.DESIGNATION, "Designation")


class TemplateService:
    def __init__(self, db: Session):
        self.db = db
        self.templates = BiddingTemplateRepository(db)

    def list(self) -> List[BiddingTemplate]:
        return self.templates.find(order_by=BiddingTemplate.name.asc())

    def create(self, payload: TemplateCreate) -> BiddingTemplate:
        template = self.templates.insert(id=ids.new_id(ids.BIDDING_TEMPLATE), **payload.to_columns())
        self.db.commit()
        return template

    def update(self, template_id: str, payload: TemplateUpdate) -> BiddingTemplate:
        template = self.templates.find_one(id=template_id)
        if template is None:
            raise NotFoundError("Template not found")
        self.templates.assign(template, payload.to_columns())
        self.templates.save(template)
        self.db.commit()
        return template

    def delete(self, template_id: str) -> None:
        if self.templates.delete(id=template_id) == 0:
            raise NotFoundError("Template not found")
        self.db.commit()
