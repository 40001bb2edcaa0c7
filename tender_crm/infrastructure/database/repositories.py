"""Data access layer for CRM documents"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from tender_crm.domain.exceptions import ConflictError, InternalError
from tender_crm.infrastructure.database.models import (
    Base,
    BiddingTemplate,
    Client,
    Department,
    Designation,
    FinancialRequest,
    Oem,
    Product,
    Tender,
    User,
)

ModelType = TypeVar("ModelType", bound=Base)


class DocumentRepository(Generic[ModelType]):
    """find / find_one / insert / save / delete over one document table"""

    model: Type[ModelType]

    def __init__(self, db: Session):
        self.db = db

    def find(self, *criteria: Any, order_by: Any = None) -> List[ModelType]:
        """Fetch all documents matching ``criteria``, optionally sorted"""
        stmt = select(self.model).where(*criteria)
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        return list(self.db.scalars(stmt))

    def find_one(self, **filters: Any) -> Optional[ModelType]:
        """Fetch the first document whose columns equal ``filters``"""
        return self.db.scalars(select(self.model).filter_by(**filters).limit(1)).first()

    def insert(self, **data: Any) -> ModelType:
        """Create a document and flush it to surface unique-key violations"""
        return self.add(self.model(**data))

    def add(self, entity: ModelType) -> ModelType:
        """Insert an already-built document"""
        self.db.add(entity)
        self._flush()
        return entity

    def save(self, entity: ModelType) -> ModelType:
        """Upsert by identity"""
        entity = self.db.merge(entity)
        self._flush()
        return entity

    def assign(self, entity: ModelType, values: Dict[str, Any]) -> ModelType:
        """Copy ``values`` onto ``entity``, ignoring nulls for required columns"""
        columns = self.model.__table__.columns
        for name, value in values.items():
            if value is None and not columns[name].nullable:
                continue
            setattr(entity, name, value)
        return entity

    def delete(self, **filters: Any) -> int:
        """Delete matching documents and return how many were removed"""
        stmt = delete(self.model).filter_by(**filters)
        try:
            result = self.db.execute(stmt)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise InternalError(f"Could not delete {self.model.__name__}") from e
        return result.rowcount

    def _flush(self) -> None:
        try:
            self.db.flush()  # Get constraint errors without committing
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError(f"{self.model.__name__} violates a unique constraint") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise InternalError(f"Could not write {self.model.__name__}") from e


class FinancialRequestRepository(DocumentRepository[FinancialRequest]):
    model = FinancialRequest

    def list_recent_first(self) -> List[FinancialRequest]:
        return self.find(order_by=FinancialRequest.request_date.desc())


class TenderRepository(DocumentRepository[Tender]):
    model = Tender

    def list_recent_first(self) -> List[Tender]:
        return self.find(order_by=Tender.created_at.desc())


class ClientRepository(DocumentRepository[Client]):
    model = Client


class UserRepository(DocumentRepository[User]):
    model = User

    def find_by_username_or_email(self, username: str, email: str) -> Optional[User]:
        """Fetch a user clashing on either unique key"""
        stmt = select(User).where((User.username == username) | (User.email == email)).limit(1)
        return self.db.scalars(stmt).first()


class OemRepository(DocumentRepository[Oem]):
    model = Oem


class ProductRepository(DocumentRepository[Product]):
    model = Product


class DepartmentRepository(DocumentRepository[Department]):
    model = Department


class DesignationRepository(DocumentRepository[Designation]):
    model = Designation


class BiddingTemplateRepository(DocumentRepository[BiddingTemplate]):
    model = BiddingTemplate
