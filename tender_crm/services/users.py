"""User administration and the simplified login check"""

import hmac
import logging
import re
from typing import Any, List
from urllib.parse import urlencode
from sqlalchemy.orm import Session

from tender_crm.api.v1.schemas import UserCreate, UserUpdate
from tender_crm.config import settings
from tender_crm.domain.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError
from tender_crm.infrastructure.database.models import User
from tender_crm.infrastructure.database.repositories import UserRepository
from tender_crm.utils import ids

logger = logging.getLogger(__name__)

PROTECTED_USERNAME = "admin"


def username_for(name: str) -> str:
    """Derive a login name, e.g. "Sales User" -> "sales.user"."""
    return re.sub(r"\s+", ".", name.strip().lower())


def normalize_specializations(value: Any) -> List[str]:
    return list(value) if isinstance(value, list) else []


class UserService:
    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)

    def list(self) -> List[User]:
        return self.users.find(order_by=User.name.asc())

    def authenticate(self, username: str, password: str) -> User:
        """
        Check credentials against the shared configured password.

        Raises:
            AuthenticationError: unknown username or wrong password
        """
        user = self.users.find_one(username=username)
        if user is None or not hmac.compare_digest(password, settings.default_user_password):
            logger.warning("Failed login", extra={"username": username})
            raise AuthenticationError("Invalid username or password")
        return user

    def create(self, payload: UserCreate) -> List[User]:
        """Create a user with derived username and email; returns all users"""
        username = username_for(payload.name)
        email = f"{username}@{settings.user_email_domain}"

        if self.users.find_by_username_or_email(username, email) is not None:
            raise ConflictError(f"A user with the name '{payload.name}' already exists.")

        self.users.insert(
            id=ids.new_id(ids.USER),
            name=payload.name,
            username=username,
            email=email,
            role=payload.role,
            avatar_url=payload.avatar_url or f"{settings.avatar_base_url}?{urlencode({'name': payload.name})}",
            status="Active",
            department=payload.department,
            designation=payload.designation,
            specializations=normalize_specializations(payload.specializations),
        )
        self.db.commit()
        return self.list()

    def update(self, user_id: str, payload: UserUpdate) -> List[User]:
        user = self.users.find_one(id=user_id)
        if user is None:
            raise NotFoundError(f"User not found: {user_id}")

        values = payload.to_columns()
        if "specializations" in values:
            values["specializations"] = normalize_specializations(payload.specializations)
        self.users.assign(user, values)
        self.users.save(user)
        self.db.commit()
        return self.list()

    def delete(self, user_id: str) -> None:
        user = self.users.find_one(id=user_id)
        if user is None:
            raise NotFoundError(f"User not found: {user_id}")
        if user.username == PROTECTED_USERNAME:
            raise ValidationError("Cannot delete the primary admin user.", field="id")
        self.users.delete(id=user_id)
        self.db.commit()
