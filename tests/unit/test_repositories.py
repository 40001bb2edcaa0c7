"""Unit tests for session handling and store error translation"""

import pytest
from unittest.mock import MagicMock
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session
from tender_crm.domain.exceptions import ConflictError, InternalError
from tender_crm.infrastructure.database import session as session_module
from tender_crm.infrastructure.database.repositories import DepartmentRepository


def store_down(*args, **kwargs):
    raise OperationalError("INSERT", {}, Exception("connection lost"))


def test_get_db_rolls_back_when_request_fails(monkeypatch):
    db = MagicMock()
    monkeypatch.setattr(session_module, "SessionLocal", lambda: db)

    gen = session_module.get_db()
    assert next(gen) is db
    with pytest.raises(RuntimeError):
        gen.throw(RuntimeError("handler failed"))

    db.rollback.assert_called_once()
    db.close.assert_called_once()


def test_get_db_closes_without_rollback_on_success(monkeypatch):
    db = MagicMock()
    monkeypatch.setattr(session_module, "SessionLocal", lambda: db)

    gen = session_module.get_db()
    next(gen)
    gen.close()

    db.rollback.assert_not_called()
    db.close.assert_called_once()


def test_duplicate_insert_raises_conflict(db: Session):
    departments = DepartmentRepository(db)
    departments.insert(id="dept1", name="Sales")
    db.commit()

    with pytest.raises(ConflictError):
        departments.insert(id="dept2", name="Sales")

    assert [d.id for d in departments.find()] == ["dept1"]


def test_store_failure_on_write_raises_internal_error(db: Session, monkeypatch):
    departments = DepartmentRepository(db)
    monkeypatch.setattr(db, "flush", store_down)

    with pytest.raises(InternalError) as exc_info:
        departments.insert(id="dept1", name="Sales")

    assert isinstance(exc_info.value.__cause__, OperationalError)
    monkeypatch.undo()
    assert departments.find() == []


def test_store_failure_on_delete_raises_internal_error(db: Session, monkeypatch):
    departments = DepartmentRepository(db)
    monkeypatch.setattr(db, "execute", store_down)

    with pytest.raises(InternalError):
        departments.delete(id="dept1")
