"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timezone
from typing import Dict, Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from tender_crm.api.main import create_app
from tender_crm.domain.models import Actor
from tender_crm.infrastructure.database.models import Base, Client, Tender
from tender_crm.infrastructure.database.session import get_db


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def admin() -> Actor:
    return Actor(user_id="user1", user_name="Admin User")


@pytest.fixture
def sales() -> Actor:
    return Actor(user_id="user2", user_name="Sales User")


@pytest.fixture
def admin_headers(admin: Actor) -> Dict[str, str]:
    return {"X-User-Id": admin.user_id, "X-User-Name": admin.user_name}


@pytest.fixture
def sales_headers(sales: Actor) -> Dict[str, str]:
    return {"X-User-Id": sales.user_id, "X-User-Name": sales.user_name}


@pytest.fixture
def existing_client(db: Session) -> Client:
    """Client row inserted directly, bypassing the API"""
    row = Client(id="cli1", name="Ministry of Roads", contacts=[], interactions=[], history=[])
    db.add(row)
    db.commit()
    return row


@pytest.fixture
def existing_tender(db: Session, existing_client: Client) -> Tender:
    """Tender ``ten1`` with empty financial slots"""
    row = Tender(
        id="ten1",
        title="Highway lighting",
        department="Public Works",
        client_id=existing_client.id,
        client_name=existing_client.name,
        status="Drafting",
        workflow_stage="Tender Identification",
        deadline=datetime(2024, 6, 30, tzinfo=timezone.utc),
        value=1_500_000,
        history=[],
    )
    db.add(row)
    db.commit()
    return row
