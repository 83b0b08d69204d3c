# /tests/conftest.py

import os

# Must be set before any `app` module reads its configuration.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["WELCOME_EMAIL_DELAY_SECONDS"] = "0"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core import security
from app.db.base import Base
from app.db.database import get_db
from app.main import app
from app.models.user_model import UserCreate
from app.services import user_service
from app.services.database_service import DatabaseService


@pytest.fixture
def db_session():
    """A fresh in-memory SQLite database, with the full schema, for each test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def db(db_session):
    return DatabaseService(db_session=db_session)


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _auth_headers(db, username: str, role: str) -> dict:
    user_service.create_user(db, UserCreate(username=username, password="secret123", role=role))
    token = security.create_access_token(subject=username)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(db):
    return _auth_headers(db, "registrar", "ADMIN")


@pytest.fixture
def student_headers(db):
    """A student login whose username matches the `ada` student's email."""
    return _auth_headers(db, "ada@school.edu", "STUDENT")


# --- Payload factories ---

@pytest.fixture
def ada_payload():
    return {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@school.edu",
        "studentIdNumber": "S-1001",
    }


@pytest.fixture
def alan_payload():
    return {
        "firstName": "Alan",
        "lastName": "Turing",
        "email": "alan@school.edu",
        "studentIdNumber": "S-1002",
    }


@pytest.fixture
def cs101_payload():
    return {"courseCode": "CS101", "courseName": "Intro", "credits": 3}
