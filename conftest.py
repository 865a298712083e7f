"""
Shared fixtures: an in-memory SQLite database per test, an email service
that records instead of sending, and helpers to create accounts and log in.
"""

import os

# Settings are read at import time, so configure them before importing the app
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-matchmate-tests-0123456789")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from matchmate.api.deps import get_email_service
from matchmate.core.database import Base, get_db
from matchmate.core.exceptions import EmailDeliveryError
from matchmate.core.security import create_access_token
from matchmate.main import app
from matchmate.models.user import User
from matchmate.services.email_service import EmailService


class RecordingEmailService(EmailService):
    """Keeps every outgoing message in ``sent`` instead of talking to SMTP."""

    def __init__(self):
        super().__init__()
        self.sent = []

    def send_email(self, to_email, subject, html_body, body=None):
        self.sent.append({"to": to_email, "subject": subject, "html": html_body})


class FailingEmailService(EmailService):
    def send_email(self, to_email, subject, html_body, body=None):
        raise EmailDeliveryError(f"Could not deliver email to {to_email}")


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def mailer():
    return RecordingEmailService()


@pytest.fixture
def client(engine, mailer):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_email_service] = lambda: mailer
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


def signup_payload(**overrides):
    payload = {
        "firstName": "John",
        "lastName": "Doe",
        "username": "john_doe1",
        "email": "John.Doe@Example.com",
        "password": "Abc!def",
        "confirmPassword": "Abc!def",
        "phoneNumber": "08012345678",
        "gender": "male",
        "interestedIn": "female",
        "hobbies": ["hiking", "chess"],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_user(client, db_session):
    """Sign a user up through the API, optionally marking them verified."""

    def _make_user(verified=True, **overrides):
        response = client.post("/api/v1/signup", json=signup_payload(**overrides))
        assert response.status_code == 201, response.json()
        user_id = response.json()["user"]["id"]
        if verified:
            user = db_session.query(User).filter(User.id == user_id).first()
            user.is_verified = True
            db_session.commit()
        return response.json()["user"]

    return _make_user


def auth_headers(user):
    token = create_access_token({"id": user["id"], "email": user["email"], "username": user["username"]})
    return {"Authorization": f"Bearer {token}"}
