"""
Test configuration for the patient portal backend.
"""
import os

# Settings are read at import time, so the environment must be ready first
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("MAIL_SUPPRESS_SEND", "true")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from patient_portal.database import Base, get_db
from patient_portal.main import app
from patient_portal.otp.email import get_email_service

# Test database URL
TEST_DATABASE_URL = "sqlite://"

# Create test database engine
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

VALID_SIGNUP = {
    "firstName": "Asha",
    "lastName": "Verma",
    "email": "asha.verma@example.com",
    "phone": "9876543210",
    "password": "Secret@123",
}


class FakeEmailService:
    """
    Records outgoing OTP emails instead of talking to an SMTP server.
    """
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent = []

    async def send_otp_email(self, email: str, code: str) -> None:
        if self.fail:
            raise ConnectionError("SMTP server unreachable")
        self.sent.append((email, code))

    def last_code_for(self, email: str) -> str:
        codes = [code for recipient, code in self.sent if recipient == email]
        assert codes, f"no OTP was sent to {email}"
        return codes[-1]


@pytest.fixture(scope="function")
def db():
    """
    Create a fresh database for each test.
    """
    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def email_service():
    return FakeEmailService()


@pytest.fixture(scope="function")
def client(db, email_service):
    """
    Create a test client with a test database session and a recording mailer.
    """
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_email_service] = lambda: email_service

    with TestClient(app) as client:
        yield client

    app.dependency_overrides = {}


@pytest.fixture
def signup_payload():
    return dict(VALID_SIGNUP)


@pytest.fixture
def registered_patient(client, signup_payload):
    """
    A patient that has signed up but not yet verified their email.
    """
    response = client.post("/api/patients/signup", json=signup_payload)
    assert response.status_code == 200, response.text
    return response.json()["patient"]
