import os

# Point settings at a throwaway database before any app module is imported.
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["DISPLAY_TIMEZONE"] = "UTC"
os.environ["QR_PAYLOAD_LETTERS"] = ""
os.environ["SCAN_BASE_URL"] = "https://rx.example.test"

import pytest
from fastapi.testclient import TestClient

from app.api.v1.routes.deps import TOKENS
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.main import app


@pytest.fixture(autouse=True)
def fresh_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    TOKENS.clear()
    yield
    TOKENS.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def register_and_login(client, email="house@example.com", password="secret123", full_name="Dr. Gregory House"):
    r = client.post(
        "/api/v1/auth/register",
        json={"email": email, "password": password, "full_name": full_name},
    )
    assert r.status_code == 200, r.text
    r = client.post("/api/v1/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    return register_and_login(client)


def prescription_body(**overrides):
    body = {
        "patient": {"name": "Jane Doe", "age": 34, "gender": "female", "contact_number": "0412345678"},
        "medications": [
            {"name": "Aspirin", "dosage": "100mg", "frequency": "3", "duration": "5"},
        ],
        "notes": "Take with water",
    }
    body.update(overrides)
    return body
