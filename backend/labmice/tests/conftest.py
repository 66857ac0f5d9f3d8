import os
os.environ["TESTING"] = "1"
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import sys
from pathlib import Path

import uuid

sys.path.append(str(Path(__file__).resolve().parents[2]))

from labmice.main import app
from labmice.database import Base, get_db
from labmice import models  # noqa: F401

SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False, "timeout": 30},
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base.metadata.drop_all(bind=engine)
Base.metadata.create_all(bind=engine)

def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

app.dependency_overrides[get_db] = override_get_db


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


def unique(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:8]}"


def register_user(client, *, username: str | None = None, password: str = "secret1"):
    """
    purpose: create a throwaway account through the API
    outputs: the serialized user dict (camelCase keys)
    """

    username = username or unique("user")
    resp = client.post(
        "/user/register",
        json={"username": username, "email": f"{username}@example.com", "password": password},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["user"]


def create_lab(client, name: str | None = None):
    resp = client.post("/lab/create", json={"name": name or unique("lab")})
    assert resp.status_code == 201, resp.text
    return resp.json()["lab"]


def mouse_payload(user_id: str, **overrides):
    payload = {
        "name": unique("M"),
        "sex": "female",
        "genotype": "WT",
        "strain": "C57BL/6J",
        "birthDate": "2024-01-01",
        "userId": user_id,
    }
    payload.update(overrides)
    return payload


def create_mouse(client, user_id: str, **overrides):
    resp = client.post("/mouse/create", json=mouse_payload(user_id, **overrides))
    assert resp.status_code == 201, resp.text
    return resp.json()["mouse"]
