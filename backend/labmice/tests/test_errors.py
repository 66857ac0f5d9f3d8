import uuid

import pytest
from sqlalchemy.exc import OperationalError

from labmice.errors import (
    AlreadyExists,
    EntryNotFound,
    ErrorKind,
    InvalidIdentifier,
    InvalidValue,
    MissingFields,
    MouseAlreadyExists,
    MouseNotFound,
    StoreError,
    UnknownStoreError,
    UserAlreadyExists,
    UserNotFound,
    WrongPassword,
)
from labmice.main import app
from .conftest import client


@pytest.mark.parametrize(
    "error, kind, status",
    [
        (MissingFields(), ErrorKind.MISSING_FIELDS, 400),
        (InvalidIdentifier(), ErrorKind.INVALID_IDENTIFIER, 400),
        (InvalidValue(), ErrorKind.INVALID_VALUE, 400),
        (MouseNotFound(), ErrorKind.NOT_FOUND, 404),
        (EntryNotFound(), ErrorKind.NOT_FOUND, 404),
        (UserAlreadyExists(), ErrorKind.ALREADY_EXISTS, 409),
        (MouseAlreadyExists(), ErrorKind.ALREADY_EXISTS, 409),
        (UserNotFound(), ErrorKind.USER_NOT_FOUND, 401),
        (WrongPassword(), ErrorKind.WRONG_PASSWORD, 401),
        (UnknownStoreError(), ErrorKind.UNKNOWN, 500),
    ],
)
def test_kinds_map_to_status(error, kind, status):
    assert isinstance(error, StoreError)
    assert error.kind is kind
    assert error.status_code == status
    assert str(error) == error.message


def test_custom_message_keeps_kind():
    err = AlreadyExists("duplicate barcode")
    assert err.message == "duplicate barcode"
    assert err.kind is ErrorKind.ALREADY_EXISTS


def test_error_body_shape(client):
    resp = client.get("/mouse/lab/not-an-id")
    assert resp.status_code == 400
    assert resp.json() == {"message": "Invalid ID provided", "kind": "invalid_identifier"}


def test_malformed_body_is_bad_request(client):
    resp = client.post(
        "/user/register",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["message"].startswith("Invalid request")


def test_database_failure_is_opaque(client):
    from labmice.database import get_db

    class BrokenSession:
        def query(self, *args, **kwargs):
            raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))

        def close(self):
            pass

    def broken_db():
        yield BrokenSession()

    previous = app.dependency_overrides[get_db]
    app.dependency_overrides[get_db] = broken_db
    try:
        resp = client.post("/user/login", json={"username": "someone", "password": "secret1"})
    finally:
        app.dependency_overrides[get_db] = previous
    assert resp.status_code == 500
    assert resp.json() == {"message": "Unexpected database error", "kind": "unknown"}
    assert "disk" not in resp.text


def test_metrics_endpoint(client):
    client.get("/lab")
    resp = client.get("/metrics")
    assert resp.status_code == 200
    assert "request_count" in resp.text


def test_metrics_label_by_route_template(client):
    names = [f"ghost-{uuid.uuid4().hex[:8]}" for _ in range(2)]
    for name in names:
        assert client.get(f"/mouse/name/{name}").status_code == 404
    text = client.get("/metrics").text
    assert 'endpoint="/mouse/name/{name}"' in text
    for name in names:
        assert name not in text
