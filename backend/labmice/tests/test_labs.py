import uuid

from .conftest import client, create_lab, create_mouse, register_user, unique


def test_create_and_read_lab(client):
    lab = create_lab(client, "  Neurogenetics  ")
    assert lab["name"] == "Neurogenetics"
    resp = client.get(f"/lab/{lab['id']}")
    assert resp.status_code == 200
    assert resp.json()["lab"]["id"] == lab["id"]

    listed = client.get("/lab").json()
    assert lab["id"] in {entry["id"] for entry in listed["labs"]}
    names = [entry["name"] for entry in listed["labs"]]
    assert names == sorted(names)


def test_lab_errors(client):
    assert client.post("/lab/create", json={"name": " "}).status_code == 400
    assert client.get(f"/lab/{uuid.uuid4()}").status_code == 404
    assert client.get("/lab/oops").status_code == 400


def test_protocol_joins_its_lab(client):
    lab = create_lab(client)
    resp = client.post("/protocol/create", json={"title": unique("IACUC"), "labId": lab["id"]})
    assert resp.status_code == 201
    protocol = resp.json()["protocol"]
    assert protocol["lab"]["name"] == lab["name"]

    user = register_user(client)
    mouse = create_mouse(client, user["id"], labId=lab["id"], protocolId=protocol["id"])
    assert mouse["protocol"]["title"] == protocol["title"]
    assert mouse["lab"]["id"] == lab["id"]

    fetched = client.get(f"/protocol/{protocol['id']}")
    assert fetched.status_code == 200
    assert client.get(f"/protocol/{uuid.uuid4()}").status_code == 404
    assert client.post("/protocol/create", json={"title": "x", "labId": "bad"}).status_code == 400
