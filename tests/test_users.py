"""Boundary tests for the user routes."""

from fastapi.testclient import TestClient

from catalog_api.app.main import create_app

from .conftest import make_settings


# --- POST /users ---

def test_create_user_returns_string_id(client, sample_user):
    resp = client.post("/users", json=sample_user)
    assert resp.status_code == 201
    assert resp.json() == {"id": "1", "name": "Ann", "age": 30, "email": "a@x.com"}


def test_create_users_sequential_ids(client, sample_user):
    first = client.post("/users", json=sample_user).json()
    second = client.post("/users", json={"name": "Bob", "age": 41, "email": "b@x.com"}).json()
    assert first["id"] == "1"
    assert second["id"] == "2"
    assert second["name"] == "Bob"


def test_create_user_schema_rejects_bad_body(client):
    resp = client.post("/users", json={"name": "", "age": -3})
    assert resp.status_code == 400
    body = resp.json()
    assert body["message"]
    fields = {err.split(":")[0] for err in body["errors"]}
    assert {"name", "age", "email"} <= fields


def test_rejected_create_does_not_use_an_id(client, sample_user):
    client.post("/users", json={"name": "Ann"})
    resp = client.post("/users", json=sample_user)
    assert resp.json()["id"] == "1"


def test_create_user_coerces_numeric_string_age(client):
    resp = client.post("/users", json={"name": "Ann", "age": "30", "email": "a@x.com"})
    assert resp.status_code == 201
    assert resp.json()["age"] == 30


def test_create_user_rejects_non_object_body(client):
    resp = client.post("/users", json=["Ann", 30])
    assert resp.status_code == 400
    assert "errors" in resp.json()


def test_create_user_without_validation_accepts_anything():
    app = create_app(make_settings(user_validation="none"))
    with TestClient(app) as client:
        resp = client.post("/users", json={"name": 7})
        assert resp.status_code == 201
        assert resp.json() == {"id": "1", "name": 7, "age": None, "email": None}


# --- GET /users/{id} ---

def test_get_user_returns_reduced_view(client, sample_user):
    client.post("/users", json=sample_user)
    resp = client.get("/users/1")
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "name": "Ann"}


def test_get_user_compares_numerically(client, sample_user):
    client.post("/users", json=sample_user)
    assert client.get("/users/01").json() == {"id": 1, "name": "Ann"}
    assert client.get("/users/1.0").status_code == 200


def test_get_user_not_found(client):
    resp = client.get("/users/99")
    assert resp.status_code == 404
    assert resp.json() == {"message": "User not found"}


def test_get_user_non_numeric_id(client, sample_user):
    client.post("/users", json=sample_user)
    assert client.get("/users/abc").status_code == 404


# --- POST /users/{id} ---

def test_replace_user(client, sample_user):
    client.post("/users", json=sample_user)
    resp = client.post("/users/1", json={"name": "Annie", "age": 31, "email": "annie@x.com"})
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "name": "Annie", "age": 31, "email": "annie@x.com"}
    assert client.get("/users/1").json() == {"id": 1, "name": "Annie"}


def test_replace_missing_user_is_404_even_with_bad_body(client):
    resp = client.post("/users/5", json={"name": ""})
    assert resp.status_code == 404


def test_replace_user_rejects_bad_body(client, sample_user):
    client.post("/users", json=sample_user)
    resp = client.post("/users/1", json={"name": "Ann", "age": 30, "email": "not-an-email"})
    assert resp.status_code == 400
    assert client.get("/users/1").json()["name"] == "Ann"


def test_list_users(client, sample_user):
    client.post("/users", json=sample_user)
    client.post("/users", json={"name": "Bob", "age": 41, "email": "b@x.com"})
    resp = client.get("/users")
    assert resp.status_code == 200
    assert [u["id"] for u in resp.json()] == [1, 2]


def test_get_user_with_prefixed_numeric_id(client, sample_user):
    client.post("/users", json=sample_user)
    assert client.get("/users/0x1").json() == {"id": 1, "name": "Ann"}
    assert client.get("/users/0b1").status_code == 200
    assert client.get("/users/0x2").status_code == 404
