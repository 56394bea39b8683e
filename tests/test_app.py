"""Static routes, error rendering and application assembly."""

import pytest
from fastapi.testclient import TestClient

from catalog_api.app.main import create_app

from .conftest import make_settings


def test_hello(client):
    resp = client.get("/hello")
    assert resp.status_code == 200
    assert resp.json() == {"message": "hello world"}


@pytest.mark.parametrize("version", ["v1", "v2"])
def test_version_endpoints(client, version):
    resp = client.get(f"/{version}")
    assert resp.status_code == 200
    assert resp.json()["version"] == version


def test_unknown_route_uses_message_body(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Not Found"}


def test_malformed_json_is_400(client):
    resp = client.post("/users", content=b"{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400


def test_internal_fault_is_500():
    app = create_app(make_settings())

    async def boom():
        raise RuntimeError("store exploded")

    app.add_api_route("/boom", boom)
    with TestClient(app, raise_server_exceptions=False) as client:
        resp = client.get("/boom")
    assert resp.status_code == 500
    assert resp.json() == {"message": "store exploded"}


def test_apps_do_not_share_state(sample_user):
    first = create_app(make_settings())
    second = create_app(make_settings())
    with TestClient(first) as a, TestClient(second) as b:
        a.post("/users", json=sample_user)
        a.delete("/productos/1")
        assert b.get("/users/1").status_code == 404
        assert b.get("/productos/1").status_code == 200
        assert b.post("/users", json=sample_user).json()["id"] == "1"


def test_docs_served_and_disableable(client):
    assert client.get("/docs").status_code == 200
    assert client.get("/openapi.json").status_code == 200
    app = create_app(make_settings(docs_url=""))
    with TestClient(app) as c:
        assert c.get("/docs").status_code == 404


@pytest.mark.parametrize("field,value", [("user_validation", "rules"), ("product_validation", "strict")])
def test_unknown_strategy_fails_at_build_time(field, value):
    with pytest.raises(ValueError):
        create_app(make_settings(**{field: value}))
