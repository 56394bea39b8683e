"""Shared fixtures: a fresh application and test client per test."""

import pytest
from fastapi.testclient import TestClient

from catalog_api.app.core.config import Settings
from catalog_api.app.main import create_app


def make_settings(**overrides) -> Settings:
    values = {
        "user_validation": "schema",
        "product_validation": "rules",
        "seed_products": True,
        "log_level": "WARNING",
        "log_file": "",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def app():
    return create_app(make_settings())


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_user():
    return {"name": "Ann", "age": 30, "email": "a@x.com"}


@pytest.fixture
def valid_product():
    return {
        "name": "Gaming laptop",
        "description": "Upgraded model",
        "price": 1299.5,
        "category": ["electronics"],
        "tags": ["computers"],
        "inStock": True,
    }
