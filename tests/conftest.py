"""Pytest configuration and fixtures."""

import asyncio
import os
from collections.abc import Callable, Iterator
from typing import Any

import pytest

# Settings are read when the app module is imported
os.environ["DATABASE_BACKEND"] = "memory"
os.environ.setdefault("ENV_FILE", os.devnull)

from fastapi.testclient import TestClient  # noqa: E402
from shop_api.main import app  # noqa: E402
from shop_common.infra import Database  # noqa: E402


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests that run against the in-memory backend")


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Create a FastAPI test client with a fresh in-memory database."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def database(client: TestClient) -> Database:
    """The database opened by the application lifespan."""
    return client.app.state.database


@pytest.fixture
def add_user(database: Database) -> Callable[..., dict[str, Any]]:
    """Insert a user directly; the API has no endpoint for it."""

    def _add_user(**fields: Any) -> dict[str, Any]:
        document = {"firstName": "Jane", "lastName": "Doe", "email": "jane.doe@example.com", **fields}
        return asyncio.run(database.users.insert(document))

    return _add_user


@pytest.fixture
def add_product(client: TestClient) -> Callable[..., dict[str, Any]]:
    """Create a product through the API."""

    def _add_product(**fields: Any) -> dict[str, Any]:
        body = {"name": "lamp", "quantity": 5, "price": 10.0, "image": "https://example.com/lamp.png", **fields}
        response = client.post("/products", json=body)
        assert response.status_code == 201
        return response.json()

    return _add_product
