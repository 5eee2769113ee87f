"""Tests for settings and database startup."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from shop_api import main
from shop_api.config import Settings
from shop_api.services.database import CosmosDbInitializer, open_database
from shop_common.infra import InMemoryCollection

pytestmark = pytest.mark.unit


def test_settings_defaults() -> None:
    settings = Settings(_env_file=None, database_backend="cosmos")

    assert settings.api_port == 3000
    assert settings.database_name == "shop"
    assert (settings.users_container, settings.products_container, settings.orders_container) == (
        "users",
        "products",
        "orders",
    )
    assert settings.seed_batch_size == 10


def test_open_in_memory_database() -> None:
    database = asyncio.run(open_database(Settings(_env_file=None, database_backend="memory")))

    assert isinstance(database.products, InMemoryCollection)
    asyncio.run(database.close())


def test_cosmos_requires_endpoint() -> None:
    settings = Settings(_env_file=None, database_backend="cosmos", azure_cosmosdb_endpoint=None)

    with pytest.raises(ValueError, match="AZURE_COSMOSDB_ENDPOINT"):
        asyncio.run(open_database(settings))


@pytest.mark.parametrize(
    ("endpoint", "expected"),
    [
        ("https://localhost:8081/", True),
        ("https://127.0.0.1:8081/", True),
        ("https://shop.documents.azure.com:443/", False),
    ],
)
def test_emulator_detection(endpoint: str, expected: bool) -> None:
    initializer = CosmosDbInitializer(Settings(_env_file=None, azure_cosmosdb_endpoint=endpoint))

    assert initializer.is_emulator is expected


def test_app_does_not_start_without_database(monkeypatch: pytest.MonkeyPatch) -> None:
    async def failing_open_database(settings: Settings):
        raise ConnectionError("database unavailable")

    monkeypatch.setattr(main, "open_database", failing_open_database)

    with pytest.raises(ConnectionError):
        with TestClient(main.app):
            pass
