"""Tests for the Cosmos DB collection against a fake async container."""

import asyncio
from typing import Any

import pytest
from azure.cosmos.exceptions import CosmosResourceNotFoundError

from shop_common.infra.cosmos import CosmosCollection
from shop_common.query import Accumulator, GroupField, Query

pytestmark = pytest.mark.unit

SYSTEM_FIELDS = {"_rid": "r", "_self": "s", "_etag": "e", "_attachments": "a", "_ts": 1}


class FakeContainer:
    """Async stand-in for ``azure.cosmos.aio.ContainerProxy`` that records queries."""

    id = "products"

    def __init__(self) -> None:
        self.items: dict[str, dict[str, Any]] = {}
        self.queries: list[tuple[str, list[dict[str, Any]] | None]] = []

    async def create_item(self, body: dict[str, Any]) -> dict[str, Any]:
        self.items[body["id"]] = dict(body)
        return {**body, **SYSTEM_FIELDS}

    async def read_item(self, item: str, partition_key: str) -> dict[str, Any]:
        assert item == partition_key
        if item not in self.items:
            raise CosmosResourceNotFoundError(status_code=404, message="Not found")
        return {**self.items[item], **SYSTEM_FIELDS}

    async def replace_item(self, item: str, body: dict[str, Any]) -> dict[str, Any]:
        self.items[item] = dict(body)
        return {**body, **SYSTEM_FIELDS}

    async def delete_item(self, item: str, partition_key: str) -> None:
        if item not in self.items:
            raise CosmosResourceNotFoundError(status_code=404, message="Not found")
        del self.items[item]

    def query_items(self, query: str, parameters: list[dict[str, Any]] | None = None):
        self.queries.append((query, parameters))

        async def results():
            for item in self.items.values():
                yield {**item, **SYSTEM_FIELDS}

        return results()


@pytest.fixture
def container() -> FakeContainer:
    return FakeContainer()


@pytest.fixture
def collection(container: FakeContainer) -> CosmosCollection:
    return CosmosCollection(container)


def test_insert_assigns_id_and_strips_system_fields(collection: CosmosCollection, container: FakeContainer) -> None:
    created = asyncio.run(collection.insert({"name": "lamp"}))

    assert set(created) == {"id", "name"}
    assert created["id"] in container.items
    assert collection.name == "products"


def test_get_missing_returns_none(collection: CosmosCollection) -> None:
    assert asyncio.run(collection.get("missing")) is None


def test_update_merges_fields(collection: CosmosCollection) -> None:
    created = asyncio.run(collection.insert({"name": "lamp", "price": 1.0}))

    updated = asyncio.run(collection.update(created["id"], {"price": 2.0, "id": "ignored"}))

    assert updated == {"id": created["id"], "name": "lamp", "price": 2.0}


def test_update_missing_returns_none(collection: CosmosCollection) -> None:
    assert asyncio.run(collection.update("missing", {"price": 2.0})) is None


def test_delete_returns_last_state(collection: CosmosCollection, container: FakeContainer) -> None:
    created = asyncio.run(collection.insert({"name": "lamp"}))

    assert asyncio.run(collection.delete(created["id"])) == created
    assert asyncio.run(collection.delete(created["id"])) is None
    assert container.items == {}


def test_find_sends_compiled_query(collection: CosmosCollection, container: FakeContainer) -> None:
    asyncio.run(collection.insert({"name": "lamp"}))

    rows = asyncio.run(collection.find(Query().order_by("name").take(5)))

    assert rows == [{"id": rows[0]["id"], "name": "lamp"}]
    assert container.queries[-1] == (
        "SELECT * FROM c ORDER BY c.name ASC OFFSET @offset LIMIT @limit",
        [{"name": "@offset", "value": 0}, {"name": "@limit", "value": 5}],
    )


def test_aggregate_groups_client_side(collection: CosmosCollection, container: FakeContainer) -> None:
    for price in (10, 20, 30):
        asyncio.run(collection.insert({"name": "lamp", "price": price}))

    rows = asyncio.run(collection.aggregate(Query().group_by(GroupField("avgPrice", Accumulator.AVG, "price"))))

    assert rows == [{"avgPrice": 20}]
    assert container.queries[-1] == ("SELECT * FROM c", [])

