"""In-memory collection for local development and tests."""

import copy
from typing import Any

from shop_common.infra.collection import DocumentCollection, new_document_id
from shop_common.query import Query, run_query


class InMemoryCollection(DocumentCollection):
    """Collection kept in a dict; iteration order is insertion order."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._documents: dict[str, dict[str, Any]] = {}

    async def insert(self, document: dict[str, Any]) -> dict[str, Any]:
        body = copy.deepcopy(document)
        stored = {"id": body.pop("id", None) or new_document_id(), **body}
        if stored["id"] in self._documents:
            raise ValueError(f"Document {stored['id']} already exists in {self.name}")
        self._documents[stored["id"]] = stored
        return copy.deepcopy(stored)

    async def get(self, document_id: str) -> dict[str, Any] | None:
        document = self._documents.get(document_id)
        return copy.deepcopy(document) if document is not None else None

    async def update(self, document_id: str, fields: dict[str, Any]) -> dict[str, Any] | None:
        document = self._documents.get(document_id)
        if document is None:
            return None
        document.update(copy.deepcopy({k: v for k, v in fields.items() if k != "id"}))
        return copy.deepcopy(document)

    async def delete(self, document_id: str) -> dict[str, Any] | None:
        return self._documents.pop(document_id, None)

    async def find(self, query: Query | None = None) -> list[dict[str, Any]]:
        query = (query or Query()).without_group()
        return copy.deepcopy(run_query(self._documents.values(), query))

    async def aggregate(self, query: Query) -> list[dict[str, Any]]:
        return copy.deepcopy(run_query(self._documents.values(), query))
