"""Document collection interface shared by every storage backend."""

import uuid
from abc import ABC, abstractmethod
from typing import Any

from shop_common.query import Query


def new_document_id() -> str:
    """Generate a document identifier."""
    return str(uuid.uuid4())


class DocumentCollection(ABC):
    """Abstract interface for a collection of JSON documents keyed by ``id``.

    Documents go in and come out as plain dictionaries. Backends assign an
    ``id`` when the caller does not provide one and strip any storage
    bookkeeping fields before returning a document.
    """

    name: str

    @abstractmethod
    async def insert(self, document: dict[str, Any]) -> dict[str, Any]:
        """Insert a document and return it as stored."""

    async def insert_many(self, documents: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Insert documents one by one, in order."""
        return [await self.insert(document) for document in documents]

    @abstractmethod
    async def get(self, document_id: str) -> dict[str, Any] | None:
        """Get a document by ID."""

    @abstractmethod
    async def update(self, document_id: str, fields: dict[str, Any]) -> dict[str, Any] | None:
        """Overwrite the given fields of a document.

        Returns:
            The document after the update, or None if it does not exist
        """

    @abstractmethod
    async def delete(self, document_id: str) -> dict[str, Any] | None:
        """Delete a document.

        Returns:
            The document as it was before deletion, or None if it does not exist
        """

    @abstractmethod
    async def find(self, query: Query | None = None) -> list[dict[str, Any]]:
        """Return the documents selected by the fetch stages of ``query``."""

    @abstractmethod
    async def aggregate(self, query: Query) -> list[dict[str, Any]]:
        """Run every stage of ``query``, including the group stage."""

    async def close(self) -> None:
        """Release backend resources."""
