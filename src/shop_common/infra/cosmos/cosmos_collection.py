"""Azure Cosmos DB implementation of DocumentCollection."""

import logging
from typing import Any

from azure.cosmos.aio import ContainerProxy
from azure.cosmos.exceptions import CosmosResourceNotFoundError

from shop_common.infra.collection import DocumentCollection, new_document_id
from shop_common.query import Query, compile_cosmos_sql, group_documents

logger = logging.getLogger(__name__)

COSMOS_SYSTEM_FIELDS = frozenset({"_rid", "_self", "_etag", "_attachments", "_ts"})


def _strip_system_fields(item: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in item.items() if k not in COSMOS_SYSTEM_FIELDS}


class CosmosCollection(DocumentCollection):
    """Infrastructure layer: one Cosmos DB container partitioned on ``/id``.

    Every document is its own logical partition, so point reads and writes use
    the document ID as the partition key and queries run cross-partition.
    """

    def __init__(self, container: ContainerProxy, name: str | None = None) -> None:
        """Initialize the collection.

        Args:
            container: Async container client
            name: Collection name used in log messages (default: container ID)
        """
        self.container = container
        self.name = name or container.id

    async def insert(self, document: dict[str, Any]) -> dict[str, Any]:
        body = dict(document)
        document_id = body.pop("id", None) or new_document_id()
        try:
            created = await self.container.create_item(body={"id": document_id, **body})
        except Exception as e:
            logger.error("Failed to create item in %s: %s", self.name, e)
            raise
        logger.debug("Created item %s in container %s", created["id"], self.name)
        return _strip_system_fields(created)

    async def get(self, document_id: str) -> dict[str, Any] | None:
        try:
            item = await self.container.read_item(item=document_id, partition_key=document_id)
        except CosmosResourceNotFoundError:
            logger.debug("Item %s not found in container %s", document_id, self.name)
            return None
        return _strip_system_fields(item)

    async def update(self, document_id: str, fields: dict[str, Any]) -> dict[str, Any] | None:
        """Read, merge and replace a document.

        Args:
            document_id: Document ID
            fields: Fields to overwrite; ``id`` is ignored

        Returns:
            Updated document, or None if it does not exist
        """
        try:
            existing = await self.container.read_item(item=document_id, partition_key=document_id)
        except CosmosResourceNotFoundError:
            return None

        existing.update({k: v for k, v in fields.items() if k != "id"})
        try:
            updated = await self.container.replace_item(item=document_id, body=_strip_system_fields(existing))
        except CosmosResourceNotFoundError:
            # Deleted between the read and the replace.
            return None
        logger.info("Updated item %s in container %s", document_id, self.name)
        return _strip_system_fields(updated)

    async def delete(self, document_id: str) -> dict[str, Any] | None:
        existing = await self.get(document_id)
        if existing is None:
            return None
        try:
            await self.container.delete_item(item=document_id, partition_key=document_id)
        except CosmosResourceNotFoundError:
            logger.warning("Item %s not found for deletion in %s", document_id, self.name)
            return None
        logger.info("Deleted item %s from container %s", document_id, self.name)
        return existing

    async def find(self, query: Query | None = None) -> list[dict[str, Any]]:
        sql, parameters = compile_cosmos_sql((query or Query()).without_group())
        logger.debug("Querying %s: %s %s", self.name, sql, parameters)
        items = self.container.query_items(query=sql, parameters=parameters)
        return [_strip_system_fields(item) async for item in items]

    async def aggregate(self, query: Query) -> list[dict[str, Any]]:
        documents = await self.find(query)
        if not query.is_grouped:
            return documents
        return group_documents(documents, query.group)
