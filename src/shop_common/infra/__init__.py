"""Data access layer."""

from shop_common.infra.collection import DocumentCollection, new_document_id
from shop_common.infra.database import Database
from shop_common.infra.memory import InMemoryCollection

__all__ = ["Database", "DocumentCollection", "InMemoryCollection", "new_document_id"]
