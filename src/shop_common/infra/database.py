"""Database handle owning the users, products and orders collections."""

import logging
from collections.abc import Sequence
from typing import Any

from shop_common.infra.collection import DocumentCollection
from shop_common.infra.memory import InMemoryCollection

logger = logging.getLogger(__name__)


class Database:
    """The three collections the API works with, plus the resources behind them.

    Constructed once by the application entry point and handed to services;
    nothing else holds a connection.
    """

    def __init__(
        self,
        users: DocumentCollection,
        products: DocumentCollection,
        orders: DocumentCollection,
        resources: Sequence[Any] = (),
    ) -> None:
        """Initialize the handle.

        Args:
            users: Users collection
            products: Products collection
            orders: Orders collection
            resources: Objects with an async ``close()`` (clients, credentials)
                to release on shutdown, closed in order
        """
        self.users = users
        self.products = products
        self.orders = orders
        self._resources = list(resources)

    @classmethod
    def in_memory(cls) -> "Database":
        """Create a database backed by in-process dictionaries."""
        return cls(
            users=InMemoryCollection("users"),
            products=InMemoryCollection("products"),
            orders=InMemoryCollection("orders"),
        )

    async def close(self) -> None:
        for resource in self._resources:
            await resource.close()
        self._resources.clear()
        logger.info("Database connection closed")
