"""Cosmos DB infrastructure."""

from shop_common.infra.cosmos.cosmos_collection import CosmosCollection

__all__ = ["CosmosCollection"]
