"""Product CRUD and reporting service."""

import logging
import re

from shop_common.errors import ProductNotFoundError
from shop_common.infra import Database
from shop_common.models.product import Product, ProductIn, ProductStatistics
from shop_common.query import Accumulator, GroupField, Query

logger = logging.getLogger(__name__)

DEFAULT_SORT_FIELD = "name"
DEFAULT_SKIP = 0
DEFAULT_LIMIT = 10

PRICE_STATISTICS = Query().group_by(
    GroupField("avgPrice", Accumulator.AVG, "price"),
    GroupField("totalPrice", Accumulator.SUM, "price"),
    GroupField("minPrice", Accumulator.MIN, "price"),
    GroupField("maxPrice", Accumulator.MAX, "price"),
    GroupField("uniqueNames", Accumulator.ADD_TO_SET, "name"),
    GroupField("firstProductName", Accumulator.FIRST, "name"),
    GroupField("lastProductName", Accumulator.LAST, "name"),
)

_LEADING_INTEGER = re.compile(r"^\s*[+-]?\d+")


def parse_count(value: str | None, default: int) -> int:
    """Parse a skip or limit query parameter, falling back to ``default``.

    Leading digits are used as-is (``"5abc"`` is 5). Missing, non-numeric,
    zero and negative values all give ``default``.
    """
    match = _LEADING_INTEGER.match(value or "")
    if match is None:
        return default
    count = int(match.group())
    return count if count > 0 else default


def build_product_page_query(
    search: str | None = None,
    sort: str = DEFAULT_SORT_FIELD,
    skip: int = DEFAULT_SKIP,
    limit: int = DEFAULT_LIMIT,
) -> Query:
    """Build the search/sort/paginate pipeline for products.

    Args:
        search: Optional case-insensitive substring of the product name
        sort: Field to sort on, ascending
        skip: Number of products to skip
        limit: Maximum number of products to return

    Returns:
        Query with an optional name filter, then sort, skip and limit stages
    """
    query = Query()
    if search:
        query = query.where_contains("name", search)
    return query.order_by(sort).offset(skip).take(limit)


class ProductService:
    """Service for managing products."""

    def __init__(self, database: Database) -> None:
        self.products = database.products

    async def create_product(self, product: ProductIn) -> Product:
        created = await self.products.insert(product.model_dump())
        logger.info("Created product %s", created["id"])
        return Product.model_validate(created)

    async def list_products(self) -> list[Product]:
        return [Product.model_validate(item) for item in await self.products.find()]

    async def update_product(self, product_id: str, product: ProductIn) -> Product:
        """Replace name, quantity, price and image of a product.

        Raises:
            ProductNotFoundError: If no product has this ID
        """
        updated = await self.products.update(product_id, product.model_dump())
        if updated is None:
            raise ProductNotFoundError(product_id)
        return Product.model_validate(updated)

    async def delete_product(self, product_id: str) -> Product:
        """Delete a product and return its last state.

        Raises:
            ProductNotFoundError: If no product has this ID
        """
        deleted = await self.products.delete(product_id)
        if deleted is None:
            raise ProductNotFoundError(product_id)
        logger.info("Deleted product %s", product_id)
        return Product.model_validate(deleted)

    async def search_products(
        self,
        search: str | None = None,
        sort: str = DEFAULT_SORT_FIELD,
        skip: int = DEFAULT_SKIP,
        limit: int = DEFAULT_LIMIT,
    ) -> list[Product]:
        query = build_product_page_query(search=search, sort=sort, skip=skip, limit=limit)
        return [Product.model_validate(item) for item in await self.products.find(query)]

    async def product_statistics(self) -> list[ProductStatistics]:
        """Compute price statistics across all products.

        Returns:
            A single-element list with the statistics, or an empty list when
            there are no products
        """
        rows = await self.products.aggregate(PRICE_STATISTICS)
        return [ProductStatistics.model_validate(row) for row in rows]
