"""Order service."""

import logging
from datetime import UTC, datetime
from typing import Any

from shop_common.errors import OrderNotFoundError, ProductNotFoundError, UserNotFoundError
from shop_common.infra import Database, new_document_id
from shop_common.models.order import Order, OrderCreate, OrderDetails

logger = logging.getLogger(__name__)

# Never exposed through a joined user.
HIDDEN_USER_FIELDS = frozenset({"password"})


class OrderService:
    """Creates orders and resolves them together with their user and product.

    Order creation checks that the user and product exist and then writes the
    order; there is no transaction around the two steps, so a product deleted
    in between still ends up referenced by the new order.
    """

    def __init__(self, database: Database) -> None:
        self.users = database.users
        self.products = database.products
        self.orders = database.orders

    async def create_order(self, request: OrderCreate) -> Order:
        """Create an order for an existing user and product.

        Args:
            request: User and product references

        Returns:
            The stored order

        Raises:
            UserNotFoundError: If the user does not exist
            ProductNotFoundError: If the product does not exist
        """
        user = await self.users.get(request.user_id)
        product = await self.products.get(request.product_id)

        if user is None:
            raise UserNotFoundError(request.user_id)
        if product is None:
            raise ProductNotFoundError(request.product_id)

        now = datetime.now(UTC)
        order = Order(
            id=new_document_id(),
            created_at=now,
            updated_at=now,
            user_id=request.user_id,
            product_id=request.product_id,
        )
        stored = await self.orders.insert(order.model_dump(mode="json", by_alias=True))
        logger.info("Created order %s for user %s", stored["id"], request.user_id)
        return Order.model_validate(stored)

    async def get_order_details(self, order_id: str) -> OrderDetails:
        """Resolve an order and inline its user and product.

        Raises:
            OrderNotFoundError: If the order does not exist, or the user or
                product it references no longer does
        """
        order = await self.orders.get(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)

        user = await self.users.get(order["userId"])
        product = await self.products.get(order["productId"])
        if user is None or product is None:
            logger.warning("Order %s references a missing user or product", order_id)
            raise OrderNotFoundError(order_id)

        return OrderDetails.model_validate(
            {**order, "userDetails": _without(user, HIDDEN_USER_FIELDS), "productDetails": product}
        )


def _without(document: dict[str, Any], fields: frozenset[str]) -> dict[str, Any]:
    return {k: v for k, v in document.items() if k not in fields}
