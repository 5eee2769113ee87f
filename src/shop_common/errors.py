"""Typed errors raised by the service layer."""

from shop_common import messages


class ShopError(Exception):
    """Base class for domain errors."""

    message: str = messages.INTERNAL_ERROR

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class EntityNotFoundError(ShopError):
    """A referenced document does not exist."""

    entity: str = "entity"

    def __init__(self, entity_id: str, message: str | None = None) -> None:
        super().__init__(message)
        self.entity_id = entity_id

    def __str__(self) -> str:
        return f"{self.entity} {self.entity_id!r} not found"


class UserNotFoundError(EntityNotFoundError):
    entity = "user"
    message = messages.USER_NOT_FOUND


class ProductNotFoundError(EntityNotFoundError):
    entity = "product"
    message = messages.PRODUCT_NOT_FOUND


class OrderNotFoundError(EntityNotFoundError):
    entity = "order"
    message = messages.ORDER_NOT_FOUND
