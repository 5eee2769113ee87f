"""Common models package."""

from shop_common.models.message import MessageResponse
from shop_common.models.order import Order, OrderCreate, OrderDetails
from shop_common.models.product import Product, ProductIn, ProductStatistics
from shop_common.models.user import User, UserCreate

__all__ = [
    "MessageResponse",
    "Order",
    "OrderCreate",
    "OrderDetails",
    "Product",
    "ProductIn",
    "ProductStatistics",
    "User",
    "UserCreate",
]
