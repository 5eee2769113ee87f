"""Common services package."""

from shop_common.services.order_service import OrderService
from shop_common.services.product_service import ProductService, build_product_page_query
from shop_common.services.seed_service import SeedService, generate_product_data, generate_user_data

__all__ = [
    "OrderService",
    "ProductService",
    "SeedService",
    "build_product_page_query",
    "generate_product_data",
    "generate_user_data",
]
