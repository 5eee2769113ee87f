"""Service initialization and dependency injection."""

from fastapi import Depends, Request

from shop_api.config import Settings, get_settings
from shop_common.infra import Database
from shop_common.services import OrderService, ProductService, SeedService


def get_database(request: Request) -> Database:
    """Get the database handle opened by the application lifespan."""
    return request.app.state.database


def get_product_service(database: Database = Depends(get_database)) -> ProductService:
    return ProductService(database)


def get_order_service(database: Database = Depends(get_database)) -> OrderService:
    return OrderService(database)


def get_seed_service(
    database: Database = Depends(get_database),
    settings: Settings = Depends(get_settings),
) -> SeedService:
    """Get seed service instance.

    Args:
        database: Database handle
        settings: Application settings

    Returns:
        SeedService writing ``settings.seed_batch_size`` records per collection
    """
    return SeedService(database, batch_size=settings.seed_batch_size)
