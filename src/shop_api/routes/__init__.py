"""Route initialization module."""

from fastapi import APIRouter

from shop_api.routes.health import router as health_router
from shop_api.routes.orders import router as orders_router
from shop_api.routes.products import router as products_router
from shop_api.routes.seed import router as seed_router

api_router = APIRouter()

# Include sub-routers
api_router.include_router(health_router)
api_router.include_router(seed_router)
api_router.include_router(orders_router)
api_router.include_router(products_router)


__all__ = ["api_router"]
