"""Product API routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from shop_api.services import get_product_service
from shop_common import messages
from shop_common.errors import ProductNotFoundError
from shop_common.models import Product, ProductIn, ProductStatistics
from shop_common.services import ProductService
from shop_common.services.product_service import DEFAULT_LIMIT, DEFAULT_SKIP, DEFAULT_SORT_FIELD, parse_count

logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])


def _server_error(detail: str, e: Exception) -> HTTPException:
    logger.error("%s: %s", detail, e, exc_info=True)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


@router.post("/products", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_product(product: ProductIn, service: ProductService = Depends(get_product_service)) -> Product:
    try:
        return await service.create_product(product)
    except Exception as e:
        raise _server_error(messages.PRODUCT_CREATE_FAILED, e) from e


@router.get("/products-list", response_model=list[Product])
async def list_products(service: ProductService = Depends(get_product_service)) -> list[Product]:
    """List every product, unfiltered and unpaginated."""
    try:
        return await service.list_products()
    except Exception as e:
        raise _server_error(messages.PRODUCT_LIST_FAILED, e) from e


@router.put("/products/{product_id}", response_model=Product)
async def update_product(
    product_id: str, product: ProductIn, service: ProductService = Depends(get_product_service)
) -> Product:
    try:
        return await service.update_product(product_id, product)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    except Exception as e:
        raise _server_error(messages.PRODUCT_UPDATE_FAILED, e) from e


@router.delete("/products/{product_id}", response_model=Product)
async def delete_product(product_id: str, service: ProductService = Depends(get_product_service)) -> Product:
    try:
        return await service.delete_product(product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    except Exception as e:
        raise _server_error(messages.PRODUCT_DELETE_FAILED, e) from e


@router.get("/products", response_model=list[Product])
async def search_products(
    search: str | None = Query(None, description="Case-insensitive substring of the product name"),
    sort: str | None = Query(None, description="Field to sort on, ascending (default: name)"),
    skip: str | None = Query(None, description="Number of products to skip (default: 0)"),
    limit: str | None = Query(None, description="Maximum number of products to return (default: 10)"),
    service: ProductService = Depends(get_product_service),
) -> list[Product]:
    """Search, sort and paginate products. No total count is returned.

    Unparseable or non-positive ``skip`` and ``limit`` fall back to their defaults.
    """
    try:
        return await service.search_products(
            search=search,
            sort=sort or DEFAULT_SORT_FIELD,
            skip=parse_count(skip, DEFAULT_SKIP),
            limit=parse_count(limit, DEFAULT_LIMIT),
        )
    except Exception as e:
        raise _server_error(messages.PRODUCT_LIST_FAILED, e) from e


@router.get("/products-statistic", response_model=list[ProductStatistics])
async def product_statistics(service: ProductService = Depends(get_product_service)) -> list[ProductStatistics]:
    try:
        return await service.product_statistics()
    except Exception as e:
        raise _server_error(messages.PRODUCT_STATISTICS_FAILED, e) from e
