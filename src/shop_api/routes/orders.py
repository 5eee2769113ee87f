"""Order API routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from shop_api.services import get_order_service
from shop_common import messages
from shop_common.errors import EntityNotFoundError, OrderNotFoundError
from shop_common.models import MessageResponse, OrderCreate, OrderDetails
from shop_common.services import OrderService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["orders"])


@router.post("/create-order", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_order(request: OrderCreate, service: OrderService = Depends(get_order_service)) -> MessageResponse:
    logger.info("Create order request: %s", request.model_dump(by_alias=True))
    try:
        await service.create_order(request)
    except EntityNotFoundError as e:
        # Covers both the user and the product reference
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    except Exception as e:
        logger.error("Failed to create order: %s", e, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=messages.ORDER_CREATE_FAILED
        ) from e
    return MessageResponse(message=messages.ORDER_CREATED)


@router.get("/order-details/{order_id}", response_model=OrderDetails)
async def get_order_details(order_id: str, service: OrderService = Depends(get_order_service)) -> OrderDetails:
    """Get an order with its user (without credentials) and product inlined."""
    try:
        return await service.get_order_details(order_id)
    except OrderNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    except Exception as e:
        logger.error("Failed to get details of order %s: %s", order_id, e, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=messages.ORDER_DETAILS_FAILED
        ) from e
