"""Seed data routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from shop_api.services import get_seed_service
from shop_common import messages
from shop_common.models import MessageResponse
from shop_common.services import SeedService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["seed"])


@router.get("/add-initial-data", response_model=MessageResponse)
async def add_initial_data(service: SeedService = Depends(get_seed_service)) -> MessageResponse:
    """Insert a batch of random users and products. Each call adds more."""
    try:
        await service.seed()
    except Exception as e:
        logger.error("Failed to add initial data: %s", e, exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=messages.SEED_FAILED) from e
    return MessageResponse(message=messages.SEED_SUCCESS)
