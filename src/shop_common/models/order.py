"""Order models."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from shop_common.models.product import Product
from shop_common.models.user import User


class OrderCreate(BaseModel):
    """Request body for creating an order."""

    user_id: str = Field(..., alias="userId", description="ID of the ordering user")
    product_id: str = Field(..., alias="productId", description="ID of the ordered product")

    model_config = ConfigDict(populate_by_name=True)  # Allow both userId and user_id


class Order(BaseModel):
    """Order entity model.

    ``user_id`` and ``product_id`` are non-owning references; they are checked
    when the order is created but nothing keeps them valid afterwards.
    """

    id: str = Field(..., description="Unique identifier for the order")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), alias="createdAt", description="Creation timestamp"
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), alias="updatedAt", description="Last update timestamp"
    )
    user_id: str = Field(..., alias="userId", description="Referenced user ID")
    product_id: str = Field(..., alias="productId", description="Referenced product ID")

    model_config = ConfigDict(populate_by_name=True)


class OrderDetails(Order):
    """Order joined with the user and product it references."""

    user_details: User = Field(..., alias="userDetails", description="Referenced user, without credentials")
    product_details: Product = Field(..., alias="productDetails", description="Referenced product")
