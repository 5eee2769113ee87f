"""Product models."""

from pydantic import BaseModel, ConfigDict, Field


class ProductIn(BaseModel):
    """Request body for creating or replacing a product."""

    name: str = Field(..., description="Product name")
    quantity: int = Field(..., description="Units in stock")
    price: float = Field(..., description="Unit price")
    image: str = Field(..., description="Image URL")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "lamp",
                "quantity": 12,
                "price": 249.99,
                "image": "https://example.com/lamp.png",
            }
        }
    )


class Product(ProductIn):
    """Product entity model."""

    id: str = Field(..., description="Unique identifier for the product")


class ProductStatistics(BaseModel):
    """Price statistics computed across every product."""

    avg_price: float | None = Field(None, alias="avgPrice", description="Average price")
    total_price: float = Field(0, alias="totalPrice", description="Sum of all prices")
    min_price: float | None = Field(None, alias="minPrice", description="Lowest price")
    max_price: float | None = Field(None, alias="maxPrice", description="Highest price")
    unique_names: list[str] = Field(default_factory=list, alias="uniqueNames", description="Distinct product names")
    first_product_name: str | None = Field(
        None, alias="firstProductName", description="Name of the first product in store order"
    )
    last_product_name: str | None = Field(
        None, alias="lastProductName", description="Name of the last product in store order"
    )

    model_config = ConfigDict(populate_by_name=True)
