"""Data Transfer Objects for Product Use Cases"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional
from pydantic import BaseModel, Field


class CreateProductCommandDTO(BaseModel):
    """
    Command DTO for creating a product

    price and stock arrive unparsed; the use case checks they are numeric.
    """

    tenant_id: int = Field(..., description="Owning tenant")
    name: str = Field(default="", description="Product name (required)")
    sku: str = Field(default="", description="SKU, unique per tenant (required)")
    category: str = Field(default="", description="Category (required)")
    price: Any = Field(default=None, description="Unit price, numeric >= 0 (required)")
    stock: Any = Field(default=None, description="Units in stock, numeric >= 0 (required)")
    description: Optional[str] = Field(default=None, description="Free text description")


class UpdateProductCommandDTO(CreateProductCommandDTO):
    """Command DTO for replacing a product's fields"""

    product_id: int = Field(..., description="Product to update")


class ProductDTO(BaseModel):
    """Response DTO for a product"""

    id: int
    name: str
    sku: str
    category: str
    price: Decimal
    stock: int
    description: str
    created_at: datetime
    updated_at: datetime

    class Config:
        json_schema_extra = {
            "example": {
                "id": 3,
                "name": "Anvil",
                "sku": "ANV-001",
                "category": "Hardware",
                "price": "50.00",
                "stock": 12,
                "description": "Drop-forged",
                "created_at": "2024-01-01T00:00:00Z",
                "updated_at": "2024-01-01T00:00:00Z"
            }
        }
