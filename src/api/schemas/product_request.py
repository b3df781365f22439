"""Request schemas for Product API"""

from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator


class ProductRequestSchema(BaseModel):
    """
    Request schema for creating or replacing a product

    Used for POST /products and PUT /products/{id}. price and stock are
    accepted as numbers or numeric strings and checked by the use case.
    """

    name: str = Field(default="", description="Product name (required)")
    sku: str = Field(default="", description="SKU, unique per tenant (required)")
    category: str = Field(default="", description="Category (required)")
    price: Any = Field(default=None, description="Unit price >= 0 (required)")
    stock: Any = Field(default=None, description="Units in stock >= 0 (required)")
    description: Optional[str] = Field(default=None, description="Free text description")

    @field_validator("name", "sku", "category", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return "" if v is None else v

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Anvil",
                "sku": "ANV-001",
                "category": "Hardware",
                "price": 50,
                "stock": 12,
                "description": "Drop-forged"
            }
        }
