"""Product Domain Entity

Catalog item sold by a tenant.
"""

from datetime import datetime
from decimal import Decimal
from sqlmodel import Field, Column, Index
from sqlalchemy import CheckConstraint, ForeignKey, Integer, Numeric, String, UniqueConstraint
from src.domain.base import BaseModel, IdType

# Decimal places stored for price, NUMERIC(18, 2)
PRICE_PLACES = 2


class Product(BaseModel, table=True):
    """
    Product - Catalog item owned by a tenant

    Domain Rules:
    - sku is unique per tenant (storage constraint)
    - price >= 0, stock >= 0
    """

    __tablename__ = "products"
    __table_args__ = (
        UniqueConstraint('tenant_id', 'sku', name='uq_products_tenant_sku'),
        CheckConstraint('price >= 0', name='product_price_non_negative'),
        CheckConstraint('stock >= 0', name='product_stock_non_negative'),
        Index('ix_products_tenant_id', 'tenant_id'),
        # Never hand out the id of a deleted row again
        {"sqlite_autoincrement": True},
    )

    id: int = Field(
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique product identifier (auto-increment)"
    )

    tenant_id: int = Field(
        sa_column=Column(IdType, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        description="Owning tenant (user id)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Product name"
    )

    sku: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Stock keeping unit, unique per tenant"
    )

    category: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Product category"
    )

    price: Decimal = Field(
        sa_column=Column(Numeric(18, PRICE_PLACES), nullable=False),
        description="Unit price (precision: 18,2)"
    )

    stock: int = Field(
        sa_column=Column(Integer, nullable=False, default=0),
        description="Units in stock"
    )

    description: str = Field(
        default="",
        sa_column=Column(String(1000), nullable=False, default=""),
        description="Free text description (optional)"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Product creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )
