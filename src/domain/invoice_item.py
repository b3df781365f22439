"""Invoice Item Domain Entity

Tracks individual line items within an invoice.
"""

from datetime import datetime
from decimal import Decimal
from sqlmodel import Field, Column, Index
from sqlalchemy import CheckConstraint, ForeignKey, Integer, Numeric
from src.domain.base import BaseModel, IdType

# Decimal places stored for unit_price, NUMERIC(18, 6)
UNIT_PRICE_PLACES = 6


class InvoiceItem(BaseModel, table=True):
    """
    Invoice Item - One product line within an invoice

    Domain Rules:
    - Each item belongs to exactly one invoice and dies with it
    - product_id is informational: unit_price is a snapshot taken at creation
    - quantity > 0, unit_price >= 0
    - total_price = quantity * unit_price
    - Immutable once created
    """

    __tablename__ = "invoice_items"
    __table_args__ = (
        CheckConstraint('quantity > 0', name='item_quantity_positive'),
        CheckConstraint('unit_price >= 0', name='item_unit_price_non_negative'),
        CheckConstraint('total_price >= 0', name='item_total_price_non_negative'),
        Index('ix_invoice_items_invoice_id', 'invoice_id'),
    )

    id: int = Field(
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique invoice item identifier (auto-increment)"
    )

    invoice_id: int = Field(
        sa_column=Column(IdType, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )

    product_id: int = Field(
        sa_column=Column(IdType, nullable=False),
        description="Product this line was sold from"
    )

    quantity: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Units sold"
    )

    unit_price: Decimal = Field(
        sa_column=Column(Numeric(18, UNIT_PRICE_PLACES), nullable=False),
        description="Price per unit at creation time (precision: 18,6)"
    )

    total_price: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Total price (quantity * unit_price)"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Line item creation timestamp"
    )
