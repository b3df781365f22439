"""Invoice Domain Entity

Invoice header issued by a tenant to one of its customers.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from sqlmodel import Field, Column, Index
from sqlalchemy import CheckConstraint, Date, ForeignKey, Numeric, String, UniqueConstraint
from src.domain.base import BaseModel, IdType


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    DRAFT = "draft"
    PENDING = "pending"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


# Statuses that count as money still owed to the tenant
OUTSTANDING_STATUSES = (InvoiceStatus.PENDING, InvoiceStatus.SENT, InvoiceStatus.OVERDUE)

# No status change is allowed once an invoice reaches one of these
FINAL_STATUSES = (InvoiceStatus.PAID, InvoiceStatus.CANCELLED)

OPEN_STATUSES = tuple(status for status in InvoiceStatus if status not in FINAL_STATUSES)

# Statuses the overdue job may move to overdue
OVERDUE_CANDIDATE_STATUSES = (InvoiceStatus.PENDING, InvoiceStatus.SENT)

# Decimal places stored for tax_rate, NUMERIC(5, 2)
TAX_RATE_PLACES = 2


class Invoice(BaseModel, table=True):
    """
    Invoice - Header of a customer invoice

    Domain Rules:
    - invoice_number is unique per tenant, formatted INV-0001
    - customer_id references a customer of the same tenant
    - tax_amount = round(subtotal * tax_rate / 100, 2)
    - total_amount = subtotal + tax_amount
    - Created together with at least one InvoiceItem, never alone
    """

    __tablename__ = "invoices"
    __table_args__ = (
        UniqueConstraint('tenant_id', 'invoice_number', name='uq_invoices_tenant_number'),
        CheckConstraint('subtotal >= 0', name='invoice_subtotal_non_negative'),
        CheckConstraint('tax_rate >= 0 AND tax_rate <= 100', name='invoice_tax_rate_range'),
        CheckConstraint('tax_amount >= 0', name='invoice_tax_amount_non_negative'),
        CheckConstraint('total_amount >= 0', name='invoice_total_non_negative'),
        Index('ix_invoices_tenant_id', 'tenant_id'),
        Index('ix_invoices_customer_id', 'customer_id'),
        Index('ix_invoices_status', 'status'),
        # Never hand out the id of a deleted row again
        {"sqlite_autoincrement": True},
    )

    id: int = Field(
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique invoice identifier (auto-increment)"
    )

    tenant_id: int = Field(
        sa_column=Column(IdType, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        description="Owning tenant (user id)"
    )

    customer_id: int = Field(
        sa_column=Column(IdType, ForeignKey("customers.id"), nullable=False),
        description="Invoiced customer"
    )

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Sequential per-tenant number (e.g., INV-0001)"
    )

    issue_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Issue date"
    )

    due_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Payment due date"
    )

    subtotal: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Sum of line item totals"
    )

    tax_rate: Decimal = Field(
        sa_column=Column(Numeric(5, TAX_RATE_PLACES), nullable=False),
        description="Tax rate in percent (0-100)"
    )

    tax_amount: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Tax amount derived from subtotal and tax_rate"
    )

    total_amount: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="subtotal + tax_amount"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.PENDING,
        description="Invoice status"
    )

    notes: str = Field(
        default="",
        sa_column=Column(String(2000), nullable=False, default=""),
        description="Free text notes (optional)"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Invoice creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "tenant_id": 1,
                "customer_id": 7,
                "invoice_number": "INV-0001",
                "issue_date": "2024-01-15",
                "due_date": "2024-02-14",
                "subtotal": "100.00",
                "tax_rate": "10.00",
                "tax_amount": "10.00",
                "total_amount": "110.00",
                "status": "pending",
                "notes": "",
                "created_at": "2024-01-15T10:00:00Z",
                "updated_at": "2024-01-15T10:00:00Z"
            }
        }
