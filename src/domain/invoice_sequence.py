"""Invoice Sequence Domain Entity

Per-tenant counter backing invoice numbering.
"""

from sqlmodel import Field, Column
from sqlalchemy import Integer
from src.domain.base import BaseModel, IdType


class InvoiceSequence(BaseModel, table=True):
    """
    Invoice Sequence - Last invoice number handed out to a tenant

    Domain Rules:
    - One row per tenant
    - last_number only increases, through a single atomic upsert
    - Numbers are never reused, even when invoices are deleted
    """

    __tablename__ = "invoice_sequences"

    tenant_id: int = Field(
        sa_column=Column(IdType, primary_key=True, autoincrement=False),
        description="Tenant owning the sequence"
    )

    last_number: int = Field(
        sa_column=Column(Integer, nullable=False, default=0),
        description="Last allocated sequence number"
    )


def format_invoice_number(sequence: int) -> str:
    """Format a sequence number as INV-0001"""
    return f"INV-{sequence:04d}"
