"""Customer Domain Entity

A party that invoices are issued to. Owned by one tenant.
"""

from datetime import datetime
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, String
from src.domain.base import BaseModel, IdType


class Customer(BaseModel, table=True):
    """
    Customer - Invoice recipient owned by a tenant

    Domain Rules:
    - Belongs to exactly one tenant
    - email is not unique (validated for format on creation)
    - Cannot be deleted while invoices reference it
    """

    __tablename__ = "customers"
    __table_args__ = (
        Index('ix_customers_tenant_id', 'tenant_id'),
        # Never hand out the id of a deleted row again
        {"sqlite_autoincrement": True},
    )

    id: int = Field(
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique customer identifier (auto-increment)"
    )

    tenant_id: int = Field(
        sa_column=Column(IdType, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        description="Owning tenant (user id)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Customer name"
    )

    email: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Contact email"
    )

    phone: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Contact phone"
    )

    address: str = Field(
        default="",
        sa_column=Column(String(500), nullable=False, default=""),
        description="Postal address (optional)"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Customer creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )
