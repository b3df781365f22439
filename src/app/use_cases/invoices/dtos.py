"""Data Transfer Objects for Invoice Use Cases

Command fields arrive unparsed (Any) so the use case can report which
field of which item failed instead of a generic schema error.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class InvoiceItemCommandDTO(BaseModel):
    """One requested line item"""

    product_id: Any = Field(default=None, description="Product sold (required)")
    quantity: Any = Field(default=None, description="Positive integer quantity")
    unit_price: Any = Field(default=None, description="Non-negative unit price")
    total_price: Any = Field(
        default=None,
        description="Optional client line total, must match quantity * unit_price"
    )


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating an invoice

    Used as input to CreateInvoice use case. Carries no money totals:
    subtotal, tax and total are always derived from the items.
    """

    tenant_id: int = Field(..., description="Owning tenant")
    customer_id: Any = Field(default=None, description="Customer of the same tenant")
    issue_date: Any = Field(default=None, description="Issue date (ISO 8601)")
    due_date: Any = Field(default=None, description="Due date, defaults to issue date")
    tax_rate: Any = Field(default=None, description="Tax percent 0-100, defaults to configuration")
    status: Optional[str] = Field(default=None, description="Initial status, defaults to pending")
    notes: Optional[str] = Field(default=None, description="Free text notes")
    items: List[InvoiceItemCommandDTO] = Field(default_factory=list, description="Line items in order")

    class Config:
        json_schema_extra = {
            "example": {
                "tenant_id": 1,
                "customer_id": 7,
                "issue_date": "2024-01-15",
                "due_date": "2024-02-14",
                "tax_rate": "10",
                "items": [{"product_id": 3, "quantity": 2, "unit_price": "50.00"}]
            }
        }


class UpdateInvoiceStatusCommandDTO(BaseModel):
    """Command DTO for changing an invoice's status"""

    invoice_id: int
    tenant_id: int
    status: str


class InvoiceItemDTO(BaseModel):
    """Response DTO for a line item"""

    id: int
    product_id: int
    product_name: Optional[str] = Field(default=None, description="None if the product was deleted")
    product_sku: Optional[str] = None
    quantity: int
    unit_price: Decimal
    total_price: Decimal


class InvoiceDTO(BaseModel):
    """Response DTO for an invoice header with its customer's name"""

    id: int
    invoice_number: str
    customer_id: int
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    issue_date: date
    due_date: date
    subtotal: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    total_amount: Decimal
    status: str
    notes: str
    created_at: datetime
    updated_at: datetime

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "invoice_number": "INV-0001",
                "customer_id": 7,
                "customer_name": "Acme",
                "customer_email": "a@acme.com",
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


class InvoiceDetailDTO(InvoiceDTO):
    """Response DTO for a single invoice with customer contact and items"""

    customer_phone: Optional[str] = None
    customer_address: Optional[str] = None
    items: List[InvoiceItemDTO] = Field(default_factory=list)


class InvoicePdfDTO(BaseModel):
    """Rendered invoice document"""

    invoice_number: str
    content: bytes


class OverdueMarkResultDTO(BaseModel):
    """Outcome of one overdue marking pass"""

    as_of: date
    checked: int = Field(..., description="Unpaid invoices found past due")
    marked: int = Field(..., description="Invoices moved to overdue")
    invoice_ids: List[int] = Field(default_factory=list)


class DashboardSummaryDTO(BaseModel):
    """Headline figures for a tenant's dashboard"""

    customer_count: int
    product_count: int
    invoice_count: int
    revenue: Decimal = Field(..., description="Sum of paid invoice totals")
    outstanding: Decimal = Field(..., description="Sum of pending, sent and overdue totals")
    invoices_by_status: Dict[str, int] = Field(default_factory=dict)
