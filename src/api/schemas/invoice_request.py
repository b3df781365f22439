"""Request schemas for Invoice API"""

from typing import Any, List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator


class InvoiceItemRequestSchema(BaseModel):
    """One line of a create invoice request, values checked by CreateInvoice"""

    product_id: Any = None
    quantity: Any = None
    unit_price: Any = None
    total_price: Any = None


class CreateInvoiceRequestSchema(BaseModel):
    """
    Request schema for creating an invoice

    Used for POST /invoices endpoint.

    Accepts both body shapes:
    - flat: {"customer_id": ..., "issue_date": ..., "items": [...]}
    - wrapped: {"invoice": {"customer_id": ..., ...}, "items": [...]}

    subtotal, tax_amount and total_amount sent by clients are ignored;
    the server always computes them.
    """

    customer_id: Any = Field(default=None, description="Customer of the tenant (required)")
    issue_date: Any = Field(default=None, description="Issue date, ISO 8601 (required)")
    due_date: Any = Field(default=None, description="Due date, defaults to issue date")
    tax_rate: Any = Field(default=None, description="Tax percent in [0, 100]")
    status: Optional[str] = Field(default=None, description="Initial status, defaults to pending")
    notes: Optional[str] = Field(default=None, description="Free text notes")
    items: List[InvoiceItemRequestSchema] = Field(default_factory=list, description="Line items")

    @model_validator(mode="before")
    @classmethod
    def unwrap_invoice(cls, data):
        if isinstance(data, dict) and isinstance(data.get("invoice"), dict):
            merged = dict(data["invoice"])
            if "items" in data:
                merged["items"] = data["items"]
            return merged
        return data

    @field_validator("items", mode="before")
    @classmethod
    def none_as_empty_list(cls, v):
        return [] if v is None else v

    class Config:
        json_schema_extra = {
            "example": {
                "invoice": {
                    "customer_id": 7,
                    "issue_date": "2024-01-15",
                    "due_date": "2024-02-14",
                    "tax_rate": 10
                },
                "items": [
                    {"product_id": 3, "quantity": 2, "unit_price": 50}
                ]
            }
        }


class UpdateInvoiceStatusRequestSchema(BaseModel):
    """Request schema for PATCH /invoices/{id}/status"""

    status: str = Field(..., min_length=1, description="Target status")

    class Config:
        json_schema_extra = {"example": {"status": "paid"}}
