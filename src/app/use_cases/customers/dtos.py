"""Data Transfer Objects for Customer Use Cases"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class CreateCustomerCommandDTO(BaseModel):
    """Command DTO for creating a customer"""

    tenant_id: int = Field(..., description="Owning tenant")
    name: str = Field(default="", description="Customer name (required)")
    email: str = Field(default="", description="Contact email (required)")
    phone: str = Field(default="", description="Contact phone (required)")
    address: Optional[str] = Field(default=None, description="Postal address")


class UpdateCustomerCommandDTO(CreateCustomerCommandDTO):
    """Command DTO for replacing a customer's fields"""

    customer_id: int = Field(..., description="Customer to update")


class CustomerDTO(BaseModel):
    """Response DTO for a customer"""

    id: int
    name: str
    email: str
    phone: str
    address: str
    created_at: datetime
    updated_at: datetime
    invoice_count: Optional[int] = Field(
        default=None,
        description="Invoices referencing the customer (list responses only)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "id": 7,
                "name": "Acme",
                "email": "a@acme.com",
                "phone": "555-0100",
                "address": "1 Road Runner Way",
                "created_at": "2024-01-01T00:00:00Z",
                "updated_at": "2024-01-01T00:00:00Z",
                "invoice_count": 3
            }
        }
