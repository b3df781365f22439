"""Request schemas for Customer API"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator


class CustomerRequestSchema(BaseModel):
    """
    Request schema for creating or replacing a customer

    Used for POST /customers and PUT /customers/{id}.
    """

    name: str = Field(default="", description="Customer name (required)")
    email: str = Field(default="", description="Contact email (required)")
    phone: str = Field(default="", description="Contact phone (required)")
    address: Optional[str] = Field(default=None, description="Postal address")

    @field_validator("name", "email", "phone", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return "" if v is None else v

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Acme",
                "email": "a@acme.com",
                "phone": "555-0100",
                "address": "1 Road Runner Way"
            }
        }
