from .base import BaseModel, IdType
from .user import User
from .customer import Customer
from .product import Product
from .invoice import (
    Invoice,
    InvoiceStatus,
    OUTSTANDING_STATUSES,
    FINAL_STATUSES,
    OPEN_STATUSES,
    OVERDUE_CANDIDATE_STATUSES,
)
from .invoice_item import InvoiceItem
from .invoice_sequence import InvoiceSequence, format_invoice_number

__all__ = [
    "BaseModel",
    "IdType",
    "User",
    "Customer",
    "Product",
    "Invoice",
    "InvoiceStatus",
    "OUTSTANDING_STATUSES",
    "FINAL_STATUSES",
    "OPEN_STATUSES",
    "OVERDUE_CANDIDATE_STATUSES",
    "InvoiceItem",
    "InvoiceSequence",
    "format_invoice_number",
]
