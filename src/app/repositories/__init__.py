from .user_repository import UserRepository
from .customer_repository import CustomerRepository
from .product_repository import ProductRepository
from .invoice_repository import InvoiceRepository
from .invoice_item_repository import InvoiceItemRepository

__all__ = [
    "UserRepository",
    "CustomerRepository",
    "ProductRepository",
    "InvoiceRepository",
    "InvoiceItemRepository",
]
