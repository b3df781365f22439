from .user_repository import SqlAlchemyUserRepository
from .customer_repository import SqlAlchemyCustomerRepository
from .product_repository import SqlAlchemyProductRepository
from .invoice_repository import SqlAlchemyInvoiceRepository
from .invoice_item_repository import SqlAlchemyInvoiceItemRepository

__all__ = [
    "SqlAlchemyUserRepository",
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyProductRepository",
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyInvoiceItemRepository",
]
