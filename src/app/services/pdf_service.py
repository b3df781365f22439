"""PDF Generation Service Interface

Defines the contract for PDF generation operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from src.domain.customer import Customer
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem
from src.domain.product import Product


class PdfService(ABC):
    """
    Service interface for PDF generation

    Provides PDF generation capabilities for invoices.
    """

    @abstractmethod
    def generate_invoice(
        self,
        invoice: Invoice,
        customer: Customer,
        items: List[Tuple[InvoiceItem, Optional[Product]]],
        company_name: str,
        company_address: str,
    ) -> bytes:
        """
        Generate an invoice PDF

        Args:
            invoice: Invoice header
            customer: Invoiced customer
            items: Line items with their products (None if deleted)
            company_name: Issuer name to display on invoice
            company_address: Issuer address to display on invoice

        Returns:
            PDF document as bytes
        """
        pass
