"""Invoice Item Repository Interface

Defines the contract for invoice line item persistence.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple
from src.domain.invoice_item import InvoiceItem
from src.domain.product import Product


class InvoiceItemRepository(ABC):
    """
    Repository interface for InvoiceItem persistence

    Items are only reachable through their invoice, so callers must have
    checked invoice ownership first.
    """

    @abstractmethod
    async def create_many(self, items: Sequence[InvoiceItem]) -> List[InvoiceItem]:
        """
        Create line items

        Args:
            items: InvoiceItem entities to persist

        Returns:
            Created items with generated IDs, in input order
        """
        pass

    @abstractmethod
    async def list_with_products(
        self, invoice_id: int, tenant_id: int
    ) -> List[Tuple[InvoiceItem, Optional[Product]]]:
        """
        Retrieve all line items for an invoice with their products

        Only products of tenant_id are joined. The product is None when it
        has since been deleted.
        """
        pass
