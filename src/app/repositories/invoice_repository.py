"""Invoice Repository Interface

Defines the contract for tenant-scoped invoice persistence.
"""

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple
from src.domain.customer import Customer
from src.domain.invoice import Invoice, InvoiceStatus


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Every tenant-facing method takes tenant_id and filters by it.
    """

    @abstractmethod
    async def next_invoice_number(self, tenant_id: int) -> str:
        """
        Allocate the next invoice number for a tenant

        Must be atomic: concurrent callers for the same tenant never receive
        the same number. Runs inside the caller's transaction, so a rolled
        back creation does not consume a number.

        Args:
            tenant_id: Tenant identifier

        Returns:
            Invoice number string (e.g., INV-0001)
        """
        pass

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice header

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: int, tenant_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Returns:
            Invoice if it exists and belongs to tenant_id, None otherwise
        """
        pass

    @abstractmethod
    async def get_with_customer(
        self, invoice_id: int, tenant_id: int
    ) -> Optional[Tuple[Invoice, Customer]]:
        """Retrieve invoice together with its customer"""
        pass

    @abstractmethod
    async def list_with_customers(
        self,
        tenant_id: int,
        status: Optional[InvoiceStatus] = None,
    ) -> List[Tuple[Invoice, Customer]]:
        """
        List a tenant's invoices with their customers

        Args:
            tenant_id: Tenant identifier
            status: Optional filter by status

        Returns:
            (invoice, customer) pairs ordered by created_at desc
        """
        pass

    @abstractmethod
    async def change_status(
        self,
        invoice_id: int,
        tenant_id: int,
        status: InvoiceStatus,
        from_statuses: Iterable[InvoiceStatus],
    ) -> Optional[Invoice]:
        """
        Conditionally move an invoice to another status

        Args:
            invoice_id: Invoice identifier
            tenant_id: Owning tenant
            status: Target status
            from_statuses: The write only applies while the stored status is one of these

        Returns:
            The updated invoice, or None if it is missing or no longer in from_statuses
        """
        pass

    @abstractmethod
    async def delete(self, invoice_id: int, tenant_id: int) -> bool:
        """
        Delete an invoice and its items

        Returns:
            True if an invoice was deleted, False if nothing matched
        """
        pass

    @abstractmethod
    async def count_by_tenant(self, tenant_id: int) -> int:
        pass

    @abstractmethod
    async def summarize_by_status(self, tenant_id: int) -> Dict[InvoiceStatus, Tuple[int, Decimal]]:
        """
        Aggregate a tenant's invoices per status

        Returns:
            Mapping of status to (invoice count, sum of total_amount);
            statuses without invoices are absent
        """
        pass

    @abstractmethod
    async def find_overdue(self, as_of: date, limit: int = 500) -> List[Invoice]:
        """
        Find unpaid invoices past their due date, across all tenants

        Used by the overdue marker job only.

        Args:
            as_of: Invoices due strictly before this date are overdue
            limit: Maximum number of invoices to return
        """
        pass
