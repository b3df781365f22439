"""Customer Repository Interface

Defines the contract for tenant-scoped customer persistence.
Every method filters by tenant_id.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from src.domain.customer import Customer


class CustomerRepository(ABC):
    """Repository interface for Customer persistence"""

    @abstractmethod
    async def list_with_invoice_counts(self, tenant_id: int) -> List[Tuple[Customer, int]]:
        """
        List a tenant's customers, newest first

        Args:
            tenant_id: Owning tenant

        Returns:
            (customer, invoice_count) pairs ordered by created_at desc
        """
        pass

    @abstractmethod
    async def get_by_id(self, customer_id: int, tenant_id: int) -> Optional[Customer]:
        """
        Retrieve a customer owned by the tenant

        Returns:
            Customer if it exists and belongs to tenant_id, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, customer: Customer) -> Customer:
        pass

    @abstractmethod
    async def update(self, customer: Customer) -> Customer:
        pass

    @abstractmethod
    async def delete(self, customer_id: int, tenant_id: int) -> bool:
        """
        Delete a customer owned by the tenant, unless invoices reference it

        Returns:
            True if a row was deleted, False if nothing matched or the
            customer still has invoices
        """
        pass

    @abstractmethod
    async def count_invoices(self, customer_id: int, tenant_id: int) -> int:
        """Count the tenant's invoices referencing the customer"""
        pass

    @abstractmethod
    async def count_by_tenant(self, tenant_id: int) -> int:
        pass
