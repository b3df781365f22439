"""Product Repository Interface

Defines the contract for tenant-scoped product persistence.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from src.domain.product import Product


class ProductRepository(ABC):
    """Repository interface for Product persistence"""

    @abstractmethod
    async def list(self, tenant_id: int) -> List[Product]:
        """List a tenant's products ordered by created_at desc"""
        pass

    @abstractmethod
    async def get_by_id(self, product_id: int, tenant_id: int) -> Optional[Product]:
        pass

    @abstractmethod
    async def get_by_ids(self, product_ids: Iterable[int], tenant_id: int) -> List[Product]:
        """
        Retrieve the tenant's products among the given ids

        Ids that are missing or owned by another tenant are silently absent
        from the result.
        """
        pass

    @abstractmethod
    async def exists_sku(
        self, tenant_id: int, sku: str, exclude_id: Optional[int] = None
    ) -> bool:
        """
        Check whether the tenant already uses a SKU

        Args:
            tenant_id: Owning tenant
            sku: SKU to look up
            exclude_id: Product to ignore (the one being updated)
        """
        pass

    @abstractmethod
    async def create(self, product: Product) -> Product:
        pass

    @abstractmethod
    async def update(self, product: Product) -> Product:
        pass

    @abstractmethod
    async def delete(self, product_id: int, tenant_id: int) -> bool:
        pass

    @abstractmethod
    async def count_by_tenant(self, tenant_id: int) -> int:
        pass
