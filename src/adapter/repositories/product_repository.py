"""SQLAlchemy implementation of ProductRepository"""

from datetime import datetime
from typing import Iterable, List, Optional
from sqlalchemy import delete
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.product_repository import ProductRepository
from src.domain.product import Product


class SqlAlchemyProductRepository(ProductRepository):
    """
    SQLAlchemy implementation of ProductRepository

    SKU uniqueness per tenant is enforced by uq_products_tenant_sku;
    exists_sku only gives callers a friendlier error first.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list(self, tenant_id: int) -> List[Product]:
        statement = (
            select(Product)
            .where(Product.tenant_id == tenant_id)
            .order_by(Product.created_at.desc(), Product.id.desc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_id(self, product_id: int, tenant_id: int) -> Optional[Product]:
        statement = (
            select(Product)
            .where(Product.id == product_id)
            .where(Product.tenant_id == tenant_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_ids(self, product_ids: Iterable[int], tenant_id: int) -> List[Product]:
        ids = set(product_ids)
        if not ids:
            return []
        statement = (
            select(Product)
            .where(Product.id.in_(ids))
            .where(Product.tenant_id == tenant_id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def exists_sku(
        self, tenant_id: int, sku: str, exclude_id: Optional[int] = None
    ) -> bool:
        statement = (
            select(func.count())
            .select_from(Product)
            .where(Product.tenant_id == tenant_id)
            .where(Product.sku == sku)
        )
        if exclude_id is not None:
            statement = statement.where(Product.id != exclude_id)
        result = await self.session.execute(statement)
        return result.scalar_one() > 0

    async def create(self, product: Product) -> Product:
        self.session.add(product)
        await self.session.flush()
        await self.session.refresh(product)
        return product

    async def update(self, product: Product) -> Product:
        product.updated_at = datetime.utcnow()
        self.session.add(product)
        await self.session.flush()
        await self.session.refresh(product)
        return product

    async def delete(self, product_id: int, tenant_id: int) -> bool:
        statement = (
            delete(Product)
            .where(Product.id == product_id)
            .where(Product.tenant_id == tenant_id)
        )
        result = await self.session.execute(statement)
        return result.rowcount > 0

    async def count_by_tenant(self, tenant_id: int) -> int:
        statement = select(func.count()).select_from(Product).where(Product.tenant_id == tenant_id)
        result = await self.session.execute(statement)
        return result.scalar_one()
