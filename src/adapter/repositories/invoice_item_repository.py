"""SQLAlchemy implementation of InvoiceItemRepository"""

from typing import List, Optional, Sequence, Tuple
from sqlalchemy import and_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.invoice_item import InvoiceItem
from src.domain.product import Product


class SqlAlchemyInvoiceItemRepository(InvoiceItemRepository):
    """SQLAlchemy implementation of InvoiceItemRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_many(self, items: Sequence[InvoiceItem]) -> List[InvoiceItem]:
        """
        Persist line items in input order

        Args:
            items: InvoiceItem entities, invoice_id already set

        Returns:
            The same items with generated IDs
        """
        for item in items:
            self.session.add(item)
        await self.session.flush()
        for item in items:
            await self.session.refresh(item)
        return list(items)

    async def list_with_products(
        self, invoice_id: int, tenant_id: int
    ) -> List[Tuple[InvoiceItem, Optional[Product]]]:
        # Outer join keeps lines whose product was deleted; other tenants' products never match
        statement = (
            select(InvoiceItem, Product)
            .outerjoin(
                Product,
                and_(Product.id == InvoiceItem.product_id, Product.tenant_id == tenant_id),
            )
            .where(InvoiceItem.invoice_id == invoice_id)
            .order_by(InvoiceItem.id)
        )
        result = await self.session.execute(statement)
        return [(item, product) for item, product in result.all()]
