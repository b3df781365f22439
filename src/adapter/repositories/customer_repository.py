"""SQLAlchemy implementation of CustomerRepository

All queries are scoped by tenant_id.
"""

from datetime import datetime
from typing import List, Optional, Tuple
from sqlalchemy import delete
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.customer import Customer
from src.domain.invoice import Invoice


class SqlAlchemyCustomerRepository(CustomerRepository):
    """SQLAlchemy implementation of CustomerRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_with_invoice_counts(self, tenant_id: int) -> List[Tuple[Customer, int]]:
        """
        List customers with the number of invoices issued to each

        Args:
            tenant_id: Owning tenant

        Returns:
            (customer, invoice_count) pairs, newest customer first
        """
        statement = (
            select(Customer, func.count(Invoice.id))
            .outerjoin(
                Invoice,
                (Invoice.customer_id == Customer.id) & (Invoice.tenant_id == Customer.tenant_id),
            )
            .where(Customer.tenant_id == tenant_id)
            .group_by(Customer.id)
            .order_by(Customer.created_at.desc(), Customer.id.desc())
        )
        result = await self.session.execute(statement)
        return [(customer, count) for customer, count in result.all()]

    async def get_by_id(self, customer_id: int, tenant_id: int) -> Optional[Customer]:
        statement = (
            select(Customer)
            .where(Customer.id == customer_id)
            .where(Customer.tenant_id == tenant_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def create(self, customer: Customer) -> Customer:
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer

    async def update(self, customer: Customer) -> Customer:
        customer.updated_at = datetime.utcnow()
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer

    async def delete(self, customer_id: int, tenant_id: int) -> bool:
        # The invoice check runs inside the DELETE so no invoice can slip in between
        has_invoices = select(Invoice.id).where(Invoice.customer_id == customer_id).exists()
        statement = (
            delete(Customer)
            .where(Customer.id == customer_id)
            .where(Customer.tenant_id == tenant_id)
            .where(~has_invoices)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(statement)
        return result.rowcount > 0

    async def count_invoices(self, customer_id: int, tenant_id: int) -> int:
        statement = (
            select(func.count())
            .select_from(Invoice)
            .where(Invoice.customer_id == customer_id)
            .where(Invoice.tenant_id == tenant_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def count_by_tenant(self, tenant_id: int) -> int:
        statement = select(func.count()).select_from(Customer).where(Customer.tenant_id == tenant_id)
        result = await self.session.execute(statement)
        return result.scalar_one()
