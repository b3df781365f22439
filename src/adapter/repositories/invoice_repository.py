"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple
from datetime import date, datetime
from sqlalchemy import delete, update
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.customer import Customer
from src.domain.invoice import OVERDUE_CANDIDATE_STATUSES, Invoice, InvoiceStatus
from src.domain.invoice_item import InvoiceItem
from src.domain.invoice_sequence import InvoiceSequence, format_invoice_number
from src.domain.pricing import ZERO

_UPSERT_BY_DIALECT = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Features:
    - Per-tenant invoice numbers from an atomic upsert on invoice_sequences
    - Every read and delete scoped by tenant_id
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def next_invoice_number(self, tenant_id: int) -> str:
        """
        Generate the next invoice number for a tenant

        Format: INV-NNNN (e.g., INV-0001), widening past 9999

        A single INSERT ... ON CONFLICT DO UPDATE ... RETURNING bumps the
        counter. The row stays locked until the caller's transaction ends, so
        concurrent creations for one tenant serialize here and never share a
        number.

        Returns:
            Unique invoice number string
        """
        dialect = self.session.get_bind().dialect.name
        insert = _UPSERT_BY_DIALECT.get(dialect)
        if insert is None:
            raise NotImplementedError(f"Invoice numbering is not supported on {dialect}")

        statement = (
            insert(InvoiceSequence)
            .values(tenant_id=tenant_id, last_number=1)
            .on_conflict_do_update(
                index_elements=["tenant_id"],
                set_={"last_number": InvoiceSequence.last_number + 1},
            )
            .returning(InvoiceSequence.last_number)
        )
        result = await self.session.execute(statement)
        return format_invoice_number(result.scalar_one())

    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with generated ID
        """
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def get_by_id(self, invoice_id: int, tenant_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID
            tenant_id: Tenant identifier

        Returns:
            Invoice if found for the tenant, None otherwise
        """
        statement = (
            select(Invoice)
            .where(Invoice.id == invoice_id)
            .where(Invoice.tenant_id == tenant_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_with_customer(
        self, invoice_id: int, tenant_id: int
    ) -> Optional[Tuple[Invoice, Customer]]:
        statement = (
            select(Invoice, Customer)
            .join(Customer, Customer.id == Invoice.customer_id)
            .where(Invoice.id == invoice_id)
            .where(Invoice.tenant_id == tenant_id)
        )
        result = await self.session.execute(statement)
        row = result.first()
        if row is None:
            return None
        return row[0], row[1]

    async def list_with_customers(
        self,
        tenant_id: int,
        status: Optional[InvoiceStatus] = None,
    ) -> List[Tuple[Invoice, Customer]]:
        """
        Retrieve invoices by tenant ID

        Args:
            tenant_id: Tenant identifier
            status: Optional filter by status

        Returns:
            List of (invoice, customer), newest first
        """
        statement = (
            select(Invoice, Customer)
            .join(Customer, Customer.id == Invoice.customer_id)
            .where(Invoice.tenant_id == tenant_id)
        )

        if status:
            statement = statement.where(Invoice.status == status)

        statement = statement.order_by(Invoice.created_at.desc(), Invoice.id.desc())

        result = await self.session.execute(statement)
        return [(invoice, customer) for invoice, customer in result.all()]

    async def change_status(
        self,
        invoice_id: int,
        tenant_id: int,
        status: InvoiceStatus,
        from_statuses: Iterable[InvoiceStatus],
    ) -> Optional[Invoice]:
        """
        Move an invoice to a new status if it is still in one of from_statuses

        The status test runs inside the UPDATE, so a concurrent write that
        moved the invoice elsewhere (e.g. to paid) is never overwritten.

        Returns:
            The reloaded invoice, or None when no row matched
        """
        statement = (
            update(Invoice)
            .where(Invoice.id == invoice_id)
            .where(Invoice.tenant_id == tenant_id)
            .where(Invoice.status.in_(list(from_statuses)))
            .values(status=status, updated_at=datetime.utcnow())
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(statement)
        if result.rowcount == 0:
            return None

        reloaded = await self.session.execute(
            select(Invoice)
            .where(Invoice.id == invoice_id)
            .execution_options(populate_existing=True)
        )
        return reloaded.scalar_one()

    async def delete(self, invoice_id: int, tenant_id: int) -> bool:
        """
        Delete an invoice and its items

        Items are removed explicitly since SQLite leaves foreign keys
        unenforced by default.

        Returns:
            True if the invoice existed for the tenant
        """
        if await self.get_by_id(invoice_id, tenant_id) is None:
            return False

        await self.session.execute(delete(InvoiceItem).where(InvoiceItem.invoice_id == invoice_id))
        await self.session.execute(
            delete(Invoice)
            .where(Invoice.id == invoice_id)
            .where(Invoice.tenant_id == tenant_id)
        )
        return True

    async def count_by_tenant(self, tenant_id: int) -> int:
        statement = select(func.count()).select_from(Invoice).where(Invoice.tenant_id == tenant_id)
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def summarize_by_status(self, tenant_id: int) -> Dict[InvoiceStatus, Tuple[int, Decimal]]:
        """
        Count and sum invoice totals per status

        Args:
            tenant_id: Tenant identifier

        Returns:
            Mapping of status to (count, sum of total_amount)
        """
        statement = (
            select(Invoice.status, func.count(Invoice.id), func.sum(Invoice.total_amount))
            .where(Invoice.tenant_id == tenant_id)
            .group_by(Invoice.status)
        )
        result = await self.session.execute(statement)
        summary: Dict[InvoiceStatus, Tuple[int, Decimal]] = {}
        for status, count, total in result.all():
            summary[InvoiceStatus(status)] = (count, Decimal(total) if total is not None else ZERO)
        return summary

    async def find_overdue(self, as_of: date, limit: int = 500) -> List[Invoice]:
        """
        Find pending or sent invoices due before as_of

        Overdue invoices are already flagged and are skipped.

        Args:
            as_of: Reference date
            limit: Maximum number of invoices to return

        Returns:
            Invoices ordered by due_date
        """
        statement = (
            select(Invoice)
            .where(Invoice.status.in_(OVERDUE_CANDIDATE_STATUSES))
            .where(Invoice.due_date < as_of)
            .order_by(Invoice.due_date, Invoice.id)
            .limit(limit)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())
