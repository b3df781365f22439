"""
Integration tests for SqlAlchemyCustomerRepository against SQLite

Covers the invoice guard on delete and foreign key enforcement.
"""
import pytest
from datetime import date
from decimal import Decimal
from sqlalchemy.exc import IntegrityError
from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.domain.invoice import Invoice, InvoiceStatus


def _invoice(tenant_id, customer_id, number="INV-0001"):
    return Invoice(
        tenant_id=tenant_id,
        customer_id=customer_id,
        invoice_number=number,
        issue_date=date(2024, 1, 1),
        due_date=date(2024, 2, 1),
        subtotal=Decimal("100.00"),
        tax_rate=Decimal("10.00"),
        tax_amount=Decimal("10.00"),
        total_amount=Decimal("110.00"),
        status=InvoiceStatus.PENDING,
        notes="",
    )


@pytest.mark.asyncio
async def test_delete_refuses_customer_with_invoices(db_session, tenant_factory, seed):
    tenant = await tenant_factory()
    customer = await seed.customer(tenant.id)
    await SqlAlchemyInvoiceRepository(db_session).create(_invoice(tenant.id, customer.id))
    await db_session.commit()
    repo = SqlAlchemyCustomerRepository(db_session)

    deleted = await repo.delete(customer.id, tenant.id)
    await db_session.commit()

    assert deleted is False
    assert await repo.get_by_id(customer.id, tenant.id) is not None
    assert await repo.count_invoices(customer.id, tenant.id) == 1


@pytest.mark.asyncio
async def test_delete_customer_without_invoices(db_session, tenant_factory, seed):
    tenant = await tenant_factory()
    intruder = await tenant_factory()
    customer = await seed.customer(tenant.id)
    repo = SqlAlchemyCustomerRepository(db_session)

    assert await repo.delete(customer.id, intruder.id) is False
    assert await repo.delete(customer.id, tenant.id) is True
    await db_session.commit()

    assert await repo.get_by_id(customer.id, tenant.id) is None


@pytest.mark.asyncio
async def test_invoice_for_deleted_customer_is_rejected(db_session, tenant_factory, seed):
    tenant = await tenant_factory()
    customer = await seed.customer(tenant.id)
    customer_id = customer.id
    assert await SqlAlchemyCustomerRepository(db_session).delete(customer_id, tenant.id) is True
    await db_session.commit()

    with pytest.raises(IntegrityError):
        await SqlAlchemyInvoiceRepository(db_session).create(_invoice(tenant.id, customer_id))
    await db_session.rollback()
