"""
Integration tests for SqlAlchemyInvoiceRepository against SQLite

Covers per-tenant numbering, tenant scoping, cascading delete,
status summaries and overdue lookups.
"""
import pytest
from datetime import date
from decimal import Decimal
from src.adapter.repositories.invoice_item_repository import SqlAlchemyInvoiceItemRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.domain.invoice import OPEN_STATUSES, OVERDUE_CANDIDATE_STATUSES, Invoice, InvoiceStatus
from src.domain.invoice_item import InvoiceItem


async def _insert_invoice(
    db_session,
    tenant_id,
    customer_id,
    product_id,
    total="110.00",
    status=InvoiceStatus.PENDING,
    due_date=date(2024, 2, 1),
):
    repo = SqlAlchemyInvoiceRepository(db_session)
    number = await repo.next_invoice_number(tenant_id)
    total_amount = Decimal(total)
    subtotal = (total_amount / Decimal("1.1")).quantize(Decimal("0.01"))
    invoice = await repo.create(
        Invoice(
            tenant_id=tenant_id,
            customer_id=customer_id,
            invoice_number=number,
            issue_date=date(2024, 1, 1),
            due_date=due_date,
            subtotal=subtotal,
            tax_rate=Decimal("10"),
            tax_amount=total_amount - subtotal,
            total_amount=total_amount,
            status=status,
            notes="",
        )
    )
    await SqlAlchemyInvoiceItemRepository(db_session).create_many(
        [
            InvoiceItem(
                invoice_id=invoice.id,
                product_id=product_id,
                quantity=1,
                unit_price=subtotal,
                total_price=subtotal,
            )
        ]
    )
    await db_session.commit()
    return invoice


@pytest.mark.asyncio
async def test_invoice_numbers_are_sequential_per_tenant(db_session, tenant_factory):
    """Each tenant has its own counter starting at INV-0001"""
    tenant_a = await tenant_factory()
    tenant_b = await tenant_factory()
    repo = SqlAlchemyInvoiceRepository(db_session)

    first_a = await repo.next_invoice_number(tenant_a.id)
    second_a = await repo.next_invoice_number(tenant_a.id)
    first_b = await repo.next_invoice_number(tenant_b.id)
    await db_session.commit()

    assert first_a == "INV-0001"
    assert second_a == "INV-0002"
    assert first_b == "INV-0001"


@pytest.mark.asyncio
async def test_numbers_are_not_reused_after_delete(db_session, tenant_factory, seed):
    tenant = await tenant_factory()
    customer = await seed.customer(tenant.id)
    product = await seed.product(tenant.id)

    first = await _insert_invoice(db_session, tenant.id, customer.id, product.id)
    repo = SqlAlchemyInvoiceRepository(db_session)
    assert await repo.delete(first.id, tenant.id) is True
    await db_session.commit()

    second = await _insert_invoice(db_session, tenant.id, customer.id, product.id)

    assert first.invoice_number == "INV-0001"
    assert second.invoice_number == "INV-0002"


@pytest.mark.asyncio
async def test_reads_are_scoped_to_tenant(db_session, tenant_factory, seed):
    owner = await tenant_factory()
    intruder = await tenant_factory()
    customer = await seed.customer(owner.id)
    product = await seed.product(owner.id)
    invoice = await _insert_invoice(db_session, owner.id, customer.id, product.id)
    repo = SqlAlchemyInvoiceRepository(db_session)

    assert await repo.get_by_id(invoice.id, intruder.id) is None
    assert await repo.get_with_customer(invoice.id, intruder.id) is None
    assert await repo.list_with_customers(intruder.id) == []
    assert await repo.delete(invoice.id, intruder.id) is False

    found = await repo.get_with_customer(invoice.id, owner.id)
    assert found is not None
    found_invoice, found_customer = found
    assert found_invoice.invoice_number == "INV-0001"
    assert found_customer.name == "Acme"


@pytest.mark.asyncio
async def test_list_with_customers_filters_by_status(db_session, tenant_factory, seed):
    tenant = await tenant_factory()
    customer = await seed.customer(tenant.id)
    product = await seed.product(tenant.id)
    await _insert_invoice(db_session, tenant.id, customer.id, product.id)
    paid = await _insert_invoice(
        db_session, tenant.id, customer.id, product.id, status=InvoiceStatus.PAID
    )
    repo = SqlAlchemyInvoiceRepository(db_session)

    everything = await repo.list_with_customers(tenant.id)
    only_paid = await repo.list_with_customers(tenant.id, status=InvoiceStatus.PAID)

    assert len(everything) == 2
    assert [invoice.id for invoice, _ in only_paid] == [paid.id]
    assert only_paid[0][1].email == "a@acme.com"


@pytest.mark.asyncio
async def test_delete_removes_items(db_session, tenant_factory, seed):
    tenant = await tenant_factory()
    customer = await seed.customer(tenant.id)
    product = await seed.product(tenant.id)
    invoice = await _insert_invoice(db_session, tenant.id, customer.id, product.id)
    invoice_id = invoice.id
    repo = SqlAlchemyInvoiceRepository(db_session)
    item_repo = SqlAlchemyInvoiceItemRepository(db_session)
    assert len(await item_repo.list_with_products(invoice_id, tenant.id)) == 1

    assert await repo.delete(invoice_id, tenant.id) is True
    await db_session.commit()

    assert await repo.get_by_id(invoice_id, tenant.id) is None
    assert await item_repo.list_with_products(invoice_id, tenant.id) == []
    assert await repo.delete(invoice_id, tenant.id) is False


@pytest.mark.asyncio
async def test_summarize_by_status(db_session, tenant_factory, seed):
    tenant = await tenant_factory()
    customer = await seed.customer(tenant.id)
    product = await seed.product(tenant.id)
    await _insert_invoice(db_session, tenant.id, customer.id, product.id, total="110.00")
    await _insert_invoice(db_session, tenant.id, customer.id, product.id, total="55.00")
    await _insert_invoice(
        db_session, tenant.id, customer.id, product.id, total="22.00", status=InvoiceStatus.PAID
    )

    summary = await SqlAlchemyInvoiceRepository(db_session).summarize_by_status(tenant.id)

    assert summary[InvoiceStatus.PENDING][0] == 2
    assert summary[InvoiceStatus.PENDING][1] == Decimal("165.00")
    assert summary[InvoiceStatus.PAID] == (1, Decimal("22.00"))
    assert InvoiceStatus.OVERDUE not in summary


@pytest.mark.asyncio
async def test_find_overdue_skips_settled_and_future_invoices(db_session, tenant_factory, seed):
    tenant = await tenant_factory()
    customer = await seed.customer(tenant.id)
    product = await seed.product(tenant.id)
    late = await _insert_invoice(
        db_session, tenant.id, customer.id, product.id, due_date=date(2024, 1, 10)
    )
    await _insert_invoice(
        db_session, tenant.id, customer.id, product.id,
        due_date=date(2024, 1, 5), status=InvoiceStatus.PAID,
    )
    await _insert_invoice(
        db_session, tenant.id, customer.id, product.id, due_date=date(2024, 3, 1)
    )
    # Due today is not late yet
    await _insert_invoice(
        db_session, tenant.id, customer.id, product.id, due_date=date(2024, 2, 1)
    )

    overdue = await SqlAlchemyInvoiceRepository(db_session).find_overdue(date(2024, 2, 1))

    assert [invoice.id for invoice in overdue] == [late.id]


@pytest.mark.asyncio
async def test_items_never_resolve_another_tenants_product(db_session, tenant_factory, seed):
    owner = await tenant_factory()
    other = await tenant_factory()
    customer = await seed.customer(owner.id)
    foreign_product = await seed.product(other.id, sku="B-SKU", name="B-SECRET-NAME")
    # An item whose product id now belongs to another tenant's product
    invoice = await _insert_invoice(db_session, owner.id, customer.id, foreign_product.id)

    rows = await SqlAlchemyInvoiceItemRepository(db_session).list_with_products(invoice.id, owner.id)

    assert len(rows) == 1
    item, product = rows[0]
    assert item.product_id == foreign_product.id
    assert product is None


@pytest.mark.asyncio
async def test_deleted_product_ids_are_not_reused(db_session, tenant_factory, seed):
    tenant = await tenant_factory()
    first = await seed.product(tenant.id, sku="A-1")
    first_id = first.id
    await db_session.delete(first)
    await db_session.commit()

    second = await seed.product(tenant.id, sku="A-2")

    assert second.id > first_id


@pytest.mark.asyncio
async def test_change_status_only_moves_from_allowed_statuses(db_session, tenant_factory, seed):
    tenant = await tenant_factory()
    customer = await seed.customer(tenant.id)
    product = await seed.product(tenant.id)
    invoice = await _insert_invoice(db_session, tenant.id, customer.id, product.id)
    repo = SqlAlchemyInvoiceRepository(db_session)

    paid = await repo.change_status(invoice.id, tenant.id, InvoiceStatus.PAID, OPEN_STATUSES)
    await db_session.commit()
    # A second writer that read the invoice while it was still pending
    late_write = await repo.change_status(
        invoice.id, tenant.id, InvoiceStatus.OVERDUE, OVERDUE_CANDIDATE_STATUSES
    )
    await db_session.commit()

    assert paid is not None
    assert paid.status == InvoiceStatus.PAID
    assert late_write is None
    stored = await repo.get_by_id(invoice.id, tenant.id)
    assert stored.status == InvoiceStatus.PAID


@pytest.mark.asyncio
async def test_change_status_is_scoped_to_tenant(db_session, tenant_factory, seed):
    owner = await tenant_factory()
    intruder = await tenant_factory()
    customer = await seed.customer(owner.id)
    product = await seed.product(owner.id)
    invoice = await _insert_invoice(db_session, owner.id, customer.id, product.id)
    repo = SqlAlchemyInvoiceRepository(db_session)

    assert await repo.change_status(invoice.id, intruder.id, InvoiceStatus.PAID, OPEN_STATUSES) is None
    await db_session.commit()

    assert (await repo.get_by_id(invoice.id, owner.id)).status == InvoiceStatus.PENDING
