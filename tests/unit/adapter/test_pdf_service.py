"""Unit tests for ReportLabPdfService"""

from datetime import date, datetime
from decimal import Decimal

from src.adapter.services.pdf_service import ReportLabPdfService
from src.domain.customer import Customer
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_item import InvoiceItem
from src.domain.product import Product


def test_generates_pdf_document():
    invoice = Invoice(
        id=1, tenant_id=1, customer_id=7, invoice_number="INV-0001",
        issue_date=date(2024, 1, 15), due_date=date(2024, 2, 14),
        subtotal=Decimal("100.00"), tax_rate=Decimal("10.00"), tax_amount=Decimal("10.00"),
        total_amount=Decimal("110.00"), status=InvoiceStatus.PENDING, notes="Thanks & regards <3",
        created_at=datetime.utcnow(), updated_at=datetime.utcnow(),
    )
    customer = Customer(
        id=7, tenant_id=1, name="Smith & Sons", email="a@acme.com", phone="555", address="",
        created_at=datetime.utcnow(), updated_at=datetime.utcnow(),
    )
    product = Product(
        id=3, tenant_id=1, name="Anvil", sku="ANV-001", category="Hardware",
        price=Decimal("50.00"), stock=1, description="",
        created_at=datetime.utcnow(), updated_at=datetime.utcnow(),
    )
    items = [
        (InvoiceItem(id=1, invoice_id=1, product_id=3, quantity=1,
                     unit_price=Decimal("50.00"), total_price=Decimal("50.00")), product),
        (InvoiceItem(id=2, invoice_id=1, product_id=9, quantity=1,
                     unit_price=Decimal("50.00"), total_price=Decimal("50.00")), None),
    ]

    content = ReportLabPdfService().generate_invoice(
        invoice=invoice,
        customer=customer,
        items=items,
        company_name="Invoicing Co",
        company_address="1 Main St",
    )

    assert content.startswith(b"%PDF")
    assert len(content) > 1000
