"""Entity to DTO mapping for invoices"""

from typing import List, Optional, Tuple
from src.domain.customer import Customer
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem
from src.domain.product import Product
from .dtos import InvoiceDetailDTO, InvoiceDTO, InvoiceItemDTO


def to_invoice_dto(invoice: Invoice, customer: Optional[Customer] = None) -> InvoiceDTO:
    return InvoiceDTO(
        id=invoice.id,
        invoice_number=invoice.invoice_number,
        customer_id=invoice.customer_id,
        customer_name=customer.name if customer else None,
        customer_email=customer.email if customer else None,
        issue_date=invoice.issue_date,
        due_date=invoice.due_date,
        subtotal=invoice.subtotal,
        tax_rate=invoice.tax_rate,
        tax_amount=invoice.tax_amount,
        total_amount=invoice.total_amount,
        status=invoice.status.value,
        notes=invoice.notes or "",
        created_at=invoice.created_at,
        updated_at=invoice.updated_at,
    )


def to_item_dto(item: InvoiceItem, product: Optional[Product] = None) -> InvoiceItemDTO:
    return InvoiceItemDTO(
        id=item.id,
        product_id=item.product_id,
        product_name=product.name if product else None,
        product_sku=product.sku if product else None,
        quantity=item.quantity,
        unit_price=item.unit_price,
        total_price=item.total_price,
    )


def to_invoice_detail_dto(
    invoice: Invoice,
    customer: Customer,
    items: List[Tuple[InvoiceItem, Optional[Product]]],
) -> InvoiceDetailDTO:
    header = to_invoice_dto(invoice, customer)
    return InvoiceDetailDTO(
        **header.model_dump(),
        customer_phone=customer.phone,
        customer_address=customer.address,
        items=[to_item_dto(item, product) for item, product in items],
    )
