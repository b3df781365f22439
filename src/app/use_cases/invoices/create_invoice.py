"""CreateInvoice Use Case

Validates an invoice request, derives its totals and persists the header
together with its line items in one transaction.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional, Union
from sqlalchemy.exc import IntegrityError
from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.product_repository import ProductRepository
from src.app.use_cases.errors import conflict, internal_error, item_error, validation_error
from src.domain.invoice import TAX_RATE_PLACES, Invoice, InvoiceStatus
from src.domain.invoice_item import UNIT_PRICE_PLACES, InvoiceItem
from src.domain.pricing import (
    HUNDRED,
    MAX_AMOUNT,
    ZERO,
    compute_invoice_totals,
    compute_line_total,
    fits_scale,
    line_total_matches,
    parse_decimal,
    round_money,
)
from src.domain.product import Product
from src.domain.validation import parse_date, parse_id
from .dtos import CreateInvoiceCommandDTO, InvoiceDetailDTO, InvoiceItemCommandDTO
from .mappers import to_invoice_detail_dto

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidatedLine:
    """A line item that passed validation, with server-computed total"""
    product: Product
    quantity: int
    unit_price: Decimal
    total_price: Decimal


class CreateInvoice:
    """
    Use Case: Create an invoice with its line items

    Business Rules:
    1. customer_id must resolve to a customer of the same tenant
    2. issue_date is required, due_date defaults to it
    3. At least one item; each item names a product of the tenant, a
       positive integer quantity and a non-negative unit price
    4. A client line total is optional but must match quantity * unit_price
    5. tax_rate lies in [0, 100] with at most 2 decimals, defaults to the
       configured rate
    6. subtotal, tax and total are always computed here and must fit the
       amount columns
    7. Header and items are committed together or not at all
    8. Invoice numbers are allocated per tenant by an atomic counter

    Flow:
    1. Validate request (fail fast, first failure wins, nothing written)
    2. Compute totals
    3. Allocate invoice number
    4. Insert header
    5. Insert items
    6. Commit transaction
    7. Return the created invoice with its items
    """

    def __init__(
        self,
        uow: UnitOfWork,
        customer_repo: CustomerRepository,
        product_repo: ProductRepository,
        invoice_repo: InvoiceRepository,
        invoice_item_repo: InvoiceItemRepository,
        default_tax_rate: Decimal = Decimal("10"),
    ):
        self.uow = uow
        self.customer_repo = customer_repo
        self.product_repo = product_repo
        self.invoice_repo = invoice_repo
        self.invoice_item_repo = invoice_item_repo
        self.default_tax_rate = default_tax_rate

    async def execute(self, command: CreateInvoiceCommandDTO) -> Result[InvoiceDetailDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with customer, dates and items

        Returns:
            Result[InvoiceDetailDTO]: Created invoice or the first validation error
        """
        tenant_id = command.tenant_id

        try:
            # Step 1: Customer must belong to the tenant
            customer_id = parse_id(command.customer_id)
            customer = None
            if customer_id is not None:
                customer = await self.customer_repo.get_by_id(customer_id, tenant_id)
            if customer is None:
                return Return.err(validation_error("customer required", field="customer_id"))

            # Step 2: Issue date
            issue_date = parse_date(command.issue_date)
            if issue_date is None:
                return Return.err(validation_error("issue date required", field="issue_date"))

            # Step 3: Items present
            if not command.items:
                return Return.err(validation_error("at least one item required", field="items"))

            # Step 4: Each item, in order
            lines = await self._validate_items(tenant_id, command.items)
            if isinstance(lines, Error):
                return Return.err(lines)

            # Step 5: Tax rate
            tax_rate = self._resolve_tax_rate(command.tax_rate)
            if tax_rate is None:
                return Return.err(
                    validation_error(
                        "tax rate must be between 0 and 100 with at most 2 decimals", field="tax_rate"
                    )
                )

            # Step 6: Due date and status
            due_date = issue_date
            if command.due_date not in (None, ""):
                due_date = parse_date(command.due_date)
                if due_date is None:
                    return Return.err(validation_error("invalid due date", field="due_date"))
                if due_date < issue_date:
                    return Return.err(
                        validation_error("due date cannot be before issue date", field="due_date")
                    )

            status = InvoiceStatus.PENDING
            if command.status:
                try:
                    status = InvoiceStatus(command.status.strip().lower())
                except ValueError:
                    return Return.err(
                        validation_error(f"invalid status '{command.status}'", field="status")
                    )

            # Step 7: Authoritative totals
            totals = compute_invoice_totals(lines, tax_rate)
            if totals.total > MAX_AMOUNT:
                return Return.err(validation_error("invoice total is too large", field="items"))

            # Step 8: Number, header, items - one transaction
            invoice_number = await self.invoice_repo.next_invoice_number(tenant_id)

            invoice = Invoice(
                tenant_id=tenant_id,
                customer_id=customer.id,
                invoice_number=invoice_number,
                issue_date=issue_date,
                due_date=due_date,
                subtotal=totals.subtotal,
                tax_rate=tax_rate,
                tax_amount=totals.tax_amount,
                total_amount=totals.total,
                status=status,
                notes=(command.notes or "").strip(),
            )
            created_invoice = await self.invoice_repo.create(invoice)

            items = [
                InvoiceItem(
                    invoice_id=created_invoice.id,
                    product_id=line.product.id,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                    total_price=line.total_price,
                )
                for line in lines
            ]
            created_items = await self.invoice_item_repo.create_many(items)

            # Step 9: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Created invoice {created_invoice.invoice_number} for tenant {tenant_id} "
                f"with {len(created_items)} item(s), total {created_invoice.total_amount}"
            )

            # Step 10: Build response
            return Return.ok(
                to_invoice_detail_dto(
                    created_invoice,
                    customer,
                    [(item, line.product) for item, line in zip(created_items, lines)],
                )
            )

        except IntegrityError as e:
            await self.uow.rollback()
            logger.warning(f"Invoice creation for tenant {tenant_id} hit a constraint: {e}")
            return Return.err(
                conflict("Invoice conflicts with existing data, please retry", reason=str(e))
            )

        except Exception as e:
            await self.uow.rollback()
            logger.exception(f"Invoice creation for tenant {tenant_id} failed")
            return Return.err(internal_error("Failed to create invoice", e))

    async def _validate_items(
        self, tenant_id: int, items: List[InvoiceItemCommandDTO]
    ) -> Union[Error, List[ValidatedLine]]:
        product_ids = [parse_id(item.product_id) for item in items]
        owned = await self.product_repo.get_by_ids(
            {pid for pid in product_ids if pid is not None}, tenant_id
        )
        products: Dict[int, Product] = {product.id: product for product in owned}

        lines: List[ValidatedLine] = []
        for index, (item, product_id) in enumerate(zip(items, product_ids), start=1):
            line = self._validate_item(index, item, product_id, products)
            if isinstance(line, Error):
                return line
            lines.append(line)
        return lines

    @staticmethod
    def _validate_item(
        index: int,
        item: InvoiceItemCommandDTO,
        product_id: Optional[int],
        products: Dict[int, Product],
    ) -> Union[Error, ValidatedLine]:
        if product_id is None:
            return item_error(index, "product_id", "product_id is required")

        product = products.get(product_id)
        if product is None:
            return item_error(index, "product_id", "product not found")

        quantity = parse_decimal(item.quantity)
        if quantity is None or quantity <= 0 or quantity != quantity.to_integral_value():
            return item_error(index, "quantity", "quantity must be a positive integer")

        unit_price = parse_decimal(item.unit_price)
        if unit_price is None or unit_price < 0:
            return item_error(index, "unit_price", "unit price must be a non-negative number")
        if not fits_scale(unit_price, UNIT_PRICE_PLACES):
            return item_error(
                index, "unit_price", f"unit price has more than {UNIT_PRICE_PLACES} decimal places"
            )

        line_total = compute_line_total(quantity, unit_price)
        if line_total > MAX_AMOUNT:
            return item_error(index, "total_price", "line total is too large")

        if item.total_price is not None:
            total_price = parse_decimal(item.total_price)
            if total_price is None or total_price < 0:
                return item_error(index, "total_price", "total price must be a non-negative number")
            if not line_total_matches(total_price, quantity, unit_price):
                return item_error(
                    index, "total_price", "total price does not match quantity x unit price"
                )

        return ValidatedLine(
            product=product,
            quantity=int(quantity),
            unit_price=unit_price,
            total_price=round_money(line_total),
        )

    def _resolve_tax_rate(self, value) -> Optional[Decimal]:
        if value is None or value == "":
            return self.default_tax_rate
        tax_rate = parse_decimal(value)
        if tax_rate is None or tax_rate < ZERO or tax_rate > HUNDRED:
            return None
        if not fits_scale(tax_rate, TAX_RATE_PLACES):
            return None
        return tax_rate
