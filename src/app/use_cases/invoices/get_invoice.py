"""GetInvoice Use Case"""

from libs.result import Result, Return
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.use_cases.errors import internal_error, not_found
from .dtos import InvoiceDetailDTO
from .mappers import to_invoice_detail_dto


class GetInvoice:
    """
    Use Case: Retrieve one invoice with customer contact and line items

    An invoice of another tenant is reported exactly like a missing one.
    """

    def __init__(self, invoice_repo: InvoiceRepository, invoice_item_repo: InvoiceItemRepository):
        self.invoice_repo = invoice_repo
        self.invoice_item_repo = invoice_item_repo

    async def execute(self, invoice_id: int, tenant_id: int) -> Result[InvoiceDetailDTO]:
        try:
            found = await self.invoice_repo.get_with_customer(invoice_id, tenant_id)
            if found is None:
                return Return.err(not_found("Invoice"))

            invoice, customer = found
            items = await self.invoice_item_repo.list_with_products(invoice.id, tenant_id)
            return Return.ok(to_invoice_detail_dto(invoice, customer, items))

        except Exception as e:
            return Return.err(internal_error("Failed to load invoice", e))
