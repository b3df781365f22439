"""RenderInvoicePdf Use Case

Generates a printable PDF for one invoice.
"""

from libs.result import Result, Return
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.services.pdf_service import PdfService
from src.app.use_cases.errors import internal_error, not_found
from .dtos import InvoicePdfDTO


class RenderInvoicePdf:
    """
    Use Case: Render an invoice as PDF

    Flow:
    1. Retrieve invoice and customer (tenant-scoped)
    2. Retrieve line items with product names
    3. Generate PDF using PDF service
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        invoice_item_repo: InvoiceItemRepository,
        pdf_service: PdfService,
        company_name: str,
        company_address: str,
    ):
        self.invoice_repo = invoice_repo
        self.invoice_item_repo = invoice_item_repo
        self.pdf_service = pdf_service
        self.company_name = company_name
        self.company_address = company_address

    async def execute(self, invoice_id: int, tenant_id: int) -> Result[InvoicePdfDTO]:
        try:
            found = await self.invoice_repo.get_with_customer(invoice_id, tenant_id)
            if found is None:
                return Return.err(not_found("Invoice"))

            invoice, customer = found
            items = await self.invoice_item_repo.list_with_products(invoice.id, tenant_id)

            content = self.pdf_service.generate_invoice(
                invoice=invoice,
                customer=customer,
                items=items,
                company_name=self.company_name,
                company_address=self.company_address,
            )
            return Return.ok(InvoicePdfDTO(invoice_number=invoice.invoice_number, content=content))

        except Exception as e:
            return Return.err(internal_error("Failed to render invoice", e))
