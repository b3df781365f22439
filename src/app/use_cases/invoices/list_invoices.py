"""ListInvoices Use Case"""

from typing import List, Optional
from libs.result import Result, Return
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.use_cases.errors import internal_error, validation_error
from src.domain.invoice import InvoiceStatus
from .dtos import InvoiceDTO
from .mappers import to_invoice_dto


class ListInvoices:
    """
    Use Case: List a tenant's invoices with customer name and email

    Business Rules:
    1. Newest first
    2. Optional status filter must be a known status
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, tenant_id: int, status: Optional[str] = None) -> Result[List[InvoiceDTO]]:
        status_filter = None
        if status:
            try:
                status_filter = InvoiceStatus(status.lower())
            except ValueError:
                return Return.err(validation_error(f"invalid status '{status}'", field="status"))

        try:
            rows = await self.invoice_repo.list_with_customers(tenant_id, status=status_filter)
            return Return.ok([to_invoice_dto(invoice, customer) for invoice, customer in rows])
        except Exception as e:
            return Return.err(internal_error("Failed to list invoices", e))
