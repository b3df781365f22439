"""DeleteInvoice Use Case"""

import logging
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.use_cases.errors import internal_error

logger = logging.getLogger(__name__)


class DeleteInvoice:
    """
    Use Case: Delete an invoice and its line items

    Business Rules:
    1. Items and header go in the same transaction
    2. Deleting a missing or foreign invoice succeeds without effect
    """

    def __init__(self, uow: UnitOfWork, invoice_repo: InvoiceRepository):
        self.uow = uow
        self.invoice_repo = invoice_repo

    async def execute(self, invoice_id: int, tenant_id: int) -> Result[None]:
        try:
            deleted = await self.invoice_repo.delete(invoice_id, tenant_id)
            await self.uow.commit()
            if deleted:
                logger.info(f"Deleted invoice {invoice_id} of tenant {tenant_id}")
            return Return.ok(None)
        except Exception as e:
            await self.uow.rollback()
            return Return.err(internal_error("Failed to delete invoice", e))
