"""MarkOverdueInvoices Use Case

Moves unpaid invoices past their due date to overdue. Run by the
overdue marker worker, not exposed over HTTP.
"""

import logging
from datetime import date
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.use_cases.errors import internal_error
from src.domain.invoice import OVERDUE_CANDIDATE_STATUSES, InvoiceStatus
from .dtos import OverdueMarkResultDTO

logger = logging.getLogger(__name__)


class MarkOverdueInvoices:
    """
    Use Case: Flag overdue invoices

    Business Rules:
    1. Only pending and sent invoices become overdue
    2. An invoice is overdue when due_date < as_of
    3. Idempotent: a second pass on the same day marks nothing
    4. An invoice paid or cancelled after it was found is left alone
    """

    def __init__(self, uow: UnitOfWork, invoice_repo: InvoiceRepository, batch_size: int = 500):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.batch_size = batch_size

    async def execute(self, as_of: date) -> Result[OverdueMarkResultDTO]:
        try:
            candidates = await self.invoice_repo.find_overdue(as_of, limit=self.batch_size)

            marked_ids = []
            for invoice in candidates:
                updated = await self.invoice_repo.change_status(
                    invoice.id,
                    invoice.tenant_id,
                    InvoiceStatus.OVERDUE,
                    from_statuses=OVERDUE_CANDIDATE_STATUSES,
                )
                if updated is not None:
                    marked_ids.append(updated.id)
            await self.uow.commit()

            if marked_ids:
                logger.info(f"Marked {len(marked_ids)} invoice(s) overdue as of {as_of.isoformat()}")
            if len(marked_ids) < len(candidates):
                logger.info(f"{len(candidates) - len(marked_ids)} invoice(s) changed status meanwhile, skipped")

            return Return.ok(
                OverdueMarkResultDTO(
                    as_of=as_of,
                    checked=len(candidates),
                    marked=len(marked_ids),
                    invoice_ids=marked_ids,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            return Return.err(internal_error("Failed to mark overdue invoices", e))
