"""UpdateInvoiceStatus Use Case"""

import logging
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.use_cases.errors import conflict, internal_error, not_found, validation_error
from src.domain.invoice import FINAL_STATUSES, OPEN_STATUSES, InvoiceStatus
from .dtos import InvoiceDTO, UpdateInvoiceStatusCommandDTO
from .mappers import to_invoice_dto

logger = logging.getLogger(__name__)


class UpdateInvoiceStatus:
    """
    Use Case: Move an invoice to another status

    Business Rules:
    1. Target status must be a known status
    2. Paid and cancelled invoices are final
    3. Amounts and items never change here
    4. The final-status check is repeated by the write itself
    """

    def __init__(self, uow: UnitOfWork, invoice_repo: InvoiceRepository):
        self.uow = uow
        self.invoice_repo = invoice_repo

    async def execute(self, command: UpdateInvoiceStatusCommandDTO) -> Result[InvoiceDTO]:
        try:
            new_status = InvoiceStatus(command.status.strip().lower())
        except ValueError:
            return Return.err(validation_error(f"invalid status '{command.status}'", field="status"))

        try:
            invoice = await self.invoice_repo.get_by_id(command.invoice_id, command.tenant_id)
            if invoice is None:
                return Return.err(not_found("Invoice"))

            if invoice.status == new_status:
                return Return.ok(to_invoice_dto(invoice))

            if invoice.status in FINAL_STATUSES:
                return Return.err(
                    validation_error(
                        f"invoice is {invoice.status.value} and can no longer change status",
                        field="status",
                    )
                )

            previous = invoice.status
            updated = await self.invoice_repo.change_status(
                command.invoice_id,
                command.tenant_id,
                new_status,
                from_statuses=OPEN_STATUSES,
            )
            if updated is None:
                # Paid, cancelled or deleted by a concurrent request since the read above
                await self.uow.rollback()
                return Return.err(
                    conflict("Invoice was changed by another request, please retry")
                )
            await self.uow.commit()

            logger.info(
                f"Invoice {updated.invoice_number} of tenant {command.tenant_id} "
                f"moved from {previous.value} to {new_status.value}"
            )
            return Return.ok(to_invoice_dto(updated))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(internal_error("Failed to update invoice status", e))
