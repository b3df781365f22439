"""DeleteCustomer Use Case"""

import logging
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.app.use_cases.errors import conflict, internal_error

logger = logging.getLogger(__name__)


class DeleteCustomer:
    """
    Use Case: Delete a customer

    Business Rules:
    1. Deleting a missing or foreign customer succeeds without effect
    2. A customer referenced by invoices cannot be deleted (CONFLICT);
       invoices keep pointing at a live customer
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, customer_id: int, tenant_id: int) -> Result[None]:
        try:
            deleted = await self.customer_repo.delete(customer_id, tenant_id)
            if not deleted:
                invoice_count = await self.customer_repo.count_invoices(customer_id, tenant_id)
                if invoice_count > 0:
                    await self.uow.rollback()
                    return Return.err(
                        conflict(f"Customer has {invoice_count} invoice(s) and cannot be deleted")
                    )

            await self.uow.commit()

            if not deleted:
                logger.debug(f"Customer {customer_id} not found for tenant {tenant_id}, nothing deleted")
            return Return.ok(None)

        except Exception as e:
            await self.uow.rollback()
            return Return.err(internal_error("Failed to delete customer", e))
