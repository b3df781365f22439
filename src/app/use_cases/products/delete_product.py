"""DeleteProduct Use Case"""

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.product_repository import ProductRepository
from src.app.use_cases.errors import internal_error


class DeleteProduct:
    """
    Use Case: Delete a product

    Deleting a missing or foreign product succeeds without effect. Invoice
    items keep their price snapshot, so past invoices are unaffected.
    """

    def __init__(self, uow: UnitOfWork, product_repo: ProductRepository):
        self.uow = uow
        self.product_repo = product_repo

    async def execute(self, product_id: int, tenant_id: int) -> Result[None]:
        try:
            await self.product_repo.delete(product_id, tenant_id)
            await self.uow.commit()
            return Return.ok(None)
        except Exception as e:
            await self.uow.rollback()
            return Return.err(internal_error("Failed to delete product", e))
