"""ListCustomers Use Case"""

from typing import List
from libs.result import Result, Return
from src.app.repositories.customer_repository import CustomerRepository
from src.app.use_cases.errors import internal_error
from .create_customer import to_customer_dto
from .dtos import CustomerDTO


class ListCustomers:
    """
    Use Case: List a tenant's customers, newest first, with invoice counts
    """

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    async def execute(self, tenant_id: int) -> Result[List[CustomerDTO]]:
        try:
            rows = await self.customer_repo.list_with_invoice_counts(tenant_id)
            return Return.ok([to_customer_dto(customer, count) for customer, count in rows])
        except Exception as e:
            return Return.err(internal_error("Failed to list customers", e))
