"""UpdateCustomer Use Case"""

from datetime import datetime
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.app.use_cases.errors import internal_error, not_found
from .create_customer import to_customer_dto, validate_customer_fields
from .dtos import CustomerDTO, UpdateCustomerCommandDTO


class UpdateCustomer:
    """
    Use Case: Replace a customer's contact fields

    Business Rules:
    1. Same field rules as creation
    2. A customer missing or owned by another tenant is NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, command: UpdateCustomerCommandDTO) -> Result[CustomerDTO]:
        error = validate_customer_fields(command)
        if error:
            return Return.err(error)

        try:
            customer = await self.customer_repo.get_by_id(command.customer_id, command.tenant_id)
            if customer is None:
                return Return.err(not_found("Customer"))

            customer.name = command.name.strip()
            customer.email = command.email.strip()
            customer.phone = command.phone.strip()
            customer.address = (command.address or "").strip()
            customer.updated_at = datetime.utcnow()

            updated = await self.customer_repo.update(customer)
            await self.uow.commit()
            return Return.ok(to_customer_dto(updated))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(internal_error("Failed to update customer", e))
