"""CreateCustomer Use Case"""

from typing import Optional
from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.app.use_cases.errors import internal_error, validation_error
from src.domain.customer import Customer
from src.domain.validation import is_valid_email
from .dtos import CreateCustomerCommandDTO, CustomerDTO


def validate_customer_fields(command: CreateCustomerCommandDTO) -> Optional[Error]:
    """Check required customer fields, returns the first failure"""
    if not command.name.strip() or not command.email.strip() or not command.phone.strip():
        return validation_error("Missing required fields: name, email and phone are required")
    if not is_valid_email(command.email.strip()):
        return validation_error("Invalid email format", field="email")
    return None


def to_customer_dto(customer: Customer, invoice_count: Optional[int] = None) -> CustomerDTO:
    return CustomerDTO(
        id=customer.id,
        name=customer.name,
        email=customer.email,
        phone=customer.phone,
        address=customer.address or "",
        created_at=customer.created_at,
        updated_at=customer.updated_at,
        invoice_count=invoice_count,
    )


class CreateCustomer:
    """
    Use Case: Create a customer for a tenant

    Business Rules:
    1. name, email and phone are required
    2. email must look like an email
    3. No uniqueness constraint on email
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, command: CreateCustomerCommandDTO) -> Result[CustomerDTO]:
        error = validate_customer_fields(command)
        if error:
            return Return.err(error)

        try:
            customer = Customer(
                tenant_id=command.tenant_id,
                name=command.name.strip(),
                email=command.email.strip(),
                phone=command.phone.strip(),
                address=(command.address or "").strip(),
            )
            created = await self.customer_repo.create(customer)
            await self.uow.commit()
            return Return.ok(to_customer_dto(created))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(internal_error("Failed to create customer", e))
