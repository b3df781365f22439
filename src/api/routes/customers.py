"""Customer API Routes

CRUD for the calling tenant's customers.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.auth import get_current_tenant
from src.api.error import ClientError, error_example
from src.api.schemas.customer_request import CustomerRequestSchema
from src.app.use_cases.auth import TenantIdentityDTO
from src.app.use_cases.customers import (
    CreateCustomer,
    CreateCustomerCommandDTO,
    CustomerDTO,
    DeleteCustomer,
    ListCustomers,
    UpdateCustomer,
    UpdateCustomerCommandDTO,
)
from src.depends import get_session

router = APIRouter(prefix="/customers", tags=["Customers"])

UNAUTHORIZED_RESPONSE = error_example("UNAUTHORIZED", "Unauthorized", "Missing or invalid token")


@router.get(
    "",
    response_model=List[CustomerDTO],
    responses={401: UNAUTHORIZED_RESPONSE},
)
async def list_customers(
    tenant: TenantIdentityDTO = Depends(get_current_tenant),
    session: AsyncSession = Depends(get_session),
):
    """
    List the tenant's customers, newest first.

    Each entry carries `invoice_count`, the number of invoices issued to it.
    """
    result = await ListCustomers(SqlAlchemyCustomerRepository(session)).execute(tenant.tenant_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "",
    response_model=CustomerDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: error_example("VALIDATION_ERROR", "Invalid email format", "Invalid customer data"),
        401: UNAUTHORIZED_RESPONSE,
    },
)
async def create_customer(
    request: CustomerRequestSchema,
    tenant: TenantIdentityDTO = Depends(get_current_tenant),
    session: AsyncSession = Depends(get_session),
):
    """
    Create a customer.

    **Request body:**
    - `name`, `email`, `phone` (required)
    - `address` (optional)
    """
    use_case = CreateCustomer(SqlAlchemyUnitOfWork(session), SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(
        CreateCustomerCommandDTO(tenant_id=tenant.tenant_id, **request.model_dump())
    )

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.put(
    "/{customer_id}",
    response_model=CustomerDTO,
    responses={
        400: error_example("VALIDATION_ERROR", "Invalid email format", "Invalid customer data"),
        401: UNAUTHORIZED_RESPONSE,
        404: error_example("NOT_FOUND", "Customer not found", "No such customer for this tenant"),
    },
)
async def update_customer(
    customer_id: int,
    request: CustomerRequestSchema,
    tenant: TenantIdentityDTO = Depends(get_current_tenant),
    session: AsyncSession = Depends(get_session),
):
    """Replace a customer's fields. Validation matches creation."""
    use_case = UpdateCustomer(SqlAlchemyUnitOfWork(session), SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(
        UpdateCustomerCommandDTO(
            tenant_id=tenant.tenant_id,
            customer_id=customer_id,
            **request.model_dump(),
        )
    )

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete(
    "/{customer_id}",
    responses={
        401: UNAUTHORIZED_RESPONSE,
        409: error_example(
            "CONFLICT",
            "Customer has 2 invoice(s) and cannot be deleted",
            "Customer still referenced by invoices",
        ),
    },
)
async def delete_customer(
    customer_id: int,
    tenant: TenantIdentityDTO = Depends(get_current_tenant),
    session: AsyncSession = Depends(get_session),
):
    """
    Delete a customer.

    Deleting an unknown id succeeds. A customer with invoices is kept and
    the request fails with 409.
    """
    use_case = DeleteCustomer(SqlAlchemyUnitOfWork(session), SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(customer_id, tenant.tenant_id)

    if result.is_err():
        raise ClientError(result.error)

    return {"success": True}
