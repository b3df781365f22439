"""Dashboard API Routes"""

from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.product_repository import SqlAlchemyProductRepository
from src.api.auth import get_current_tenant
from src.api.error import ClientError, error_example
from src.app.use_cases.auth import TenantIdentityDTO
from src.app.use_cases.dashboard import GetDashboardSummary
from src.app.use_cases.invoices import DashboardSummaryDTO
from src.depends import get_session

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get(
    "/summary",
    response_model=DashboardSummaryDTO,
    responses={401: error_example("UNAUTHORIZED", "Unauthorized", "Missing or invalid token")},
)
async def get_summary(
    tenant: TenantIdentityDTO = Depends(get_current_tenant),
    session: AsyncSession = Depends(get_session),
):
    """
    Headline figures for the tenant.

    **Example response:**
    ```json
    {
      "customer_count": 4,
      "product_count": 12,
      "invoice_count": 9,
      "revenue": "1320.00",
      "outstanding": "440.00",
      "invoices_by_status": {"draft": 0, "pending": 3, "sent": 1, "paid": 5, "overdue": 0, "cancelled": 0}
    }
    ```
    """
    use_case = GetDashboardSummary(
        customer_repo=SqlAlchemyCustomerRepository(session),
        product_repo=SqlAlchemyProductRepository(session),
        invoice_repo=SqlAlchemyInvoiceRepository(session),
    )
    result = await use_case.execute(tenant.tenant_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
