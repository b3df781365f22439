"""GetDashboardSummary Use Case"""

from libs.result import Result, Return
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.product_repository import ProductRepository
from src.app.use_cases.errors import internal_error
from src.app.use_cases.invoices.dtos import DashboardSummaryDTO
from src.domain.invoice import OUTSTANDING_STATUSES, InvoiceStatus
from src.domain.pricing import ZERO


class GetDashboardSummary:
    """
    Use Case: Headline figures of one tenant

    Business Rules:
    1. Revenue counts paid invoices only
    2. Outstanding counts pending, sent and overdue invoices
    3. Every status is reported, zero when absent
    """

    def __init__(
        self,
        customer_repo: CustomerRepository,
        product_repo: ProductRepository,
        invoice_repo: InvoiceRepository,
    ):
        self.customer_repo = customer_repo
        self.product_repo = product_repo
        self.invoice_repo = invoice_repo

    async def execute(self, tenant_id: int) -> Result[DashboardSummaryDTO]:
        try:
            customer_count = await self.customer_repo.count_by_tenant(tenant_id)
            product_count = await self.product_repo.count_by_tenant(tenant_id)
            by_status = await self.invoice_repo.summarize_by_status(tenant_id)

            invoice_count = sum(count for count, _ in by_status.values())
            revenue = by_status.get(InvoiceStatus.PAID, (0, ZERO))[1]
            outstanding = sum(
                (by_status.get(status, (0, ZERO))[1] for status in OUTSTANDING_STATUSES),
                ZERO,
            )

            return Return.ok(
                DashboardSummaryDTO(
                    customer_count=customer_count,
                    product_count=product_count,
                    invoice_count=invoice_count,
                    revenue=revenue,
                    outstanding=outstanding,
                    invoices_by_status={
                        status.value: by_status.get(status, (0, ZERO))[0]
                        for status in InvoiceStatus
                    },
                )
            )
        except Exception as e:
            return Return.err(internal_error("Failed to load dashboard summary", e))
