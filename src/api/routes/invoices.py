"""Invoice API Routes

FastAPI routes for the tenant's invoices: creation with line items, listing,
detail, status changes, deletion and PDF rendering.
"""

from decimal import Decimal
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.repositories.invoice_item_repository import SqlAlchemyInvoiceItemRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.product_repository import SqlAlchemyProductRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.auth import get_current_tenant
from src.api.error import ClientError, error_example
from src.api.schemas.invoice_request import (
    CreateInvoiceRequestSchema,
    UpdateInvoiceStatusRequestSchema,
)
from src.app.services.pdf_service import PdfService
from src.app.use_cases.auth import TenantIdentityDTO
from src.app.use_cases.invoices import (
    CreateInvoice,
    CreateInvoiceCommandDTO,
    DeleteInvoice,
    GetInvoice,
    InvoiceDetailDTO,
    InvoiceDTO,
    InvoiceItemCommandDTO,
    ListInvoices,
    RenderInvoicePdf,
    UpdateInvoiceStatus,
    UpdateInvoiceStatusCommandDTO,
)
from src.depends import get_pdf_service, get_session

router = APIRouter(prefix="/invoices", tags=["Invoices"])

UNAUTHORIZED_RESPONSE = error_example("UNAUTHORIZED", "Unauthorized", "Missing or invalid token")
NOT_FOUND_RESPONSE = error_example("NOT_FOUND", "Invoice not found", "No such invoice for this tenant")


@router.get(
    "",
    response_model=List[InvoiceDTO],
    responses={
        400: error_example("VALIDATION_ERROR", "invalid status 'late'", "Unknown status filter"),
        401: UNAUTHORIZED_RESPONSE,
    },
)
async def list_invoices(
    status_filter: Optional[str] = Query(default=None, alias="status", description="Only this status"),
    tenant: TenantIdentityDTO = Depends(get_current_tenant),
    session: AsyncSession = Depends(get_session),
):
    """
    List the tenant's invoices, newest first, with customer name and email.

    **Query parameters:**
    - `status` (optional): draft, pending, sent, paid, overdue or cancelled
    """
    use_case = ListInvoices(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(tenant.tenant_id, status=status_filter)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "",
    response_model=InvoiceDetailDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {
            "description": "Invalid invoice or line item",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "VALIDATION_ERROR",
                            "message": "Item 2: quantity must be a positive integer",
                            "details": {"item": 2, "field": "quantity"}
                        }
                    }
                }
            }
        },
        401: UNAUTHORIZED_RESPONSE,
        409: error_example(
            "CONFLICT",
            "Invoice conflicts with existing data, please retry",
            "Concurrent write collided",
        ),
    },
)
async def create_invoice(
    request: CreateInvoiceRequestSchema,
    tenant: TenantIdentityDTO = Depends(get_current_tenant),
    session: AsyncSession = Depends(get_session),
):
    """
    Create an invoice with its line items in one transaction.

    Accepts a flat body or `{"invoice": {...}, "items": [...]}`.

    **Request body:**
    - `customer_id` (required): Customer of this tenant
    - `issue_date` (required): ISO date
    - `due_date` (optional): Defaults to `issue_date`, never earlier
    - `tax_rate` (optional): Percent in [0, 100], defaults to configuration
    - `status` (optional): Defaults to `pending`
    - `notes` (optional)
    - `items` (required, non-empty): `product_id`, `quantity`, `unit_price`,
      optional `total_price` which must match `quantity x unit_price`

    Subtotal, tax and total are computed by the server; values sent by the
    client are ignored. The invoice number (`INV-0001`, ...) is assigned
    per tenant.

    **Returns:**
    - 201: Invoice with items
    - 400: First validation failure, item errors carry the 1-based item index
    """
    use_case = CreateInvoice(
        uow=SqlAlchemyUnitOfWork(session),
        customer_repo=SqlAlchemyCustomerRepository(session),
        product_repo=SqlAlchemyProductRepository(session),
        invoice_repo=SqlAlchemyInvoiceRepository(session),
        invoice_item_repo=SqlAlchemyInvoiceItemRepository(session),
        default_tax_rate=Decimal(str(ApplicationConfig.DEFAULT_TAX_RATE)),
    )
    command = CreateInvoiceCommandDTO(
        tenant_id=tenant.tenant_id,
        customer_id=request.customer_id,
        issue_date=request.issue_date,
        due_date=request.due_date,
        tax_rate=request.tax_rate,
        status=request.status,
        notes=request.notes,
        items=[InvoiceItemCommandDTO(**item.model_dump()) for item in request.items],
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/{invoice_id}",
    response_model=InvoiceDetailDTO,
    responses={401: UNAUTHORIZED_RESPONSE, 404: NOT_FOUND_RESPONSE},
)
async def get_invoice(
    invoice_id: int,
    tenant: TenantIdentityDTO = Depends(get_current_tenant),
    session: AsyncSession = Depends(get_session),
):
    """Invoice with customer contact details and line items"""
    use_case = GetInvoice(SqlAlchemyInvoiceRepository(session), SqlAlchemyInvoiceItemRepository(session))
    result = await use_case.execute(invoice_id, tenant.tenant_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.patch(
    "/{invoice_id}/status",
    response_model=InvoiceDTO,
    responses={
        400: error_example(
            "VALIDATION_ERROR",
            "invoice is paid and can no longer change status",
            "Unknown status or final invoice",
        ),
        401: UNAUTHORIZED_RESPONSE,
        404: NOT_FOUND_RESPONSE,
    },
)
async def update_invoice_status(
    invoice_id: int,
    request: UpdateInvoiceStatusRequestSchema,
    tenant: TenantIdentityDTO = Depends(get_current_tenant),
    session: AsyncSession = Depends(get_session),
):
    """
    Change an invoice's status.

    Paid and cancelled invoices are final. Amounts never change.
    """
    use_case = UpdateInvoiceStatus(SqlAlchemyUnitOfWork(session), SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(
        UpdateInvoiceStatusCommandDTO(
            invoice_id=invoice_id,
            tenant_id=tenant.tenant_id,
            status=request.status,
        )
    )

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete("/{invoice_id}", responses={401: UNAUTHORIZED_RESPONSE})
async def delete_invoice(
    invoice_id: int,
    tenant: TenantIdentityDTO = Depends(get_current_tenant),
    session: AsyncSession = Depends(get_session),
):
    """Delete an invoice and its items. Unknown ids succeed."""
    use_case = DeleteInvoice(SqlAlchemyUnitOfWork(session), SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(invoice_id, tenant.tenant_id)

    if result.is_err():
        raise ClientError(result.error)

    return {"success": True}


@router.get(
    "/{invoice_id}/pdf",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        },
        401: UNAUTHORIZED_RESPONSE,
        404: NOT_FOUND_RESPONSE,
    }
)
async def get_invoice_pdf(
    invoice_id: int,
    tenant: TenantIdentityDTO = Depends(get_current_tenant),
    session: AsyncSession = Depends(get_session),
    pdf_service: PdfService = Depends(get_pdf_service),
):
    """
    Download the invoice as a PDF file.

    **Returns:**
    - 200: PDF file (application/pdf)
    - 404: Invoice not found
    """
    use_case = RenderInvoicePdf(
        invoice_repo=SqlAlchemyInvoiceRepository(session),
        invoice_item_repo=SqlAlchemyInvoiceItemRepository(session),
        pdf_service=pdf_service,
        company_name=ApplicationConfig.COMPANY_NAME,
        company_address=ApplicationConfig.COMPANY_ADDRESS,
    )
    result = await use_case.execute(invoice_id, tenant.tenant_id)

    if result.is_err():
        raise ClientError(result.error)

    pdf = result.value
    return Response(
        content=pdf.content,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{pdf.invoice_number}.pdf"'
        }
    )
