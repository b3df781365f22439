"""Invoice use cases"""
from .create_invoice import CreateInvoice
from .list_invoices import ListInvoices
from .get_invoice import GetInvoice
from .delete_invoice import DeleteInvoice
from .update_invoice_status import UpdateInvoiceStatus
from .render_invoice_pdf import RenderInvoicePdf
from .mark_overdue_invoices import MarkOverdueInvoices
from .dtos import (
    CreateInvoiceCommandDTO,
    InvoiceItemCommandDTO,
    UpdateInvoiceStatusCommandDTO,
    InvoiceDTO,
    InvoiceDetailDTO,
    InvoiceItemDTO,
    InvoicePdfDTO,
    OverdueMarkResultDTO,
    DashboardSummaryDTO,
)

__all__ = [
    "CreateInvoice",
    "ListInvoices",
    "GetInvoice",
    "DeleteInvoice",
    "UpdateInvoiceStatus",
    "RenderInvoicePdf",
    "MarkOverdueInvoices",
    "CreateInvoiceCommandDTO",
    "InvoiceItemCommandDTO",
    "UpdateInvoiceStatusCommandDTO",
    "InvoiceDTO",
    "InvoiceDetailDTO",
    "InvoiceItemDTO",
    "InvoicePdfDTO",
    "OverdueMarkResultDTO",
    "DashboardSummaryDTO",
]
