"""ReportLab PDF Generation Service Implementation

Implements invoice rendering using ReportLab library.
"""

from io import BytesIO
from decimal import Decimal
from typing import List, Optional, Tuple
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from src.app.services.pdf_service import PdfService
from src.domain.customer import Customer
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem
from src.domain.product import Product

PRIMARY = colors.HexColor("#2C3E50")
MUTED = colors.HexColor("#7F8C8D")
GRID = colors.HexColor("#BDC3C7")

COLUMN_WIDTHS = [75 * mm, 20 * mm, 35 * mm, 40 * mm]


def _money(value: Decimal) -> str:
    return f"{Decimal(value):,.2f}"


def _text(value: Optional[str]) -> str:
    # Paragraph parses inline markup
    return escape(value or "")


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Layout: issuer header, invoice details, bill-to block, line items,
    subtotal / tax / total block and optional notes.
    """

    def generate_invoice(
        self,
        invoice: Invoice,
        customer: Customer,
        items: List[Tuple[InvoiceItem, Optional[Product]]],
        company_name: str,
        company_address: str,
    ) -> bytes:
        """
        Generate an invoice PDF

        Args:
            invoice: Invoice header with stored totals
            customer: Invoiced customer
            items: Line items with products (None when the product was deleted)
            company_name: Issuer name
            company_address: Issuer address

        Returns:
            PDF document as bytes
        """
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=20 * mm,
            leftMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
            title=invoice.invoice_number,
        )

        styles = getSampleStyleSheet()
        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=22,
            spaceAfter=6,
            textColor=PRIMARY,
        )
        label_style = ParagraphStyle(
            "LabelStyle",
            parent=styles["Heading2"],
            fontSize=14,
            textColor=PRIMARY,
            spaceAfter=12,
        )
        muted_style = ParagraphStyle(
            "MutedStyle",
            parent=styles["Normal"],
            fontSize=10,
            textColor=MUTED,
        )
        normal_style = ParagraphStyle("NormalStyle", parent=styles["Normal"], fontSize=10)
        bold_style = ParagraphStyle(
            "BoldStyle",
            parent=styles["Normal"],
            fontSize=10,
            fontName="Helvetica-Bold",
        )

        elements = [
            Paragraph(_text(company_name), title_style),
            Paragraph(_text(company_address), muted_style),
            Spacer(1, 10 * mm),
            Paragraph("INVOICE", label_style),
        ]

        details = Table(
            [
                ["Invoice Number:", invoice.invoice_number],
                ["Status:", invoice.status.value.upper()],
                ["Issue Date:", invoice.issue_date.isoformat()],
                ["Due Date:", invoice.due_date.isoformat()],
            ],
            colWidths=[40 * mm, 100 * mm],
        )
        details.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("TEXTCOLOR", (0, 0), (0, -1), MUTED),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.extend([details, Spacer(1, 8 * mm)])

        elements.append(Paragraph("Bill To:", bold_style))
        for line in (customer.name, customer.email, customer.phone, customer.address):
            if line:
                elements.append(Paragraph(_text(line), normal_style))
        elements.append(Spacer(1, 8 * mm))

        rows = [["Product", "Qty", "Unit Price", "Total"]]
        for item, product in items:
            rows.append(
                [
                    Paragraph(_text(product.name if product else f"Product #{item.product_id}"), normal_style),
                    str(item.quantity),
                    _money(item.unit_price),
                    _money(item.total_price),
                ]
            )
        line_table = Table(rows, colWidths=COLUMN_WIDTHS, repeatRows=1)
        line_table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), PRIMARY),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 9),
                    ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
                    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                    ("GRID", (0, 0), (-1, -1), 0.5, GRID),
                    ("TOPPADDING", (0, 0), (-1, -1), 5),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 5),
                    (
                        "ROWBACKGROUNDS",
                        (0, 1),
                        (-1, -1),
                        [colors.white, colors.HexColor("#F8F9F9")],
                    ),
                ]
            )
        )
        elements.extend([line_table, Spacer(1, 4 * mm)])

        totals = Table(
            [
                ["", "", "Subtotal:", _money(invoice.subtotal)],
                ["", "", f"Tax ({Decimal(invoice.tax_rate).normalize():f}%):", _money(invoice.tax_amount)],
                ["", "", "Total:", _money(invoice.total_amount)],
            ],
            colWidths=COLUMN_WIDTHS,
        )
        totals.setStyle(
            TableStyle(
                [
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("ALIGN", (2, 0), (-1, -1), "RIGHT"),
                    ("FONTNAME", (2, 2), (-1, 2), "Helvetica-Bold"),
                    ("LINEABOVE", (2, 2), (-1, 2), 1.5, PRIMARY),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(totals)

        if invoice.notes:
            elements.extend(
                [
                    Spacer(1, 10 * mm),
                    Paragraph("Notes:", bold_style),
                    Paragraph(_text(invoice.notes), muted_style),
                ]
            )

        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes
