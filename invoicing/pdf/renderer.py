# invoicing/pdf/renderer.py
"""
Invoice PDF rendering.

The layout is fixed: header, "Bill To" block beside the invoice metadata,
the item table (paginated by ``layout.layout_item_rows``), the total line and
a centered footer. Coordinates below are points from the top-left corner and
are flipped onto reportlab's bottom-up canvas when drawn.
"""

import io
from datetime import datetime
from typing import List, Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from invoicing.core.errors import RenderFailed
from invoicing.models.customers import Customer
from invoicing.models.invoices import Invoice, InvoiceItem, InvoiceStatus
from invoicing.pdf.formatting import fmt_date, fmt_money, fmt_qty
from invoicing.pdf.layout import TABLE_TOP, RowSlot, layout_item_rows

PAGE_WIDTH, PAGE_HEIGHT = A4
LEFT = 50
RIGHT = 550
PRODUCT_NAME = "Invoice Management System"

FONT = "Helvetica"
FONT_BOLD = "Helvetica-Bold"

COLOR_ACCENT = colors.HexColor("#2563eb")
COLOR_HEADER = colors.HexColor("#4b5563")
COLOR_RULE = colors.HexColor("#e5e7eb")
COLOR_MUTED = colors.HexColor("#6b7280")
COLOR_TEXT = colors.HexColor("#000000")

STATUS_COLORS = {
    InvoiceStatus.DRAFT.value: "#6b7280",
    InvoiceStatus.SENT.value: "#3b82f6",
    InvoiceStatus.PAID.value: "#10b981",
    InvoiceStatus.CANCELLED.value: "#ef4444",
}

# Item table columns
DESCRIPTION_X = 50
QUANTITY_X = 280
PRICE_X = 370
TOTAL_X = 460
DESCRIPTION_WIDTH = 210
DESCRIPTION_MAX_LINES = 2


def status_color(status) -> colors.Color:
    """Colour for a status value; unknown statuses render black."""
    key = status.value if isinstance(status, InvoiceStatus) else str(status)
    return colors.HexColor(STATUS_COLORS.get(key, "#000000"))


def _text(pdf, x, y, text, font=FONT, size=10, color=None) -> None:
    pdf.setFont(font, size)
    if color is not None:
        pdf.setFillColor(color)
    pdf.drawString(x, PAGE_HEIGHT - y - size, text)


def _rule(pdf, y) -> None:
    pdf.setStrokeColor(COLOR_RULE)
    pdf.setLineWidth(1)
    pdf.line(LEFT, PAGE_HEIGHT - y, RIGHT, PAGE_HEIGHT - y)


def _draw_header(pdf) -> None:
    _text(pdf, LEFT, 50, "INVOICE", font=FONT_BOLD, size=20, color=COLOR_ACCENT)
    _text(pdf, LEFT, 75, PRODUCT_NAME, size=10, color=COLOR_TEXT)


def _draw_invoice_info(pdf, invoice: Invoice) -> None:
    top = 130
    rows = [
        ("Invoice Number:", invoice.number),
        ("Invoice Date:", fmt_date(invoice.issue_date)),
        ("Due Date:", fmt_date(invoice.due_date)),
    ]
    for offset, (label, value) in enumerate(rows):
        y = top + offset * 15
        _text(pdf, 350, y, label, font=FONT_BOLD, color=COLOR_TEXT)
        _text(pdf, 460, y, value)

    status_y = top + len(rows) * 15
    _text(pdf, 350, status_y, "Status:", font=FONT_BOLD, color=COLOR_TEXT)
    _text(pdf, 460, status_y, invoice.status.value, color=status_color(invoice.status))
    pdf.setFillColor(COLOR_TEXT)


def _draw_customer_info(pdf, customer: Customer) -> None:
    _text(pdf, LEFT, 130, "Bill To:", font=FONT_BOLD, size=12, color=COLOR_TEXT)
    _text(pdf, LEFT, 150, customer.name)
    _text(pdf, LEFT, 165, customer.email)

    y = 180
    if customer.tax_number:
        _text(pdf, LEFT, y, f"Tax Number: {customer.tax_number}")
        y += 15

    if customer.address:
        for line in simpleSplit(customer.address, FONT, 10, 250):
            _text(pdf, LEFT, y, line)
            y += 12


def _description_lines(description: str) -> List[str]:
    lines = simpleSplit(description, FONT, 9, DESCRIPTION_WIDTH) or [description]
    if len(lines) > DESCRIPTION_MAX_LINES:
        lines = lines[:DESCRIPTION_MAX_LINES]
        lines[-1] = lines[-1].rstrip() + "..."
    return lines


def _draw_item_table(pdf, items: List[InvoiceItem]) -> RowSlot:
    """
    Draw the table and return where the cursor ended, which may be on a later
    page than the one the table started on.
    """
    _text(pdf, DESCRIPTION_X, TABLE_TOP, "Description", font=FONT_BOLD, color=COLOR_HEADER)
    _text(pdf, QUANTITY_X, TABLE_TOP, "Qty", font=FONT_BOLD)
    _text(pdf, PRICE_X, TABLE_TOP, "Unit Price", font=FONT_BOLD)
    _text(pdf, TOTAL_X, TABLE_TOP, "Total", font=FONT_BOLD)
    _rule(pdf, TABLE_TOP + 15)

    layout = layout_item_rows(len(items))
    page = 0

    for item, slot in zip(items, layout.rows):
        if slot.page > page:
            pdf.showPage()
            page = slot.page

        y = slot.y
        for index, line in enumerate(_description_lines(item.description)):
            _text(pdf, DESCRIPTION_X, y + index * 10, line, size=9, color=COLOR_TEXT)
        _text(pdf, QUANTITY_X, y, fmt_qty(item.quantity), size=9)
        _text(pdf, PRICE_X, y, fmt_money(item.unit_price), size=9)
        _text(pdf, TOTAL_X, y, fmt_money(item.total), size=9)

    if layout.end.page > page:
        pdf.showPage()

    _rule(pdf, layout.end.y)
    return layout.end


def _draw_total(pdf, end: RowSlot, total_amount) -> None:
    y = end.y + 20
    _text(pdf, PRICE_X, y, "Total Amount:", font=FONT_BOLD, size=12, color=COLOR_TEXT)
    _text(pdf, TOTAL_X, y, fmt_money(total_amount), font=FONT_BOLD, size=14, color=COLOR_ACCENT)


def _draw_footer(pdf, generated_at: datetime) -> None:
    center = (LEFT + RIGHT) / 2
    pdf.setFont(FONT, 8)
    pdf.setFillColor(COLOR_MUTED)
    pdf.drawCentredString(center, PAGE_HEIGHT - 750 - 8, "Thank you for your business!")
    pdf.drawCentredString(center, PAGE_HEIGHT - 765 - 8, f"Generated on {fmt_date(generated_at)}")


def render_invoice_pdf(
    invoice: Invoice,
    compress: bool = True,
    generated_at: Optional[datetime] = None,
) -> bytes:
    """
    Render a fully resolved invoice (customer and items embedded) to PDF bytes.

    The "Generated on" footer uses the render time unless ``generated_at`` is
    given. Set ``compress=False`` to keep page streams readable.

    Raises:
        RenderFailed: if the document cannot be produced. No partial output
        is ever returned.
    """
    buffer = io.BytesIO()

    try:
        pdf = canvas.Canvas(buffer, pagesize=A4, pageCompression=1 if compress else 0)
        pdf.setTitle(f"Invoice {invoice.number}")
        pdf.setAuthor(PRODUCT_NAME)

        _draw_header(pdf)
        _draw_invoice_info(pdf, invoice)
        _draw_customer_info(pdf, invoice.customer)
        end = _draw_item_table(pdf, invoice.items)
        _draw_total(pdf, end, invoice.total_amount)
        _draw_footer(pdf, generated_at or datetime.now())

        pdf.showPage()
        pdf.save()
    except Exception as exc:
        raise RenderFailed(f"Failed to render invoice {invoice.number}: {exc}") from exc

    return buffer.getvalue()
