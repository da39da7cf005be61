# invoicing/api/invoices.py

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.exc import SQLAlchemyError

from invoicing.api.deps import get_invoice_service
from invoicing.api.errors import error_response
from invoicing.core.errors import CustomerNotFound
from invoicing.models.invoices import (
    Invoice,
    InvoiceCreate,
    InvoiceFilters,
    InvoiceSortField,
    InvoiceStatus,
    InvoiceUpdate,
    SortOrder,
)
from invoicing.services.invoices import InvoiceService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/invoices", tags=["invoices"])


@router.get("", response_model=List[Invoice])
def list_invoices(
    search: Optional[str] = Query(
        default=None,
        description="Case-insensitive match on invoice number or customer name",
    ),
    status_filter: Optional[InvoiceStatus] = Query(default=None, alias="status"),
    customer_id: Optional[str] = Query(default=None, alias="customerId"),
    sort_by: InvoiceSortField = Query(default=InvoiceSortField.CREATED_AT, alias="sortBy"),
    sort_order: SortOrder = Query(default=SortOrder.DESC, alias="sortOrder"),
    service: InvoiceService = Depends(get_invoice_service),
) -> List[Invoice]:
    filters = InvoiceFilters(
        search=search,
        status=status_filter,
        customer_id=customer_id,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return service.list_invoices(filters)


@router.get("/{invoice_id}", response_model=Invoice)
def get_invoice(
    invoice_id: str,
    service: InvoiceService = Depends(get_invoice_service),
) -> Invoice:
    return service.get_invoice(invoice_id)


@router.get(
    "/{invoice_id}/pdf",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
def export_invoice_pdf(
    invoice_id: str,
    service: InvoiceService = Depends(get_invoice_service),
) -> Response:
    invoice, pdf_bytes = service.render_pdf(invoice_id)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename=invoice-{invoice.number}.pdf"},
    )


@router.post("", response_model=Invoice, status_code=status.HTTP_201_CREATED)
def create_invoice(
    payload: InvoiceCreate,
    service: InvoiceService = Depends(get_invoice_service),
):
    try:
        return service.create_invoice(payload)
    except CustomerNotFound as exc:
        # an unknown customer id is a bad request body here, not a missing route resource
        return error_response(status.HTTP_400_BAD_REQUEST, exc.detail)
    except SQLAlchemyError as exc:
        logger.exception("Create invoice error")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to create invoice",
            details=str(exc),
        )


@router.put("/{invoice_id}", response_model=Invoice)
def update_invoice(
    invoice_id: str,
    payload: InvoiceUpdate,
    service: InvoiceService = Depends(get_invoice_service),
):
    """
    Partially update an invoice. Status may be set to any value at any time;
    supplying items replaces the whole item set.
    """
    try:
        return service.update_invoice(invoice_id, payload)
    except SQLAlchemyError as exc:
        logger.exception("Update invoice error")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to update invoice",
            details=str(exc),
        )


@router.delete("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_invoice(
    invoice_id: str,
    service: InvoiceService = Depends(get_invoice_service),
) -> Response:
    service.delete_invoice(invoice_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
