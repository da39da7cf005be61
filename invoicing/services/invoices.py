# invoicing/services/invoices.py

import logging
from typing import List, Optional, Tuple

from invoicing.core.errors import InvoiceNotFound
from invoicing.models.invoices import Invoice, InvoiceCreate, InvoiceFilters, InvoiceUpdate
from invoicing.pdf.renderer import render_invoice_pdf
from invoicing.repositories.customers import CustomerRepository
from invoicing.repositories.invoices import InvoiceRepository
from invoicing.services import validation

logger = logging.getLogger(__name__)


class InvoiceService:
    def __init__(self, invoices: InvoiceRepository, customers: CustomerRepository):
        self.invoices = invoices
        self.customers = customers

    def list_invoices(self, filters: Optional[InvoiceFilters] = None) -> List[Invoice]:
        return self.invoices.find_all(filters)

    def get_invoice(self, invoice_id: str) -> Invoice:
        invoice = self.invoices.find_by_id(invoice_id)
        if invoice is None:
            raise InvoiceNotFound()
        return invoice

    def create_invoice(self, data: InvoiceCreate) -> Invoice:
        customer = self.customers.find_by_id(data.customer_id)
        by_number = self.invoices.find_by_number(data.number)
        validation.validate_new_invoice(data, customer, by_number)

        invoice = self.invoices.create(data)
        logger.info("Created invoice %s (%s)", invoice.number, invoice.id)
        return invoice

    def update_invoice(self, invoice_id: str, data: InvoiceUpdate) -> Invoice:
        supplied = data.model_fields_set
        existing = self.invoices.find_by_id(invoice_id)

        customer = None
        if existing is not None and "customer_id" in supplied:
            customer = self.customers.find_by_id(data.customer_id)

        by_number = None
        if existing is not None and "number" in supplied:
            by_number = self.invoices.find_by_number(data.number)

        validation.validate_invoice_update(invoice_id, data, existing, customer, by_number)

        return self.invoices.update(invoice_id, data)

    def delete_invoice(self, invoice_id: str) -> None:
        if not self.invoices.delete(invoice_id):
            raise InvoiceNotFound()
        logger.info("Deleted invoice %s", invoice_id)

    def render_pdf(self, invoice_id: str) -> Tuple[Invoice, bytes]:
        invoice = self.get_invoice(invoice_id)
        return invoice, render_invoice_pdf(invoice)
