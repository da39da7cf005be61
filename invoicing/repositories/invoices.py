# invoicing/repositories/invoices.py

from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from sqlalchemy import delete, insert, or_, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from invoicing.core.errors import CustomerNotFound, DuplicateInvoiceNumber
from invoicing.db.engine import is_foreign_key_violation, is_unique_violation
from invoicing.db.schema import customers, invoice_items, invoices
from invoicing.models.invoices import (
    Invoice,
    InvoiceCreate,
    InvoiceFilters,
    InvoiceItem,
    InvoiceItemIn,
    InvoiceSortField,
    InvoiceSummary,
    InvoiceUpdate,
    SortOrder,
)
from invoicing.repositories.rows import (
    new_id,
    row_to_customer,
    row_to_invoice_summary,
    row_to_item,
    utcnow,
)

SORT_COLUMNS = {
    InvoiceSortField.NUMBER: invoices.c.number,
    InvoiceSortField.DATE: invoices.c.issue_date,
    InvoiceSortField.DUE_DATE: invoices.c.due_date,
    InvoiceSortField.STATUS: invoices.c.status,
    InvoiceSortField.TOTAL_AMOUNT: invoices.c.total_amount,
    InvoiceSortField.CREATED_AT: invoices.c.created_at,
    InvoiceSortField.UPDATED_AT: invoices.c.updated_at,
}

# InvoiceUpdate fields stored as invoices columns of the same name
UPDATABLE_FIELDS = (
    "customer_id",
    "number",
    "issue_date",
    "due_date",
    "status",
    "total_amount",
)


def _invoice_with_customer():
    return select(
        invoices,
        customers.c.name.label("customer_name"),
        customers.c.email.label("customer_email"),
        customers.c.tax_number.label("customer_tax_number"),
        customers.c.address.label("customer_address"),
        customers.c.created_at.label("customer_created_at"),
        customers.c.updated_at.label("customer_updated_at"),
    ).select_from(invoices.join(customers))


def _item_rows(invoice_id: str, items: Iterable[InvoiceItemIn]) -> List[dict]:
    return [
        {
            "id": new_id(),
            "invoice_id": invoice_id,
            "position": position,
            "description": item.description,
            "quantity": item.quantity,
            "unit_price": item.unit_price,
            "total": item.total,
        }
        for position, item in enumerate(items)
    ]


def _raise_for_integrity(exc: IntegrityError) -> None:
    if is_unique_violation(exc):
        raise DuplicateInvoiceNumber() from exc
    if is_foreign_key_violation(exc):
        raise CustomerNotFound() from exc
    raise exc


class InvoiceRepository:
    def __init__(self, engine: Engine):
        self.engine = engine

    def find_all(self, filters: Optional[InvoiceFilters] = None) -> List[Invoice]:
        filters = filters or InvoiceFilters()
        stmt = _invoice_with_customer()

        if filters.customer_id:
            stmt = stmt.where(invoices.c.customer_id == filters.customer_id)

        if filters.status is not None:
            stmt = stmt.where(invoices.c.status == filters.status.value)

        if filters.search:
            stmt = stmt.where(
                or_(
                    invoices.c.number.icontains(filters.search, autoescape=True),
                    customers.c.name.icontains(filters.search, autoescape=True),
                )
            )

        sort_column = SORT_COLUMNS[filters.sort_by]
        if filters.sort_order == SortOrder.ASC:
            stmt = stmt.order_by(sort_column.asc())
        else:
            stmt = stmt.order_by(sort_column.desc())

        with self.engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
            items_by_invoice = self._load_items(conn, [row["id"] for row in rows])

        return [self._row_to_invoice(row, items_by_invoice[row["id"]]) for row in rows]

    def find_by_id(self, invoice_id: str) -> Optional[Invoice]:
        with self.engine.connect() as conn:
            row = conn.execute(
                _invoice_with_customer().where(invoices.c.id == invoice_id)
            ).mappings().first()

            if row is None:
                return None

            items_by_invoice = self._load_items(conn, [invoice_id])

        return self._row_to_invoice(row, items_by_invoice[invoice_id])

    def find_by_number(self, number: str) -> Optional[InvoiceSummary]:
        with self.engine.connect() as conn:
            row = conn.execute(
                select(invoices).where(invoices.c.number == number)
            ).mappings().first()

        return row_to_invoice_summary(row) if row is not None else None

    def create(self, data: InvoiceCreate) -> Invoice:
        now = utcnow()
        invoice_id = new_id()

        try:
            with self.engine.begin() as conn:
                conn.execute(
                    insert(invoices).values(
                        id=invoice_id,
                        customer_id=data.customer_id,
                        number=data.number,
                        issue_date=data.issue_date,
                        due_date=data.due_date,
                        status=data.status.value,
                        total_amount=data.total_amount,
                        created_at=now,
                        updated_at=now,
                    )
                )
                if data.items:
                    conn.execute(insert(invoice_items), _item_rows(invoice_id, data.items))
        except IntegrityError as exc:
            _raise_for_integrity(exc)

        return self.find_by_id(invoice_id)

    def update(self, invoice_id: str, data: InvoiceUpdate) -> Invoice:
        """
        Apply the supplied fields. When items are supplied the stored items
        are deleted and the new set inserted in the same transaction.
        """
        supplied = data.model_fields_set
        values = {
            field: getattr(data, field)
            for field in UPDATABLE_FIELDS
            if field in supplied
        }
        if "status" in values:
            values["status"] = values["status"].value
        values["updated_at"] = utcnow()

        try:
            with self.engine.begin() as conn:
                if "items" in supplied:
                    conn.execute(
                        delete(invoice_items).where(invoice_items.c.invoice_id == invoice_id)
                    )
                    if data.items:
                        conn.execute(insert(invoice_items), _item_rows(invoice_id, data.items))

                conn.execute(
                    update(invoices).where(invoices.c.id == invoice_id).values(**values)
                )
        except IntegrityError as exc:
            _raise_for_integrity(exc)

        return self.find_by_id(invoice_id)

    def delete(self, invoice_id: str) -> bool:
        with self.engine.begin() as conn:
            conn.execute(delete(invoice_items).where(invoice_items.c.invoice_id == invoice_id))
            result = conn.execute(delete(invoices).where(invoices.c.id == invoice_id))

        return result.rowcount > 0

    @staticmethod
    def _load_items(conn, invoice_ids: List[str]) -> Dict[str, List[InvoiceItem]]:
        items_by_invoice: Dict[str, List[InvoiceItem]] = defaultdict(list)
        if not invoice_ids:
            return items_by_invoice

        rows = conn.execute(
            select(invoice_items)
            .where(invoice_items.c.invoice_id.in_(invoice_ids))
            .order_by(invoice_items.c.invoice_id, invoice_items.c.position)
        ).mappings().all()

        for row in rows:
            items_by_invoice[row["invoice_id"]].append(row_to_item(row))
        return items_by_invoice

    @staticmethod
    def _row_to_invoice(row, items: List[InvoiceItem]) -> Invoice:
        summary = row_to_invoice_summary(row)
        customer = row_to_customer(row, prefix="customer_")
        return Invoice(**summary.model_dump(), customer=customer, items=items)
