# invoicing/repositories/rows.py
"""
Row to read-model converters shared by the repositories.
"""

import uuid
from datetime import datetime, timezone

from invoicing.models.customers import Customer
from invoicing.models.invoices import InvoiceItem, InvoiceStatus, InvoiceSummary
from invoicing.models.users import UserRecord


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def row_to_customer(row, prefix: str = "") -> Customer:
    return Customer(
        id=row[f"{prefix}id"],
        name=row[f"{prefix}name"],
        email=row[f"{prefix}email"],
        tax_number=row[f"{prefix}tax_number"],
        address=row[f"{prefix}address"],
        created_at=row[f"{prefix}created_at"],
        updated_at=row[f"{prefix}updated_at"],
    )


def row_to_invoice_summary(row) -> InvoiceSummary:
    return InvoiceSummary(
        id=row["id"],
        customer_id=row["customer_id"],
        number=row["number"],
        issue_date=row["issue_date"],
        due_date=row["due_date"],
        status=InvoiceStatus(row["status"]),
        total_amount=row["total_amount"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_item(row) -> InvoiceItem:
    return InvoiceItem(
        id=row["id"],
        invoice_id=row["invoice_id"],
        description=row["description"],
        quantity=row["quantity"],
        unit_price=row["unit_price"],
        total=row["total"],
    )


def row_to_user(row) -> UserRecord:
    return UserRecord(
        id=row["id"],
        email=row["email"],
        name=row["name"],
        password_hash=row["password_hash"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
