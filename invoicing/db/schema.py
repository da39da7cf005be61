# invoicing/db/schema.py

from sqlalchemy import (
    MetaData, Table, Column, Integer, String, Text,
    Numeric, Date, DateTime, ForeignKey, CheckConstraint,
)

metadata = MetaData()

customers = Table(
    "customers",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", Text, nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("tax_number", Text, nullable=True),
    Column("address", Text, nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

# number uniqueness here is the final arbiter; service checks are only a pre-check
invoices = Table(
    "invoices",
    metadata,
    Column("id", String(36), primary_key=True),
    Column(
        "customer_id",
        String(36),
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("number", String(100), nullable=False, unique=True),
    Column("issue_date", Date, nullable=False),
    Column("due_date", Date, nullable=False),
    Column("status", String(20), nullable=False),
    Column("total_amount", Numeric(12, 2), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    CheckConstraint(
        "status IN ('DRAFT', 'SENT', 'PAID', 'CANCELLED')",
        name="ck_invoices_status",
    ),
)

invoice_items = Table(
    "invoice_items",
    metadata,
    Column("id", String(36), primary_key=True),
    Column(
        "invoice_id",
        String(36),
        ForeignKey("invoices.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("position", Integer, nullable=False),
    Column("description", Text, nullable=False),
    Column("quantity", Numeric(12, 2), nullable=False),
    Column("unit_price", Numeric(12, 2), nullable=False),
    Column("total", Numeric(12, 2), nullable=False),
    CheckConstraint("quantity > 0", name="ck_invoice_items_quantity_pos"),
    CheckConstraint("unit_price >= 0", name="ck_invoice_items_unit_price_nonneg"),
)

users = Table(
    "users",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column("name", Text, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)
