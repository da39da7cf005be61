# scripts/seed_data.py
"""
Reset the database and load a demo user, three customers and four invoices.

Usage:
    python -m scripts.seed_data
"""

import logging
from datetime import date
from decimal import Decimal

from invoicing.core.config import settings
from invoicing.db.engine import create_db_engine
from invoicing.models.customers import CustomerCreate
from invoicing.models.invoices import InvoiceCreate, InvoiceItemIn, InvoiceStatus
from invoicing.repositories.customers import CustomerRepository
from invoicing.repositories.invoices import InvoiceRepository
from invoicing.repositories.users import UserRepository
from invoicing.services.auth import AuthService
from invoicing.services.customers import CustomerService
from invoicing.services.invoices import InvoiceService
from scripts.init_db import reset_schema

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

ADMIN = {"email": "admin@example.com", "password": "admin123", "name": "Admin User"}

CUSTOMERS = [
    {
        "name": "Acme Corporation",
        "email": "contact@acme.com",
        "tax_number": "TAX-001-ACME",
        "address": "123 Business St, New York, NY 10001",
    },
    {
        "name": "Tech Solutions Inc",
        "email": "info@techsolutions.com",
        "tax_number": "TAX-002-TECH",
        "address": "456 Innovation Ave, San Francisco, CA 94105",
    },
    {
        "name": "Global Traders LLC",
        "email": "admin@globaltraders.com",
        "tax_number": "TAX-003-GLOBAL",
        "address": "789 Commerce Blvd, Chicago, IL 60601",
    },
]

# (customer index, number, issue date, due date, status, items)
INVOICES = [
    (0, "INV-2024-001", date(2024, 1, 15), date(2024, 2, 15), InvoiceStatus.PAID, [
        ("Web Development Services", "40", "25.00"),
        ("Hosting & Maintenance", "1", "500.00"),
    ]),
    (1, "INV-2024-002", date(2024, 2, 1), date(2024, 3, 1), InvoiceStatus.SENT, [
        ("Software License - Enterprise", "10", "200.00"),
        ("Technical Support - Annual", "1", "1200.00"),
    ]),
    (0, "INV-2024-003", date(2024, 2, 10), date(2024, 3, 10), InvoiceStatus.DRAFT, [
        ("UI/UX Design Consultation", "10", "75.00"),
        ("Design Assets Package", "1", "100.00"),
    ]),
    (2, "INV-2024-004", date(2024, 2, 15), date(2024, 3, 15), InvoiceStatus.SENT, [
        ("Database Migration Service", "24", "100.00"),
    ]),
]


def build_items(rows):
    items = []
    for description, quantity, unit_price in rows:
        quantity, unit_price = Decimal(quantity), Decimal(unit_price)
        items.append(
            InvoiceItemIn(
                description=description,
                quantity=quantity,
                unit_price=unit_price,
                total=quantity * unit_price,
            )
        )
    return items


def seed(engine) -> None:
    auth = AuthService(UserRepository(engine), settings)
    customer_service = CustomerService(CustomerRepository(engine))
    invoice_service = InvoiceService(InvoiceRepository(engine), CustomerRepository(engine))

    admin = auth.register(ADMIN["email"], ADMIN["password"], ADMIN["name"])
    logger.info("Created admin user %s", admin.user.email)

    created = [customer_service.create_customer(CustomerCreate(**row)) for row in CUSTOMERS]
    logger.info("Created %d customers", len(created))

    for customer_index, number, issued, due, status, rows in INVOICES:
        items = build_items(rows)
        invoice_service.create_invoice(
            InvoiceCreate(
                customer_id=created[customer_index].id,
                number=number,
                issue_date=issued,
                due_date=due,
                status=status,
                total_amount=sum((item.total for item in items), Decimal("0")),
                items=items,
            )
        )
    logger.info("Created %d invoices", len(INVOICES))


def main():
    logger.info("Starting database seed...")
    engine = create_db_engine(settings.database_url)
    try:
        reset_schema(engine)
        seed(engine)
    finally:
        engine.dispose()
    logger.info("Database seed completed successfully!")


if __name__ == "__main__":
    main()
