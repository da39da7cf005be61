from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.engine import Engine

from invoicing.core.errors import (
    CustomerNotFound,
    DuplicateEmail,
    DuplicateInvoiceNumber,
    EmailInUse,
    EmailTaken,
)
from invoicing.models.customers import CustomerCreate, CustomerUpdate
from invoicing.models.invoices import InvoiceCreate, InvoiceItemIn, InvoiceUpdate
from invoicing.repositories.customers import CustomerRepository
from invoicing.repositories.invoices import InvoiceRepository
from invoicing.repositories.users import UserRepository


def _customer(email: str = "contact@acme.com") -> CustomerCreate:
    return CustomerCreate(name="Acme Corporation", email=email)


def _invoice(customer_id: str, number: str = "INV-2024-001") -> InvoiceCreate:
    return InvoiceCreate(
        customer_id=customer_id,
        number=number,
        issue_date=date(2024, 1, 15),
        due_date=date(2024, 2, 15),
        total_amount=Decimal("500"),
        items=[
            InvoiceItemIn(
                description="Hosting & Maintenance",
                quantity=Decimal("1"),
                unit_price=Decimal("500"),
                total=Decimal("500"),
            )
        ],
    )


class TestCustomerRepositoryConstraints:
    """Unique email enforced by storage, without the service pre-check."""

    def test_create_duplicate_email(self, engine: Engine):
        repo = CustomerRepository(engine)
        repo.create(_customer())

        with pytest.raises(DuplicateEmail):
            repo.create(_customer())

        assert len(repo.find_all()) == 1

    def test_update_to_taken_email(self, engine: Engine):
        repo = CustomerRepository(engine)
        repo.create(_customer())
        other = repo.create(_customer("info@techsolutions.com"))

        with pytest.raises(EmailInUse):
            repo.update(other.id, CustomerUpdate(email="contact@acme.com"))

        assert repo.find_by_id(other.id).email == "info@techsolutions.com"


class TestInvoiceRepositoryConstraints:
    """Unique number and customer foreign key enforced by storage."""

    def test_create_duplicate_number(self, engine: Engine):
        customer = CustomerRepository(engine).create(_customer())
        repo = InvoiceRepository(engine)
        repo.create(_invoice(customer.id))

        with pytest.raises(DuplicateInvoiceNumber):
            repo.create(_invoice(customer.id))

        invoices = repo.find_all()
        assert len(invoices) == 1
        assert len(invoices[0].items) == 1

    def test_update_to_taken_number(self, engine: Engine):
        customer = CustomerRepository(engine).create(_customer())
        repo = InvoiceRepository(engine)
        repo.create(_invoice(customer.id, "INV-A"))
        other = repo.create(_invoice(customer.id, "INV-B"))

        with pytest.raises(DuplicateInvoiceNumber):
            repo.update(other.id, InvoiceUpdate(number="INV-A"))

    def test_create_for_missing_customer(self, engine: Engine):
        repo = InvoiceRepository(engine)

        with pytest.raises(CustomerNotFound):
            repo.create(_invoice("no-such-customer"))

        assert repo.find_all() == []

    def test_update_to_missing_customer(self, engine: Engine):
        customer = CustomerRepository(engine).create(_customer())
        repo = InvoiceRepository(engine)
        invoice = repo.create(_invoice(customer.id))

        with pytest.raises(CustomerNotFound):
            repo.update(invoice.id, InvoiceUpdate(customer_id="no-such-customer"))

        assert repo.find_by_id(invoice.id).customer_id == customer.id


class TestUserRepositoryConstraints:
    def test_create_duplicate_email(self, engine: Engine):
        repo = UserRepository(engine)
        repo.create("admin@example.com", "hash-1", "Admin User")

        with pytest.raises(EmailTaken):
            repo.create("admin@example.com", "hash-2", "Impostor")

        assert repo.find_by_email("admin@example.com").name == "Admin User"
