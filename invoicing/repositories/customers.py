# invoicing/repositories/customers.py

from typing import List, Optional

from sqlalchemy import delete, insert, or_, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from invoicing.core.errors import DuplicateEmail, EmailInUse
from invoicing.db.engine import is_unique_violation
from invoicing.db.schema import customers, invoice_items, invoices
from invoicing.models.customers import Customer, CustomerCreate, CustomerUpdate
from invoicing.models.invoices import CustomerDetail
from invoicing.repositories.rows import (
    new_id,
    row_to_customer,
    row_to_invoice_summary,
    utcnow,
)


class CustomerRepository:
    def __init__(self, engine: Engine):
        self.engine = engine

    def find_all(self, search: Optional[str] = None) -> List[Customer]:
        """
        Return customers, newest first, optionally filtered by a
        case-insensitive substring of name, email or tax number.
        """
        stmt = select(customers).order_by(customers.c.created_at.desc())

        if search:
            stmt = stmt.where(
                or_(
                    customers.c.name.icontains(search, autoescape=True),
                    customers.c.email.icontains(search, autoescape=True),
                    customers.c.tax_number.icontains(search, autoescape=True),
                )
            )

        with self.engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()

        return [row_to_customer(row) for row in rows]

    def find_by_id(self, customer_id: str) -> Optional[CustomerDetail]:
        with self.engine.connect() as conn:
            row = conn.execute(
                select(customers).where(customers.c.id == customer_id)
            ).mappings().first()

            if row is None:
                return None

            invoice_rows = conn.execute(
                select(invoices)
                .where(invoices.c.customer_id == customer_id)
                .order_by(invoices.c.created_at.desc())
            ).mappings().all()

        return CustomerDetail(
            **row_to_customer(row).model_dump(),
            invoices=[row_to_invoice_summary(r) for r in invoice_rows],
        )

    def find_by_email(self, email: str) -> Optional[Customer]:
        with self.engine.connect() as conn:
            row = conn.execute(
                select(customers).where(customers.c.email == email)
            ).mappings().first()

        return row_to_customer(row) if row is not None else None

    def create(self, data: CustomerCreate) -> Customer:
        now = utcnow()
        values = {
            "id": new_id(),
            "name": data.name,
            "email": str(data.email),
            "tax_number": data.tax_number,
            "address": data.address,
            "created_at": now,
            "updated_at": now,
        }

        try:
            with self.engine.begin() as conn:
                conn.execute(insert(customers).values(**values))
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise DuplicateEmail() from exc
            raise

        return self._get(values["id"])

    def update(self, customer_id: str, data: CustomerUpdate) -> Customer:
        values = data.model_dump(exclude_unset=True)
        if "email" in values:
            values["email"] = str(values["email"])
        values["updated_at"] = utcnow()

        try:
            with self.engine.begin() as conn:
                conn.execute(
                    update(customers)
                    .where(customers.c.id == customer_id)
                    .values(**values)
                )
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise EmailInUse() from exc
            raise

        return self._get(customer_id)

    def delete(self, customer_id: str) -> bool:
        """
        Delete a customer together with its invoices and their items.

        Returns False when no customer had that id.
        """
        owned_invoices = select(invoices.c.id).where(invoices.c.customer_id == customer_id)

        with self.engine.begin() as conn:
            conn.execute(
                delete(invoice_items).where(invoice_items.c.invoice_id.in_(owned_invoices))
            )
            conn.execute(delete(invoices).where(invoices.c.customer_id == customer_id))
            result = conn.execute(delete(customers).where(customers.c.id == customer_id))

        return result.rowcount > 0

    def _get(self, customer_id: str) -> Customer:
        with self.engine.connect() as conn:
            row = conn.execute(
                select(customers).where(customers.c.id == customer_id)
            ).mappings().one()
        return row_to_customer(row)
