# invoicing/services/validation.py
"""
Business invariants checked before any customer or invoice write.

Every function here is pure: callers fetch whatever lookups are needed and
pass them in. Each violation raises its own named error from
``invoicing.core.errors``; nothing is retried.

The uniqueness checks are a friendly early rejection only. The unique
constraints on ``customers.email`` and ``invoices.number`` remain the final
arbiter when two writers race.
"""

from decimal import Decimal
from typing import Iterable, Optional

from invoicing.core.errors import (
    CustomerNotFound,
    DuplicateEmail,
    DuplicateInvoiceNumber,
    EmailInUse,
    EmptyItems,
    InvoiceNotFound,
    TotalMismatch,
)
from invoicing.models.customers import Customer, CustomerCreate, CustomerUpdate
from invoicing.models.invoices import (
    Invoice,
    InvoiceCreate,
    InvoiceSummary,
    InvoiceUpdate,
)

# Absolute bound in currency units, not relative to the amount
TOTAL_TOLERANCE = Decimal("0.01")


def items_total(items: Iterable) -> Decimal:
    return sum((Decimal(item.total) for item in items), Decimal("0"))


def totals_match(items: Iterable, declared_total) -> bool:
    return abs(items_total(items) - Decimal(declared_total)) <= TOTAL_TOLERANCE


def _check_totals(items, declared_total) -> None:
    if not totals_match(items, declared_total):
        raise TotalMismatch(calculated=items_total(items), declared=Decimal(declared_total))


def validate_new_customer(
    candidate: CustomerCreate,
    existing_by_email: Optional[Customer],
) -> None:
    if existing_by_email is not None:
        raise DuplicateEmail()


def validate_customer_update(
    customer_id: str,
    candidate: CustomerUpdate,
    existing_by_id: Optional[Customer],
    existing_by_email: Optional[Customer],
) -> None:
    if existing_by_id is None:
        raise CustomerNotFound()
    if existing_by_email is not None and existing_by_email.id != customer_id:
        raise EmailInUse()


def validate_new_invoice(
    candidate: InvoiceCreate,
    customer_lookup: Optional[Customer],
    number_lookup: Optional[InvoiceSummary],
) -> None:
    """
    Checked in order: customer exists, number unused, at least one item,
    item totals add up to the declared total.
    """
    if customer_lookup is None:
        raise CustomerNotFound()
    if number_lookup is not None:
        raise DuplicateInvoiceNumber()
    if not candidate.items:
        raise EmptyItems()
    _check_totals(candidate.items, candidate.total_amount)


def validate_invoice_update(
    invoice_id: str,
    candidate: InvoiceUpdate,
    existing_invoice: Optional[Invoice],
    customer_lookup_if_changed: Optional[Customer],
    number_lookup_if_changed: Optional[InvoiceSummary],
) -> None:
    """
    Apply the creation rules to the fields present in a partial update.

    When only one of items / total is supplied, the other side of the
    comparison comes from the stored invoice so the sum always matches the
    total after a successful update. Status is written as given; no
    transition order is enforced.
    """
    if existing_invoice is None:
        raise InvoiceNotFound()

    supplied = candidate.model_fields_set

    if "customer_id" in supplied and customer_lookup_if_changed is None:
        raise CustomerNotFound()

    if (
        "number" in supplied
        and number_lookup_if_changed is not None
        and number_lookup_if_changed.id != invoice_id
    ):
        raise DuplicateInvoiceNumber()

    if "items" in supplied and not candidate.items:
        raise EmptyItems()

    if "items" in supplied or "total_amount" in supplied:
        items = candidate.items if "items" in supplied else existing_invoice.items
        total = (
            candidate.total_amount
            if "total_amount" in supplied
            else existing_invoice.total_amount
        )
        _check_totals(items, total)
