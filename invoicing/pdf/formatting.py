# invoicing/pdf/formatting.py
"""Value formatting for rendered invoices."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

CENTS = Decimal("0.01")


def to_money(amount: Any) -> Decimal:
    return Decimal(str(amount)).quantize(CENTS, rounding=ROUND_HALF_UP)


def fmt_money(amount: Any, symbol: str = "$") -> str:
    """Always exactly two decimal places, e.g. ``$1500.00``."""
    return f"{symbol}{to_money(amount)}"


def fmt_qty(qty: Any) -> str:
    value = Decimal(str(qty))
    if value == value.to_integral_value():
        return str(int(value))
    return format(value.normalize(), "f")


def fmt_date(value: date) -> str:
    """Format as 'Jan 15, 2024' (no zero padding on the day)."""
    return f"{value:%b} {value.day}, {value:%Y}"
