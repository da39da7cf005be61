from datetime import date, datetime
from decimal import Decimal

import pytest

from invoicing.pdf.formatting import fmt_date, fmt_money, fmt_qty


class TestFmtMoney:
    @pytest.mark.parametrize(
        "amount,expected",
        [
            (Decimal("1500"), "$1500.00"),
            (Decimal("25.5"), "$25.50"),
            (Decimal("2.345"), "$2.35"),
            (0, "$0.00"),
            ("1200.00", "$1200.00"),
        ],
    )
    def test_two_decimal_places(self, amount, expected):
        assert fmt_money(amount) == expected

    def test_no_thousands_separator(self):
        assert fmt_money(Decimal("1234567.8")) == "$1234567.80"

    def test_custom_symbol(self):
        assert fmt_money(Decimal("10"), symbol="EUR ") == "EUR 10.00"


class TestFmtQty:
    @pytest.mark.parametrize(
        "qty,expected",
        [
            (Decimal("40.00"), "40"),
            (Decimal("1"), "1"),
            (Decimal("2.50"), "2.5"),
            (Decimal("0.25"), "0.25"),
        ],
    )
    def test_trailing_zeros_dropped(self, qty, expected):
        assert fmt_qty(qty) == expected


class TestFmtDate:
    def test_short_month_day_year(self):
        assert fmt_date(date(2024, 1, 15)) == "Jan 15, 2024"

    def test_day_not_zero_padded(self):
        assert fmt_date(date(2024, 3, 5)) == "Mar 5, 2024"

    def test_accepts_datetime(self):
        assert fmt_date(datetime(2024, 12, 31, 23, 59)) == "Dec 31, 2024"
