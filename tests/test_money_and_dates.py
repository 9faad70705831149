"""Money coercion and calendar helpers."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from moneymap.domain.errors import InvalidInputError
from moneymap.services.dates import (
    add_months,
    days_between,
    is_before,
    max_month_offset,
    month_bounds,
)
from moneymap.services.money import format_currency, quantize_cents, sum_money, to_money


class TestMoney:
    def test_float_goes_through_str(self):
        assert to_money(0.1) == Decimal("0.1")
        assert sum_money([0.1, 0.2]) == Decimal("0.3")

    def test_int_and_str(self):
        assert to_money(5) == Decimal("5")
        assert to_money(" 12.50 ") == Decimal("12.50")

    @pytest.mark.parametrize("value", ["nan", "inf", float("inf"), "twelve", True, None, [1]])
    def test_rejects_non_amounts(self, value):
        with pytest.raises(InvalidInputError):
            to_money(value, field="amount")

    def test_half_up_rounding(self):
        assert quantize_cents(Decimal("2.345")) == Decimal("2.35")
        assert quantize_cents(Decimal("-2.345")) == Decimal("-2.35")

    def test_format_currency(self):
        assert format_currency(Decimal("1234.5")) == "$1,234.50"
        assert format_currency(Decimal("-1250.3")) == "-$1,250.30"
        assert format_currency(0) == "$0.00"


class TestDates:
    def test_days_between_dates(self):
        assert days_between(date(2024, 1, 15), date(2024, 1, 20)) == 5
        assert days_between(date(2024, 1, 15), date(2024, 1, 10)) == -5

    def test_days_between_rounds_up(self):
        assert days_between(datetime(2024, 1, 15, 12), datetime(2024, 1, 16, 0)) == 1
        assert days_between(datetime(2024, 1, 15, 12), datetime(2024, 1, 15, 12)) == 0

    def test_is_before_mixes_dates_and_datetimes(self):
        assert is_before(date(2024, 1, 15), datetime(2024, 1, 15, 9))
        assert not is_before(date(2024, 1, 15), date(2024, 1, 15))

    @pytest.mark.parametrize(
        ("start", "months", "expected"),
        [
            (date(2024, 1, 15), 27, date(2026, 4, 15)),
            (date(2024, 1, 31), 1, date(2024, 2, 29)),
            (date(2023, 1, 31), 1, date(2023, 2, 28)),
            (date(2024, 3, 31), -1, date(2024, 2, 29)),
            (date(2024, 12, 1), 1, date(2025, 1, 1)),
        ],
    )
    def test_add_months(self, start, months, expected):
        assert add_months(start, months) == expected

    def test_month_bounds(self):
        assert month_bounds(date(2024, 12, 17)) == (date(2024, 12, 1), date(2025, 1, 1))

    def test_max_month_offset_reaches_last_month(self):
        start = date(2026, 1, 1)
        offset = max_month_offset(start)

        assert offset == (9999 - 2026) * 12 + 11
        assert add_months(start, offset) == date(9999, 12, 1)
        assert max_month_offset(date(9999, 12, 31)) == 0
