"""Bill status classification and filter tabs."""

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from moneymap.domain.errors import InvalidInputError
from moneymap.domain.records import BillStatus
from moneymap.services.bills import FILTER_KEYS, classify, classify_bill, filter_bills

TODAY = date(2024, 1, 15)


class TestClassify:
    def test_unpaid_past_due_is_overdue(self):
        result = classify(TODAY - timedelta(days=1), False, TODAY)

        assert result.status == BillStatus.OVERDUE
        assert result.days_until_due == -1

    def test_paid_wins_over_overdue(self):
        result = classify(TODAY - timedelta(days=1), True, TODAY)

        assert result.status == BillStatus.PAID
        assert result.days_until_due == -1

    def test_due_today_is_pending(self):
        result = classify(TODAY, False, TODAY)

        assert result.status == BillStatus.PENDING
        assert result.days_until_due == 0

    def test_future_bill_is_pending(self):
        result = classify(TODAY + timedelta(days=10), False, TODAY)

        assert result.status == BillStatus.PENDING
        assert result.days_until_due == 10

    def test_partial_days_round_up(self):
        """A bill due tomorrow is one day away at any time today."""
        result = classify(date(2024, 1, 16), False, datetime(2024, 1, 15, 18, 30))

        assert result.status == BillStatus.PENDING
        assert result.days_until_due == 1

    def test_due_today_is_pending_all_day(self):
        result = classify(date(2024, 1, 15), False, datetime(2024, 1, 15, 18, 30))

        assert result.status == BillStatus.PENDING
        assert result.days_until_due == 0

    def test_due_today_shows_under_upcoming_tab(self, bill_record):
        bill = bill_record(date(2024, 1, 15), name="Internet")
        as_of = datetime(2024, 1, 15, 23, 59)

        assert filter_bills([bill], "upcoming", as_of=as_of) == [bill]
        assert filter_bills([bill], "overdue", as_of=as_of) == []

    def test_classify_bill_record(self, bill_record):
        bill = bill_record(TODAY - timedelta(days=5), "125.00", name="Car Insurance")
        assert classify_bill(bill, as_of=TODAY).status == BillStatus.OVERDUE


class TestFilterBills:
    @pytest.fixture
    def bills(self, bill_record):
        return [
            bill_record(TODAY - timedelta(days=14), "1200", is_paid=True, id=1, name="Rent"),
            bill_record(TODAY, "89.50", id=2, name="Electric Bill"),
            bill_record(TODAY + timedelta(days=5), "65", id=3, name="Internet"),
            bill_record(TODAY - timedelta(days=5), "125", id=4, name="Car Insurance"),
        ]

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("all", ["Rent", "Electric Bill", "Internet", "Car Insurance"]),
            ("paid", ["Rent"]),
            ("unpaid", ["Electric Bill", "Internet", "Car Insurance"]),
            ("overdue", ["Car Insurance"]),
            ("upcoming", ["Electric Bill", "Internet"]),
        ],
    )
    def test_filter_tabs(self, bills, key, expected):
        assert [bill.name for bill in filter_bills(bills, key, as_of=TODAY)] == expected

    def test_every_tab_is_covered(self):
        assert FILTER_KEYS == ("all", "paid", "unpaid", "overdue", "upcoming")

    def test_unknown_filter(self, bills):
        with pytest.raises(InvalidInputError) as exc:
            filter_bills(bills, "late", as_of=TODAY)
        assert exc.value.field == "filter"
