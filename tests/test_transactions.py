"""Transaction aggregation tests."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from moneymap.domain.records import TransactionType
from moneymap.services.transactions import (
    filter_transactions,
    recent_transactions,
    savings_rate,
    summarize_transactions,
    totals_by_category,
)
from tests.conftest import assert_money_equal


def test_summarize_transactions(sample_transactions):
    """Transfers count toward the total rows but not income or expenses."""
    totals = summarize_transactions(sample_transactions)

    assert_money_equal(totals.income, "2250.00")
    assert_money_equal(totals.expenses, "264.75")
    assert_money_equal(totals.net, "1985.25")
    assert totals.count == 6


def test_expenses_by_category_largest_first(sample_transactions):
    totals = totals_by_category(sample_transactions, type=TransactionType.EXPENSE)

    assert list(totals) == ["Food & Dining", "Utilities", "Transportation"]
    assert totals["Food & Dining"] == Decimal("130.25")


def test_missing_category_is_grouped(transaction_record):
    totals = totals_by_category([transaction_record("-10", date(2024, 1, 1), category="")])
    assert totals == {"Uncategorized": Decimal("10")}


def test_filter_by_search_matches_description_and_category(sample_transactions):
    assert [t.description for t in filter_transactions(sample_transactions, search="COFFEE")] == [
        "Coffee Shop"
    ]
    assert len(filter_transactions(sample_transactions, search="dining")) == 2


def test_filter_by_category_and_type(sample_transactions):
    assert len(filter_transactions(sample_transactions, category="Utilities")) == 1
    assert len(filter_transactions(sample_transactions, type="transfer")) == 1
    assert len(filter_transactions(sample_transactions, type=TransactionType.EXPENSE)) == 4
    assert filter_transactions(sample_transactions) == sample_transactions


def test_recent_transactions_newest_first(sample_transactions):
    recent = recent_transactions(reversed(sample_transactions), limit=3)

    assert [t.id for t in recent] == [2, 1, 4]


def test_savings_rate():
    assert_money_equal(savings_rate(Decimal("4500"), Decimal("3200")), "28.89")
    assert savings_rate(Decimal("0"), Decimal("10")) is None


def test_negative_savings_rate_when_overspending():
    assert savings_rate(1000, 1500) == Decimal("-50.00")
