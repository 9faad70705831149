"""Transaction aggregation used by the dashboard and transactions page."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from ..domain.records import TransactionRecord, TransactionType
from .money import HUNDRED, MoneyLike, ZERO, quantize_cents, to_money


@dataclass(frozen=True, slots=True)
class TransactionTotals:
    income: Decimal
    expenses: Decimal
    net: Decimal
    count: int


def summarize_transactions(transactions: Iterable[TransactionRecord]) -> TransactionTotals:
    """Income and expenses (as a positive figure); transfers only count toward ``count``."""

    income = ZERO
    expenses = ZERO
    count = 0
    for txn in transactions:
        count += 1
        amount = to_money(txn.amount)
        if txn.type == TransactionType.INCOME:
            income += amount
        elif txn.type == TransactionType.EXPENSE:
            expenses += abs(amount)
    return TransactionTotals(income=income, expenses=expenses, net=income - expenses, count=count)


def totals_by_category(
    transactions: Iterable[TransactionRecord],
    *,
    type: Optional[TransactionType] = None,
) -> dict[str, Decimal]:
    """Absolute amounts per category, largest first."""

    totals: dict[str, Decimal] = {}
    for txn in transactions:
        if type is not None and txn.type != type:
            continue
        key = txn.category or "Uncategorized"
        totals[key] = totals.get(key, ZERO) + abs(to_money(txn.amount))
    return dict(sorted(totals.items(), key=lambda item: (-item[1], item[0])))


def filter_transactions(
    transactions: Iterable[TransactionRecord],
    *,
    search: Optional[str] = None,
    category: Optional[str] = None,
    type: Optional[TransactionType | str] = None,
) -> list[TransactionRecord]:
    """Search matches description or category, case-insensitively."""

    needle = (search or "").strip().lower()
    wanted_type = TransactionType(type) if type else None
    matches = []
    for txn in transactions:
        if needle and needle not in txn.description.lower() and needle not in txn.category.lower():
            continue
        if category and txn.category != category:
            continue
        if wanted_type is not None and txn.type != wanted_type:
            continue
        matches.append(txn)
    return matches


def recent_transactions(transactions: Iterable[TransactionRecord], limit: int = 5) -> list[TransactionRecord]:
    ordered = sorted(transactions, key=lambda t: (t.occurred_on, t.id), reverse=True)
    return ordered[: max(limit, 0)]


def savings_rate(income: MoneyLike, expenses: MoneyLike) -> Optional[Decimal]:
    """Percent of income kept; ``None`` when there is no income to divide by."""

    earned = to_money(income, field="income")
    if earned <= 0:
        return None
    return quantize_cents((earned - to_money(expenses, field="expenses")) / earned * HUNDRED)


__all__ = [
    "TransactionTotals",
    "filter_transactions",
    "recent_transactions",
    "savings_rate",
    "summarize_transactions",
    "totals_by_category",
]
