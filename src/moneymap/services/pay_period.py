"""Pay-period budgeting: period income, spend-to-date and what is left."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Iterable

from ..domain.errors import InvalidInputError
from ..domain.records import BillRecord, PayFrequency, TransactionRecord, TransactionType
from .dates import add_months
from .money import HUNDRED, MoneyLike, ZERO, format_currency, quantize_cents, to_money

PERIODS_PER_YEAR: dict[PayFrequency, int] = {
    PayFrequency.WEEKLY: 52,
    PayFrequency.BI_WEEKLY: 26,
    PayFrequency.MONTHLY: 12,
    PayFrequency.QUARTERLY: 4,
    PayFrequency.YEARLY: 1,
}

_DAY_STEPS = {PayFrequency.WEEKLY: 7, PayFrequency.BI_WEEKLY: 14}
_MONTH_STEPS = {PayFrequency.MONTHLY: 1, PayFrequency.QUARTERLY: 3, PayFrequency.YEARLY: 12}


def coerce_frequency(value: PayFrequency | str) -> PayFrequency:
    try:
        return PayFrequency(value)
    except ValueError as exc:
        raise InvalidInputError("frequency", f"unknown pay frequency {value!r}") from exc


def periods_per_year(frequency: PayFrequency | str) -> int:
    return PERIODS_PER_YEAR[coerce_frequency(frequency)]


def period_income(monthly_income: MoneyLike, frequency: PayFrequency | str) -> Decimal:
    """Income for one pay period: the monthly figure annualised, then split.

    A bi-weekly budget on 4,500/month therefore gets 4,500 * 12 / 26 = 2,076.92
    per paycheck.
    """

    income = to_money(monthly_income, field="monthly_income")
    if income <= 0:
        raise InvalidInputError("monthly_income", "must be greater than zero")
    return quantize_cents(income * 12 / periods_per_year(frequency))


def _boundary(anchor: date, frequency: PayFrequency, index: int) -> date:
    if frequency in _DAY_STEPS:
        return anchor + timedelta(days=_DAY_STEPS[frequency] * index)
    return add_months(anchor, _MONTH_STEPS[frequency] * index)


def _as_date(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


@dataclass(frozen=True, slots=True)
class PayPeriod:
    """The ``index``-th pay period counted from the first pay date.

    A period includes its start date and excludes the next period's start;
    ``end`` is the last day that still belongs to it.
    """

    anchor: date
    frequency: PayFrequency
    index: int

    @property
    def start(self) -> date:
        return _boundary(self.anchor, self.frequency, self.index)

    @property
    def next_start(self) -> date:
        return _boundary(self.anchor, self.frequency, self.index + 1)

    @property
    def end(self) -> date:
        return self.next_start - timedelta(days=1)

    def contains(self, day: date) -> bool:
        return self.start <= _as_date(day) < self.next_start

    def next(self) -> "PayPeriod":
        return replace(self, index=self.index + 1)


def pay_period_for(
    first_pay_date: date, frequency: PayFrequency | str, as_of: date
) -> PayPeriod:
    """Return the pay period containing *as_of* (works before the first pay date too)."""

    freq = coerce_frequency(frequency)
    anchor = _as_date(first_pay_date)
    day = _as_date(as_of)

    if freq in _DAY_STEPS:
        index = (day - anchor).days // _DAY_STEPS[freq]
    else:
        months_apart = (day.year - anchor.year) * 12 + (day.month - anchor.month)
        index = months_apart // _MONTH_STEPS[freq]
        # Day-of-month clamping can put the estimate one period off either way.
        while _boundary(anchor, freq, index) > day:
            index -= 1
        while _boundary(anchor, freq, index + 1) <= day:
            index += 1
    return PayPeriod(anchor=anchor, frequency=freq, index=index)


@dataclass(frozen=True, slots=True)
class PeriodBudget:
    period_start: date
    period_end: date
    period_income: Decimal
    spent: Decimal
    remaining: Decimal
    utilization_pct: Decimal

    @property
    def is_overspent(self) -> bool:
        return self.remaining < 0

    @property
    def progress_pct(self) -> Decimal:
        """Utilization capped at 100 for progress bars."""
        return min(self.utilization_pct, HUNDRED)


def compute_period_budget(
    monthly_income: MoneyLike,
    frequency: PayFrequency | str,
    period_spend: MoneyLike,
    period_start: date,
    period_end: date,
) -> PeriodBudget:
    """Income, remaining and utilization for a single pay period.

    ``remaining`` goes negative when the period is overspent; that is reported,
    not rejected.
    """

    spent = to_money(period_spend, field="period_spend")
    if spent < 0:
        raise InvalidInputError("period_spend", "must not be negative")
    if _as_date(period_end) < _as_date(period_start):
        raise InvalidInputError("period_end", "must not be before period_start")

    income = period_income(monthly_income, frequency)
    return PeriodBudget(
        period_start=period_start,
        period_end=period_end,
        period_income=income,
        spent=spent,
        remaining=income - spent,
        utilization_pct=quantize_cents(spent / income * HUNDRED),
    )


def period_spend(transactions: Iterable[TransactionRecord], period: PayPeriod) -> Decimal:
    """Total expense outflow that falls inside *period*."""

    total = ZERO
    for txn in transactions:
        if txn.type != TransactionType.EXPENSE or not period.contains(txn.occurred_on):
            continue
        total += abs(to_money(txn.amount))
    return total


def projected_bills(bills: Iterable[BillRecord], period: PayPeriod) -> Decimal:
    """Unpaid bills falling due inside *period*."""

    return sum(
        (to_money(bill.amount) for bill in bills if not bill.is_paid and period.contains(bill.due_date)),
        ZERO,
    )


@dataclass(frozen=True, slots=True)
class BudgetAdvice:
    kind: str
    message: str


def budget_recommendation(remaining: MoneyLike, *, threshold: MoneyLike = Decimal("200")) -> BudgetAdvice:
    """Advice shown under the pay-period card."""

    left = to_money(remaining, field="remaining")
    floor = to_money(threshold, field="threshold")
    if left < 0:
        return BudgetAdvice(
            "over_budget",
            f"You're {format_currency(-left)} over budget this period. "
            "Consider reducing discretionary spending.",
        )
    if left == 0:
        return BudgetAdvice("balanced", "You've spent exactly this period's income.")
    if left < floor:
        return BudgetAdvice(
            "low_remaining",
            f"You have {format_currency(left)} remaining. "
            "Consider setting aside some for savings or next period's bills.",
        )
    return BudgetAdvice(
        "save_surplus",
        f"You have {format_currency(left)} remaining this period. "
        "Consider adding to your emergency fund or savings goals.",
    )


__all__ = [
    "BudgetAdvice",
    "PERIODS_PER_YEAR",
    "PayPeriod",
    "PeriodBudget",
    "budget_recommendation",
    "coerce_frequency",
    "compute_period_budget",
    "pay_period_for",
    "period_income",
    "period_spend",
    "periods_per_year",
    "projected_bills",
]
