"""Debt payoff calculators.

Closed-form payoff estimates for a fixed monthly payment, a month-by-month
amortization schedule, and the snowball/avalanche orderings used for the
"which debt first" recommendation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from ..domain.errors import InvalidInputError, UnpayableDebtError
from ..domain.records import DebtRecord
from .dates import add_months, max_month_offset
from .money import HUNDRED, MoneyLike, ZERO, clamp_percent, quantize_cents, to_money

# Absorbs Decimal noise so an exact whole number of months is not rounded up.
_CEIL_TOLERANCE = Decimal("1e-12")


@dataclass(frozen=True, slots=True)
class PayoffProjection:
    months_to_payoff: int
    total_interest: Decimal
    payoff_date: date


@dataclass(frozen=True, slots=True)
class PaymentRow:
    """Represents a single projected payment."""

    due_date: date
    payment: Decimal
    interest: Decimal
    principal: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True, slots=True)
class DebtProjection:
    debt: DebtRecord
    percent_paid: Decimal
    payoff: PayoffProjection


def monthly_rate(annual_rate_pct: MoneyLike) -> Decimal:
    rate = to_money(annual_rate_pct, field="annual_rate_pct")
    if rate < 0:
        raise InvalidInputError("annual_rate_pct", "must not be negative")
    return rate / HUNDRED / 12


def _ceil_months(value: Decimal) -> int:
    return max(math.ceil(value - _CEIL_TOLERANCE), 0)


def _check_horizon(months: int, as_of: date) -> None:
    if months > max_month_offset(as_of):
        raise InvalidInputError(
            "monthly_payment", "too small to pay off the balance before year 9999"
        )


def compute_payoff(
    balance: MoneyLike,
    annual_rate_pct: MoneyLike,
    monthly_payment: MoneyLike,
    *,
    as_of: date,
) -> PayoffProjection:
    """Months, total interest and payoff date for a fixed monthly payment.

    Uses the standard amortization identity
    ``n = ln(P / (P - B*r)) / ln(1 + r)`` and falls back to ``B / P`` when the
    rate is zero. ``total_interest`` is the simple ``P*n - B`` estimate, so the
    partial final payment is counted in full.

    Raises:
        UnpayableDebtError: the payment does not exceed the monthly interest.
        InvalidInputError: negative balance/rate, a non-positive payment, or a
            payoff date past ``date.max``.
    """

    owed = to_money(balance, field="balance")
    if owed < 0:
        raise InvalidInputError("balance", "must not be negative")
    rate = monthly_rate(annual_rate_pct)
    if owed == 0:
        return PayoffProjection(months_to_payoff=0, total_interest=ZERO, payoff_date=as_of)

    payment = to_money(monthly_payment, field="monthly_payment")
    if payment <= 0:
        raise InvalidInputError("monthly_payment", "must be greater than zero")

    if rate == 0:
        months = _ceil_months(owed / payment)
    else:
        interest = owed * rate
        if payment <= interest:
            raise UnpayableDebtError(
                balance=owed,
                monthly_payment=payment,
                monthly_interest=quantize_cents(interest),
            )
        months = _ceil_months((payment / (payment - interest)).ln() / (1 + rate).ln())
    _check_horizon(months, as_of)

    total_interest = max(payment * months - owed, ZERO)
    return PayoffProjection(
        months_to_payoff=months,
        total_interest=quantize_cents(total_interest),
        payoff_date=add_months(as_of, months),
    )


def percent_paid(principal: MoneyLike, balance: MoneyLike) -> Decimal:
    """Share of the original principal already repaid, clamped to 0..100."""

    original = to_money(principal, field="principal")
    if original <= 0:
        raise InvalidInputError("principal", "must be greater than zero")
    owed = to_money(balance, field="balance")
    return quantize_cents(clamp_percent((original - owed) / original * HUNDRED))


def amortization_schedule(
    balance: MoneyLike,
    annual_rate_pct: MoneyLike,
    monthly_payment: MoneyLike,
    *,
    as_of: date,
    months: Optional[int] = None,
) -> list[PaymentRow]:
    """Cent-rounded month-by-month schedule.

    The first payment is due one month after *as_of*. When ``months`` is
    ``None`` the schedule runs until the balance reaches zero; otherwise at
    most ``months`` rows are returned.
    """

    remaining = quantize_cents(to_money(balance, field="balance"))
    if remaining < 0:
        raise InvalidInputError("balance", "must not be negative")
    rate = monthly_rate(annual_rate_pct)
    payment = quantize_cents(to_money(monthly_payment, field="monthly_payment"))
    if remaining > 0 and payment <= 0:
        raise InvalidInputError("monthly_payment", "must be greater than zero")
    if months is not None and months <= 0:
        return []
    if months is None and remaining > 0:
        compute_payoff(remaining, annual_rate_pct, payment, as_of=as_of)

    rows: list[PaymentRow] = []
    while remaining > 0 and (months is None or len(rows) < months):
        interest = quantize_cents(remaining * rate)
        if payment <= interest:
            raise UnpayableDebtError(
                balance=remaining, monthly_payment=payment, monthly_interest=interest
            )
        _check_horizon(len(rows) + 1, as_of)
        paid = min(payment, remaining + interest)
        principal = paid - interest
        remaining -= principal
        rows.append(
            PaymentRow(
                due_date=add_months(as_of, len(rows) + 1),
                payment=paid,
                interest=interest,
                principal=principal,
                remaining_balance=remaining,
            )
        )
    return rows


def weighted_average_rate(debts: Iterable[DebtRecord]) -> Decimal:
    """Balance-weighted APR; zero when nothing is owed."""

    total_balance = ZERO
    weighted = ZERO
    for debt in debts:
        owed = to_money(debt.balance)
        total_balance += owed
        weighted += owed * to_money(debt.annual_rate_pct)
    if total_balance == 0:
        return ZERO
    return quantize_cents(weighted / total_balance)


def payoff_order(debts: Iterable[DebtRecord], strategy: str = "avalanche") -> list[DebtRecord]:
    """Order open debts for extra payments.

    ``avalanche`` targets the highest APR first (least interest overall);
    ``snowball`` targets the smallest balance first.
    """

    open_debts = [debt for debt in debts if to_money(debt.balance) > 0]
    if strategy == "avalanche":
        return sorted(open_debts, key=lambda d: (-to_money(d.annual_rate_pct), to_money(d.balance)))
    if strategy == "snowball":
        return sorted(open_debts, key=lambda d: (to_money(d.balance), -to_money(d.annual_rate_pct)))
    raise InvalidInputError("strategy", f"unknown payoff strategy {strategy!r}")


def project_debt(debt: DebtRecord, *, as_of: date) -> DebtProjection:
    """Percent paid plus payoff projection at the debt's minimum payment."""

    return DebtProjection(
        debt=debt,
        percent_paid=percent_paid(debt.principal, debt.balance),
        payoff=compute_payoff(
            debt.balance, debt.annual_rate_pct, debt.minimum_payment, as_of=as_of
        ),
    )


__all__ = [
    "DebtProjection",
    "PaymentRow",
    "PayoffProjection",
    "amortization_schedule",
    "compute_payoff",
    "monthly_rate",
    "payoff_order",
    "percent_paid",
    "project_debt",
    "weighted_average_rate",
]
