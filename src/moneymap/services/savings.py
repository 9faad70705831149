"""Savings goal pacing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..domain.errors import GoalUnreachableError, InvalidInputError
from ..domain.records import SavingsGoalRecord
from .dates import days_between, flat_months
from .money import HUNDRED, MoneyLike, ZERO, clamp_percent, quantize_cents, to_money


@dataclass(frozen=True, slots=True)
class GoalPacing:
    remaining: Decimal
    months_needed: int
    months_available: int
    on_track: bool
    required_monthly_contribution: Decimal


def compute_pacing(
    target: MoneyLike,
    current: MoneyLike,
    target_date: date,
    monthly_contribution: MoneyLike,
    as_of: date,
) -> GoalPacing:
    """Compare the configured contribution against the time left.

    ``months_available`` counts flat 30-day months, rounded up. The
    ``required_monthly_contribution`` is advisory: what it would take to hit
    the date regardless of the configured contribution.

    Raises:
        GoalUnreachableError: money is still owed to the goal but nothing is
            being contributed.
        InvalidInputError: non-positive target, negative current amount or
            negative contribution.
    """

    goal = to_money(target, field="target")
    if goal <= 0:
        raise InvalidInputError("target", "must be greater than zero")
    saved = to_money(current, field="current")
    if saved < 0:
        raise InvalidInputError("current", "must not be negative")
    contribution = to_money(monthly_contribution, field="monthly_contribution")
    if contribution < 0:
        raise InvalidInputError("monthly_contribution", "must not be negative")

    remaining = max(goal - saved, ZERO)
    months_available = flat_months(days_between(as_of, target_date))
    required = quantize_cents(remaining / max(months_available, 1))

    if remaining == 0:
        months_needed = 0
    elif contribution == 0:
        raise GoalUnreachableError(
            remaining=remaining,
            months_available=months_available,
            required_monthly_contribution=required,
        )
    else:
        months_needed = math.ceil(remaining / contribution)

    return GoalPacing(
        remaining=remaining,
        months_needed=months_needed,
        months_available=months_available,
        on_track=remaining == 0 or months_needed <= months_available,
        required_monthly_contribution=required,
    )


def goal_progress_pct(target: MoneyLike, current: MoneyLike) -> Decimal:
    goal = to_money(target, field="target")
    if goal <= 0:
        raise InvalidInputError("target", "must be greater than zero")
    return quantize_cents(clamp_percent(to_money(current, field="current") / goal * HUNDRED))


def is_completed(goal: SavingsGoalRecord) -> bool:
    """Over-target goals count as completed."""
    return to_money(goal.current_amount) >= to_money(goal.target_amount)


def pace_goal(goal: SavingsGoalRecord, *, as_of: date) -> GoalPacing:
    return compute_pacing(
        goal.target_amount,
        goal.current_amount,
        goal.target_date,
        goal.monthly_contribution,
        as_of,
    )


def average_time_to_goal(pacings: list[GoalPacing]) -> Optional[int]:
    """Mean months to fund each goal, rounded up; ``None`` without goals."""

    if not pacings:
        return None
    return math.ceil(sum(p.months_needed for p in pacings) / len(pacings))


def longest_time_to_goal(pacings: list[GoalPacing]) -> Optional[int]:
    """Months until the slowest goal is funded, ``None`` without goals."""

    if not pacings:
        return None
    return max(p.months_needed for p in pacings)


__all__ = [
    "GoalPacing",
    "average_time_to_goal",
    "compute_pacing",
    "goal_progress_pct",
    "is_completed",
    "longest_time_to_goal",
    "pace_goal",
]
