"""Typed failures raised by the financial metrics calculators.

Each error carries a short ``kind`` string so callers that isolate per-item
failures (see ``services.summaries``) can report them without inspecting the
exception class.
"""

from __future__ import annotations

from decimal import Decimal


class MetricsError(Exception):
    """Base class for every calculator failure."""

    kind = "metrics_error"


class InvalidInputError(MetricsError, ValueError):
    """A precondition was violated before any computation happened."""

    kind = "invalid_input"

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field


class UnpayableDebtError(MetricsError):
    """The monthly payment never covers the interest accruing on the balance."""

    kind = "unpayable_debt"

    def __init__(self, *, balance: Decimal, monthly_payment: Decimal, monthly_interest: Decimal):
        super().__init__(
            f"a payment of {monthly_payment} will never pay off a balance of {balance} "
            f"accruing {monthly_interest} interest per month"
        )
        self.balance = balance
        self.monthly_payment = monthly_payment
        self.monthly_interest = monthly_interest


class GoalUnreachableError(MetricsError):
    """A savings goal with money still to save but no monthly contribution."""

    kind = "unreachable_goal"

    def __init__(
        self,
        *,
        remaining: Decimal,
        months_available: int,
        required_monthly_contribution: Decimal,
    ):
        super().__init__(
            f"{remaining} left to save with no monthly contribution; "
            f"{required_monthly_contribution} per month would be needed"
        )
        self.remaining = remaining
        self.months_available = months_available
        self.required_monthly_contribution = required_monthly_contribution


__all__ = [
    "GoalUnreachableError",
    "InvalidInputError",
    "MetricsError",
    "UnpayableDebtError",
]
