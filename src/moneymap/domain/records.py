"""Immutable value records consumed by the financial metrics services.

Records are produced by the persistence layer (``Model.to_record()``) or built
directly in tests; the services never mutate them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class AccountCategory(str, Enum):
    CHECKING = "checking"
    SAVINGS = "savings"
    CREDIT = "credit"
    INVESTMENT = "investment"


class PayFrequency(str, Enum):
    WEEKLY = "weekly"
    BI_WEEKLY = "bi-weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class BillFrequency(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"
    TRANSFER = "transfer"


class BillStatus(str, Enum):
    PAID = "paid"
    PENDING = "pending"
    OVERDUE = "overdue"


@dataclass(frozen=True, slots=True)
class AccountRecord:
    """A bank, card or brokerage account with its signed balance.

    For credit accounts a negative balance is the amount owed and a positive
    balance is a credit float.
    """

    id: int
    name: str
    category: AccountCategory
    balance: Decimal
    is_active: bool = True
    last_synced: Optional[datetime] = None
    institution: str = ""


@dataclass(frozen=True, slots=True)
class DebtRecord:
    """An installment or revolving debt."""

    id: int
    name: str
    principal: Decimal
    balance: Decimal
    annual_rate_pct: Decimal
    minimum_payment: Decimal
    payoff_date: Optional[date] = None


@dataclass(frozen=True, slots=True)
class BudgetRecord:
    name: str
    monthly_income: Decimal
    pay_frequency: PayFrequency
    first_pay_date: date


@dataclass(frozen=True, slots=True)
class SavingsGoalRecord:
    id: int
    name: str
    target_amount: Decimal
    current_amount: Decimal
    target_date: date
    monthly_contribution: Decimal = Decimal("0")
    is_active: bool = True
    category: str = ""


@dataclass(frozen=True, slots=True)
class BillRecord:
    """A bill instance; paid/pending/overdue is derived, never stored."""

    id: int
    name: str
    amount: Decimal
    due_date: date
    is_paid: bool = False
    frequency: BillFrequency = BillFrequency.MONTHLY
    category: str = ""
    last_paid_date: Optional[date] = None
    is_recurring: bool = True
    payment_method: str = ""


@dataclass(frozen=True, slots=True)
class TransactionRecord:
    """A ledger entry; positive amounts are inflows."""

    id: int
    description: str
    amount: Decimal
    category: str
    type: TransactionType
    occurred_on: date
    is_recurring: bool = False
    account_id: Optional[int] = None


__all__ = [
    "AccountCategory",
    "AccountRecord",
    "BillFrequency",
    "BillRecord",
    "BillStatus",
    "BudgetRecord",
    "DebtRecord",
    "PayFrequency",
    "SavingsGoalRecord",
    "TransactionRecord",
    "TransactionType",
]
