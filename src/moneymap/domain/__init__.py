"""Domain records, errors and repository protocols."""

from .errors import GoalUnreachableError, InvalidInputError, MetricsError, UnpayableDebtError
from .records import (
    AccountCategory,
    AccountRecord,
    BillFrequency,
    BillRecord,
    BillStatus,
    BudgetRecord,
    DebtRecord,
    PayFrequency,
    SavingsGoalRecord,
    TransactionRecord,
    TransactionType,
)

__all__ = [
    "AccountCategory",
    "AccountRecord",
    "BillFrequency",
    "BillRecord",
    "BillStatus",
    "BudgetRecord",
    "DebtRecord",
    "GoalUnreachableError",
    "InvalidInputError",
    "MetricsError",
    "PayFrequency",
    "SavingsGoalRecord",
    "TransactionRecord",
    "TransactionType",
    "UnpayableDebtError",
]
