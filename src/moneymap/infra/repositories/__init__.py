"""Concrete repository implementations using SQLModel."""

from .account import SQLModelAccountRepository
from .bill import SQLModelBillRepository
from .budget import SQLModelBudgetRepository
from .debt import SQLModelDebtRepository
from .savings_goal import SQLModelSavingsGoalRepository
from .transaction import SQLModelTransactionRepository

__all__ = [
    "SQLModelAccountRepository",
    "SQLModelBillRepository",
    "SQLModelBudgetRepository",
    "SQLModelDebtRepository",
    "SQLModelSavingsGoalRepository",
    "SQLModelTransactionRepository",
]
