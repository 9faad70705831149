"""Repository protocol definitions for domain layer."""

from .account import AccountRepository
from .bill import BillRepository
from .budget import BudgetRepository
from .debt import DebtRepository
from .savings_goal import SavingsGoalRepository
from .transaction import TransactionRepository

__all__ = [
    "AccountRepository",
    "BillRepository",
    "BudgetRepository",
    "DebtRepository",
    "SavingsGoalRepository",
    "TransactionRepository",
]
