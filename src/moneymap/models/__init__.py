"""SQLModel table exports."""

from .account import Account
from .bill import Bill
from .budget import Budget
from .debt import Debt
from .savings_goal import SavingsGoal
from .transaction import Transaction
from .user import User

__all__ = [
    "Account",
    "Bill",
    "Budget",
    "Debt",
    "SavingsGoal",
    "Transaction",
    "User",
]
