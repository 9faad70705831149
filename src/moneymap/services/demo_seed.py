"""Demo data seed.

Loads the sample accounts, debts, bills, goals, budget and transactions the
app ships with. Dates are laid out relative to ``today`` so the demo always
shows a mix of paid, pending and overdue bills.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from typing import Callable

from sqlmodel import Session, select

from ..logging_config import get_logger
from ..models import Account, Bill, Budget, Debt, SavingsGoal, Transaction, User
from .dates import add_months

SessionFactory = Callable[[], AbstractContextManager[Session]]

logger = get_logger("demo_seed")


@dataclass(slots=True)
class SeedSummary:
    user_id: int
    created: bool
    accounts: int = 0
    debts: int = 0
    bills: int = 0
    goals: int = 0
    transactions: int = 0


def _accounts(today: date) -> list[Account]:
    synced = datetime.combine(today, time(10, 30), tzinfo=timezone.utc)
    return [
        Account(name="Primary Checking", category="checking", balance=Decimal("2450.75"),
                institution="Chase Bank", account_number="****1234", last_synced=synced),
        Account(name="Emergency Savings", category="savings", balance=Decimal("8500.00"),
                institution="Chase Bank", account_number="****5678", last_synced=synced),
        Account(name="Travel Rewards Card", category="credit", balance=Decimal("-1250.30"),
                institution="Capital One", account_number="****9012", last_synced=synced),
        Account(name="Investment Account", category="investment", balance=Decimal("15750.25"),
                institution="Fidelity", account_number="****3456", last_synced=synced),
    ]


def _debts() -> list[Debt]:
    return [
        Debt(name="Credit Card", principal=Decimal("5000"), balance=Decimal("3200"),
             interest_rate=Decimal("18.5"), minimum_payment=Decimal("150")),
        Debt(name="Student Loan", principal=Decimal("15000"), balance=Decimal("9300"),
             interest_rate=Decimal("6.5"), minimum_payment=Decimal("200")),
    ]


def _bills(today: date) -> list[Bill]:
    def day(offset: int) -> date:
        return today + timedelta(days=offset)

    return [
        Bill(name="Rent", amount=Decimal("1200"), due_date=day(-14), category="Housing",
             payment_method="Bank Transfer", is_paid=True, last_paid_date=day(-14)),
        Bill(name="Electric Bill", amount=Decimal("89.50"), due_date=day(0), category="Utilities",
             payment_method="Credit Card"),
        Bill(name="Internet", amount=Decimal("65.00"), due_date=day(5), category="Utilities",
             payment_method="Auto Pay"),
        Bill(name="Car Insurance", amount=Decimal("125.00"), due_date=day(-5), category="Insurance",
             payment_method="Credit Card"),
        Bill(name="Phone Bill", amount=Decimal("45.00"), due_date=day(10), category="Utilities",
             payment_method="Auto Pay"),
        Bill(name="Gym Membership", amount=Decimal("29.99"), due_date=day(-3),
             category="Health & Fitness", payment_method="Credit Card", is_paid=True,
             last_paid_date=day(-3)),
    ]


def _goals(today: date) -> list[SavingsGoal]:
    return [
        SavingsGoal(name="Emergency Fund", category="Emergency", target_amount=Decimal("10000"),
                    current_amount=Decimal("6500"), target_date=add_months(today, 11),
                    monthly_contribution=Decimal("500")),
        SavingsGoal(name="Vacation to Europe", category="Travel", target_amount=Decimal("5000"),
                    current_amount=Decimal("2100"), target_date=add_months(today, 7),
                    monthly_contribution=Decimal("400")),
        SavingsGoal(name="New Car Down Payment", category="Transportation",
                    target_amount=Decimal("8000"), current_amount=Decimal("3200"),
                    target_date=add_months(today, 17), monthly_contribution=Decimal("300")),
        SavingsGoal(name="Home Renovation", category="Home", target_amount=Decimal("15000"),
                    current_amount=Decimal("15000"), target_date=add_months(today, -7),
                    monthly_contribution=Decimal("0"), is_active=False),
    ]


def _transactions(today: date) -> list[Transaction]:
    rows = [
        (0, "Salary Deposit", "Income", "2250.00", "income", True),
        (0, "Grocery Store", "Food & Dining", "-125.50", "expense", False),
        (-1, "Gas Station", "Transportation", "-45.00", "expense", False),
        (-1, "Electric Bill", "Utilities", "-89.50", "expense", True),
        (-2, "Coffee Shop", "Food & Dining", "-4.75", "expense", False),
        (-3, "Online Transfer", "Transfer", "-500.00", "transfer", False),
    ]
    return [
        Transaction(occurred_on=today + timedelta(days=offset), description=description,
                    category=category, amount=Decimal(amount), type=kind, is_recurring=recurring)
        for offset, description, category, amount, kind, recurring in rows
    ]


def run_demo_seed(session_factory: SessionFactory, *, username: str, today: date) -> SeedSummary:
    """Create the demo user and data; a second run leaves existing data alone."""

    with session_factory() as session:
        user = session.exec(select(User).where(User.username == username)).first()
        if user is not None:
            logger.info("Demo user already seeded", extra={"username": username})
            return SeedSummary(user_id=user.id, created=False)

        user = User(username=username)
        session.add(user)
        session.flush()

        accounts = _accounts(today)
        debts = _debts()
        bills = _bills(today)
        goals = _goals(today)
        transactions = _transactions(today)
        budget = Budget(
            name="My Budget",
            monthly_income=Decimal("4500"),
            pay_frequency="bi-weekly",
            first_pay_date=today - timedelta(days=3),
        )
        for row in [*accounts, *debts, *bills, *goals, *transactions, budget]:
            row.user_id = user.id
            session.add(row)
        session.commit()

        summary = SeedSummary(
            user_id=user.id,
            created=True,
            accounts=len(accounts),
            debts=len(debts),
            bills=len(bills),
            goals=len(goals),
            transactions=len(transactions),
        )
    logger.info("Demo data seeded", extra={"username": username, "user_id": summary.user_id})
    return summary


__all__ = ["SeedSummary", "run_demo_seed"]
