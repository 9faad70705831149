"""Pytest configuration and shared fixtures for MoneyMap tests.

This module provides database fixtures, record factories, and helper utilities
for testing the calculators, repositories, and summaries without touching the
real app database.
"""

from __future__ import annotations

import tempfile
from contextlib import contextmanager
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

from moneymap.domain.records import (
    AccountCategory,
    AccountRecord,
    BillRecord,
    DebtRecord,
    SavingsGoalRecord,
    TransactionRecord,
    TransactionType,
)
# Importing the package registers every table with SQLModel metadata
from moneymap.models import User

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine connected to test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    # Cleanup: close connections and delete database file
    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching ``infra.database.create_session_factory``."""

    @contextmanager
    def factory():
        session = Session(db_engine, expire_on_commit=False)
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    return factory


@pytest.fixture
def user(session_factory) -> User:
    """Create a default user for scoping data."""

    with session_factory() as session:
        row = User(username="tester")
        session.add(row)
        session.commit()
        session.refresh(row)
        return row


@pytest.fixture
def other_user(session_factory) -> User:
    with session_factory() as session:
        row = User(username="someone-else")
        session.add(row)
        session.commit()
        session.refresh(row)
        return row


# =============================================================================
# Record Factories
# =============================================================================


@pytest.fixture
def account_record():
    """Factory for ``AccountRecord`` values with sensible defaults."""

    def _create(
        balance="100.00",
        category: AccountCategory = AccountCategory.CHECKING,
        *,
        id: int = 1,
        name: str = "Checking",
        is_active: bool = True,
    ) -> AccountRecord:
        return AccountRecord(
            id=id,
            name=name,
            category=category,
            balance=Decimal(balance),
            is_active=is_active,
        )

    return _create


@pytest.fixture
def debt_record():
    def _create(
        balance="3200",
        annual_rate_pct="18.5",
        minimum_payment="150",
        *,
        principal="5000",
        id: int = 1,
        name: str = "Credit Card",
    ) -> DebtRecord:
        return DebtRecord(
            id=id,
            name=name,
            principal=Decimal(principal),
            balance=Decimal(balance),
            annual_rate_pct=Decimal(annual_rate_pct),
            minimum_payment=Decimal(minimum_payment),
        )

    return _create


@pytest.fixture
def bill_record():
    def _create(
        due_date: date,
        amount="50.00",
        *,
        is_paid: bool = False,
        id: int = 1,
        name: str = "Bill",
        category: str = "Utilities",
    ) -> BillRecord:
        return BillRecord(
            id=id,
            name=name,
            amount=Decimal(amount),
            due_date=due_date,
            is_paid=is_paid,
            category=category,
        )

    return _create


@pytest.fixture
def goal_record():
    def _create(
        target="10000",
        current="0",
        *,
        target_date: date,
        monthly_contribution="0",
        is_active: bool = True,
        id: int = 1,
        name: str = "Goal",
    ) -> SavingsGoalRecord:
        return SavingsGoalRecord(
            id=id,
            name=name,
            target_amount=Decimal(target),
            current_amount=Decimal(current),
            target_date=target_date,
            monthly_contribution=Decimal(monthly_contribution),
            is_active=is_active,
        )

    return _create


@pytest.fixture
def transaction_record():
    def _create(
        amount,
        occurred_on: date,
        *,
        type: TransactionType = TransactionType.EXPENSE,
        category: str = "Food & Dining",
        description: str = "Purchase",
        id: int = 1,
    ) -> TransactionRecord:
        return TransactionRecord(
            id=id,
            description=description,
            amount=Decimal(amount),
            category=category,
            type=type,
            occurred_on=occurred_on,
        )

    return _create


@pytest.fixture
def sample_transactions() -> list[TransactionRecord]:
    """The six ledger rows shown on the demo dashboard."""

    rows = [
        (1, date(2024, 1, 15), "Salary Deposit", "Income", "2250.00", TransactionType.INCOME),
        (2, date(2024, 1, 15), "Grocery Store", "Food & Dining", "-125.50", TransactionType.EXPENSE),
        (3, date(2024, 1, 14), "Gas Station", "Transportation", "-45.00", TransactionType.EXPENSE),
        (4, date(2024, 1, 14), "Electric Bill", "Utilities", "-89.50", TransactionType.EXPENSE),
        (5, date(2024, 1, 13), "Coffee Shop", "Food & Dining", "-4.75", TransactionType.EXPENSE),
        (6, date(2024, 1, 12), "Online Transfer", "Transfer", "-500.00", TransactionType.TRANSFER),
    ]
    return [
        TransactionRecord(
            id=txn_id,
            description=description,
            amount=Decimal(amount),
            category=category,
            type=kind,
            occurred_on=occurred_on,
        )
        for txn_id, occurred_on, description, category, amount, kind in rows
    ]


# =============================================================================
# Test Utilities
# =============================================================================


def assert_money_equal(actual, expected, *, places: int = 2):
    """Compare a Decimal amount against an expected value at cent precision."""

    quantum = Decimal(1).scaleb(-places)
    actual_q = Decimal(actual).quantize(quantum)
    expected_q = Decimal(str(expected)).quantize(quantum)
    assert actual_q == expected_q, f"Expected {expected_q}, got {actual_q}"
