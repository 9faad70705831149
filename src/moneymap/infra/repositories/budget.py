"""SQLModel implementation of Budget repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...domain.records import BudgetRecord
from ...models.budget import Budget


class SQLModelBudgetRepository:
    """SQLModel-based budget repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get_for_user(self, user_id: int) -> Optional[BudgetRecord]:
        """Return the most recently created budget for the user."""
        with self.session_factory() as session:
            statement = (
                select(Budget)
                .where(Budget.user_id == user_id)
                .order_by(Budget.id.desc())  # type: ignore
            )
            row = session.exec(statement).first()
            return row.to_record() if row else None

    def create(self, budget: Budget, *, user_id: int) -> Budget:
        with self.session_factory() as session:
            budget.user_id = user_id
            session.add(budget)
            session.commit()
            session.refresh(budget)
            return budget
