"""SQLModel implementation of SavingsGoal repository."""

from __future__ import annotations

from typing import Callable

from sqlmodel import Session, select

from ...domain.records import SavingsGoalRecord
from ...models.savings_goal import SavingsGoal


class SQLModelSavingsGoalRepository:
    """SQLModel-based savings goal repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def list_for_user(self, user_id: int) -> list[SavingsGoalRecord]:
        with self.session_factory() as session:
            statement = (
                select(SavingsGoal)
                .where(SavingsGoal.user_id == user_id)
                .order_by(SavingsGoal.target_date, SavingsGoal.name)  # type: ignore
            )
            return [row.to_record() for row in session.exec(statement).all()]

    def create(self, goal: SavingsGoal, *, user_id: int) -> SavingsGoal:
        with self.session_factory() as session:
            goal.user_id = user_id
            session.add(goal)
            session.commit()
            session.refresh(goal)
            return goal
