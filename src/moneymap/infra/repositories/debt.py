"""SQLModel implementation of Debt repository."""

from __future__ import annotations

from typing import Callable

from sqlmodel import Session, select

from ...domain.records import DebtRecord
from ...models.debt import Debt


class SQLModelDebtRepository:
    """SQLModel-based debt repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def list_for_user(self, user_id: int) -> list[DebtRecord]:
        with self.session_factory() as session:
            statement = (
                select(Debt)
                .where(Debt.user_id == user_id)
                .order_by(Debt.name)  # type: ignore
            )
            return [row.to_record() for row in session.exec(statement).all()]

    def create(self, debt: Debt, *, user_id: int) -> Debt:
        with self.session_factory() as session:
            debt.user_id = user_id
            session.add(debt)
            session.commit()
            session.refresh(debt)
            return debt
