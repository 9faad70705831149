"""SQLModel implementation of Transaction repository."""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from sqlmodel import Session, select

from ...domain.records import TransactionRecord
from ...models.transaction import Transaction


class SQLModelTransactionRepository:
    """SQLModel-based transaction repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def list_for_user(
        self,
        user_id: int,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> list[TransactionRecord]:
        """List transactions in ``[start, end)``, newest first."""
        with self.session_factory() as session:
            statement = select(Transaction).where(Transaction.user_id == user_id)
            if start is not None:
                statement = statement.where(Transaction.occurred_on >= start)
            if end is not None:
                statement = statement.where(Transaction.occurred_on < end)
            statement = statement.order_by(
                Transaction.occurred_on.desc(), Transaction.id.desc()  # type: ignore
            )
            return [row.to_record() for row in session.exec(statement).all()]

    def create(self, transaction: Transaction, *, user_id: int) -> Transaction:
        with self.session_factory() as session:
            transaction.user_id = user_id
            session.add(transaction)
            session.commit()
            session.refresh(transaction)
            return transaction
