"""SQLModel implementation of Account repository."""

from __future__ import annotations

from typing import Callable

from sqlmodel import Session, select

from ...domain.records import AccountRecord
from ...models.account import Account


class SQLModelAccountRepository:
    """SQLModel-based account repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def list_for_user(self, user_id: int) -> list[AccountRecord]:
        with self.session_factory() as session:
            statement = (
                select(Account)
                .where(Account.user_id == user_id)
                .order_by(Account.name)  # type: ignore
            )
            return [row.to_record() for row in session.exec(statement).all()]

    def create(self, account: Account, *, user_id: int) -> Account:
        with self.session_factory() as session:
            account.user_id = user_id
            session.add(account)
            session.commit()
            session.refresh(account)
            return account
