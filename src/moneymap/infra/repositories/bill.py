"""SQLModel implementation of Bill repository."""

from __future__ import annotations

from typing import Callable

from sqlmodel import Session, select

from ...domain.records import BillRecord
from ...models.bill import Bill


class SQLModelBillRepository:
    """SQLModel-based bill repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def list_for_user(self, user_id: int) -> list[BillRecord]:
        with self.session_factory() as session:
            statement = (
                select(Bill)
                .where(Bill.user_id == user_id)
                .order_by(Bill.due_date, Bill.name)  # type: ignore
            )
            return [row.to_record() for row in session.exec(statement).all()]

    def create(self, bill: Bill, *, user_id: int) -> Bill:
        with self.session_factory() as session:
            bill.user_id = user_id
            session.add(bill)
            session.commit()
            session.refresh(bill)
            return bill
