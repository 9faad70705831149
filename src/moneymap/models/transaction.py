"""SQLModel definitions for ledger transactions."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel

from ..domain.records import TransactionRecord, TransactionType


class Transaction(SQLModel, table=True):
    """A single ledger transaction entered by hand or seeded."""

    __tablename__: ClassVar[str] = "transaction"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", nullable=False, index=True)
    occurred_on: date = Field(nullable=False, index=True)
    description: str = Field(default="", max_length=255)
    amount: Decimal = Field(
        max_digits=14, decimal_places=2, description="Positive for inflow, negative for outflow"
    )
    category: str = Field(default="", max_length=64)
    type: str = Field(default=TransactionType.EXPENSE.value, max_length=16)
    is_recurring: bool = Field(default=False, nullable=False)
    account_id: Optional[int] = Field(default=None, foreign_key="account.id")

    def to_record(self) -> TransactionRecord:
        return TransactionRecord(
            id=self.id or 0,
            description=self.description,
            amount=Decimal(self.amount),
            category=self.category,
            type=TransactionType(self.type),
            occurred_on=self.occurred_on,
            is_recurring=self.is_recurring,
            account_id=self.account_id,
        )
