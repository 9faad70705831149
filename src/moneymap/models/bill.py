"""Bills with due dates; status is computed, never stored."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel

from ..domain.records import BillFrequency, BillRecord


class Bill(SQLModel, table=True):
    __tablename__: ClassVar[str] = "bill"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=80)
    amount: Decimal = Field(max_digits=12, decimal_places=2)
    due_date: date = Field(nullable=False, index=True)
    frequency: str = Field(default=BillFrequency.MONTHLY.value, max_length=16)
    category: str = Field(default="", max_length=64)
    payment_method: str = Field(default="", max_length=64)
    is_paid: bool = Field(default=False, nullable=False)
    is_recurring: bool = Field(default=True, nullable=False)
    last_paid_date: Optional[date] = Field(default=None)

    def to_record(self) -> BillRecord:
        return BillRecord(
            id=self.id or 0,
            name=self.name,
            amount=Decimal(self.amount),
            due_date=self.due_date,
            is_paid=self.is_paid,
            frequency=BillFrequency(self.frequency),
            category=self.category,
            last_paid_date=self.last_paid_date,
            is_recurring=self.is_recurring,
            payment_method=self.payment_method,
        )
