"""Budget settings: income and pay schedule."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel

from ..domain.records import BudgetRecord, PayFrequency


class Budget(SQLModel, table=True):
    """Monthly income and the pay schedule that slices it into periods."""

    __tablename__: ClassVar[str] = "budget"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", nullable=False, index=True)
    name: str = Field(default="My Budget", max_length=64)
    monthly_income: Decimal = Field(max_digits=12, decimal_places=2)
    pay_frequency: str = Field(default=PayFrequency.BI_WEEKLY.value, max_length=16)
    first_pay_date: date = Field(nullable=False)

    # TODO(@budgeting): enforce a single budget per user once editing lands.

    def to_record(self) -> BudgetRecord:
        return BudgetRecord(
            name=self.name,
            monthly_income=Decimal(self.monthly_income),
            pay_frequency=PayFrequency(self.pay_frequency),
            first_pay_date=self.first_pay_date,
        )
