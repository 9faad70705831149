"""Savings goals."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel

from ..domain.records import SavingsGoalRecord


class SavingsGoal(SQLModel, table=True):
    __tablename__: ClassVar[str] = "savings_goal"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=80)
    category: str = Field(default="", max_length=64)
    target_amount: Decimal = Field(max_digits=14, decimal_places=2)
    current_amount: Decimal = Field(default=Decimal("0"), max_digits=14, decimal_places=2)
    target_date: date = Field(nullable=False)
    monthly_contribution: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    is_active: bool = Field(default=True, nullable=False)
    created_on: Optional[date] = Field(default=None)

    def to_record(self) -> SavingsGoalRecord:
        return SavingsGoalRecord(
            id=self.id or 0,
            name=self.name,
            target_amount=Decimal(self.target_amount),
            current_amount=Decimal(self.current_amount),
            target_date=self.target_date,
            monthly_contribution=Decimal(self.monthly_contribution),
            is_active=self.is_active,
            category=self.category,
        )
