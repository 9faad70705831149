"""Debt entities."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel

from ..domain.records import DebtRecord


class Debt(SQLModel, table=True):
    """Installment or revolving debt tracked against its original principal."""

    __tablename__: ClassVar[str] = "debt"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=80, index=True)
    principal: Decimal = Field(max_digits=14, decimal_places=2)
    balance: Decimal = Field(max_digits=14, decimal_places=2)
    interest_rate: Decimal = Field(default=Decimal("0"), max_digits=6, decimal_places=3)
    minimum_payment: Decimal = Field(max_digits=12, decimal_places=2)
    payoff_date: Optional[date] = Field(default=None)

    def to_record(self) -> DebtRecord:
        return DebtRecord(
            id=self.id or 0,
            name=self.name,
            principal=Decimal(self.principal),
            balance=Decimal(self.balance),
            annual_rate_pct=Decimal(self.interest_rate),
            minimum_payment=Decimal(self.minimum_payment),
            payoff_date=self.payoff_date,
        )
