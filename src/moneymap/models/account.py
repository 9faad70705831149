"""Bank, card and brokerage accounts."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel

from ..domain.records import AccountCategory, AccountRecord


class Account(SQLModel, table=True):
    __tablename__: ClassVar[str] = "account"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=128)
    category: str = Field(default=AccountCategory.CHECKING.value, max_length=16)
    balance: Decimal = Field(default=Decimal("0"), max_digits=14, decimal_places=2)
    institution: str = Field(default="", max_length=128)
    account_number: str = Field(default="", max_length=32, description="Masked, e.g. ****1234")
    is_active: bool = Field(default=True, nullable=False)
    last_synced: Optional[datetime] = Field(default=None)

    def to_record(self) -> AccountRecord:
        return AccountRecord(
            id=self.id or 0,
            name=self.name,
            category=AccountCategory(self.category),
            balance=Decimal(self.balance),
            is_active=self.is_active,
            last_synced=self.last_synced,
            institution=self.institution,
        )
