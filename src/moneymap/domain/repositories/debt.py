"""Debt repository protocol."""

from __future__ import annotations

from typing import Protocol

from ...domain.records import DebtRecord
from ...models.debt import Debt


class DebtRepository(Protocol):
    def list_for_user(self, user_id: int) -> list[DebtRecord]:
        """List a user's debts ordered by name."""
        ...

    def create(self, debt: Debt, *, user_id: int) -> Debt:
        ...
