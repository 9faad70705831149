"""Budget repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...domain.records import BudgetRecord
from ...models.budget import Budget


class BudgetRepository(Protocol):
    def get_for_user(self, user_id: int) -> Optional[BudgetRecord]:
        """Return the user's budget, or ``None`` if none is configured."""
        ...

    def create(self, budget: Budget, *, user_id: int) -> Budget:
        ...
