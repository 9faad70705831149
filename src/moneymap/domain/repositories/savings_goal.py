"""Savings goal repository protocol."""

from __future__ import annotations

from typing import Protocol

from ...domain.records import SavingsGoalRecord
from ...models.savings_goal import SavingsGoal


class SavingsGoalRepository(Protocol):
    def list_for_user(self, user_id: int) -> list[SavingsGoalRecord]:
        """List a user's goals, active and completed."""
        ...

    def create(self, goal: SavingsGoal, *, user_id: int) -> SavingsGoal:
        ...
