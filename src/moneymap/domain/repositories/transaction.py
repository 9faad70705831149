"""Transaction repository protocol."""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from ...domain.records import TransactionRecord
from ...models.transaction import Transaction


class TransactionRepository(Protocol):
    def list_for_user(
        self,
        user_id: int,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> list[TransactionRecord]:
        """List transactions with ``start <= occurred_on < end``, newest first."""
        ...

    def create(self, transaction: Transaction, *, user_id: int) -> Transaction:
        ...
