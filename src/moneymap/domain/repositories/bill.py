"""Bill repository protocol."""

from __future__ import annotations

from typing import Protocol

from ...domain.records import BillRecord
from ...models.bill import Bill


class BillRepository(Protocol):
    def list_for_user(self, user_id: int) -> list[BillRecord]:
        """List a user's bills ordered by due date."""
        ...

    def create(self, bill: Bill, *, user_id: int) -> Bill:
        ...
