"""Account repository protocol."""

from __future__ import annotations

from typing import Protocol

from ...domain.records import AccountRecord
from ...models.account import Account


class AccountRepository(Protocol):
    """Read accounts for a user; writes exist only for seeding."""

    def list_for_user(self, user_id: int) -> list[AccountRecord]:
        """List a user's accounts ordered by name."""
        ...

    def create(self, account: Account, *, user_id: int) -> Account:
        ...
