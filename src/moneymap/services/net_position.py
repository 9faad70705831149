"""Net worth from account balances."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from ..domain.records import AccountCategory, AccountRecord
from .money import ZERO, to_money


@dataclass(frozen=True, slots=True)
class NetPosition:
    total_assets: Decimal
    total_liabilities: Decimal
    net_worth: Decimal


def compute_net_position(accounts: Iterable[AccountRecord]) -> NetPosition:
    """Split balances into assets and liabilities.

    Any positive balance is an asset, including a credit card carrying a credit
    float. Only a negative credit balance is a liability; an overdrawn
    checking account counts toward neither side.
    """

    assets = ZERO
    liabilities = ZERO
    for account in accounts:
        balance = to_money(account.balance, field="balance")
        if balance > 0:
            assets += balance
        elif balance < 0 and account.category == AccountCategory.CREDIT:
            liabilities += -balance

    return NetPosition(
        total_assets=assets,
        total_liabilities=liabilities,
        net_worth=assets - liabilities,
    )


__all__ = ["NetPosition", "compute_net_position"]
