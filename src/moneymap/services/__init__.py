"""Service module exports."""

from . import (
    bills,
    dates,
    debts,
    demo_seed,
    money,
    net_position,
    pay_period,
    reports,
    savings,
    summaries,
    transactions,
)

__all__ = [
    "bills",
    "dates",
    "debts",
    "demo_seed",
    "money",
    "net_position",
    "pay_period",
    "reports",
    "savings",
    "summaries",
    "transactions",
]
