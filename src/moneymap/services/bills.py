"""Bill status classification.

A bill moves Pending -> Paid, or Pending -> Overdue -> Paid when paid late.
Rolling a recurring bill forward to its next due date belongs to whoever
stores bills, not to this module.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable

from ..domain.errors import InvalidInputError
from ..domain.records import BillRecord, BillStatus
from .dates import days_between, is_before

FILTER_KEYS = ("all", "paid", "unpaid", "overdue", "upcoming")


@dataclass(frozen=True, slots=True)
class BillClassification:
    status: BillStatus
    days_until_due: int


def classify(due_date: date, is_paid: bool, as_of: date) -> BillClassification:
    """Paid wins over everything; otherwise overdue once the due date has passed.

    A plain ``due_date`` covers the whole day, so a datetime ``as_of`` is
    compared by its calendar date.
    """

    if isinstance(as_of, datetime) and not isinstance(due_date, datetime):
        as_of = as_of.date()

    if is_paid:
        status = BillStatus.PAID
    elif is_before(due_date, as_of):
        status = BillStatus.OVERDUE
    else:
        status = BillStatus.PENDING
    return BillClassification(status=status, days_until_due=days_between(as_of, due_date))


def classify_bill(bill: BillRecord, *, as_of: date) -> BillClassification:
    return classify(bill.due_date, bill.is_paid, as_of)


def filter_bills(bills: Iterable[BillRecord], key: str, *, as_of: date) -> list[BillRecord]:
    """Apply one of the bill list tabs."""

    if key not in FILTER_KEYS:
        raise InvalidInputError("filter", f"unknown bill filter {key!r}")
    selected = []
    for bill in bills:
        status = classify_bill(bill, as_of=as_of).status
        if (
            key == "all"
            or (key == "paid" and status == BillStatus.PAID)
            or (key == "unpaid" and status != BillStatus.PAID)
            or (key == "overdue" and status == BillStatus.OVERDUE)
            or (key == "upcoming" and status == BillStatus.PENDING)
        ):
            selected.append(bill)
    return selected


__all__ = ["BillClassification", "FILTER_KEYS", "classify", "classify_bill", "filter_bills"]
