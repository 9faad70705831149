"""Calendar arithmetic with explicit rounding rules.

* Day differences round up to whole days (a bill due later today is 0 days
  away, one due at any time tomorrow is 1 day away).
* Savings-goal pacing uses a flat 30-day month on purpose, so a goal due in
  31 days has 2 months available.
* Payoff dates advance by calendar months, clamping the day to the month end.
"""

from __future__ import annotations

import calendar
import math
from datetime import date, datetime, time

DAYS_PER_FLAT_MONTH = 30
_SECONDS_PER_DAY = 86400


def _as_datetime(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def days_between(start: date, end: date) -> int:
    """Whole days from *start* to *end*, rounded up; negative when *end* is earlier."""

    if not isinstance(start, datetime) and not isinstance(end, datetime):
        return (end - start).days
    delta = _as_datetime(end) - _as_datetime(start)
    return math.ceil(delta.total_seconds() / _SECONDS_PER_DAY)


def is_before(value: date, reference: date) -> bool:
    """Compare dates and datetimes alike (a plain date means midnight)."""

    return _as_datetime(value) < _as_datetime(reference)


def flat_months(days: int) -> int:
    """Ceiling of ``days / 30``."""

    return -(-days // DAYS_PER_FLAT_MONTH)


def max_month_offset(value: date) -> int:
    """Largest month count :func:`add_months` can move *value* before ``date.max``."""

    return (date.max.year - value.year) * 12 + (date.max.month - value.month)


def add_months(value: date, months: int) -> date:
    """Move *value* forward by calendar months, clamping to the last day."""

    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def month_bounds(value: date) -> tuple[date, date]:
    """Return ``(first day of month, first day of next month)`` for *value*."""

    start = date(value.year, value.month, 1)
    return start, add_months(start, 1)


__all__ = [
    "DAYS_PER_FLAT_MONTH",
    "add_months",
    "days_between",
    "flat_months",
    "is_before",
    "max_month_offset",
    "month_bounds",
]
