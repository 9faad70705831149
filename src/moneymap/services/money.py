"""Money helpers: every amount is a ``Decimal`` with two-decimal semantics.

Sums are accumulated in ``Decimal`` and only rounded/formatted at the edge.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable

from ..domain.errors import InvalidInputError

CENT = Decimal("0.01")
ZERO = Decimal("0")
HUNDRED = Decimal("100")

MoneyLike = Decimal | int | float | str


def to_money(value: MoneyLike, *, field: str = "amount") -> Decimal:
    """Coerce *value* to ``Decimal``.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")`` rather than
    its binary expansion.
    """

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        raise InvalidInputError(field, "booleans are not amounts")
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, (float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise InvalidInputError(field, f"{value!r} is not a number") from exc
    else:
        raise InvalidInputError(field, f"unsupported type {type(value).__name__}")

    if not result.is_finite():
        raise InvalidInputError(field, "must be finite")
    return result


def quantize_cents(value: Decimal) -> Decimal:
    """Round half-up to whole cents."""

    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def sum_money(values: Iterable[MoneyLike]) -> Decimal:
    total = ZERO
    for value in values:
        total += to_money(value)
    return total


def percent(part: Decimal, whole: Decimal) -> Decimal:
    """Return ``part / whole * 100`` rounded to cents; *whole* must be non-zero."""

    return quantize_cents(part / whole * HUNDRED)


def clamp_percent(value: Decimal) -> Decimal:
    return min(max(value, ZERO), HUNDRED)


def format_currency(value: MoneyLike) -> str:
    """Render ``-$1,234.50`` style strings for display."""

    amount = quantize_cents(to_money(value))
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


__all__ = [
    "CENT",
    "HUNDRED",
    "ZERO",
    "clamp_percent",
    "format_currency",
    "percent",
    "quantize_cents",
    "sum_money",
    "to_money",
]
