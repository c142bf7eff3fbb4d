"""Application filtering – value coercion shared by filters and sorting.

Each helper returns ``None`` when the value cannot be read as the requested
type; the caller decides whether that is a malformed operand or an
operator that does not apply to the record's value.
"""
from __future__ import annotations

import math
from datetime import UTC, date, datetime, timedelta
from decimal import Decimal, InvalidOperation
from enum import Enum
from numbers import Real

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
DAY_MS = 86_400_000

_TRUE_WORDS = frozenset({"true", "1", "yes"})
_FALSE_WORDS = frozenset({"false", "0", "no"})

Number = int | float | Decimal


def as_text(value: object) -> str | None:
    if isinstance(value, Enum):
        value = value.value
    return value if isinstance(value, str) else None


def as_number(value: object) -> Number | None:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        return None if value.is_nan() else value
    if isinstance(value, Real):
        number = float(value)
        return None if math.isnan(number) else number
    if isinstance(value, str):
        text = value.strip()
        if "_" in text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = Decimal(text)
        except InvalidOperation:
            return None
        return None if number.is_nan() else float(number)
    return None


def as_epoch_ms(value: object) -> int | None:
    """Normalize a temporal value to UTC epoch milliseconds.

    Naive datetimes are read as UTC; bare dates as UTC midnight; integers
    are already epoch milliseconds.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        moment = value if value.tzinfo is not None else value.replace(tzinfo=UTC)
        return (moment - EPOCH) // timedelta(milliseconds=1)
    if isinstance(value, date):
        return as_epoch_ms(datetime(value.year, value.month, value.day, tzinfo=UTC))
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        try:
            return as_epoch_ms(datetime.fromisoformat(value.strip()))
        except ValueError:
            return None
    return None


def as_bool(value: object) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    return None


__all__ = ["DAY_MS", "EPOCH", "Number", "as_bool", "as_epoch_ms", "as_number", "as_text"]
