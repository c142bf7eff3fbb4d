"""Application sorting – SortComparator.

Values are compared by type, never by their string form, so ``10`` sorts
after ``9``.  Keys of different types are ordered by type rank (numbers,
then dates/times, then text, then anything else) to keep the order total.
Absent values always sort after present ones, whatever the direction.
"""
from __future__ import annotations

import datetime as dt
import functools
import math
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Sequence, TypeVar

from listquery.application.filtering.coercion import as_epoch_ms
from listquery.application.sorting.sort import SortSpec
from listquery.kernel.records import MISSING, resolve_field

T = TypeVar("T")

_NUMBER, _TEMPORAL, _TEXT, _OTHER = range(4)

SortKey = tuple[int, Any] | None


def sort_key(value: Any) -> SortKey:
    """Typed, comparable key for one field value; ``None`` means absent."""
    if value is MISSING or value is None:
        return None
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return (_NUMBER, int(value))
    if isinstance(value, float):
        return None if math.isnan(value) else (_NUMBER, value)
    if isinstance(value, Decimal):
        return None if value.is_nan() else (_NUMBER, value)
    if isinstance(value, int):
        return (_NUMBER, value)
    if isinstance(value, (dt.datetime, dt.date)):
        return (_TEMPORAL, as_epoch_ms(value))
    if isinstance(value, str):
        return (_TEXT, value)
    return (_OTHER, 0)


def _cmp(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


class SortComparator:
    """Multi-key comparator plus the stable ordering built on it."""

    def compare(self, a: Any, b: Any, spec: SortSpec) -> int:
        return self._compare_keys(self._keys(a, spec), self._keys(b, spec), spec)

    def sort(
        self,
        items: Sequence[T],
        spec: SortSpec,
        *,
        record: Callable[[T], Any] | None = None,
    ) -> list[T]:
        """Stable sort of *items*; *record* extracts the record from each item."""
        if not spec.fields:
            return list(items)
        extract = record or (lambda item: item)
        decorated = [(self._keys(extract(item), spec), item) for item in items]
        ordering = functools.cmp_to_key(
            lambda x, y: self._compare_keys(x[0], y[0], spec)
        )
        return [item for _, item in sorted(decorated, key=ordering)]

    def order(
        self,
        items: Sequence[T],
        spec: SortSpec | None,
        *,
        record: Callable[[T], Any] | None = None,
        relevance: Callable[[T], float] | None = None,
    ) -> list[T]:
        """Explicit sort when given, else descending relevance, else input order."""
        if spec is not None and spec.fields:
            return self.sort(items, spec, record=record)
        if relevance is not None:
            return sorted(items, key=lambda item: -relevance(item))
        return list(items)

    @staticmethod
    def _keys(record: Any, spec: SortSpec) -> tuple[SortKey, ...]:
        return tuple(sort_key(resolve_field(record, sf.field)) for sf in spec.fields)

    @staticmethod
    def _compare_keys(left: tuple[SortKey, ...], right: tuple[SortKey, ...], spec: SortSpec) -> int:
        for sf, ka, kb in zip(spec.fields, left, right):
            if ka is None and kb is None:
                continue
            if ka is None:
                return 1
            if kb is None:
                return -1
            result = _cmp(ka, kb)
            if result:
                return -result if sf.descending else result
        return 0


__all__ = ["SortComparator", "sort_key"]
