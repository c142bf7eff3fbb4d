"""Application filtering – typed filters, one class per operator family."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Iterable, Iterator


class FilterLogic(str, Enum):
    AND = "AND"
    OR = "OR"


class StringOperator(str, Enum):
    EQUALS = "EQUALS"
    NOT_EQUALS = "NOT_EQUALS"
    CONTAINS = "CONTAINS"
    STARTS_WITH = "STARTS_WITH"
    ENDS_WITH = "ENDS_WITH"
    MATCHES = "MATCHES"


class NumberOperator(str, Enum):
    EQUALS = "EQUALS"
    NOT_EQUALS = "NOT_EQUALS"
    GREATER_THAN = "GREATER_THAN"
    GREATER_EQUAL = "GREATER_EQUAL"
    LESS_THAN = "LESS_THAN"
    LESS_EQUAL = "LESS_EQUAL"
    BETWEEN = "BETWEEN"


class BooleanOperator(str, Enum):
    EQUALS = "EQUALS"


class DateOperator(str, Enum):
    BEFORE = "BEFORE"
    AFTER = "AFTER"
    BETWEEN = "BETWEEN"
    ON = "ON"


class ListOperator(str, Enum):
    IN = "IN"
    NOT_IN = "NOT_IN"


@dataclasses.dataclass(frozen=True)
class Filter:
    """Base of every typed filter: the (dotted) field it reads."""
    field: str


@dataclasses.dataclass(frozen=True)
class StringFilter(Filter):
    """Text comparison; case-sensitive unless ``case_sensitive=False``."""
    operator: StringOperator = StringOperator.EQUALS
    value: object = ""
    case_sensitive: bool = True


@dataclasses.dataclass(frozen=True)
class NumberFilter(Filter):
    """Typed numeric comparison; BETWEEN is inclusive of ``value`` and ``range_end``."""
    operator: NumberOperator = NumberOperator.EQUALS
    value: object = None
    range_end: object = None


@dataclasses.dataclass(frozen=True)
class BooleanFilter(Filter):
    value: object = True
    operator: BooleanOperator = BooleanOperator.EQUALS


@dataclasses.dataclass(frozen=True)
class DateFilter(Filter):
    """Date/time comparison on epoch milliseconds.

    ``value`` and ``range_end`` accept ``datetime``, ``date``, ISO-8601
    strings or epoch-millisecond integers.  ON matches the same UTC day.
    """
    operator: DateOperator = DateOperator.AFTER
    value: object = None
    range_end: object = None


@dataclasses.dataclass(frozen=True)
class ListFilter(Filter):
    """Membership test; a list-valued field matches when any element is listed."""
    operator: ListOperator = ListOperator.IN
    values: object = ()


@dataclasses.dataclass(frozen=True)
class RangeFilter(Filter):
    """Numeric range with independently open or closed bounds; ``None`` is unbounded."""
    low: object = None
    high: object = None
    include_low: bool = True
    include_high: bool = True


@dataclasses.dataclass(frozen=True)
class FilterSpec:
    """Ordered filters combined with ``logic`` (AND unless stated otherwise)."""

    filters: tuple[Filter, ...] = ()
    logic: FilterLogic = FilterLogic.AND

    def __post_init__(self) -> None:
        object.__setattr__(self, "filters", tuple(self.filters))

    @classmethod
    def of(cls, *filters: Filter, logic: FilterLogic = FilterLogic.AND) -> "FilterSpec":
        return cls(filters=filters, logic=logic)

    @classmethod
    def all_of(cls, filters: Iterable[Filter]) -> "FilterSpec":
        return cls(filters=tuple(filters), logic=FilterLogic.AND)

    @classmethod
    def any_of(cls, filters: Iterable[Filter]) -> "FilterSpec":
        return cls(filters=tuple(filters), logic=FilterLogic.OR)

    def __iter__(self) -> Iterator[Filter]:
        return iter(self.filters)

    def __len__(self) -> int:
        return len(self.filters)


__all__ = [
    "BooleanFilter",
    "BooleanOperator",
    "DateFilter",
    "DateOperator",
    "Filter",
    "FilterLogic",
    "FilterSpec",
    "ListFilter",
    "ListOperator",
    "NumberFilter",
    "NumberOperator",
    "RangeFilter",
    "StringFilter",
    "StringOperator",
]
