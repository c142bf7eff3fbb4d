"""Specification pattern — composable boolean rules over records.

The filter evaluator compiles a :class:`~listquery.application.filtering.FilterSpec`
into one of these so callers can combine request filters with their own
scoping rules before handing records to the pipeline.
"""

from __future__ import annotations

import abc
from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


class RecordSpecification(abc.ABC, Generic[T]):
    """Abstract base for specifications — provides operator overloads.

    Example::

        class InStock(RecordSpecification[dict]):
            def is_satisfied_by(self, candidate: dict) -> bool:
                return candidate.get("stock", 0) > 0

        spec = InStock() & evaluator.as_specification(request_filters)
    """

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    def __call__(self, candidate: T) -> bool:
        return self.is_satisfied_by(candidate)

    def __and__(self, other: "RecordSpecification[T]") -> "AndSpecification[T]":
        return AndSpecification(self, other)

    def __or__(self, other: "RecordSpecification[T]") -> "OrSpecification[T]":
        return OrSpecification(self, other)

    def __invert__(self) -> "NotSpecification[T]":
        return NotSpecification(self)


class AndSpecification(RecordSpecification[T]):
    """Conjunction of two specifications."""

    def __init__(self, left: RecordSpecification[T], right: RecordSpecification[T]) -> None:
        self._left = left
        self._right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._left.is_satisfied_by(candidate) and self._right.is_satisfied_by(candidate)


class OrSpecification(RecordSpecification[T]):
    """Disjunction of two specifications."""

    def __init__(self, left: RecordSpecification[T], right: RecordSpecification[T]) -> None:
        self._left = left
        self._right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._left.is_satisfied_by(candidate) or self._right.is_satisfied_by(candidate)


class NotSpecification(RecordSpecification[T]):
    """Negation of a specification."""

    def __init__(self, spec: RecordSpecification[T]) -> None:
        self._spec = spec

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self._spec.is_satisfied_by(candidate)


class LambdaSpecification(RecordSpecification[T]):
    """Wraps a plain callable as a specification.

    Example::

        active = LambdaSpecification(lambda r: r["active"] is True, name="active")
    """

    def __init__(self, predicate: Callable[[T], bool], *, name: str = "") -> None:
        self._predicate = predicate
        self.name: str = name or getattr(predicate, "__name__", "<lambda>")

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._predicate(candidate)

    def __repr__(self) -> str:  # pragma: no cover
        return f"LambdaSpecification({self.name!r})"


def match_all() -> LambdaSpecification[object]:
    """Specification satisfied by every candidate."""
    return LambdaSpecification(lambda _: True, name="match_all")


def all_of(specs: Iterable[RecordSpecification[T]]) -> RecordSpecification[T]:
    """Fold *specs* with AND; an empty iterable matches everything."""
    combined: RecordSpecification[T] | None = None
    for spec in specs:
        combined = spec if combined is None else combined & spec
    return combined if combined is not None else match_all()  # type: ignore[return-value]


def any_of(specs: Iterable[RecordSpecification[T]]) -> RecordSpecification[T]:
    """Fold *specs* with OR; an empty iterable matches everything."""
    combined: RecordSpecification[T] | None = None
    for spec in specs:
        combined = spec if combined is None else combined | spec
    return combined if combined is not None else match_all()  # type: ignore[return-value]


__all__ = [
    "AndSpecification",
    "LambdaSpecification",
    "NotSpecification",
    "OrSpecification",
    "RecordSpecification",
    "all_of",
    "any_of",
    "match_all",
]
