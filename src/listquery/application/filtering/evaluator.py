"""Application filtering – FilterEvaluator.

Decides whether one record satisfies a :class:`FilterSpec`.  Every single
filter check yields a :class:`~listquery.kernel.types.Result`:
``Ok(bool)`` when it could be evaluated, ``Err(FilterError)`` when the
field is absent, the operand is malformed, or the operator does not apply
to the record's value.  An ``Err`` counts as "does not match"; nothing is
ever raised to the caller, so one bad filter never aborts a listing.
"""
from __future__ import annotations

import dataclasses
import re
from collections.abc import Iterable, Sequence, Set
from typing import Any, TypeVar

from listquery.application.filtering.coercion import (
    DAY_MS,
    as_bool,
    as_epoch_ms,
    as_number,
    as_text,
)
from listquery.application.filtering.filters import (
    BooleanFilter,
    BooleanOperator,
    DateFilter,
    DateOperator,
    Filter,
    FilterLogic,
    FilterSpec,
    ListFilter,
    ListOperator,
    NumberFilter,
    NumberOperator,
    RangeFilter,
    StringFilter,
    StringOperator,
)
from listquery.kernel.ddd import RecordSpecification, all_of, any_of, match_all
from listquery.kernel.errors import (
    FilterError,
    MalformedOperandError,
    MissingFieldError,
    UnsupportedOperatorError,
)
from listquery.kernel.records import MISSING, resolve_field
from listquery.kernel.types import Err, Ok, Result

R = TypeVar("R")

Check = Result[bool, FilterError]


@dataclasses.dataclass(frozen=True)
class FilterOutcome:
    """Verdict for one record plus what made it fail."""

    passed: bool
    unmatched: tuple[Filter, ...] = ()
    errors: tuple[FilterError, ...] = ()


class FilterRule(RecordSpecification[Any]):
    """A single filter exposed as a specification."""

    def __init__(self, evaluator: "FilterEvaluator", flt: Filter) -> None:
        self._evaluator = evaluator
        self.filter = flt

    def is_satisfied_by(self, candidate: Any) -> bool:
        return self._evaluator.check(candidate, self.filter).unwrap_or(False)

    def __repr__(self) -> str:  # pragma: no cover
        return f"FilterRule({self.filter!r})"


class FilterEvaluator:
    """Stateless evaluator of typed filters against arbitrary records."""

    def evaluate(self, record: Any, spec: FilterSpec | None) -> bool:
        return self.as_specification(spec).is_satisfied_by(record)

    def assess(self, record: Any, spec: FilterSpec | None) -> FilterOutcome:
        """Like :meth:`evaluate` but reports the failing filters and errors."""
        if spec is None or not spec.filters:
            return FilterOutcome(passed=True)
        unmatched: list[Filter] = []
        errors: list[FilterError] = []
        hits = 0
        for flt in spec.filters:
            result = self.check(record, flt)
            if result.is_err():
                errors.append(result.error)  # type: ignore[union-attr]
            elif result.value:  # type: ignore[union-attr]
                hits += 1
            else:
                unmatched.append(flt)
        if spec.logic == FilterLogic.OR:
            passed = hits > 0
        else:
            passed = hits == len(spec.filters)
        if passed:
            return FilterOutcome(passed=True)
        return FilterOutcome(passed=False, unmatched=tuple(unmatched), errors=tuple(errors))

    def as_specification(self, spec: FilterSpec | None) -> RecordSpecification[Any]:
        if spec is None or not spec.filters:
            return match_all()
        rules = [FilterRule(self, flt) for flt in spec.filters]
        return any_of(rules) if spec.logic == FilterLogic.OR else all_of(rules)

    def filter(self, records: Iterable[R], spec: FilterSpec | None) -> list[R]:
        predicate = self.as_specification(spec)
        return [record for record in records if predicate.is_satisfied_by(record)]

    # ------------------------------------------------------------------
    # Single-filter checks
    # ------------------------------------------------------------------

    def check(self, record: Any, flt: Filter) -> Check:
        value = resolve_field(record, flt.field)
        if value is MISSING:
            return Err(MissingFieldError(flt.field))
        match flt:
            case StringFilter():
                return self._check_string(value, flt)
            case NumberFilter():
                return self._check_number(value, flt)
            case BooleanFilter():
                return self._check_boolean(value, flt)
            case DateFilter():
                return self._check_date(value, flt)
            case ListFilter():
                return self._check_list(value, flt)
            case RangeFilter():
                return self._check_range(value, flt)
            case _:
                return Err(UnsupportedOperatorError(flt.field, type(flt).__name__, value))

    def _check_string(self, value: object, flt: StringFilter) -> Check:
        text = as_text(value)
        if text is None:
            return Err(UnsupportedOperatorError(flt.field, _name(flt.operator), value))
        operand = as_text(flt.value)
        if operand is None:
            return Err(MalformedOperandError(flt.field, "expected a string operand"))
        if flt.operator == StringOperator.MATCHES:
            try:
                pattern = re.compile(operand, 0 if flt.case_sensitive else re.IGNORECASE)
            except re.error as exc:
                return Err(MalformedOperandError(flt.field, f"invalid pattern: {exc}"))
            return Ok(pattern.search(text) is not None)
        if not flt.case_sensitive:
            text, operand = text.casefold(), operand.casefold()
        match flt.operator:
            case StringOperator.EQUALS:
                return Ok(text == operand)
            case StringOperator.NOT_EQUALS:
                return Ok(text != operand)
            case StringOperator.CONTAINS:
                return Ok(operand in text)
            case StringOperator.STARTS_WITH:
                return Ok(text.startswith(operand))
            case StringOperator.ENDS_WITH:
                return Ok(text.endswith(operand))
            case _:
                return Err(UnsupportedOperatorError(flt.field, _name(flt.operator), value))

    def _check_number(self, value: object, flt: NumberFilter) -> Check:
        number = as_number(value)
        if number is None:
            return Err(UnsupportedOperatorError(flt.field, _name(flt.operator), value))
        operand = as_number(flt.value)
        if operand is None:
            return Err(MalformedOperandError(flt.field, "expected a numeric operand"))
        match flt.operator:
            case NumberOperator.EQUALS:
                return Ok(number == operand)
            case NumberOperator.NOT_EQUALS:
                return Ok(number != operand)
            case NumberOperator.GREATER_THAN:
                return Ok(number > operand)
            case NumberOperator.GREATER_EQUAL:
                return Ok(number >= operand)
            case NumberOperator.LESS_THAN:
                return Ok(number < operand)
            case NumberOperator.LESS_EQUAL:
                return Ok(number <= operand)
            case NumberOperator.BETWEEN:
                high = as_number(flt.range_end)
                if high is None:
                    return Err(MalformedOperandError(flt.field, "BETWEEN requires a numeric range_end"))
                return Ok(operand <= number <= high)
            case _:
                return Err(UnsupportedOperatorError(flt.field, _name(flt.operator), value))

    def _check_boolean(self, value: object, flt: BooleanFilter) -> Check:
        flag = as_bool(value)
        if flag is None:
            return Err(UnsupportedOperatorError(flt.field, _name(flt.operator), value))
        operand = as_bool(flt.value)
        if operand is None:
            return Err(MalformedOperandError(flt.field, "expected a boolean operand"))
        if flt.operator != BooleanOperator.EQUALS:
            return Err(UnsupportedOperatorError(flt.field, _name(flt.operator), value))
        return Ok(flag is operand)

    def _check_date(self, value: object, flt: DateFilter) -> Check:
        moment = as_epoch_ms(value)
        if moment is None:
            return Err(UnsupportedOperatorError(flt.field, _name(flt.operator), value))
        start = as_epoch_ms(flt.value)
        if start is None:
            return Err(MalformedOperandError(flt.field, "expected a date/time operand"))
        match flt.operator:
            case DateOperator.BEFORE:
                return Ok(moment < start)
            case DateOperator.AFTER:
                return Ok(moment > start)
            case DateOperator.ON:
                return Ok(moment // DAY_MS == start // DAY_MS)
            case DateOperator.BETWEEN:
                end = as_epoch_ms(flt.range_end)
                if end is None:
                    return Err(MalformedOperandError(flt.field, "BETWEEN requires a date/time range_end"))
                return Ok(start <= moment <= end)
            case _:
                return Err(UnsupportedOperatorError(flt.field, _name(flt.operator), value))

    def _check_list(self, value: object, flt: ListFilter) -> Check:
        if isinstance(flt.values, (str, bytes)) or not isinstance(flt.values, (Sequence, Set)):
            return Err(MalformedOperandError(flt.field, "expected a list of values"))
        candidates = list(flt.values)
        if isinstance(value, (Sequence, Set)) and not isinstance(value, (str, bytes)):
            present = any(_member(item, candidates) for item in value)
        else:
            present = _member(value, candidates)
        match flt.operator:
            case ListOperator.IN:
                return Ok(present)
            case ListOperator.NOT_IN:
                return Ok(not present)
            case _:
                return Err(UnsupportedOperatorError(flt.field, _name(flt.operator), value))

    def _check_range(self, value: object, flt: RangeFilter) -> Check:
        number = as_number(value)
        if number is None:
            return Err(UnsupportedOperatorError(flt.field, "RANGE", value))
        if flt.low is None and flt.high is None:
            return Err(MalformedOperandError(flt.field, "range needs at least one bound"))
        low = None if flt.low is None else as_number(flt.low)
        high = None if flt.high is None else as_number(flt.high)
        if (flt.low is not None and low is None) or (flt.high is not None and high is None):
            return Err(MalformedOperandError(flt.field, "range bounds must be numeric"))
        if low is not None and not (number >= low if flt.include_low else number > low):
            return Ok(False)
        if high is not None and not (number <= high if flt.include_high else number < high):
            return Ok(False)
        return Ok(True)


def _name(operator: object) -> str:
    return str(getattr(operator, "value", operator))


def _member(item: object, candidates: list[object]) -> bool:
    text = as_text(item)
    for candidate in candidates:
        if item == candidate or (text is not None and text == as_text(candidate)):
            return True
    return False


__all__ = ["FilterEvaluator", "FilterOutcome", "FilterRule"]
