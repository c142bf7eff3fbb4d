"""Unit tests for typed filters and the FilterEvaluator."""

from __future__ import annotations

from datetime import UTC, date, datetime
from decimal import Decimal
from enum import Enum

import pytest

from listquery.application.filtering import (
    BooleanFilter,
    DateFilter,
    DateOperator,
    FilterEvaluator,
    FilterLogic,
    FilterRule,
    FilterSpec,
    ListFilter,
    ListOperator,
    NumberFilter,
    NumberOperator,
    RangeFilter,
    StringFilter,
    StringOperator,
)
from listquery.application.filtering.coercion import as_bool, as_epoch_ms, as_number, as_text
from listquery.kernel.ddd import LambdaSpecification
from listquery.kernel.errors import MalformedOperandError, MissingFieldError, UnsupportedOperatorError


class Status(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


@pytest.fixture()
def evaluator() -> FilterEvaluator:
    return FilterEvaluator()


# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------


class TestCoercion:
    def test_as_text(self) -> None:
        assert as_text("a") == "a"
        assert as_text(Status.OPEN) == "open"
        assert as_text(1) is None

    def test_as_number(self) -> None:
        assert as_number(3) == 3
        assert as_number(2.5) == 2.5
        assert as_number(Decimal("1.5")) == Decimal("1.5")
        assert as_number(" 42 ") == 42
        assert as_number("1.25") == 1.25

    def test_as_number_rejects(self) -> None:
        assert as_number(True) is None
        assert as_number("1_000") is None
        assert as_number(float("nan")) is None
        assert as_number("abc") is None
        assert as_number(None) is None

    def test_as_epoch_ms(self) -> None:
        assert as_epoch_ms(datetime(1970, 1, 1, 0, 0, 1, tzinfo=UTC)) == 1000
        assert as_epoch_ms(datetime(1970, 1, 1, 0, 0, 1)) == 1000
        assert as_epoch_ms(date(1970, 1, 2)) == 86_400_000
        assert as_epoch_ms(5000) == 5000
        assert as_epoch_ms("1970-01-01T00:00:02+00:00") == 2000

    def test_as_epoch_ms_rejects(self) -> None:
        assert as_epoch_ms("not a date") is None
        assert as_epoch_ms(True) is None
        assert as_epoch_ms(float("inf")) is None

    def test_as_bool(self) -> None:
        assert as_bool(True) is True
        assert as_bool(0) is False
        assert as_bool("Yes") is True
        assert as_bool("false") is False
        assert as_bool("maybe") is None


# ---------------------------------------------------------------------------
# FilterSpec
# ---------------------------------------------------------------------------


class TestFilterSpec:
    def test_defaults_to_and(self) -> None:
        spec = FilterSpec.of(StringFilter("name", value="a"))
        assert spec.logic == FilterLogic.AND
        assert len(spec) == 1

    def test_any_of(self) -> None:
        spec = FilterSpec.any_of([StringFilter("name", value="a"), StringFilter("name", value="b")])
        assert spec.logic == FilterLogic.OR
        assert [f.value for f in spec] == ["a", "b"]  # type: ignore[attr-defined]

    def test_filters_are_stored_as_tuple(self) -> None:
        spec = FilterSpec(filters=[BooleanFilter("active")])  # type: ignore[arg-type]
        assert isinstance(spec.filters, tuple)


# ---------------------------------------------------------------------------
# String filters
# ---------------------------------------------------------------------------


class TestStringFilter:
    @pytest.mark.parametrize(
        ("operator", "operand", "expected"),
        [
            (StringOperator.EQUALS, "Banana", True),
            (StringOperator.EQUALS, "banana", False),
            (StringOperator.NOT_EQUALS, "Apple", True),
            (StringOperator.CONTAINS, "nan", True),
            (StringOperator.STARTS_WITH, "Ban", True),
            (StringOperator.STARTS_WITH, "nan", False),
            (StringOperator.ENDS_WITH, "ana", True),
            (StringOperator.MATCHES, r"^B.n", True),
            (StringOperator.MATCHES, r"\d", False),
        ],
    )
    def test_operators(
        self, evaluator: FilterEvaluator, operator: StringOperator, operand: str, expected: bool
    ) -> None:
        flt = StringFilter("name", operator, operand)
        assert evaluator.check({"name": "Banana"}, flt).unwrap() is expected

    def test_case_insensitive(self, evaluator: FilterEvaluator) -> None:
        flt = StringFilter("name", StringOperator.EQUALS, "BANANA", case_sensitive=False)
        assert evaluator.check({"name": "banana"}, flt).unwrap() is True

    def test_case_insensitive_regex(self, evaluator: FilterEvaluator) -> None:
        flt = StringFilter("name", StringOperator.MATCHES, "^ban", case_sensitive=False)
        assert evaluator.check({"name": "Banana"}, flt).unwrap() is True

    def test_enum_value_is_text(self, evaluator: FilterEvaluator) -> None:
        flt = StringFilter("status", value="open")
        assert evaluator.check({"status": Status.OPEN}, flt).unwrap() is True

    def test_non_text_value_is_unsupported(self, evaluator: FilterEvaluator) -> None:
        result = evaluator.check({"name": 10}, StringFilter("name", StringOperator.CONTAINS, "1"))
        assert result.is_err()
        assert isinstance(result.error, UnsupportedOperatorError)  # type: ignore[union-attr]
        assert result.error.operator == "CONTAINS"  # type: ignore[union-attr]

    def test_non_text_operand_is_malformed(self, evaluator: FilterEvaluator) -> None:
        result = evaluator.check({"name": "x"}, StringFilter("name", value=5))
        assert isinstance(result.error, MalformedOperandError)  # type: ignore[union-attr]

    def test_invalid_pattern_is_malformed(self, evaluator: FilterEvaluator) -> None:
        result = evaluator.check({"name": "x"}, StringFilter("name", StringOperator.MATCHES, "("))
        assert isinstance(result.error, MalformedOperandError)  # type: ignore[union-attr]
        assert "invalid pattern" in result.error.reason  # type: ignore[union-attr]


# ---------------------------------------------------------------------------
# Number filters
# ---------------------------------------------------------------------------


class TestNumberFilter:
    @pytest.mark.parametrize(
        ("operator", "operand", "expected"),
        [
            (NumberOperator.EQUALS, 10, True),
            (NumberOperator.NOT_EQUALS, 10, False),
            (NumberOperator.GREATER_THAN, 9, True),
            (NumberOperator.GREATER_THAN, 10, False),
            (NumberOperator.GREATER_EQUAL, 10, True),
            (NumberOperator.LESS_THAN, 10, False),
            (NumberOperator.LESS_EQUAL, 10, True),
        ],
    )
    def test_operators(
        self, evaluator: FilterEvaluator, operator: NumberOperator, operand: int, expected: bool
    ) -> None:
        assert evaluator.check({"price": 10}, NumberFilter("price", operator, operand)).unwrap() is expected

    def test_compares_numerically_not_lexically(self, evaluator: FilterEvaluator) -> None:
        flt = NumberFilter("price", NumberOperator.GREATER_THAN, 9)
        assert evaluator.check({"price": 10}, flt).unwrap() is True

    def test_numeric_string_value(self, evaluator: FilterEvaluator) -> None:
        flt = NumberFilter("price", NumberOperator.EQUALS, 5)
        assert evaluator.check({"price": "5"}, flt).unwrap() is True

    def test_underscore_numeral_is_not_a_number(self, evaluator: FilterEvaluator) -> None:
        result = evaluator.check({"price": "1_000"}, NumberFilter("price", NumberOperator.EQUALS, 1000))
        assert isinstance(result.error, UnsupportedOperatorError)  # type: ignore[union-attr]

    def test_between_is_inclusive(self, evaluator: FilterEvaluator) -> None:
        flt = NumberFilter("price", NumberOperator.BETWEEN, 10, 20)
        assert evaluator.check({"price": 10}, flt).unwrap() is True
        assert evaluator.check({"price": 20}, flt).unwrap() is True
        assert evaluator.check({"price": 21}, flt).unwrap() is False

    def test_between_without_upper_bound_is_malformed(self, evaluator: FilterEvaluator) -> None:
        result = evaluator.check({"price": 10}, NumberFilter("price", NumberOperator.BETWEEN, 1))
        assert isinstance(result.error, MalformedOperandError)  # type: ignore[union-attr]

    def test_boolean_value_is_unsupported(self, evaluator: FilterEvaluator) -> None:
        result = evaluator.check({"price": True}, NumberFilter("price", value=1))
        assert isinstance(result.error, UnsupportedOperatorError)  # type: ignore[union-attr]

    def test_missing_operand_is_malformed(self, evaluator: FilterEvaluator) -> None:
        result = evaluator.check({"price": 1}, NumberFilter("price"))
        assert isinstance(result.error, MalformedOperandError)  # type: ignore[union-attr]


# ---------------------------------------------------------------------------
# Boolean, date, list and range filters
# ---------------------------------------------------------------------------


class TestBooleanFilter:
    def test_equals(self, evaluator: FilterEvaluator) -> None:
        assert evaluator.check({"active": True}, BooleanFilter("active", True)).unwrap() is True
        assert evaluator.check({"active": False}, BooleanFilter("active", True)).unwrap() is False

    def test_string_operand(self, evaluator: FilterEvaluator) -> None:
        assert evaluator.check({"active": False}, BooleanFilter("active", "false")).unwrap() is True

    def test_non_boolean_value_is_unsupported(self, evaluator: FilterEvaluator) -> None:
        result = evaluator.check({"active": [1]}, BooleanFilter("active"))
        assert isinstance(result.error, UnsupportedOperatorError)  # type: ignore[union-attr]


class TestDateFilter:
    record = {"created_at": datetime(2024, 5, 10, 12, 0, tzinfo=UTC)}

    def test_before_and_after(self, evaluator: FilterEvaluator) -> None:
        after = DateFilter("created_at", DateOperator.AFTER, datetime(2024, 1, 1, tzinfo=UTC))
        before = DateFilter("created_at", DateOperator.BEFORE, "2024-01-01T00:00:00+00:00")
        assert evaluator.check(self.record, after).unwrap() is True
        assert evaluator.check(self.record, before).unwrap() is False

    def test_between_inclusive(self, evaluator: FilterEvaluator) -> None:
        flt = DateFilter(
            "created_at",
            DateOperator.BETWEEN,
            datetime(2024, 5, 10, 12, 0, tzinfo=UTC),
            date(2024, 6, 1),
        )
        assert evaluator.check(self.record, flt).unwrap() is True

    def test_on_same_day(self, evaluator: FilterEvaluator) -> None:
        flt = DateFilter("created_at", DateOperator.ON, date(2024, 5, 10))
        assert evaluator.check(self.record, flt).unwrap() is True
        other = DateFilter("created_at", DateOperator.ON, date(2024, 5, 11))
        assert evaluator.check(self.record, other).unwrap() is False

    def test_iso_string_value(self, evaluator: FilterEvaluator) -> None:
        flt = DateFilter("created_at", DateOperator.AFTER, date(2020, 1, 1))
        assert evaluator.check({"created_at": "2024-01-01"}, flt).unwrap() is True

    def test_between_without_end_is_malformed(self, evaluator: FilterEvaluator) -> None:
        flt = DateFilter("created_at", DateOperator.BETWEEN, date(2024, 1, 1))
        assert isinstance(evaluator.check(self.record, flt).error, MalformedOperandError)  # type: ignore[union-attr]

    def test_unparseable_value_is_unsupported(self, evaluator: FilterEvaluator) -> None:
        flt = DateFilter("created_at", DateOperator.AFTER, date(2024, 1, 1))
        result = evaluator.check({"created_at": "yesterday"}, flt)
        assert isinstance(result.error, UnsupportedOperatorError)  # type: ignore[union-attr]


class TestListFilter:
    def test_in(self, evaluator: FilterEvaluator) -> None:
        flt = ListFilter("status", ListOperator.IN, ("open", "pending"))
        assert evaluator.check({"status": "open"}, flt).unwrap() is True
        assert evaluator.check({"status": "closed"}, flt).unwrap() is False

    def test_not_in(self, evaluator: FilterEvaluator) -> None:
        flt = ListFilter("status", ListOperator.NOT_IN, ["closed"])
        assert evaluator.check({"status": "open"}, flt).unwrap() is True

    def test_enum_member_matches_text(self, evaluator: FilterEvaluator) -> None:
        flt = ListFilter("status", ListOperator.IN, ["open"])
        assert evaluator.check({"status": Status.OPEN}, flt).unwrap() is True

    def test_list_valued_field_overlaps(self, evaluator: FilterEvaluator) -> None:
        flt = ListFilter("tags", ListOperator.IN, ["red"])
        assert evaluator.check({"tags": ["blue", "red"]}, flt).unwrap() is True
        assert evaluator.check({"tags": ["blue"]}, flt).unwrap() is False

    def test_string_operand_is_malformed(self, evaluator: FilterEvaluator) -> None:
        flt = ListFilter("status", ListOperator.IN, "open")
        assert isinstance(evaluator.check({"status": "open"}, flt).error, MalformedOperandError)  # type: ignore[union-attr]


class TestRangeFilter:
    def test_closed_bounds(self, evaluator: FilterEvaluator) -> None:
        flt = RangeFilter("price", low=10, high=20)
        assert evaluator.check({"price": 10}, flt).unwrap() is True
        assert evaluator.check({"price": 20}, flt).unwrap() is True

    def test_open_bounds(self, evaluator: FilterEvaluator) -> None:
        flt = RangeFilter("price", low=10, high=20, include_low=False, include_high=False)
        assert evaluator.check({"price": 10}, flt).unwrap() is False
        assert evaluator.check({"price": 15}, flt).unwrap() is True
        assert evaluator.check({"price": 20}, flt).unwrap() is False

    def test_unbounded_side(self, evaluator: FilterEvaluator) -> None:
        assert evaluator.check({"price": 10_000}, RangeFilter("price", low=10)).unwrap() is True
        assert evaluator.check({"price": -5}, RangeFilter("price", high=0)).unwrap() is True

    def test_no_bounds_is_malformed(self, evaluator: FilterEvaluator) -> None:
        result = evaluator.check({"price": 1}, RangeFilter("price"))
        assert isinstance(result.error, MalformedOperandError)  # type: ignore[union-attr]

    def test_non_numeric_bound_is_malformed(self, evaluator: FilterEvaluator) -> None:
        result = evaluator.check({"price": 1}, RangeFilter("price", low="cheap"))
        assert isinstance(result.error, MalformedOperandError)  # type: ignore[union-attr]


# ---------------------------------------------------------------------------
# Combining filters
# ---------------------------------------------------------------------------


class TestEvaluate:
    def test_missing_field_is_an_error(self, evaluator: FilterEvaluator) -> None:
        result = evaluator.check({}, StringFilter("name", value="x"))
        assert isinstance(result.error, MissingFieldError)  # type: ignore[union-attr]

    def test_missing_field_excludes_record(self, evaluator: FilterEvaluator) -> None:
        assert evaluator.evaluate({}, FilterSpec.of(StringFilter("name", value="x"))) is False

    def test_empty_spec_passes(self, evaluator: FilterEvaluator) -> None:
        assert evaluator.evaluate({}, FilterSpec()) is True
        assert evaluator.evaluate({}, None) is True

    def test_and_logic(self, evaluator: FilterEvaluator) -> None:
        spec = FilterSpec.of(BooleanFilter("active", True), NumberFilter("price", NumberOperator.LESS_THAN, 5))
        assert evaluator.evaluate({"active": True, "price": 1}, spec) is True
        assert evaluator.evaluate({"active": True, "price": 9}, spec) is False

    def test_or_logic(self, evaluator: FilterEvaluator) -> None:
        spec = FilterSpec.of(
            BooleanFilter("active", True),
            NumberFilter("price", NumberOperator.LESS_THAN, 5),
            logic=FilterLogic.OR,
        )
        assert evaluator.evaluate({"active": False, "price": 1}, spec) is True
        assert evaluator.evaluate({"active": False, "price": 9}, spec) is False

    def test_or_logic_ignores_failing_filter_errors(self, evaluator: FilterEvaluator) -> None:
        spec = FilterSpec.any_of([StringFilter("missing", value="x"), BooleanFilter("active", True)])
        assert evaluator.evaluate({"active": True}, spec) is True

    def test_filter_keeps_order(self, evaluator: FilterEvaluator) -> None:
        records = [{"id": i, "active": i % 2 == 0} for i in range(6)]
        kept = evaluator.filter(records, FilterSpec.of(BooleanFilter("active", True)))
        assert [r["id"] for r in kept] == [0, 2, 4]


class TestAssess:
    def test_passing_record(self, evaluator: FilterEvaluator) -> None:
        outcome = evaluator.assess({"active": True}, FilterSpec.of(BooleanFilter("active", True)))
        assert outcome.passed
        assert outcome.unmatched == () and outcome.errors == ()

    def test_reports_unmatched_and_errors(self, evaluator: FilterEvaluator) -> None:
        active = BooleanFilter("active", True)
        spec = FilterSpec.of(active, StringFilter("name", value="x"))
        outcome = evaluator.assess({"active": False}, spec)
        assert not outcome.passed
        assert outcome.unmatched == (active,)
        assert [e.code for e in outcome.errors] == ["field_missing"]


class TestAsSpecification:
    def test_combines_with_caller_rules(self, evaluator: FilterEvaluator) -> None:
        in_stock = LambdaSpecification(lambda r: r["stock"] > 0)
        spec = in_stock & evaluator.as_specification(FilterSpec.of(BooleanFilter("active", True)))
        assert spec({"stock": 1, "active": True})
        assert not spec({"stock": 0, "active": True})

    def test_filter_rule_exposes_filter(self, evaluator: FilterEvaluator) -> None:
        flt = BooleanFilter("active", True)
        rule = FilterRule(evaluator, flt)
        assert rule.filter is flt
        assert not rule({})
