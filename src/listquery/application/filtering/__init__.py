"""Application filtering – typed filters and their evaluator."""
from listquery.application.filtering.evaluator import FilterEvaluator, FilterOutcome, FilterRule
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

__all__ = [
    "BooleanFilter",
    "BooleanOperator",
    "DateFilter",
    "DateOperator",
    "Filter",
    "FilterEvaluator",
    "FilterLogic",
    "FilterOutcome",
    "FilterRule",
    "FilterSpec",
    "ListFilter",
    "ListOperator",
    "NumberFilter",
    "NumberOperator",
    "RangeFilter",
    "StringFilter",
    "StringOperator",
]
