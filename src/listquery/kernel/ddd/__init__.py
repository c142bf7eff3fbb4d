"""Kernel DDD building blocks used by the query engine."""

from listquery.kernel.ddd.specification import (
    AndSpecification,
    LambdaSpecification,
    NotSpecification,
    OrSpecification,
    RecordSpecification,
    all_of,
    any_of,
    match_all,
)

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
