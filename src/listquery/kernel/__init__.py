"""Kernel – framework-agnostic building blocks of the query engine."""

from listquery.kernel.errors import (
    BaseError,
    FilterError,
    InvalidCursorError,
    MalformedOperandError,
    MissingFieldError,
    QueryError,
    UnsupportedOperatorError,
)
from listquery.kernel.records import MISSING, Record, resolve_field
from listquery.kernel.types import Err, Ok, Result

__all__ = [
    "MISSING",
    "BaseError",
    "Err",
    "FilterError",
    "InvalidCursorError",
    "MalformedOperandError",
    "MissingFieldError",
    "Ok",
    "QueryError",
    "Record",
    "Result",
    "UnsupportedOperatorError",
    "resolve_field",
]
