"""Query errors — raised inside the list-query engine and absorbed there.

None of these escape :meth:`QueryPipeline.process`; they are turned into
skip reasons (filters) or a restart from the first item (cursors).
"""

from __future__ import annotations

from typing import Any

from listquery.kernel.errors.base import BaseError


class QueryError(BaseError):
    """Base for every list-query failure."""

    default_code = "query_error"


class FilterError(QueryError):
    """A single filter could not be evaluated against a record."""

    default_code = "filter_error"

    def __init__(self, message: str, *, field: str, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["field"] = self.field
        return base


class MissingFieldError(FilterError):
    """The record has no value for the filtered field."""

    default_code = "field_missing"

    def __init__(self, field: str, **kwargs: Any) -> None:
        super().__init__(f"field '{field}' is absent", field=field, **kwargs)


class MalformedOperandError(FilterError):
    """The filter operand is unusable (e.g. BETWEEN without an upper bound)."""

    default_code = "malformed_operand"

    def __init__(self, field: str, reason: str, **kwargs: Any) -> None:
        super().__init__(f"malformed operand for '{field}': {reason}", field=field, **kwargs)
        self.reason = reason


class UnsupportedOperatorError(FilterError):
    """The operator cannot be applied to the field's value type."""

    default_code = "unsupported_operator"

    def __init__(self, field: str, operator: str, value: object, **kwargs: Any) -> None:
        super().__init__(
            f"operator {operator} does not apply to {type(value).__name__} value of '{field}'",
            field=field,
            **kwargs,
        )
        self.operator = operator


class InvalidCursorError(QueryError):
    """A cursor token could not be decoded."""

    default_code = "invalid_cursor"

    def __init__(self, token: str, **kwargs: Any) -> None:
        super().__init__("cursor token is not valid", detail={"token": token}, **kwargs)
        self.token = token


__all__ = [
    "FilterError",
    "InvalidCursorError",
    "MalformedOperandError",
    "MissingFieldError",
    "QueryError",
    "UnsupportedOperatorError",
]
