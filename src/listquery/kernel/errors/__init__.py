"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── QueryError                 (query.py)
        ├── FilterError
        │   ├── MissingFieldError
        │   ├── MalformedOperandError
        │   └── UnsupportedOperatorError
        └── InvalidCursorError

Configuration errors live in :mod:`listquery.config.validation`.
"""

from listquery.kernel.errors.base import BaseError
from listquery.kernel.errors.query import (
    FilterError,
    InvalidCursorError,
    MalformedOperandError,
    MissingFieldError,
    QueryError,
    UnsupportedOperatorError,
)

__all__ = [
    "BaseError",
    "FilterError",
    "InvalidCursorError",
    "MalformedOperandError",
    "MissingFieldError",
    "QueryError",
    "UnsupportedOperatorError",
]
