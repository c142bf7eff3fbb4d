"""Kernel records — the single named-field accessor shared by every entity."""

from listquery.kernel.records.accessor import (
    MISSING,
    Record,
    camel_case,
    resolve_field,
    string_fields,
)

__all__ = ["MISSING", "Record", "camel_case", "resolve_field", "string_fields"]
