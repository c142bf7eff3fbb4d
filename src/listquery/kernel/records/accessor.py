"""Record capability contract — named-field lookup over any record shape.

Every entity handled by the engine is read through :func:`resolve_field`,
so the pipeline is written once and reused for mappings, dataclasses,
plain objects and anything exposing ``get(name)``.

Resolution order for one path segment:

1. ``Mapping`` → key lookup.
2. An object with a callable ``get`` → ``record.get(name)``.
3. Anything else → public attribute lookup.

When the exact name is absent a snake_case segment is retried in its
camelCase spelling (``created_at`` → ``createdAt``), which lets the same
request field names work against JSON-shaped payloads.  ``None`` is
treated as absent.
"""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Mapping
from typing import Any, Iterator, Protocol, runtime_checkable

from listquery.observability.logging import get_logger

logger = get_logger(__name__)


class _Missing(enum.Enum):
    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing.MISSING
"""Sentinel returned by :func:`resolve_field` for an absent field."""


@runtime_checkable
class Record(Protocol):
    """Anything that exposes a named-field accessor.

    Accessor records that also expose ``keys()`` list their fields through it;
    without ``keys()`` their public attributes are listed instead.
    """

    def get(self, name: str, /) -> Any: ...


def camel_case(name: str) -> str:
    """``created_at`` → ``createdAt``; names without underscores are unchanged."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _lookup_once(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj[name] if name in obj else MISSING
    getter = getattr(obj, "get", None)
    if callable(getter) and not isinstance(obj, type):
        try:
            value = getter(name)
        except KeyError:
            return MISSING
        return MISSING if value is None else value
    if name.startswith("_"):
        return MISSING
    return getattr(obj, name, MISSING)


def _lookup(obj: Any, name: str) -> Any:
    value = _lookup_once(obj, name)
    if value is MISSING:
        alt = camel_case(name)
        if alt != name:
            value = _lookup_once(obj, alt)
    return MISSING if value is None else value


def resolve_field(record: Any, path: str) -> Any:
    """Return the value at *path* (dot-separated) or :data:`MISSING`."""
    if record is None or not path:
        return MISSING
    current = record
    for part in path.split("."):
        current = _lookup(current, part)
        if current is MISSING:
            return MISSING
    return current


def _declared_items(record: Any) -> Iterator[tuple[str, Any]]:
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        for field in dataclasses.fields(record):
            yield field.name, getattr(record, field.name, None)
    elif hasattr(record, "__dict__"):
        for key, value in vars(record).items():
            if not key.startswith("_"):
                yield key, value
    else:
        seen: set[str] = set()
        for klass in type(record).__mro__:
            slots = getattr(klass, "__slots__", ())
            for slot in (slots,) if isinstance(slots, str) else slots:
                if slot.startswith("_") or slot in seen:
                    continue
                seen.add(slot)
                yield slot, getattr(record, slot, None)


def _accessor_names(record: Any) -> list[str]:
    keys = getattr(record, "keys", None)
    if callable(keys):
        return [key for key in keys() if isinstance(key, str)]
    return [name for name, _ in _declared_items(record)]


def _field_items(record: Any) -> Iterator[tuple[str, Any]]:
    if isinstance(record, Mapping):
        for key, value in record.items():
            if isinstance(key, str):
                yield key, value
        return
    getter = getattr(record, "get", None)
    if callable(getter) and not isinstance(record, type):
        names = _accessor_names(record)
        if not names:
            logger.warning("list_query.record_fields_unknown", record_type=type(record).__name__)
        for name in names:
            yield name, _lookup_once(record, name)
        return
    yield from _declared_items(record)


def string_fields(record: Any) -> list[str]:
    """Names of the record's top-level text-valued fields, in declaration order."""
    return [name for name, value in _field_items(record) if isinstance(value, str)]


__all__ = ["MISSING", "Record", "camel_case", "resolve_field", "string_fields"]
