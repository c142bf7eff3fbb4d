"""Application pagination – Cursor codec, PaginationResponse and Page."""
from __future__ import annotations

import base64
import binascii
import dataclasses
import json
from typing import Any, Callable, Generic, NamedTuple, TypeVar

from listquery.kernel.errors import InvalidCursorError

T = TypeVar("T")
U = TypeVar("U")


@dataclasses.dataclass(frozen=True, slots=True)
class Cursor:
    """Decoded resume position: key and index of the last record returned.

    The wire form is URL-safe base64 of a compact JSON object; clients
    treat it as opaque.
    """
    index: int
    key: str | None = None

    def encode(self) -> str:
        payload = json.dumps({"i": self.index, "k": self.key}, separators=(",", ":"), sort_keys=True)
        return base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii").rstrip("=")

    @classmethod
    def decode(cls, token: str) -> "Cursor":
        try:
            raw = base64.urlsafe_b64decode(token + "=" * (-len(token) % 4))
            payload = json.loads(raw.decode("utf-8"))
        except (binascii.Error, ValueError) as exc:
            raise InvalidCursorError(token, cause=exc) from exc
        if not isinstance(payload, dict):
            raise InvalidCursorError(token)
        index, key = payload.get("i"), payload.get("k")
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            raise InvalidCursorError(token)
        if key is not None and not isinstance(key, str):
            raise InvalidCursorError(token)
        return cls(index=index, key=key)

    def __str__(self) -> str:
        return self.encode()


@dataclasses.dataclass(frozen=True)
class PaginationResponse:
    """Pagination counters for one result page.

    ``current_page`` and ``total_pages`` are only set in offset mode;
    ``next_page_token`` only in cursor mode when more items remain.
    """
    total_items: int = 0
    current_page: int | None = None
    total_pages: int | None = None
    has_next: bool = False
    has_prev: bool = False
    next_page_token: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "total_items": self.total_items,
            "has_next": self.has_next,
            "has_prev": self.has_prev,
        }
        if self.current_page is not None:
            payload["current_page"] = self.current_page
        if self.total_pages is not None:
            payload["total_pages"] = self.total_pages
        if self.next_page_token is not None:
            payload["next_page_token"] = self.next_page_token
        return payload


class Page(NamedTuple, Generic[T]):
    """Items of one page plus its counters; unpacks as ``items, pagination``."""

    items: list[T]
    pagination: PaginationResponse

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        """Return a new :class:`Page` with each item transformed by *fn*."""
        return Page([fn(item) for item in self.items], self.pagination)


__all__ = ["Cursor", "Page", "PaginationResponse"]
