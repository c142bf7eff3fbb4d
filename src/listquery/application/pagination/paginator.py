"""Application pagination – Paginator.

Offset mode slices ``[(page-1)*limit, page*limit)`` out of the ordered
sequence.  Cursor mode resumes strictly after the record named in the
token: it looks the record's key up in the current ordering, so rows
inserted or removed before it between calls neither repeat nor get
skipped, and falls back to the remembered index when the key is gone.
"""
from __future__ import annotations

import math
from typing import Any, Callable, Sequence, TypeVar

from listquery.application.pagination.page import Cursor, Page, PaginationResponse
from listquery.application.pagination.page_request import CursorToken, OffsetPage, PaginationSpec
from listquery.config.settings import QuerySettings
from listquery.kernel.errors import InvalidCursorError
from listquery.kernel.records import MISSING, resolve_field
from listquery.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class Paginator:
    def __init__(self, settings: QuerySettings | None = None) -> None:
        self._settings = settings or QuerySettings()

    def clamp_limit(self, limit: int) -> int:
        return limit if limit >= 1 else self._settings.default_limit

    def paginate(
        self,
        items: Sequence[T],
        spec: PaginationSpec | None,
        *,
        key: Callable[[T], Any] | None = None,
    ) -> Page[T]:
        """Return the requested page of *items*.

        *key* extracts the cursor identity of an item; it defaults to the
        configured ``cursor_key_field`` of the item itself.
        """
        match spec:
            case OffsetPage():
                return self._offset(items, spec)
            case CursorToken():
                return self._cursor(items, spec, key or self.record_key)
            case _:
                return self._single(items)

    def _single(self, items: Sequence[T]) -> Page[T]:
        total = len(items)
        return Page(
            list(items),
            PaginationResponse(
                total_items=total,
                current_page=1,
                total_pages=1 if total else 0,
                has_next=False,
                has_prev=False,
            ),
        )

    def _offset(self, items: Sequence[T], spec: OffsetPage) -> Page[T]:
        total = len(items)
        limit = self.clamp_limit(spec.limit)
        page = max(spec.page, 1)
        offset = (page - 1) * limit
        total_pages = math.ceil(total / limit) if total else 0
        return Page(
            list(items[offset:offset + limit]),
            PaginationResponse(
                total_items=total,
                current_page=page,
                total_pages=total_pages,
                has_next=page < total_pages,
                has_prev=page > 1,
            ),
        )

    def _cursor(self, items: Sequence[T], spec: CursorToken, key: Callable[[T], Any]) -> Page[T]:
        total = len(items)
        limit = self.clamp_limit(spec.limit)
        start = self._resume_at(items, spec.token, key)
        window = list(items[start:start + limit])
        has_next = start + len(window) < total
        token = None
        if has_next and window:
            last = start + len(window) - 1
            token = Cursor(index=last, key=self._key_text(key(window[-1]))).encode()
        return Page(
            window,
            PaginationResponse(
                total_items=total,
                has_next=has_next,
                has_prev=start > 0,
                next_page_token=token,
            ),
        )

    def _resume_at(self, items: Sequence[T], token: str | None, key: Callable[[T], Any]) -> int:
        if not token:
            return 0
        try:
            cursor = Cursor.decode(token)
        except InvalidCursorError as exc:
            logger.warning("list_query.invalid_cursor", error=exc.code, token=token)
            return 0
        if cursor.key is not None:
            positions = [i for i, item in enumerate(items) if self._key_text(key(item)) == cursor.key]
            if positions:
                return min(positions, key=lambda i: abs(i - cursor.index)) + 1
        return min(cursor.index + 1, len(items))

    def record_key(self, item: Any) -> Any:
        """Cursor identity of *item*: its configured key field."""
        return resolve_field(item, self._settings.cursor_key_field)

    @staticmethod
    def _key_text(value: Any) -> str | None:
        return None if value is MISSING or value is None else str(value)


__all__ = ["Paginator"]
