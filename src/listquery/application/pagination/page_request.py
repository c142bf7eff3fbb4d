"""Application pagination – OffsetPage, CursorToken and the PaginationSpec union."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class OffsetPage:
    """Page-number pagination.

    Values are not validated here: the paginator clamps ``page < 1`` to 1
    and ``limit < 1`` to the configured default.  Upper bounds on
    ``limit`` are the caller's business.
    """
    page: int = 1
    limit: int = 10

    @property
    def offset(self) -> int:
        return (max(self.page, 1) - 1) * max(self.limit, 0)


@dataclasses.dataclass(frozen=True)
class CursorToken:
    """Resume-position pagination; ``token=None`` starts at the first item."""
    token: str | None = None
    limit: int = 10


type PaginationSpec = OffsetPage | CursorToken

__all__ = ["CursorToken", "OffsetPage", "PaginationSpec"]
