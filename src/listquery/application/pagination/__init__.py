"""Application pagination – offset and cursor pagination."""
from listquery.application.pagination.page import Cursor, Page, PaginationResponse
from listquery.application.pagination.page_request import CursorToken, OffsetPage, PaginationSpec
from listquery.application.pagination.paginator import Paginator

__all__ = [
    "Cursor",
    "CursorToken",
    "OffsetPage",
    "Page",
    "PaginationResponse",
    "PaginationSpec",
    "Paginator",
]
