"""
listquery – generic list-query engine for entity list views.

Filters, full-text searches, sorts and paginates an in-memory sequence of
records in one pure, synchronous call::

    from listquery import FilterSpec, OffsetPage, SearchSpec, process
    from listquery.application.filtering import BooleanFilter

    result = process(
        records,
        filters=FilterSpec.of(BooleanFilter("active", True)),
        search=SearchSpec(query="acme"),
        pagination=OffsetPage(page=1, limit=20),
    )
"""

from listquery.application import (
    CursorToken,
    FilterEvaluator,
    FilterLogic,
    FilterSpec,
    ItemOutcome,
    OffsetPage,
    PaginationResponse,
    PaginationSpec,
    Paginator,
    QueryPipeline,
    QueryResult,
    SearchMetrics,
    SearchResult,
    SearchScorer,
    SearchSpec,
    SkipReason,
    SortComparator,
    SortDirection,
    SortField,
    SortSpec,
    process,
)
from listquery.config import QuerySettings

__version__ = "0.1.0"
__all__ = [
    "CursorToken",
    "FilterEvaluator",
    "FilterLogic",
    "FilterSpec",
    "ItemOutcome",
    "OffsetPage",
    "PaginationResponse",
    "PaginationSpec",
    "Paginator",
    "QueryPipeline",
    "QueryResult",
    "QuerySettings",
    "SearchMetrics",
    "SearchResult",
    "SearchScorer",
    "SearchSpec",
    "SkipReason",
    "SortComparator",
    "SortDirection",
    "SortField",
    "SortSpec",
    "__version__",
    "process",
]
