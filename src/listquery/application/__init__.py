"""Application – the list-query engine stages (framework-agnostic)."""

from listquery.application.filtering import FilterEvaluator, FilterLogic, FilterSpec
from listquery.application.pagination import (
    CursorToken,
    OffsetPage,
    PaginationResponse,
    PaginationSpec,
    Paginator,
)
from listquery.application.query import ItemOutcome, QueryPipeline, QueryResult, SkipReason, process
from listquery.application.search import SearchMetrics, SearchResult, SearchScorer, SearchSpec
from listquery.application.sorting import SortComparator, SortDirection, SortField, SortSpec

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
    "SearchMetrics",
    "SearchResult",
    "SearchScorer",
    "SearchSpec",
    "SkipReason",
    "SortComparator",
    "SortDirection",
    "SortField",
    "SortSpec",
    "process",
]
