"""Application query – QueryPipeline.

One synchronous call runs the fixed stage order::

    filter → search (score, drop zero relevance) → sort → paginate

Filtering first shrinks the set the scorer has to look at; search runs
before sort so relevance can serve as the fallback order; pagination runs
last because it needs the final count and order.  The pipeline keeps no
state between calls and never mutates the records it is given.
"""
from __future__ import annotations

import dataclasses
import time
from collections import Counter
from typing import Any, Callable, Generic, Iterable, TypeVar

from listquery.application.filtering import FilterEvaluator, FilterSpec
from listquery.application.pagination import PaginationResponse, PaginationSpec, Paginator
from listquery.application.query.outcome import ItemOutcome
from listquery.application.search import SearchMetrics, SearchResult, SearchScorer, SearchSpec
from listquery.application.sorting import SortComparator, SortSpec
from listquery.config.settings import EnvSettingsLoader, QuerySettings
from listquery.observability.logging import get_logger

R = TypeVar("R")
U = TypeVar("U")

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class QueryResult(Generic[R]):
    """Page of records plus the metadata list views render.

    ``search_results`` is ``None`` unless a search ran; otherwise it is
    aligned item-for-item with ``items``.  ``outcomes`` holds one entry per
    input record, in input order.
    """

    items: list[R]
    pagination: PaginationResponse
    search_results: list[SearchResult] | None = None
    search_metrics: SearchMetrics | None = None
    outcomes: tuple[ItemOutcome, ...] = ()

    @property
    def skipped(self) -> tuple[ItemOutcome, ...]:
        return tuple(o for o in self.outcomes if not o.kept)

    def map(self, fn: Callable[[R], U]) -> "QueryResult[U]":
        """Return a copy with each item transformed by *fn* (e.g. into a DTO)."""
        return QueryResult(
            items=[fn(item) for item in self.items],
            pagination=self.pagination,
            search_results=self.search_results,
            search_metrics=self.search_metrics,
            outcomes=self.outcomes,
        )


@dataclasses.dataclass(frozen=True, slots=True)
class _Row:
    index: int
    record: Any
    result: SearchResult | None = None


class QueryPipeline:
    """Composes the four stages; collaborators can be swapped for tests."""

    def __init__(
        self,
        settings: QuerySettings | None = None,
        *,
        evaluator: FilterEvaluator | None = None,
        scorer: SearchScorer | None = None,
        comparator: SortComparator | None = None,
        paginator: Paginator | None = None,
    ) -> None:
        self.settings = settings or QuerySettings()
        self._evaluator = evaluator or FilterEvaluator()
        self._scorer = scorer or SearchScorer(self.settings)
        self._comparator = comparator or SortComparator()
        self._paginator = paginator or Paginator(self.settings)

    @classmethod
    def from_env(cls) -> "QueryPipeline":
        """Build a pipeline configured from ``LISTQUERY_*`` environment variables."""
        return cls(EnvSettingsLoader().load(QuerySettings))

    def process(
        self,
        records: Iterable[R],
        filters: FilterSpec | None = None,
        sort: SortSpec | None = None,
        search: SearchSpec | None = None,
        pagination: PaginationSpec | None = None,
    ) -> QueryResult[R]:
        started = time.perf_counter()
        snapshot = list(records)
        outcomes: dict[int, ItemOutcome] = {}

        rows = self._filter(snapshot, filters, outcomes)
        filtered = len(rows)

        searching = search is not None and not search.is_blank
        metrics: SearchMetrics | None = None
        if searching:
            rows = self._search(rows, search, outcomes)  # type: ignore[arg-type]
            metrics = self._scorer.metrics((row.result for row in rows), search)  # type: ignore[arg-type, misc]

        for row in rows:
            outcomes[row.index] = ItemOutcome.keep(row.index)

        ordered = self._comparator.order(
            rows,
            sort,
            record=lambda row: row.record,
            relevance=(lambda row: row.result.score) if searching else None,
        )
        page_rows, page_info = self._paginator.paginate(
            ordered,
            pagination,
            key=lambda row: self._paginator.record_key(row.record),
        )

        result: QueryResult[R] = QueryResult(
            items=[row.record for row in page_rows],
            pagination=page_info,
            search_results=[row.result for row in page_rows] if searching else None,  # type: ignore[misc]
            search_metrics=metrics,
            outcomes=tuple(outcomes[i] for i in range(len(snapshot))),
        )
        logger.debug(
            "list_query.processed",
            input=len(snapshot),
            filtered=filtered,
            matched=len(rows),
            returned=len(result.items),
            skipped=dict(Counter(r.code for o in result.skipped for r in o.reasons)),
            elapsed_ms=round((time.perf_counter() - started) * 1000, 3),
        )
        return result

    def _filter(
        self,
        records: list[Any],
        spec: FilterSpec | None,
        outcomes: dict[int, ItemOutcome],
    ) -> list[_Row]:
        rows: list[_Row] = []
        for index, record in enumerate(records):
            verdict = self._evaluator.assess(record, spec)
            if verdict.passed:
                rows.append(_Row(index, record))
            else:
                outcomes[index] = ItemOutcome.filtered_out(index, verdict)
        return rows

    def _search(
        self,
        rows: list[_Row],
        spec: SearchSpec,
        outcomes: dict[int, ItemOutcome],
    ) -> list[_Row]:
        scored: list[_Row] = []
        for row in rows:
            result = self._scorer.score(row.record, spec)
            if result.is_match:
                scored.append(dataclasses.replace(row, result=result))
            else:
                outcomes[row.index] = ItemOutcome.no_relevance(row.index)

        cap = spec.max_results
        if cap is not None and 0 <= cap < len(scored):
            ranked = sorted(scored, key=lambda row: -row.result.score)  # type: ignore[union-attr]
            keep = {row.index for row in ranked[:cap]}
            for row in scored:
                if row.index not in keep:
                    outcomes[row.index] = ItemOutcome.over_limit(row.index, cap)
            scored = [row for row in scored if row.index in keep]
        return scored


_default_pipeline = QueryPipeline()


def process(
    records: Iterable[R],
    filters: FilterSpec | None = None,
    sort: SortSpec | None = None,
    search: SearchSpec | None = None,
    pagination: PaginationSpec | None = None,
) -> QueryResult[R]:
    """Run the default pipeline (built-in settings) over *records*."""
    return _default_pipeline.process(records, filters, sort, search, pagination)


__all__ = ["QueryPipeline", "QueryResult", "process"]
