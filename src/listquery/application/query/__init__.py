"""Application query – the list-query pipeline and its result types."""
from listquery.application.query.outcome import ItemOutcome, SkipCode, SkipReason, SkipStage
from listquery.application.query.pipeline import QueryPipeline, QueryResult, process

__all__ = [
    "ItemOutcome",
    "QueryPipeline",
    "QueryResult",
    "SkipCode",
    "SkipReason",
    "SkipStage",
    "process",
]
