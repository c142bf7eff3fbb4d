"""Application search – SearchResult and SearchMetrics containers."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = ["SearchMetrics", "SearchResult"]


@dataclass(frozen=True)
class SearchResult:
    """Relevance of one record: its score and a marked snippet per matching field."""

    score: float = 0.0
    highlights: dict[str, str] = field(default_factory=dict)
    matched_fields: tuple[str, ...] = ()

    @property
    def is_match(self) -> bool:
        return self.score > 0

    def to_dict(self) -> dict[str, Any]:
        return {"score": self.score, "highlights": dict(self.highlights)}


@dataclass(frozen=True)
class SearchMetrics:
    total_results: int = 0
    top_terms: tuple[str, ...] = ()
    field_match_counts: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_results": self.total_results,
            "top_terms": list(self.top_terms),
            "field_match_counts": dict(self.field_match_counts),
        }
