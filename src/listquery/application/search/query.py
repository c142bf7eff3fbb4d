"""Application search – SearchSpec value object and query tokenization."""
from __future__ import annotations

import dataclasses
from typing import Mapping

__all__ = ["SearchSpec", "tokenize", "top_terms"]

_TRIM = ".,!?;:"

_STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to",
    "for", "of", "with", "by", "is", "are", "was", "were", "be", "been",
})


def tokenize(query: str) -> tuple[str, ...]:
    """Split *query* on whitespace into case-folded, de-duplicated terms."""
    terms: list[str] = []
    for part in query.split():
        term = part.strip(_TRIM).casefold()
        if term and term not in terms:
            terms.append(term)
    return tuple(terms)


def top_terms(query: str) -> tuple[str, ...]:
    """Significant query terms: no stop words, longer than two characters."""
    return tuple(t for t in tokenize(query) if t not in _STOP_WORDS and len(t) > 2)


@dataclasses.dataclass(frozen=True)
class SearchSpec:
    """Free-text query plus the knobs that shape scoring.

    An empty ``fields`` searches every text-valued field of each record.
    ``max_results`` keeps only the best-scoring records.
    """

    query: str = ""
    fields: tuple[str, ...] = ()
    field_weights: Mapping[str, float] = dataclasses.field(default_factory=dict)
    highlight: bool = True
    fuzzy: bool = False
    max_results: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def terms(self) -> tuple[str, ...]:
        return tokenize(self.query)

    @property
    def is_blank(self) -> bool:
        return not self.terms

    def weight_for(self, field: str) -> float:
        return max(float(self.field_weights.get(field, 1.0)), 0.0)
