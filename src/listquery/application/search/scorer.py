"""Application search – SearchScorer.

Scores one record against a free-text query.  Per searchable field and
per query term the best match level wins::

    exact full-field match  >  prefix match  >  substring match  >  none

(with an optional fuzzy fallback below substring).  Field scores are
multiplied by the field's weight and summed into the record's score.  For
every field that scored, the earliest matching substring is wrapped in the
configured markers with the original casing preserved.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable

from listquery.application.filtering.coercion import as_text
from listquery.application.search.query import SearchSpec, top_terms
from listquery.application.search.result import SearchMetrics, SearchResult
from listquery.config.settings import QuerySettings
from listquery.kernel.records import MISSING, resolve_field, string_fields

__all__ = ["SearchScorer"]


class SearchScorer:
    """Pure relevance scorer; identical inputs always give identical output."""

    def __init__(self, settings: QuerySettings | None = None) -> None:
        self._settings = settings or QuerySettings()

    def score(self, record: Any, spec: SearchSpec) -> SearchResult:
        terms = spec.terms
        if not terms:
            return SearchResult()
        fields = spec.fields or tuple(string_fields(record))
        total = 0.0
        highlights: dict[str, str] = {}
        matched: list[str] = []
        for name in fields:
            text = self._field_text(record, name, explicit=bool(spec.fields))
            if not text:
                continue
            field_score = self._score_text(text, terms, fuzzy=spec.fuzzy) * spec.weight_for(name)
            if field_score <= 0:
                continue
            total += field_score
            matched.append(name)
            if spec.highlight:
                snippet = self.highlight(text, terms)
                if snippet is not None:
                    highlights[name] = snippet
        return SearchResult(score=total, highlights=highlights, matched_fields=tuple(matched))

    def metrics(self, results: Iterable[SearchResult], spec: SearchSpec) -> SearchMetrics:
        total = 0
        counts: dict[str, int] = {}
        for result in results:
            if not result.is_match:
                continue
            total += 1
            for name in result.matched_fields:
                counts[name] = counts.get(name, 0) + 1
        return SearchMetrics(total_results=total, top_terms=top_terms(spec.query), field_match_counts=counts)

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def term_weight(self, text: str, term: str, *, fuzzy: bool = False) -> float:
        """Weight of one (case-folded) *term* against *text*."""
        folded = text.casefold()
        if folded == term:
            return self._settings.exact_weight
        if folded.startswith(term):
            return self._settings.prefix_weight
        if term in folded:
            return self._settings.substring_weight
        if fuzzy and term:
            ratio = sum(1 for ch in term if ch in folded) / len(term)
            if ratio > self._settings.fuzzy_threshold:
                return ratio * self._settings.fuzzy_weight
        return 0.0

    def highlight(self, text: str, terms: Iterable[str]) -> str | None:
        """Mark the earliest matching term in *text*; ``None`` when nothing matches literally.

        Matching runs on the case-folded text, the same form :meth:`term_weight`
        scores, and the span is mapped back so the original casing is kept.
        """
        folded, origin = _fold(text)
        best: tuple[int, int] | None = None
        for term in terms:
            needle = term.casefold()
            start = folded.find(needle) if needle else -1
            if start < 0:
                continue
            if best is None or (start, -len(needle)) < (best[0], best[0] - best[1]):
                best = (start, start + len(needle))
        if best is None:
            return None
        start, end = origin[best[0]], origin[best[1] - 1] + 1
        ctx = self._settings.snippet_context
        return (
            text[max(0, start - ctx):start]
            + self._settings.highlight_pre
            + text[start:end]
            + self._settings.highlight_post
            + text[end:end + ctx]
        )

    def _score_text(self, text: str, terms: tuple[str, ...], *, fuzzy: bool) -> float:
        return sum(self.term_weight(text, term, fuzzy=fuzzy) for term in terms)

    @staticmethod
    def _field_text(record: Any, name: str, *, explicit: bool) -> str | None:
        value = resolve_field(record, name)
        if value is MISSING:
            return None
        text = as_text(value)
        if text is None and explicit and isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
            text = str(value)
        return text


def _fold(text: str) -> tuple[str, list[int]]:
    """Case-fold *text* per character, remembering each folded character's source index."""
    parts: list[str] = []
    origin: list[int] = []
    for index, char in enumerate(text):
        folded = char.casefold()
        parts.append(folded)
        origin.extend([index] * len(folded))
    return "".join(parts), origin
