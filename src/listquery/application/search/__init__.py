"""Application search – free-text relevance scoring."""
from listquery.application.search.query import SearchSpec, tokenize, top_terms
from listquery.application.search.result import SearchMetrics, SearchResult
from listquery.application.search.scorer import SearchScorer

__all__ = [
    "SearchMetrics",
    "SearchResult",
    "SearchScorer",
    "SearchSpec",
    "tokenize",
    "top_terms",
]
