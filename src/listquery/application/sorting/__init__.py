"""Application sorting – multi-field, stable, type-aware ordering."""
from listquery.application.sorting.comparator import SortComparator, sort_key
from listquery.application.sorting.sort import SortDirection, SortField, SortSpec

__all__ = ["SortComparator", "SortDirection", "SortField", "SortSpec", "sort_key"]
