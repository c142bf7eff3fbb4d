"""Application query – per-record outcomes (kept, or skipped with reasons)."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any

from listquery.application.filtering import Filter, FilterOutcome
from listquery.kernel.errors import FilterError


class SkipStage(str, Enum):
    FILTER = "filter"
    SEARCH = "search"


class SkipCode(str, Enum):
    FIELD_MISSING = "field_missing"
    MALFORMED_OPERAND = "malformed_operand"
    UNSUPPORTED_OPERATOR = "unsupported_operator"
    NOT_MATCHED = "not_matched"
    NO_RELEVANCE = "no_relevance"
    BELOW_MAX_RESULTS = "below_max_results"


@dataclasses.dataclass(frozen=True)
class SkipReason:
    code: str
    message: str
    field: str | None = None

    @classmethod
    def from_error(cls, error: FilterError) -> "SkipReason":
        return cls(code=error.code, message=error.message, field=error.field)

    @classmethod
    def not_matched(cls, flt: Filter) -> "SkipReason":
        return cls(
            code=SkipCode.NOT_MATCHED.value,
            message=f"value of '{flt.field}' does not satisfy {type(flt).__name__}",
            field=flt.field,
        )

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "field": self.field}


@dataclasses.dataclass(frozen=True)
class ItemOutcome:
    """What happened to the input record at ``index``.

    Pagination is not an exclusion: a kept record may still fall outside
    the returned page.
    """

    index: int
    kept: bool
    stage: SkipStage | None = None
    reasons: tuple[SkipReason, ...] = ()

    @classmethod
    def keep(cls, index: int) -> "ItemOutcome":
        return cls(index=index, kept=True)

    @classmethod
    def filtered_out(cls, index: int, verdict: FilterOutcome) -> "ItemOutcome":
        reasons = tuple(SkipReason.not_matched(f) for f in verdict.unmatched) + tuple(
            SkipReason.from_error(e) for e in verdict.errors
        )
        return cls(index=index, kept=False, stage=SkipStage.FILTER, reasons=reasons)

    @classmethod
    def no_relevance(cls, index: int) -> "ItemOutcome":
        return cls(
            index=index,
            kept=False,
            stage=SkipStage.SEARCH,
            reasons=(SkipReason(SkipCode.NO_RELEVANCE.value, "no query term matched"),),
        )

    @classmethod
    def over_limit(cls, index: int, max_results: int) -> "ItemOutcome":
        return cls(
            index=index,
            kept=False,
            stage=SkipStage.SEARCH,
            reasons=(
                SkipReason(SkipCode.BELOW_MAX_RESULTS.value, f"not among the top {max_results} results"),
            ),
        )


__all__ = ["ItemOutcome", "SkipCode", "SkipReason", "SkipStage"]
