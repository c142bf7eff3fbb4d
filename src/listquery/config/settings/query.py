"""Config settings – QuerySettings, the knobs of the list-query engine."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from listquery.config.settings.base import Settings
from listquery.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class QuerySettings(Settings):
    """Engine-wide defaults, read from ``LISTQUERY_*`` environment variables.

    ``default_limit`` replaces any page size below 1; the engine never
    enforces an upper bound, callers validate their own maximum before
    building a pagination spec.  The three match weights rank an exact
    full-field hit above a prefix hit above a substring hit.
    """

    _prefix: ClassVar[str] = "LISTQUERY"

    default_limit: int = 10
    cursor_key_field: str = "id"
    highlight_pre: str = "<mark>"
    highlight_post: str = "</mark>"
    snippet_context: int = 50
    exact_weight: float = 3.0
    prefix_weight: float = 2.0
    substring_weight: float = 1.0
    fuzzy_threshold: float = 0.6
    fuzzy_weight: float = 0.5

    def _validate(self) -> None:
        if self.default_limit < 1:
            raise InvalidSettingValueError("default_limit", self.default_limit, "must be >= 1")
        if self.snippet_context < 0:
            raise InvalidSettingValueError("snippet_context", self.snippet_context, "must be >= 0")
        if not self.exact_weight > self.prefix_weight > self.substring_weight > 0:
            raise InvalidSettingValueError(
                "exact_weight",
                (self.exact_weight, self.prefix_weight, self.substring_weight),
                "weights must satisfy exact > prefix > substring > 0",
            )
        if not 0 < self.fuzzy_threshold <= 1:
            raise InvalidSettingValueError("fuzzy_threshold", self.fuzzy_threshold, "must be in (0, 1]")
        if self.fuzzy_weight < 0:
            raise InvalidSettingValueError("fuzzy_weight", self.fuzzy_weight, "must be >= 0")


__all__ = ["QuerySettings"]
