"""Application sorting – SortSpec, SortField, SortDirection."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Iterator


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclasses.dataclass(frozen=True)
class SortField:
    """Single sort criterion."""
    field: str
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction == SortDirection.DESC


@dataclasses.dataclass(frozen=True)
class SortSpec:
    """Ordered sort keys; the first is primary, later ones break ties."""

    fields: tuple[SortField, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))

    @classmethod
    def of(cls, *fields: SortField) -> "SortSpec":
        return cls(fields=fields)

    @classmethod
    def parse(cls, expression: str) -> "SortSpec":
        """Build from ``"price:desc,name"``; unknown directions read as ASC."""
        fields: list[SortField] = []
        for chunk in expression.split(","):
            name, _, direction = chunk.strip().partition(":")
            if not name:
                continue
            desc = direction.strip().upper() == SortDirection.DESC.value
            fields.append(SortField(name.strip(), SortDirection.DESC if desc else SortDirection.ASC))
        return cls(fields=tuple(fields))

    def __iter__(self) -> Iterator[SortField]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)


__all__ = ["SortDirection", "SortField", "SortSpec"]
