"""conftest.py for benchmarks.

Provides session-scoped record sets so every benchmark measures the
pipeline, not record construction.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from listquery.testing import RecordBuilder

_WORDS = ("apple", "banana", "cherry", "date", "elderberry", "fig", "grape", "kiwi")


@pytest.fixture(scope="session")
def catalog() -> list[dict[str, Any]]:
    """5 000 product-like records."""
    start = datetime(2024, 1, 1, tzinfo=UTC)
    return RecordBuilder(category="fruit").many(
        5_000,
        name=lambda i: f"{_WORDS[i % len(_WORDS)]} {_WORDS[(i * 7) % len(_WORDS)]} #{i}",
        description=lambda i: f"Fresh {_WORDS[(i * 3) % len(_WORDS)]} from farm {i % 40}",
        price=lambda i: (i * 37) % 500,
        active=lambda i: i % 3 != 0,
        created_at=lambda i: start + timedelta(hours=i),
    )
