"""Unit tests for the Hypothesis strategies shipped in listquery.testing."""
from __future__ import annotations

from datetime import UTC
from typing import Any

from hypothesis import given

from listquery import OffsetPage, SortSpec
from listquery.testing.strategies import (
    RECORD_FIELDS,
    offset_page_strategy,
    record_strategy,
    records_strategy,
    sort_spec_strategy,
)


class TestRecordStrategy:
    @given(record=record_strategy())
    def test_shape(self, record: dict[str, Any]) -> None:
        assert {"name", "active", "created_at"} <= record.keys()
        assert set(record) <= set(RECORD_FIELDS)
        assert record["created_at"].tzinfo == UTC
        if "price" in record:
            assert 0 <= record["price"] <= 50


class TestRecordsStrategy:
    @given(records=records_strategy(max_size=10))
    def test_ids_are_sequential(self, records: list[dict[str, Any]]) -> None:
        assert len(records) <= 10
        assert [r["id"] for r in records] == [f"rec-{i:04d}" for i in range(len(records))]


class TestSpecStrategies:
    @given(spec=sort_spec_strategy())
    def test_sort_spec(self, spec: SortSpec) -> None:
        assert 1 <= len(spec) <= 3
        assert all(f.field in RECORD_FIELDS for f in spec)

    @given(spec=offset_page_strategy(max_limit=5))
    def test_offset_page(self, spec: OffsetPage) -> None:
        assert spec.page >= 1
        assert 1 <= spec.limit <= 5
