"""Tests for shared service-layer helper functions."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from datectl.services._helpers import iso_z, now_utc, parse_iso_instant


class TestNowUtc:
    def test_is_aware_utc(self) -> None:
        assert now_utc().utcoffset() == timedelta(0)


class TestIsoZ:
    def test_millisecond_precision_with_z(self) -> None:
        assert iso_z(datetime(2025, 9, 14, 4, 0, tzinfo=UTC)) == "2025-09-14T04:00:00.000Z"

    def test_converts_offsets_to_utc(self) -> None:
        moment = datetime(2025, 9, 14, 0, 0, tzinfo=timezone(timedelta(hours=-4)))
        assert iso_z(moment) == "2025-09-14T04:00:00.000Z"

    def test_truncates_microseconds(self) -> None:
        moment = datetime(2025, 9, 14, 4, 0, 0, 123456, tzinfo=UTC)
        assert iso_z(moment) == "2025-09-14T04:00:00.123Z"


class TestParseIsoInstant:
    @pytest.mark.parametrize(
        "text",
        ["2025-09-14T04:00:00Z", "2025-09-14T04:00:00.000Z", "2025-09-14T00:00:00-04:00"],
    )
    def test_offset_timestamps(self, text: str) -> None:
        assert parse_iso_instant(text) == datetime(2025, 9, 14, 4, tzinfo=UTC)

    @pytest.mark.parametrize("text", ["2025-09-14T04:00:00", "2025-09-14", "yesterday", ""])
    def test_naive_or_malformed_is_none(self, text: str) -> None:
        assert parse_iso_instant(text) is None
