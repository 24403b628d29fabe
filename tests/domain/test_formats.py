"""Tests for the format catalog."""

import pytest
from pydantic import ValidationError

from datectl.domain.formats import (
    DATE_FORMATS,
    FORMAT_EXAMPLES,
    ISO,
    MONTH_FORMATS,
    YEAR_MONTH,
    FormatId,
    accepted_patterns,
    coerce_format_id,
    get_format,
)


class TestCatalogOrder:
    def test_date_priority(self) -> None:
        assert [spec.id for spec in DATE_FORMATS] == [
            FormatId.ISO,
            FormatId.ISO_DATETIME,
            FormatId.US,
            FormatId.EU,
            FormatId.SHORT,
            FormatId.NATURAL,
        ]

    def test_month_formats_lead_with_year_month(self) -> None:
        assert MONTH_FORMATS[0] is YEAR_MONTH
        assert MONTH_FORMATS[1:] == DATE_FORMATS

    def test_us_precedes_eu(self) -> None:
        ids = [spec.id for spec in DATE_FORMATS]
        assert ids.index(FormatId.US) < ids.index(FormatId.EU)

    def test_accepted_patterns(self) -> None:
        assert accepted_patterns() == [
            "yyyy-MM-dd",
            "yyyy-MM-dd HH:mm:ss",
            "MM/dd/yyyy",
            "dd/MM/yyyy",
            "MM/dd/yy",
            "MMMM d, yyyy",
        ]


class TestFormatSpec:
    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            ISO.pattern = "dd.MM.yyyy"  # type: ignore[misc]

    def test_year_month_parses_loosely_renders_padded(self) -> None:
        assert YEAR_MONTH.pattern == "yyyy-MM"
        assert YEAR_MONTH.matcher.match("2025-9") is not None

    def test_matcher_is_cached(self) -> None:
        assert ISO.matcher is ISO.matcher

    @pytest.mark.parametrize("format_id", list(FORMAT_EXAMPLES))
    def test_examples_match_their_own_format(self, format_id: FormatId) -> None:
        spec = get_format(format_id)
        assert spec is not None
        assert spec.matcher.match(FORMAT_EXAMPLES[format_id]) is not None


class TestLookup:
    @pytest.mark.parametrize("value", ["US", "us", "Us", FormatId.US])
    def test_case_insensitive(self, value: str) -> None:
        assert coerce_format_id(value) is FormatId.US

    @pytest.mark.parametrize("value", ["", "RFC2822", None])
    def test_unknown_is_none(self, value: str | None) -> None:
        assert coerce_format_id(value) is None
        assert get_format(value) is None

    def test_get_format(self) -> None:
        spec = get_format("natural")
        assert spec is not None
        assert spec.pattern == "MMMM d, yyyy"
