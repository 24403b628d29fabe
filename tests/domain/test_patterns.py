"""Tests for pattern tokenizing, strict matching, and rendering."""

from datetime import datetime

import pytest

from datectl.domain.patterns import (
    MONTH_NAMES,
    Fields,
    compile_pattern,
    expand_year,
    extract_fields,
    render,
    tokenize,
)


class TestTokenize:
    def test_natural_pattern(self) -> None:
        assert tokenize("MMMM d, yyyy") == ["MMMM", " ", "d", ", ", "yyyy"]

    def test_datetime_pattern(self) -> None:
        assert tokenize("yyyy-MM-dd HH:mm:ss") == [
            "yyyy", "-", "MM", "-", "dd", " ", "HH", ":", "mm", ":", "ss",
        ]  # fmt: skip

    @pytest.mark.parametrize("pattern", ["yyy-MM-dd", "MMM d", "ddd", "H:mm"])
    def test_unsupported_width_raises(self, pattern: str) -> None:
        with pytest.raises(ValueError, match="Unsupported pattern token"):
            tokenize(pattern)


class TestCompilePattern:
    def test_exact_width_match(self) -> None:
        regex = compile_pattern("yyyy-MM-dd")
        assert regex.match("2025-09-14") is not None

    @pytest.mark.parametrize(
        "text",
        ["2025-9-14", "2025-09-4", "25-09-14", " 2025-09-14", "2025-09-14 ", "2025-09-14x"],
    )
    def test_rejects_wrong_shape(self, text: str) -> None:
        assert compile_pattern("yyyy-MM-dd").match(text) is None

    def test_single_digit_fields_accept_one_or_two(self) -> None:
        regex = compile_pattern("yyyy-M")
        assert regex.match("2025-9") is not None
        assert regex.match("2025-09") is not None
        assert regex.match("2025-009") is None

    def test_month_names_case_insensitive(self) -> None:
        regex = compile_pattern("MMMM d, yyyy")
        assert regex.match("September 14, 2025") is not None
        assert regex.match("september 14, 2025") is not None
        assert regex.match("SEPTEMBER 4, 2025") is not None

    def test_abbreviated_month_rejected(self) -> None:
        assert compile_pattern("MMMM d, yyyy").match("Sep 14, 2025") is None

    def test_non_ascii_digits_rejected(self) -> None:
        assert compile_pattern("yyyy-MM-dd").match("２０２５-09-14") is None

    def test_literals_are_escaped(self) -> None:
        regex = compile_pattern("MM/dd/yyyy")
        assert regex.match("09/14/2025") is not None
        assert regex.match("09x14x2025") is None


class TestExpandYear:
    @pytest.mark.parametrize(
        "two_digit,expected",
        [(0, 2000), (25, 2025), (68, 2068), (69, 1969), (99, 1999)],
    )
    def test_pivot(self, two_digit: int, expected: int) -> None:
        assert expand_year(two_digit) == expected


class TestExtractFields:
    def test_numeric_fields(self) -> None:
        m = compile_pattern("yyyy-MM-dd HH:mm:ss").match("2025-09-14 14:30:05")
        assert m is not None
        assert extract_fields(m) == Fields(2025, 9, 14, 14, 30, 5)

    def test_month_name(self) -> None:
        m = compile_pattern("MMMM d, yyyy").match("march 3, 2024")
        assert m is not None
        assert extract_fields(m) == Fields(2024, 3, 3)

    def test_two_digit_year(self) -> None:
        m = compile_pattern("MM/dd/yy").match("12/31/69")
        assert m is not None
        assert extract_fields(m).year == 1969

    def test_missing_day_defaults_to_first(self) -> None:
        m = compile_pattern("yyyy-M").match("2025-9")
        assert m is not None
        fields = extract_fields(m)
        assert fields.day == 1
        assert fields.hour == 0

    def test_out_of_range_components_are_kept(self) -> None:
        """Calendar checks happen later; extraction only converts digits."""
        m = compile_pattern("yyyy-MM-dd").match("2025-13-45")
        assert m is not None
        assert extract_fields(m) == Fields(2025, 13, 45)


class TestRender:
    def test_natural(self) -> None:
        assert render("MMMM d, yyyy", datetime(2025, 9, 4)) == "September 4, 2025"

    def test_zero_padding(self) -> None:
        assert render("MM/dd/yy", datetime(2005, 1, 2)) == "01/02/05"

    def test_time_fields(self) -> None:
        moment = datetime(2025, 9, 14, 9, 5, 7)
        assert render("yyyy-MM-dd HH:mm:ss", moment) == "2025-09-14 09:05:07"

    def test_every_month_name(self) -> None:
        rendered = [render("MMMM", datetime(2025, m, 1)) for m in range(1, 13)]
        assert tuple(rendered) == MONTH_NAMES
