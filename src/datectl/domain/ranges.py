"""Range validation and duration reporting for two parse outcomes."""

from __future__ import annotations

from datetime import timedelta

from datectl.domain.outcomes import ErrorCode, Invalid, Parsed, ParseOutcome, RangeResult, Valid

_MS_PER_HOUR = 60 * 60 * 1000
_MS_PER_DAY = 24 * _MS_PER_HOUR


def human_duration(days: int) -> str:
    """``1 day`` for exactly one, ``N days`` otherwise (including zero)."""
    return "1 day" if days == 1 else f"{days} days"


def validate_range(start: ParseOutcome, end: ParseOutcome) -> RangeResult:
    """Check that *start* precedes (or equals) *end* and measure the gap.

    A rejected side short-circuits with a field-qualified reason; the
    start side is reported first when both failed.
    """
    if not isinstance(start, Parsed):
        return Invalid(code=start.code, field="start", reason=f"Invalid start date: {start.reason}")
    if not isinstance(end, Parsed):
        return Invalid(code=end.code, field="end", reason=f"Invalid end date: {end.reason}")
    if start.instant > end.instant:
        return Invalid(code=ErrorCode.START_AFTER_END, reason="Start date cannot be after end date")

    diff_ms = (end.instant - start.instant) // timedelta(milliseconds=1)
    total_days = diff_ms // _MS_PER_DAY
    return Valid(
        start=start.instant,
        end=end.instant,
        total_days=total_days,
        total_hours=diff_ms // _MS_PER_HOUR,
        human_readable=human_duration(total_days),
    )
