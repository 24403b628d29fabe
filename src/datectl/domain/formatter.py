"""Render a UTC instant back into any catalog layout, in a target timezone."""

from __future__ import annotations

from datetime import datetime

from datectl.domain.formats import ISO, FormatId, get_format
from datectl.domain.outcomes import ErrorCode, FormatOutcome, Formatted, Rejected
from datectl.domain.patterns import render
from datectl.domain.timezones import (
    DEFAULT_TIMEZONE,
    invalid_timezone_reason,
    resolve_timezone,
    to_wall_clock,
)


def format_instant(
    instant: datetime | None,
    format_id: str | FormatId = FormatId.ISO,
    timezone: str = DEFAULT_TIMEZONE,
) -> FormatOutcome:
    """Render *instant* as wall-clock text in *timezone*.

    Unknown *format_id* values fall back to ISO. Naive datetimes and
    non-datetime values are rejected with INVALID_INSTANT; they are never
    guessed at.
    """
    if not isinstance(instant, datetime) or instant.utcoffset() is None:
        return Rejected(code=ErrorCode.INVALID_INSTANT, reason="Invalid date provided")
    zone = resolve_timezone(timezone)
    if zone is None:
        return Rejected(code=ErrorCode.INVALID_TIMEZONE, reason=invalid_timezone_reason(timezone))
    spec = get_format(format_id) or ISO
    try:
        local = to_wall_clock(instant, zone)
    except OverflowError:
        return Rejected(code=ErrorCode.INVALID_INSTANT, reason="Invalid date provided")
    return Formatted(text=render(spec.pattern, local))
