"""Date and month parsing — strict, priority-ordered, timezone-normalised.

``parse_date`` walks the catalog in priority order and stops at the first
layout whose shape matches *and* whose components form a real date. The
matched wall-clock time is read in the caller's timezone and stored as a
UTC instant.

``parse_month`` tries ``yyyy-M``/``yyyy-MM`` first, then falls back to any
full date and truncates it to the first of its month.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from datectl.domain.formats import (
    DATE_FORMATS,
    YEAR_MONTH,
    FormatId,
    FormatSpec,
    accepted_patterns,
)
from datectl.domain.outcomes import ErrorCode, Parsed, ParseOutcome, Rejected
from datectl.domain.patterns import extract_fields
from datectl.domain.timezones import (
    DEFAULT_TIMEZONE,
    invalid_timezone_reason,
    resolve_timezone,
    to_instant,
    to_wall_clock,
)

if TYPE_CHECKING:
    from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

MONTH_FORMAT_HINT = "Use YYYY-MM (e.g., 2025-09) or any valid date format"


class _CalendarError(ValueError):
    """Shape matched but the components name no real date."""


def _match(spec: FormatSpec, text: str) -> datetime | None:
    """Strictly match *text* against one layout.

    Returns the naive wall-clock datetime, None when the shape does not
    match, or raises _CalendarError when the shape matches but the
    components are impossible (month 13, Feb 30, hour 24).
    """
    m = spec.matcher.match(text)
    if m is None:
        return None
    f = extract_fields(m)
    try:
        return datetime(f.year, f.month, f.day, f.hour, f.minute, f.second)
    except ValueError as exc:
        raise _CalendarError(str(exc)) from exc


def _blank(raw: object) -> bool:
    return not isinstance(raw, str) or not raw.strip()


def _parse_in_zone(text: str, zone: ZoneInfo) -> ParseOutcome:
    calendar_error: str | None = None
    for spec in DATE_FORMATS:
        try:
            wall_clock = _match(spec, text)
        except _CalendarError as exc:
            logger.debug("Format %s matched %r but date is invalid: %s", spec.id, text, exc)
            if calendar_error is None:
                calendar_error = str(exc)
            continue
        if wall_clock is None:
            continue
        try:
            instant = to_instant(wall_clock, zone)
        except OverflowError:
            calendar_error = calendar_error or "date is outside the supported range"
            continue
        logger.debug("Parsed %r as %s", text, spec.id)
        return Parsed(instant=instant, matched_format=spec.id)

    if calendar_error is not None:
        return Rejected(
            code=ErrorCode.INVALID_CALENDAR_DATE,
            reason=f"Invalid calendar date {text!r}: {calendar_error}",
        )
    return Rejected(
        code=ErrorCode.NO_FORMAT_MATCHED,
        reason=f"Invalid date format. Accepted formats: {', '.join(accepted_patterns())}",
    )


def _month_start(year: int, month: int, zone: ZoneInfo) -> datetime | None:
    try:
        return to_instant(datetime(year, month, 1), zone)
    except (ValueError, OverflowError):
        return None


def parse_date(raw: str, timezone: str = DEFAULT_TIMEZONE) -> ParseOutcome:
    """Parse *raw* in any catalog format, reading it as wall-clock time in *timezone*.

    Args:
        raw: User-supplied date text. Surrounding whitespace is ignored.
        timezone: IANA timezone identifier, e.g. ``"America/New_York"``.

    Returns:
        ``Parsed`` with the UTC instant and matched format, or ``Rejected``
        with one of EMPTY_INPUT, INVALID_TIMEZONE, INVALID_CALENDAR_DATE,
        NO_FORMAT_MATCHED.
    """
    if _blank(raw):
        return Rejected(code=ErrorCode.EMPTY_INPUT, reason="Date string is required")
    zone = resolve_timezone(timezone)
    if zone is None:
        return Rejected(code=ErrorCode.INVALID_TIMEZONE, reason=invalid_timezone_reason(timezone))
    return _parse_in_zone(raw.strip(), zone)


def parse_month(raw: str, timezone: str = DEFAULT_TIMEZONE) -> ParseOutcome:
    """Parse *raw* as a month and return the first instant of that month.

    ``2025-9`` and ``2025-09`` both resolve to September 1st, 00:00 in
    *timezone*. Any full date is accepted too and truncated to its month.
    """
    if _blank(raw):
        return Rejected(code=ErrorCode.EMPTY_INPUT, reason="Month string is required")
    zone = resolve_timezone(timezone)
    if zone is None:
        return Rejected(code=ErrorCode.INVALID_TIMEZONE, reason=invalid_timezone_reason(timezone))

    text = raw.strip()
    bad_month: int | None = None
    m = YEAR_MONTH.matcher.match(text)
    if m is not None:
        fields = extract_fields(m)
        if 1 <= fields.month <= 12:
            instant = _month_start(fields.year, fields.month, zone)
            if instant is not None:
                return Parsed(instant=instant, matched_format=FormatId.YEAR_MONTH)
        else:
            bad_month = fields.month

    outcome = _parse_in_zone(text, zone)
    if isinstance(outcome, Parsed):
        local = to_wall_clock(outcome.instant, zone)
        instant = _month_start(local.year, local.month, zone)
        if instant is not None:
            return Parsed(instant=instant, matched_format=outcome.matched_format)

    if bad_month is not None:
        return Rejected(
            code=ErrorCode.INVALID_MONTH_COMPONENT,
            reason=(
                f"Invalid month component {bad_month}: month must be between 1 and 12. "
                f"{MONTH_FORMAT_HINT}"
            ),
        )
    return Rejected(
        code=ErrorCode.NO_FORMAT_MATCHED,
        reason=f"Invalid month format. {MONTH_FORMAT_HINT}",
    )


def month_of(instant: datetime, timezone: str = DEFAULT_TIMEZONE) -> tuple[int, int] | None:
    """Return ``(year, month)`` of *instant*'s wall clock in *timezone*."""
    zone = resolve_timezone(timezone)
    if zone is None:
        return None
    local = to_wall_clock(instant, zone)
    return local.year, local.month
