"""Timezone resolution and wall-clock <-> instant conversion.

Every conversion takes the zone as an explicit argument; nothing here
reads or mutates process-wide timezone state.
"""

from __future__ import annotations

from datetime import UTC, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DEFAULT_TIMEZONE = "UTC"


def resolve_timezone(timezone: object) -> ZoneInfo | None:
    """Return the ZoneInfo for an IANA identifier, or None if it is invalid."""
    if not isinstance(timezone, str) or not timezone.strip():
        return None
    try:
        return ZoneInfo(timezone.strip())
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return None


def invalid_timezone_reason(timezone: object) -> str:
    return f"Invalid timezone: {timezone!r}"


def to_instant(wall_clock: datetime, zone: ZoneInfo) -> datetime:
    """Interpret a naive wall-clock time in *zone* and return the UTC instant.

    Ambiguous times (DST fall-back) resolve to the first occurrence;
    nonexistent times (DST spring-forward) shift forward by the gap.
    """
    return wall_clock.replace(tzinfo=zone, fold=0).astimezone(UTC)


def to_wall_clock(instant: datetime, zone: ZoneInfo) -> datetime:
    """Convert an aware instant to naive wall-clock time in *zone*."""
    return instant.astimezone(zone).replace(tzinfo=None)
