"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import UTC, datetime


def now_utc() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def iso_z(instant: datetime) -> str:
    """Serialize an instant as UTC ISO 8601 with millisecond precision.

    Examples:
        >>> from datetime import datetime, UTC
        >>> iso_z(datetime(2025, 9, 14, 4, 0, tzinfo=UTC))
        '2025-09-14T04:00:00.000Z'
    """
    return instant.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso_instant(text: str) -> datetime | None:
    """Parse an ISO 8601 timestamp that carries an offset (or ``Z``).

    Returns None for malformed text or naive timestamps.
    """
    try:
        value = datetime.fromisoformat(text.strip())
    except (ValueError, AttributeError):
        return None
    if value.utcoffset() is None:
        return None
    return value
