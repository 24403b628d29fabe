"""Format catalog — the accepted date layouts and their priority order.

Order matters: the parser stops at the first format whose shape matches
and whose components form a real calendar date. A string such as
``01/02/2025`` is valid under both US and EU layouts, so US wins by
priority. ``09/14/2025`` can only be US (14 is not a month), and
``14/09/2025`` can only be EU.

INVARIANT: the catalog is immutable; adding a format means inserting a
FormatSpec at the desired priority position.
"""

from __future__ import annotations

import functools
import re
from enum import StrEnum

from pydantic import BaseModel

from datectl.domain.patterns import compile_pattern


class FormatId(StrEnum):
    """Identifiers for every recognised layout."""

    ISO = "ISO"
    ISO_DATETIME = "ISO_DATETIME"
    US = "US"
    EU = "EU"
    SHORT = "SHORT"
    NATURAL = "NATURAL"
    YEAR_MONTH = "YEAR_MONTH"


class FormatSpec(BaseModel):
    """One named layout.

    Attributes:
        id: Catalog identifier.
        pattern: Layout used for rendering and shown to users.
        parse_pattern: Layout used for strict matching, when it differs
            from ``pattern`` (YEAR_MONTH accepts a single-digit month).
    """

    model_config = {"frozen": True}

    id: FormatId
    pattern: str
    parse_pattern: str | None = None

    @property
    def matcher(self) -> re.Pattern[str]:
        return _compiled(self.parse_pattern or self.pattern)


@functools.lru_cache(maxsize=None)
def _compiled(pattern: str) -> re.Pattern[str]:
    return compile_pattern(pattern)


ISO = FormatSpec(id=FormatId.ISO, pattern="yyyy-MM-dd")
ISO_DATETIME = FormatSpec(id=FormatId.ISO_DATETIME, pattern="yyyy-MM-dd HH:mm:ss")
US = FormatSpec(id=FormatId.US, pattern="MM/dd/yyyy")
EU = FormatSpec(id=FormatId.EU, pattern="dd/MM/yyyy")
SHORT = FormatSpec(id=FormatId.SHORT, pattern="MM/dd/yy")
NATURAL = FormatSpec(id=FormatId.NATURAL, pattern="MMMM d, yyyy")
YEAR_MONTH = FormatSpec(id=FormatId.YEAR_MONTH, pattern="yyyy-MM", parse_pattern="yyyy-M")

DATE_FORMATS: tuple[FormatSpec, ...] = (ISO, ISO_DATETIME, US, EU, SHORT, NATURAL)
MONTH_FORMATS: tuple[FormatSpec, ...] = (YEAR_MONTH, *DATE_FORMATS)

_BY_ID: dict[FormatId, FormatSpec] = {spec.id: spec for spec in MONTH_FORMATS}

FORMAT_EXAMPLES: dict[FormatId, str] = {
    FormatId.ISO: "2025-09-14",
    FormatId.ISO_DATETIME: "2025-09-14 14:30:00",
    FormatId.US: "09/14/2025",
    FormatId.EU: "14/09/2025",
    FormatId.SHORT: "09/14/25",
    FormatId.NATURAL: "September 14, 2025",
    FormatId.YEAR_MONTH: "2025-09",
}


def coerce_format_id(value: str | FormatId | None) -> FormatId | None:
    """Return the FormatId for *value*, or None when it names no format.

    Lookup is case-insensitive so ``"us"`` and ``"US"`` are equivalent.
    """
    if value is None:
        return None
    try:
        return FormatId(str(value).upper())
    except ValueError:
        return None


def get_format(format_id: str | FormatId | None) -> FormatSpec | None:
    """Look up a FormatSpec by identifier."""
    key = coerce_format_id(format_id)
    return _BY_ID.get(key) if key is not None else None


def accepted_patterns() -> list[str]:
    """Patterns of every full-date format, in priority order."""
    return [spec.pattern for spec in DATE_FORMATS]
