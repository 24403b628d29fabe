"""DateService — validation envelopes for dates, months, ranges, and renders.

Wraps the pure domain operations and shapes their outcomes into the
payloads callers consume: the parsed instant, the detected
format, and the same instant re-rendered in each display format.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, cast

from datectl.domain.formats import (
    DATE_FORMATS,
    FORMAT_EXAMPLES,
    MONTH_FORMATS,
    FormatId,
    coerce_format_id,
)
from datectl.domain.formatter import format_instant
from datectl.domain.outcomes import Formatted, Parsed, Rejected, Valid
from datectl.domain.parser import month_of, parse_date, parse_month
from datectl.domain.patterns import MONTH_NAMES
from datectl.domain.ranges import validate_range
from datectl.services._helpers import iso_z, now_utc, parse_iso_instant
from datectl.services.base import BaseService
from datectl.services.result import ServiceResult

if TYPE_CHECKING:
    from collections.abc import Iterable

MONTH_INPUT_EXAMPLES = ["2025-09", "2025-9", "09/14/2025"]

EXAMPLE_FORMATS = (FormatId.ISO, FormatId.US, FormatId.EU, FormatId.NATURAL, FormatId.SHORT)


def _supported_formats() -> dict[str, str]:
    return {str(spec.id): spec.pattern for spec in DATE_FORMATS}


def _render_all(
    instant: datetime,
    timezone: str,
    format_ids: Iterable[FormatId],
) -> dict[str, str]:
    """Render *instant* once per format id, keyed by the lower-cased id."""
    rendered: dict[str, str] = {}
    for fid in format_ids:
        outcome = format_instant(instant, fid, timezone)
        if isinstance(outcome, Formatted):
            rendered[str(fid).lower()] = outcome.text
    return rendered


class DateService(BaseService):
    """Date, month, and range validation plus catalog introspection."""

    def validate_date(self, text: str, timezone: str | None = None) -> ServiceResult:
        """Parse *text* and return it rendered in every configured display format."""
        op = "validate_date"
        tz = self._timezone(timezone)
        outcome = parse_date(text, tz)
        if isinstance(outcome, Rejected):
            return self._rejected(
                op,
                outcome,
                {"original_input": text, "supported_formats": _supported_formats()},
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "original_input": text,
                "parsed": iso_z(outcome.instant),
                "detected_format": str(outcome.matched_format),
                "timezone": tz,
                "formatted": _render_all(
                    outcome.instant, tz, self._settings.dates.display_formats
                ),
            },
        )

    def validate_month(self, text: str, timezone: str | None = None) -> ServiceResult:
        """Parse *text* as a month and describe the month it names."""
        op = "validate_month"
        tz = self._timezone(timezone)
        outcome = parse_month(text, tz)
        if isinstance(outcome, Rejected):
            return self._rejected(
                op,
                outcome,
                {"original_input": text, "examples": MONTH_INPUT_EXAMPLES},
            )

        # parse_month already rejected an unknown timezone
        year, month = cast("tuple[int, int]", month_of(outcome.instant, tz))
        month_name = MONTH_NAMES[month - 1]
        rendered = _render_all(outcome.instant, tz, (FormatId.YEAR_MONTH, FormatId.NATURAL))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "original_input": text,
                "parsed": iso_z(outcome.instant),
                "detected_format": str(outcome.matched_format),
                "timezone": tz,
                "month_info": {"year": year, "month": month, "month_name": month_name},
                "formatted": {
                    "year_month": rendered["year_month"],
                    "natural": rendered["natural"],
                    "display": f"{month_name} {year}",
                },
            },
        )

    def validate_range(
        self,
        start: str,
        end: str,
        timezone: str | None = None,
    ) -> ServiceResult:
        """Parse both ends of a range and report its duration."""
        op = "validate_range"
        tz = self._timezone(timezone)
        start_outcome = parse_date(start, tz)
        end_outcome = parse_date(end, tz)
        result = validate_range(start_outcome, end_outcome)

        if not isinstance(result, Valid):
            detail: dict[str, Any] = {"timezone": tz}
            if result.field is not None:
                detail["field"] = result.field
            if isinstance(start_outcome, Parsed) and isinstance(end_outcome, Parsed):
                detail["start"] = iso_z(start_outcome.instant)
                detail["end"] = iso_z(end_outcome.instant)
            return self._rejected(op, result, detail)

        # a Valid range implies both sides parsed
        start_parsed = cast("Parsed", start_outcome)
        end_parsed = cast("Parsed", end_outcome)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "start": {
                    "original": start,
                    "parsed": iso_z(start_parsed.instant),
                    "format": str(start_parsed.matched_format),
                },
                "end": {
                    "original": end,
                    "parsed": iso_z(end_parsed.instant),
                    "format": str(end_parsed.matched_format),
                },
                "duration": {
                    "total_days": result.total_days,
                    "total_hours": result.total_hours,
                    "human_readable": result.human_readable,
                },
                "timezone": tz,
            },
        )

    def render(
        self,
        instant_text: str,
        format_id: str = "ISO",
        timezone: str | None = None,
    ) -> ServiceResult:
        """Render an ISO 8601 timestamp (with offset) in a catalog format."""
        op = "format_date"
        tz = self._timezone(timezone)
        instant = parse_iso_instant(instant_text)
        outcome = format_instant(instant, format_id, tz)
        if isinstance(outcome, Rejected):
            return self._rejected(op, outcome, {"input": instant_text})

        warnings: list[str] = []
        resolved = coerce_format_id(format_id)
        if resolved is None:
            resolved = FormatId.ISO
            warnings.append(f"Unknown format {format_id!r}; rendered as ISO")
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "instant": iso_z(cast("datetime", instant)),
                "format": str(resolved),
                "timezone": tz,
                "text": outcome.text,
            },
            warnings=warnings,
        )

    def list_formats(self) -> ServiceResult:
        """Enumerate the catalog in priority order with an example for each layout."""
        return ServiceResult(
            ok=True,
            op="list_formats",
            data={
                "formats": {str(spec.id): spec.pattern for spec in MONTH_FORMATS},
                "examples": {str(fid): example for fid, example in FORMAT_EXAMPLES.items()},
                "date_priority": [str(spec.id) for spec in DATE_FORMATS],
                "month_priority": [str(spec.id) for spec in MONTH_FORMATS],
            },
        )

    def format_examples(
        self,
        now: datetime | None = None,
        timezone: str | None = None,
    ) -> ServiceResult:
        """Render *now* (default: the current time) in each user-facing layout."""
        op = "format_examples"
        tz = self._timezone(timezone)
        moment = now or now_utc()
        probe = format_instant(moment, FormatId.ISO, tz)
        if isinstance(probe, Rejected):
            return self._rejected(op, probe)
        rendered = _render_all(moment, tz, EXAMPLE_FORMATS)
        examples = {key.upper(): text for key, text in rendered.items()}
        return ServiceResult(ok=True, op=op, data={"timezone": tz, "examples": examples})
