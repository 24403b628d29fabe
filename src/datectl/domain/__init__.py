"""Domain layer — the date parsing, formatting, and range engine.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, config, or output.
"""

from datectl.domain.formats import (
    DATE_FORMATS,
    FORMAT_EXAMPLES,
    MONTH_FORMATS,
    FormatId,
    FormatSpec,
    accepted_patterns,
    get_format,
)
from datectl.domain.formatter import format_instant
from datectl.domain.outcomes import (
    ErrorCode,
    FormatOutcome,
    Formatted,
    Invalid,
    Parsed,
    ParseOutcome,
    RangeResult,
    Rejected,
    Valid,
)
from datectl.domain.parser import parse_date, parse_month
from datectl.domain.ranges import human_duration, validate_range

__all__ = [
    "DATE_FORMATS",
    "FORMAT_EXAMPLES",
    "MONTH_FORMATS",
    "ErrorCode",
    "FormatId",
    "FormatOutcome",
    "FormatSpec",
    "Formatted",
    "Invalid",
    "ParseOutcome",
    "Parsed",
    "RangeResult",
    "Rejected",
    "Valid",
    "accepted_patterns",
    "format_instant",
    "get_format",
    "human_duration",
    "parse_date",
    "parse_month",
    "validate_range",
]
