"""Date pattern tokens — one layout string drives both matching and rendering.

Patterns use date-fns style field letters:

- ``yyyy`` four-digit year, ``yy`` two-digit year
- ``MMMM`` full English month name, ``MM`` zero-padded month, ``M`` 1-2 digit month
- ``dd`` zero-padded day, ``d`` 1-2 digit day
- ``HH`` / ``mm`` / ``ss`` zero-padded hour, minute, second

Anything else is a literal. Matching is strict: the derived regex is
anchored at both ends and each field accepts exactly its documented width.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_MONTH_LOOKUP: dict[str, int] = {name.lower(): i for i, name in enumerate(MONTH_NAMES, 1)}

# POSIX strptime convention for %y.
YY_PIVOT = 69

_TOKEN_RE = re.compile(r"y+|M+|d+|H+|m+|s+|[^yMdHms]+")

# token -> (group name, regex fragment)
_FIELDS: dict[str, tuple[str, str]] = {
    "yyyy": ("year", r"\d{4}"),
    "yy": ("year2", r"\d{2}"),
    "MMMM": ("month_name", "|".join(MONTH_NAMES)),
    "MM": ("month", r"\d{2}"),
    "M": ("month", r"\d{1,2}"),
    "dd": ("day", r"\d{2}"),
    "d": ("day", r"\d{1,2}"),
    "HH": ("hour", r"\d{2}"),
    "mm": ("minute", r"\d{2}"),
    "ss": ("second", r"\d{2}"),
}


@dataclass(frozen=True)
class Fields:
    """Raw components pulled out of a shape match, before calendar checks."""

    year: int
    month: int
    day: int = 1
    hour: int = 0
    minute: int = 0
    second: int = 0


def tokenize(pattern: str) -> list[str]:
    """Split *pattern* into field tokens and literal runs.

    Raises ValueError for field letters of an unsupported width
    (e.g. ``yyy``) instead of treating them as literals.
    """
    tokens = _TOKEN_RE.findall(pattern)
    for token in tokens:
        if token[0] in "yMdHms" and token not in _FIELDS:
            msg = f"Unsupported pattern token {token!r} in {pattern!r}"
            raise ValueError(msg)
    return tokens


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Build an anchored, case-insensitive regex for *pattern*."""
    parts: list[str] = []
    for token in tokenize(pattern):
        field = _FIELDS.get(token)
        if field is None:
            parts.append(re.escape(token))
        else:
            name, fragment = field
            parts.append(f"(?P<{name}>{fragment})")
    return re.compile("^" + "".join(parts) + "$", re.IGNORECASE | re.ASCII)


def expand_year(two_digit: int) -> int:
    """Map a two-digit year onto a full year using the fixed pivot.

    >>> expand_year(25)
    2025
    >>> expand_year(69)
    1969
    """
    return two_digit + (1900 if two_digit >= YY_PIVOT else 2000)


def extract_fields(match: re.Match[str]) -> Fields:
    """Convert a shape match into integer components."""
    groups = match.groupdict()
    if groups.get("year") is not None:
        year = int(groups["year"])
    else:
        year = expand_year(int(groups["year2"]))
    if groups.get("month_name") is not None:
        month = _MONTH_LOOKUP[groups["month_name"].lower()]
    else:
        month = int(groups["month"])
    return Fields(
        year=year,
        month=month,
        day=int(groups.get("day") or 1),
        hour=int(groups.get("hour") or 0),
        minute=int(groups.get("minute") or 0),
        second=int(groups.get("second") or 0),
    )


_RENDERERS: dict[str, Callable[[datetime], str]] = {
    "yyyy": lambda m: f"{m.year:04d}",
    "yy": lambda m: f"{m.year % 100:02d}",
    "MMMM": lambda m: MONTH_NAMES[m.month - 1],
    "MM": lambda m: f"{m.month:02d}",
    "M": lambda m: str(m.month),
    "dd": lambda m: f"{m.day:02d}",
    "d": lambda m: str(m.day),
    "HH": lambda m: f"{m.hour:02d}",
    "mm": lambda m: f"{m.minute:02d}",
    "ss": lambda m: f"{m.second:02d}",
}


def render(pattern: str, moment: datetime) -> str:
    """Render the wall-clock fields of *moment* through *pattern*."""
    out: list[str] = []
    for token in tokenize(pattern):
        renderer = _RENDERERS.get(token)
        out.append(renderer(moment) if renderer else token)
    return "".join(out)
