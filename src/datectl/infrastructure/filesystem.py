"""Filesystem layout for planner pages.

Pages live under the configured pages directory, grouped by year and
month::

    pages/2025/09/2025-09-14.md          daily page
    pages/2025/09/2025-09-overview.md    monthly overview

Only validated dates reach this module; it never parses user input.
"""

from __future__ import annotations

from pathlib import Path

PAGE_SUFFIX = ".md"
OVERVIEW_SUFFIX = "-overview"


def daily_page_path(pages_dir: Path, year: int, month: int, day: int) -> Path:
    """Path of the daily page for a calendar date."""
    return (
        pages_dir
        / f"{year:04d}"
        / f"{month:02d}"
        / f"{year:04d}-{month:02d}-{day:02d}{PAGE_SUFFIX}"
    )


def monthly_overview_path(pages_dir: Path, year: int, month: int) -> Path:
    """Path of the overview page for a month."""
    return (
        pages_dir
        / f"{year:04d}"
        / f"{month:02d}"
        / f"{year:04d}-{month:02d}{OVERVIEW_SUFFIX}{PAGE_SUFFIX}"
    )


def read_page(path: Path) -> str | None:
    """Return the page text, or None if the page does not exist."""
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8")
