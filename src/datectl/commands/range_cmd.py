"""Command: validate a date range and report its duration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datectl.commands._base import DateCommand, timezone_option

if TYPE_CHECKING:
    from datectl.commands._context import AppContext


@click.command(
    "range",
    cls=DateCommand,
    examples="""\
  datectl range 2025-01-01 2025-01-31
  datectl range "09/01/2025" "September 14, 2025" --tz America/Chicago
  datectl -q range 2025-01-01 2025-01-02
  datectl --json range 2025-02-01 2025-01-01""",
)
@click.argument("start")
@click.argument("end")
@timezone_option
@click.pass_obj
def range_cmd(app: AppContext, start: str, end: str, timezone: str | None) -> None:
    """Check that START is not after END and show the duration between them."""
    app.emit(app.dates.validate_range(start, end, timezone))
