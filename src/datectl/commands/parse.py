"""Command: parse a date in any accepted format."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datectl.commands._base import DateCommand, timezone_option

if TYPE_CHECKING:
    from datectl.commands._context import AppContext


@click.command(
    cls=DateCommand,
    examples="""\
  datectl parse 2025-09-14
  datectl parse "09/14/2025" --tz America/New_York
  datectl parse "September 14, 2025"
  datectl parse "2025-09-14 14:30:00" --tz Europe/Berlin
  datectl --json parse 14/09/2025""",
)
@click.argument("text")
@timezone_option
@click.pass_obj
def parse(app: AppContext, text: str, timezone: str | None) -> None:
    """Parse TEXT and show it in every display format."""
    app.emit(app.dates.validate_date(text, timezone))
