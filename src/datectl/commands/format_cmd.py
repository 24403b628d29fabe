"""Command: render a UTC instant in a catalog format."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datectl.commands._base import DateCommand, timezone_option

if TYPE_CHECKING:
    from datectl.commands._context import AppContext


@click.command(
    "format",
    cls=DateCommand,
    examples="""\
  datectl format 2025-09-14T04:00:00Z --as US --tz America/New_York
  datectl format 2025-09-14T12:00:00+00:00 --as NATURAL
  datectl -q format 2025-09-14T00:00:00Z --as SHORT""",
)
@click.argument("instant")
@click.option(
    "--as",
    "format_id",
    default="ISO",
    show_default=True,
    help="Format id (ISO, ISO_DATETIME, US, EU, SHORT, NATURAL, YEAR_MONTH).",
)
@timezone_option
@click.pass_obj
def format_cmd(app: AppContext, instant: str, format_id: str, timezone: str | None) -> None:
    """Render INSTANT (ISO 8601 with offset) as wall-clock text."""
    app.emit(app.dates.render(instant, format_id, timezone))
