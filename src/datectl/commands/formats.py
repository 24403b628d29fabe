"""Command: list accepted formats in priority order."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datectl.commands._base import DateCommand, timezone_option

if TYPE_CHECKING:
    from datectl.commands._context import AppContext


@click.command(
    cls=DateCommand,
    examples="""\
  datectl formats
  datectl formats --today
  datectl formats --today --tz Australia/Sydney""",
)
@click.option("--today", is_flag=True, help="Show today's date in each format instead.")
@timezone_option
@click.pass_obj
def formats(app: AppContext, today: bool, timezone: str | None) -> None:
    """List the accepted date formats."""
    if today:
        app.emit(app.dates.format_examples(timezone=timezone))
    else:
        app.emit(app.dates.list_formats())
