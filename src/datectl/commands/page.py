"""Command: show a planner page for a day or a month."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datectl.commands._base import DateCommand

if TYPE_CHECKING:
    from datectl.commands._context import AppContext


@click.command(
    cls=DateCommand,
    examples="""\
  datectl page 2025 9 14
  datectl page 2025 09
  datectl -v page 2025 09 14""",
)
@click.argument("year")
@click.argument("month")
@click.argument("day", required=False)
@click.pass_obj
def page(app: AppContext, year: str, month: str, day: str | None) -> None:
    """Show the daily page for YEAR MONTH DAY, or the monthly overview without DAY."""
    if day is None:
        app.emit(app.pages.monthly_overview(year, month))
    else:
        app.emit(app.pages.daily_page(year, month, day))
