"""Command: parse a month (YYYY-MM, YYYY-M, or any full date)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datectl.commands._base import DateCommand, timezone_option

if TYPE_CHECKING:
    from datectl.commands._context import AppContext


@click.command(
    cls=DateCommand,
    examples="""\
  datectl month 2025-09
  datectl month 2025-9 --tz Asia/Tokyo
  datectl month "September 14, 2025"
  datectl -q month 09/14/2025""",
)
@click.argument("text")
@timezone_option
@click.pass_obj
def month(app: AppContext, text: str, timezone: str | None) -> None:
    """Resolve TEXT to the first instant of its month."""
    app.emit(app.dates.validate_month(text, timezone))
