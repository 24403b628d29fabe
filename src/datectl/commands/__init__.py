"""Subcommand modules for datectl.

Provides register_commands() which uses deferred imports so
``datectl --help`` does not load the services.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from datectl.commands.format_cmd import format_cmd
    from datectl.commands.formats import formats
    from datectl.commands.month import month
    from datectl.commands.page import page
    from datectl.commands.parse import parse
    from datectl.commands.range_cmd import range_cmd

    cli.add_command(parse)
    cli.add_command(month)
    cli.add_command(range_cmd)
    cli.add_command(format_cmd)
    cli.add_command(formats)
    cli.add_command(page)
