"""Root CLI group for datectl with global flags and command registration."""

from __future__ import annotations

import click

from datectl import __version__
from datectl.commands import register_commands
from datectl.commands._base import DateGroup
from datectl.commands._context import AppContext
from datectl.config.settings import DatectlSettings


@click.group(
    cls=DateGroup,
    invoke_without_command=True,
    examples="""\
  datectl parse "09/14/2025" --tz America/New_York
  datectl month 2025-9
  datectl range 2025-01-01 2025-01-02
  datectl format 2025-09-14T04:00:00Z --as NATURAL
  datectl formats
  datectl page 2025 09 14""",
)
@click.version_option(version=__version__, prog_name="datectl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """datectl — multi-format date parsing, formatting, and range checks."""
    settings = DatectlSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
