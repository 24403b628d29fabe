"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Builds services from the frozen settings and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datectl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from datectl.config.settings import DatectlSettings
    from datectl.services.dates import DateService
    from datectl.services.pages import PageService
    from datectl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  Services are created
    on first use so ``--help`` and ``--version`` stay cheap.
    """

    def __init__(self, settings: DatectlSettings) -> None:
        self.settings = settings

        from datectl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def dates(self) -> DateService:
        from datectl.services.dates import DateService

        return DateService(self.settings)

    @property
    def pages(self) -> PageService:
        from datectl.services.pages import PageService

        return PageService(self.settings)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
