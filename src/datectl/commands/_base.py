"""Custom Click base classes and shared options.

Provides DateCommand and DateGroup that accept an ``examples`` parameter.
When ``--examples`` is passed, the command prints usage examples and exits.
This keeps ``--help`` concise while making examples available on demand.

:func:`timezone_option` gives every parsing command the same ``--tz`` flag.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class DateCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class DateGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Sets ``command_class = DateCommand`` so all subcommands automatically
    accept the ``examples`` parameter without explicit ``cls=`` each time.
    """

    command_class = DateCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


F = TypeVar("F", bound=Callable[..., Any])


def timezone_option(func: F) -> F:
    """Attach the shared ``--tz`` option (None means the configured default)."""
    return click.option(
        "--tz",
        "timezone",
        default=None,
        metavar="IANA",
        help="Timezone the input is written in, e.g. America/New_York.",
    )(func)
