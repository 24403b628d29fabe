"""Parametrized help tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from datectl.cli import cli

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["parse", "--help"], ["TEXT", "--tz"]),
    (["month", "--help"], ["TEXT", "--tz", "first instant"]),
    (["range", "--help"], ["START", "END", "--tz", "duration"]),
    (["format", "--help"], ["INSTANT", "--as", "--tz", "NATURAL"]),
    (["formats", "--help"], ["--today", "--tz"]),
    (["page", "--help"], ["YEAR", "MONTH", "DAY", "daily page"]),
]


def _help_id(item: tuple[list[str], list[str]]) -> str:
    args, _ = item
    return "_".join(a for a in args if a != "--help")


@pytest.mark.parametrize(
    "args,expected_keywords",
    HELP_COMMANDS,
    ids=[_help_id(item) for item in HELP_COMMANDS],
)
def test_help_output(cli_runner: CliRunner, args: list[str], expected_keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    for kw in expected_keywords:
        assert kw in result.output, f"Expected '{kw}' in help for {args}"


def test_root_help_lists_global_flags(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for flag in ("--json", "--quiet", "--verbose", "--log-json", "--config", "--version"):
        assert flag in result.output
