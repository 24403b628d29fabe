"""Shared pytest fixtures and test helpers for datectl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from datectl.config.logging import APP_LOGGER
from datectl.config.settings import DatectlSettings
from datectl.domain.outcomes import Parsed, ParseOutcome
from datectl.services.dates import DateService
from datectl.services.pages import PageService


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's DATECTL_* environment out of every test."""
    for name in (
        "DATECTL_CONFIG",
        "DATECTL_PROJECT_ROOT",
        "DATECTL_DATES__DEFAULT_TIMEZONE",
        "DATECTL_PAGES__DIRECTORY",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and app logger state after each test.

    ``configure_logging`` replaces the root handler; without this a
    handler bound to a finished CliRunner's stderr would leak forward.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger(APP_LOGGER)
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project directory with an empty datectl.toml and pages tree.

    This is the single source of truth for the project layout.
    """
    (tmp_path / "datectl.toml").write_text("")
    (tmp_path / "pages").mkdir()
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> DatectlSettings:
    return DatectlSettings.from_cli(project_root=project_root)


@pytest.fixture
def date_service(settings: DatectlSettings) -> DateService:
    return DateService(settings)


@pytest.fixture
def page_service(settings: DatectlSettings) -> PageService:
    return PageService(settings)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp project so the CLI discovers its datectl.toml.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(project_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def write_page(root: Path, relative: str, content: str) -> Path:
    """Create a page file under ``<root>/pages``."""
    path = root / "pages" / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def assert_parsed(outcome: ParseOutcome) -> Parsed:
    """Assert *outcome* is Parsed and return it narrowed."""
    assert isinstance(outcome, Parsed), outcome
    return outcome
