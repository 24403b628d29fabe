"""Config file and project root discovery.

Walk-up finder locates datectl.toml, similar to how git finds .git/.
Supports DATECTL_CONFIG env var and --config CLI flag overrides.

The project root (where the planner ``pages/`` tree lives) is the
directory holding datectl.toml, else the nearest enclosing git checkout,
else the working directory.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from datectl.config.models import DatectlConfig

CONFIG_FILENAME = "datectl.toml"
CONFIG_ENV_VAR = "DATECTL_CONFIG"


def _walk_up(start: Path | None, found: Callable[[Path], bool]) -> Path | None:
    """Return the first directory from *start* upwards for which *found* holds."""
    current = (start or Path.cwd()).resolve()
    while True:
        if found(current):
            return current
        parent = current.parent
        if parent == current:
            return None
        current = parent


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for datectl.toml.

    Returns the path to the config file, or None if not found.
    Checks DATECTL_CONFIG env var first; a dangling env path yields None.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    directory = _walk_up(start, lambda d: (d / CONFIG_FILENAME).is_file())
    return directory / CONFIG_FILENAME if directory else None


def find_project_root(start: Path | None = None, config_path: Path | None = None) -> Path:
    """Resolve the project root for *start*.

    Prefers the parent of *config_path*, then the nearest ``.git``
    directory, then *start* itself (or the cwd).
    """
    if config_path is not None:
        return config_path.parent
    git_root = _walk_up(start, lambda d: (d / ".git").exists())
    if git_root is not None:
        return git_root
    return (start or Path.cwd()).resolve()


def load_config(path: Path | None = None, cwd: Path | None = None) -> DatectlConfig:
    """Load and validate config from a TOML file.

    If *path* is None, uses find_config(*cwd*) to discover the file.
    Returns default DatectlConfig if no file is found.
    """
    if path is None:
        path = find_config(cwd)

    if path is None:
        return DatectlConfig()

    return DatectlConfig.model_validate(read_toml(path))


def read_toml(path: Path) -> dict[str, Any]:
    """Parse a TOML file, reporting syntax errors as a ClickException."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
