"""Tests for config discovery, project root resolution, and loading."""

from pathlib import Path

import click
import pytest

from datectl.config.discovery import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    find_config,
    find_project_root,
    load_config,
)
from datectl.config.models import DatectlConfig


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[dates]\ndefault_timezone = "UTC"\n')
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        config_file = tmp_path / "custom.toml"
        config_file.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert find_config(tmp_path) == config_file

    def test_dangling_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestFindProjectRoot:
    def test_config_parent_wins(self, tmp_path: Path) -> None:
        config_file = tmp_path / "conf" / CONFIG_FILENAME
        assert find_project_root(tmp_path, config_file) == tmp_path / "conf"

    def test_git_checkout(self, tmp_path: Path) -> None:
        (tmp_path / ".git").mkdir()
        child = tmp_path / "docs" / "notes"
        child.mkdir(parents=True)
        assert find_project_root(child) == tmp_path.resolve()

    def test_falls_back_to_start(self, tmp_path: Path) -> None:
        child = tmp_path / "loose"
        child.mkdir()
        # tmp_path lives outside any git checkout
        root = find_project_root(child)
        assert root in (child.resolve(), *child.resolve().parents)

    def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / ".git").mkdir()
        monkeypatch.chdir(tmp_path)
        assert find_project_root() == tmp_path.resolve()


class TestLoadConfig:
    def test_loads_from_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text(
            '[dates]\ndefault_timezone = "Europe/Berlin"\n[pages]\ndirectory = "journal"\n'
        )
        cfg = load_config(config_file)
        assert cfg.dates.default_timezone == "Europe/Berlin"
        assert cfg.pages.directory == "journal"
        assert len(cfg.dates.display_formats) == 4  # default

    def test_returns_defaults_when_no_file(self, tmp_path: Path) -> None:
        assert load_config(cwd=tmp_path) == DatectlConfig()

    def test_discovers_from_cwd(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text('[pages]\ndirectory = "found"\n')
        child = tmp_path / "nested"
        child.mkdir()
        assert load_config(cwd=child).pages.directory == "found"

    def test_empty_file_returns_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        assert load_config(config_file) == DatectlConfig()

    def test_invalid_toml(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[pages\ndirectory =")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            load_config(config_file)
