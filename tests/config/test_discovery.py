"""Tests for config discovery and loading."""

from pathlib import Path

import pytest

from dumpctl.config.discovery import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    find_config,
    load_config,
    user_config_path,
)
from dumpctl.config.models import DumpConfig
from dumpctl.domain.types import OutputFormat


@pytest.fixture
def no_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Discovery without the env override and with an empty home directory."""
    monkeypatch.delenv(CONFIG_ENV_VAR)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path, no_env: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[output]\nraw = true\n")
        assert find_config(tmp_path) == config_file.resolve()

    def test_walks_up(self, tmp_path: Path, no_env: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file.resolve()

    def test_returns_none_when_not_found(self, tmp_path: Path, no_env: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_user_config_fallback(self, tmp_path: Path, no_env: Path) -> None:
        fallback = user_config_path()
        fallback.parent.mkdir(parents=True)
        fallback.write_text("")
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) == fallback

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text("")
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert find_config(tmp_path) == config_file

    def test_env_var_missing_file_disables_discovery(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "gone.toml"))
        assert find_config(tmp_path) is None


class TestLoadConfig:
    def test_loads_from_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text(
            '[output]\nformat = "kv"\nbr = "-"\n[patterns.iface]\nrx = ["interface", "rx"]\n'
        )
        cfg = load_config(config_file)
        assert cfg.output.format is OutputFormat.KV
        assert cfg.output.br == "-"
        assert cfg.patterns.iface == {"rx": ["interface", "rx"]}

    def test_defaults_when_missing(self, tmp_path: Path) -> None:
        assert load_config(cwd=tmp_path) == DumpConfig()
