"""Tests for DumpSettings — unified settings with TOML source."""

from collections.abc import Callable
from pathlib import Path

import click
import pytest

from dumpctl.config.settings import DumpSettings
from dumpctl.domain.types import OutputFormat


class TestDumpSettingsDefaults:
    def test_all_defaults(self) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = DumpSettings.from_cli()
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.output.format is OutputFormat.RAW
        assert settings.patterns.for_domain("process") == {}

    def test_frozen(self) -> None:
        settings = DumpSettings.from_cli()
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, write_config: Callable[..., Path]) -> None:
        path = write_config(
            '[output]\nformat = "json"\n[patterns.disk]\nio = ["name", "read", "write"]\n'
        )
        settings = DumpSettings.from_cli(config_path=str(path))
        assert settings.config_path == path
        assert settings.output.format is OutputFormat.JSON
        assert settings.output.raw is False  # default preserved
        assert settings.patterns.for_domain("disk") == {"io": ["name", "read", "write"]}

    def test_discovered_from_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("DUMPCTL_CONFIG")
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        (tmp_path / "dumpctl.toml").write_text("[output]\nraw = true\n")
        child = tmp_path / "a" / "b"
        child.mkdir(parents=True)
        settings = DumpSettings.from_cli(cwd=child)
        assert settings.output.raw is True

    def test_empty_toml_uses_defaults(self, write_config: Callable[..., Path]) -> None:
        settings = DumpSettings.from_cli(config_path=str(write_config("")))
        assert settings.output.format is OutputFormat.RAW

    def test_invalid_toml(self, write_config: Callable[..., Path]) -> None:
        path = write_config("[output\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            DumpSettings.from_cli(config_path=str(path))

    def test_explicit_missing_path(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="Config file not found"):
            DumpSettings.from_cli(config_path=str(tmp_path / "missing.toml"))


class TestPriority:
    def test_env_beats_toml(
        self, write_config: Callable[..., Path], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = write_config('[output]\nformat = "csv"\n')
        monkeypatch.setenv("DUMPCTL_OUTPUT__FORMAT", "tsv")
        settings = DumpSettings.from_cli(config_path=str(path))
        assert settings.output.format is OutputFormat.TSV

    def test_env_sets_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DUMPCTL_VERBOSE", "true")
        assert DumpSettings.from_cli().verbose is True

    def test_cli_flag_beats_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DUMPCTL_JSON_OUTPUT", "false")
        assert DumpSettings.from_cli(json_output=True).json_output is True

    def test_unset_cli_flag_keeps_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DUMPCTL_QUIET", "true")
        assert DumpSettings.from_cli(quiet=False).quiet is True
