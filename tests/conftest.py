"""Shared pytest fixtures for dumpctl tests."""

from __future__ import annotations

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from dumpctl.config.settings import DumpSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _no_user_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own dumpctl.toml and DUMPCTL_* env out of tests.

    Pointing DUMPCTL_CONFIG at a missing file disables discovery; tests
    that exercise discovery remove it again.
    """
    for name in ("DUMPCTL_JSON_OUTPUT", "DUMPCTL_QUIET", "DUMPCTL_VERBOSE", "DUMPCTL_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DUMPCTL_CONFIG", str(tmp_path / "no-such-dumpctl.toml"))


@pytest.fixture
def settings() -> DumpSettings:
    """Settings with no config file and every flag at its default."""
    return DumpSettings.from_cli()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Write a dumpctl.toml under tmp_path and return its path."""

    def _write(text: str, name: str = "dumpctl.toml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the handlers AppContext installs when the CLI runs."""
    import logging

    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    dump = logging.getLogger("dumpctl")
    dump_level = dump.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    dump.setLevel(dump_level)
