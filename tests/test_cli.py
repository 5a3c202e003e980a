"""Tests for the root dumpctl CLI."""

import json

from click.testing import CliRunner

from dumpctl import __version__
from dumpctl.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "dumpctl" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_all_domains_registered() -> None:
    assert set(cli.commands) == {
        "system",
        "disk",
        "btrfs",
        "process",
        "cgroup",
        "iface",
        "network",
        "transport",
    }


# --- Global flags ---


def test_verbose_logs_to_stderr(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "system", "-b", "08:30", "-f", "hostname"])
    assert result.exit_code == 0
    assert "dump.resolved" in result.stderr
    assert "dump.resolved" not in result.stdout


def test_log_json(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(
        cli, ["-v", "--log-json", "system", "-b", "08:30", "-f", "hostname"]
    )
    assert result.exit_code == 0
    events = [json.loads(line) for line in result.stderr.splitlines() if line.startswith("{")]
    assert any(e["event"] == "dump.resolved" and e["domain"] == "system" for e in events)


def test_missing_config_file(cli_runner: CliRunner, tmp_path) -> None:
    result = cli_runner.invoke(
        cli, ["-c", str(tmp_path / "nope.toml"), "system", "-b", "08:30"]
    )
    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_invalid_toml(cli_runner: CliRunner, write_config) -> None:
    path = write_config("[output\nformat = ")
    result = cli_runner.invoke(cli, ["-c", str(path), "system", "-b", "08:30"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output


def test_env_flag(cli_runner: CliRunner, monkeypatch) -> None:
    monkeypatch.setenv("DUMPCTL_QUIET", "1")
    result = cli_runner.invoke(cli, ["system", "-b", "08:30", "-f", "hostname"])
    assert result.exit_code == 0
    assert result.stdout == "hostname\n"
