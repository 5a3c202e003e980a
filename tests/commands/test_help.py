"""Parametrized help tests for every dump subcommand."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from dumpctl.cli import cli
from dumpctl.commands._base import keep_commands_verbatim
from dumpctl.domains import ALL_DOMAINS

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["system", "disk", "btrfs", "process", "cgroup", "iface", "network"]),
    (["system", "--help"], ["Dump system stats", "Available fields", "cpu.usage_pct", "--detail"]),
    (["disk", "--help"], ["fs_info", "--select", "--rsort", "--top", "--output-format"]),
    (["btrfs", "--help"], ["disk_usage: includes [disk_fraction, disk_bytes]."]),
    (["process", "--help"], ["exe_path", "--pattern", "--everything", "--filter"]),
    (["cgroup", "--help"], ["pressure.memory_full_pct", "Example Commands"]),
    (["iface", "--help"], ["rx_nohandler", "--repeat-title", "--disable-title"]),
    (["network", "--help"], ["icmp6.in_msgs_per_sec", "no effect."]),
    (["transport", "--help"], ["udp6.in_datagrams_pkts_per_sec", "--examples"]),
]


@pytest.mark.parametrize(
    ("args", "keywords"),
    HELP_COMMANDS,
    ids=[" ".join(args) for args, _ in HELP_COMMANDS],
)
def test_help(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    for keyword in keywords:
        assert keyword in result.output, f"{keyword!r} missing from {args}"


@pytest.mark.parametrize("domain", ALL_DOMAINS, ids=lambda d: d.name)
def test_example_commands_not_rewrapped(cli_runner: CliRunner, domain) -> None:
    result = cli_runner.invoke(cli, [domain.name, "--help"])
    assert result.exit_code == 0
    for example in domain.examples:
        assert f"$ {example.command}" in result.output


@pytest.mark.parametrize("name", ["system", "network", "transport"])
def test_no_select_on_unselectable_domains(cli_runner: CliRunner, name: str) -> None:
    result = cli_runner.invoke(cli, [name, "--help"])
    assert "-s, --select" not in result.output


def test_short_help_is_about(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert "Dump the link layer iface stats" in result.output


def test_help_does_not_need_begin(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["disk", "--help"])
    assert result.exit_code == 0
    assert "Missing option" not in result.output


class TestKeepCommandsVerbatim:
    def test_marks_only_command_paragraphs(self) -> None:
        text = "About\n\nSimple example:\n\n$ dumpctl disk -b x\n"
        assert keep_commands_verbatim(text) == (
            "About\n\nSimple example:\n\n\b\n$ dumpctl disk -b x"
        )
