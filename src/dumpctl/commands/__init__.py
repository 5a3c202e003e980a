"""Subcommand modules for dumpctl.

Provides register_commands(), which adds one dump subcommand per
registered domain.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register a dump subcommand for every domain on the root CLI group."""
    from dumpctl.commands.dump import make_dump_command
    from dumpctl.domains import ALL_DOMAINS

    for domain in ALL_DOMAINS:
        cli.add_command(make_dump_command(domain))
