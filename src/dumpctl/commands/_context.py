"""AppContext — shared Click context for all dump commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Owns the settings and the single place where
service results are printed and turned into exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dumpctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from dumpctl.config.settings import DumpSettings
    from dumpctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: DumpSettings) -> None:
        self.settings = settings

        from dumpctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Print a ServiceResult with the right stream and exit status.

        * Success: stdout, returns normally. Warnings go to stderr so they
          don't pollute piped output (JSON mode already carries them).
        * Failure: stderr, exits with status 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
