"""Dump subcommands — one Click command per registered domain.

Every domain shares the same option surface; only ``--select`` depends on
whether the domain supports row selection. Options are parsed here and
handed unresolved to :class:`~dumpctl.services.dump.DumpService`, which
owns all validation beyond simple type conversion.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from dumpctl.commands._base import DumpCommand
from dumpctl.commands._context import AppContext
from dumpctl.commands._options import FieldIdType, GreedyOption, RegexType
from dumpctl.domain.registry import DumpDomain
from dumpctl.domain.types import OutputFormat
from dumpctl.services.dump import DumpRequest, DumpService, OutputOptions, TimeRange

Decorator = Callable[[Callable[..., Any]], Callable[..., Any]]

_FORMATS = [fmt.value for fmt in OutputFormat]


def _common_options() -> list[Decorator]:
    """Options every dump subcommand accepts, in help order."""
    return [
        click.option(
            "-b", "--begin", required=True, help="Begin time, e.g. '08:30:00' or '3 hours ago'."
        ),
        click.option("-e", "--end", default=None, help="End time (default: now)."),
        click.option("--duration", default=None, help="Time span from --begin, e.g. '10m'."),
        click.option("-r", "--yesterdays", default=None, help="Shift the range back N days."),
        click.option(
            "-f",
            "--fields",
            cls=GreedyOption,
            multiple=True,
            help="Fields or aggregated fields to print (space separated).",
        ),
        click.option("-p", "--pattern", default=None, help="Saved field list from the config."),
        click.option("--default", "default", is_flag=True, help="Print the default fields."),
        click.option("--everything", is_flag=True, help="Print every field in full detail."),
        click.option("-d", "--detail", is_flag=True, help="Expand aggregated fields fully."),
        click.option(
            "-F", "--filter", "filter_", type=RegexType(), default=None,
            help="Keep rows whose --select value matches this regex.",
        ),
        click.option("--sort", is_flag=True, help="Sort rows by --select, ascending."),
        click.option("--rsort", is_flag=True, help="Sort rows by --select, descending."),
        click.option(
            "--top", type=click.IntRange(min=0), default=0, show_default=True,
            help="Keep the first N rows per time slice (0 keeps all).",
        ),
        click.option(
            "-O",
            "--output-format",
            type=click.Choice(_FORMATS, case_sensitive=False),
            default=None,
            help="Output format (default from config, else raw).",
        ),
        click.option("-o", "--output", "output_path", default=None, help="Write to a file."),
        click.option("--disable-title", is_flag=True, help="Omit the title row."),
        click.option(
            "--repeat-title", type=click.IntRange(min=1), default=None,
            help="Repeat the title row every N rows.",
        ),
        click.option("--br", default=None, help="Line separator between time slices."),
        click.option("--raw", is_flag=True, help="Print raw values without unit formatting."),
    ]


def _select_option(domain: DumpDomain) -> Decorator:
    return click.option(
        "-s",
        "--select",
        type=FieldIdType(domain.field_type),
        default=None,
        help="Field the row operations (--filter, --sort, --top) act on.",
    )


def make_dump_command(domain: DumpDomain) -> click.Command:
    """Build the ``dumpctl <domain>`` command."""

    @click.pass_obj
    def run(
        app: AppContext,
        *,
        fields: tuple[str, ...],
        pattern: str | None,
        default: bool,
        everything: bool,
        detail: bool,
        filter_: Any,
        sort: bool,
        rsort: bool,
        top: int,
        begin: str,
        end: str | None,
        duration: str | None,
        yesterdays: str | None,
        output_format: str | None,
        output_path: str | None,
        disable_title: bool,
        repeat_title: int | None,
        br: str | None,
        raw: bool,
        select: Any = None,
    ) -> None:
        request = DumpRequest(
            fields=fields,
            pattern=pattern,
            default=default,
            everything=everything,
            detail=detail,
            select=select,
            filter=filter_,
            sort=sort,
            rsort=rsort,
            top=top,
            time=TimeRange(begin=begin, end=end, duration=duration, days=yesterdays),
            output=OutputOptions(
                format=OutputFormat(output_format.lower()) if output_format else None,
                path=output_path,
                disable_title=disable_title,
                repeat_title=repeat_title,
                br=br,
                raw=raw,
            ),
        )
        app.emit(DumpService(app.settings).plan(domain, request))

    decorators = _common_options()
    if domain.selectable:
        decorators.append(_select_option(domain))
    for decorator in reversed(decorators):
        run = decorator(run)
    return click.command(domain.name, cls=DumpCommand, domain=domain)(run)
