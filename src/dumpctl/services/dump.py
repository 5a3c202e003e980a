"""DumpService — turn one dump request into the ordered fields to print.

Everything that can be wrong with a request is detected here, before any
sample is fetched or rendered:

1. conflicting flags (``--fields``/``--pattern``, ``--end``/``--duration``,
   ``--sort``/``--rsort``)
2. row operations without ``--select``
3. unknown ``--pattern`` presets
4. unknown field tokens

The successful result is a plan the data and rendering layers consume:
resolved field names plus the row, time-range, and output options.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

import structlog

from dumpctl.config.settings import DumpSettings
from dumpctl.domain.errors import (
    ConflictingOptionsError,
    DumpError,
    InvalidOptionError,
    PatternNotFoundError,
)
from dumpctl.domain.fields import FieldId
from dumpctl.domain.registry import DumpDomain
from dumpctl.domain.types import FieldSource, OutputFormat
from dumpctl.services.result import ServiceError, ServiceResult

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class TimeRange:
    """Raw time-range strings; parsing belongs to the sample store."""

    begin: str | None = None
    end: str | None = None
    duration: str | None = None
    days: str | None = None


@dataclass(frozen=True)
class OutputOptions:
    """Renderer flags as given on the command line (None = not given)."""

    format: OutputFormat | None = None
    path: str | None = None
    disable_title: bool = False
    repeat_title: int | None = None
    br: str | None = None
    raw: bool = False


@dataclass(frozen=True)
class DumpRequest:
    """Everything a dump subcommand was asked for, still unresolved."""

    fields: tuple[str, ...] = ()
    pattern: str | None = None
    default: bool = False
    everything: bool = False
    detail: bool = False
    select: FieldId | None = None
    filter: re.Pattern[str] | None = None
    sort: bool = False
    rsort: bool = False
    top: int = 0
    time: TimeRange = field(default_factory=TimeRange)
    output: OutputOptions = field(default_factory=OutputOptions)


class DumpService:
    """Resolve dump requests against a domain and the loaded settings."""

    def __init__(self, settings: DumpSettings) -> None:
        self._settings = settings

    def plan(self, domain: DumpDomain, request: DumpRequest) -> ServiceResult:
        """Validate *request* and resolve its field list.

        Returns a failed result carrying the error code instead of raising.
        """
        op = f"dump_{domain.name}"
        warnings: list[str] = []
        try:
            fields, source = self.resolve_fields(domain, request, warnings=warnings)
        except DumpError as exc:
            log.debug("dump.rejected", domain=domain.name, code=exc.code)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code=exc.code, message=str(exc), detail=exc.detail),
            )

        log.debug("dump.resolved", domain=domain.name, source=source.value, count=len(fields))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "domain": domain.name,
                "source": source.value,
                "detail": request.detail or request.everything,
                "fields": [f.render() for f in fields],
                "select": request.select.render() if request.select else None,
                "filter": request.filter.pattern if request.filter else None,
                "sort": _sort_order(request),
                "top": request.top,
                "time": {
                    "begin": request.time.begin,
                    "end": request.time.end,
                    "duration": request.time.duration,
                    "days": request.time.days,
                },
                "output": self._output(request.output),
            },
            warnings=warnings,
        )

    def resolve_fields(
        self,
        domain: DumpDomain,
        request: DumpRequest,
        *,
        warnings: list[str] | None = None,
    ) -> tuple[list[FieldId], FieldSource]:
        """Return the flat field list to print and where it came from.

        Raises:
            DumpError: Any of the request errors listed in the module doc.
        """
        _check_conflicts(request)
        _check_select(domain, request)

        source = FieldSource.FIELDS
        tokens: tuple[str, ...] | list[str] = request.fields
        if request.pattern is not None:
            source = FieldSource.PATTERN
            tokens = self._load_pattern(domain, request.pattern)

        # Tokens are parsed even when --default/--everything replaces them.
        options = domain.parse(tokens)

        if request.everything:
            if tokens and warnings is not None:
                warnings.append(f"--everything overrides --{source.value}")
            return domain.expand_defaults(True), FieldSource.EVERYTHING
        if request.default or not tokens:
            if tokens and warnings is not None:
                warnings.append(f"--default overrides --{source.value}")
            return domain.expand_defaults(request.detail), FieldSource.DEFAULT
        return domain.expand(options, request.detail), source

    def _load_pattern(self, domain: DumpDomain, name: str) -> list[str]:
        saved = self._settings.patterns.for_domain(domain.name)
        if name not in saved:
            raise PatternNotFoundError(domain.name, name)
        return saved[name]

    def _output(self, cli: OutputOptions) -> dict[str, Any]:
        """Merge output flags over the ``[output]`` config defaults."""
        defaults = self._settings.output
        fmt = cli.format or defaults.format
        return {
            "format": OutputFormat(fmt).value,
            "path": cli.path,
            "title": not (cli.disable_title or defaults.disable_title),
            "repeat_title": (
                cli.repeat_title if cli.repeat_title is not None else defaults.repeat_title
            ),
            "br": cli.br if cli.br is not None else defaults.br,
            "raw": cli.raw or defaults.raw,
        }


def _check_conflicts(request: DumpRequest) -> None:
    if request.fields and request.pattern is not None:
        raise ConflictingOptionsError("--fields", "--pattern")
    if request.time.end is not None and request.time.duration is not None:
        raise ConflictingOptionsError("--end", "--duration")
    if request.sort and request.rsort:
        raise ConflictingOptionsError("--sort", "--rsort")


def _check_select(domain: DumpDomain, request: DumpRequest) -> None:
    if request.select is not None:
        if not domain.selectable:
            raise InvalidOptionError(f"--select is not supported by '{domain.name}'")
        if not isinstance(request.select, domain.field_type):
            raise InvalidOptionError(
                f"--select field '{request.select}' does not belong to '{domain.name}'"
            )
        return

    needs_select = [
        flag
        for flag, used in (
            ("--sort", request.sort),
            ("--rsort", request.rsort),
            ("--filter", request.filter is not None),
            ("--top", request.top > 0),
        )
        if used
    ]
    if needs_select:
        raise InvalidOptionError(
            f"{', '.join(needs_select)} requires --select",
            options=needs_select,
        )


def _sort_order(request: DumpRequest) -> str | None:
    if request.sort:
        return "asc"
    if request.rsort:
        return "desc"
    return None
