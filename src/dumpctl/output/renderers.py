"""Rich renderers for dump service results.

Renderers are dispatched on ``result.op``: every ``dump_<domain>`` op
uses the plan renderer, anything else falls back to key-value output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from dumpctl.domain.fields import CommonField
from dumpctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from dumpctl.services.result import ServiceResult

_COMMON_NAMES = frozenset(f.render() for f in CommonField)


def render_result(result: ServiceResult) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if not result.ok:
        _render_error(result, console)
    elif result.op.startswith("dump_"):
        _render_plan(result, console)
    else:
        _render_generic(result, console)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output: one resolved field name per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    fields = result.data.get("fields")
    if isinstance(fields, list):
        return "\n".join(fields)
    return f"OK: {result.op}"


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="dump.ok"), Text(f"  {result.op}", style="dump.op"))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="dump.key"), Text(str(value)), sep="")


def _render_error(result: ServiceResult, console: Console) -> None:
    msg = result.error.message if result.error else "Unknown error"
    console.print(
        Text("ERROR:", style="dump.error"),
        Text(f" {result.op}", style="dump.op"),
        Text(f" — {msg}"),
        sep="",
    )


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _options_summary(data: dict[str, Any]) -> list[tuple[str, Any]]:
    """Non-empty request options worth echoing back, in display order."""
    rows: list[tuple[str, Any]] = [
        ("domain", data.get("domain")),
        ("source", data.get("source")),
        ("detail", data.get("detail")),
    ]
    for key in ("select", "filter", "sort"):
        if data.get(key) is not None:
            rows.append((key, data[key]))
    if data.get("top"):
        rows.append(("top", data["top"]))
    time = {k: v for k, v in (data.get("time") or {}).items() if v is not None}
    if time:
        rows.append(("time", " ".join(f"{k}={v}" for k, v in time.items())))
    output = data.get("output") or {}
    if output:
        rows.append(("format", output.get("format")))
        if output.get("path"):
            rows.append(("output", output["path"]))
    return rows


def _render_plan(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in _options_summary(result.data):
        _field(console, key, value)

    fields: list[str] = result.data.get("fields", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", style="dump.index", justify="right")
    table.add_column("Field")
    for index, name in enumerate(fields, start=1):
        style = "dump.common" if name in _COMMON_NAMES else "dump.field"
        table.add_row(str(index), Text(name, style=style))
    console.print()
    console.print(table)
