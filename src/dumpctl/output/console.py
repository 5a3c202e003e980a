"""Rich Console factory and theme for dumpctl output.

Consoles render into a StringIO buffer so renderers keep a
``render_*() -> str`` contract. In non-TTY environments (tests, pipes)
Rich drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DUMP_THEME = Theme(
    {
        "dump.ok": "bold green",
        "dump.error": "bold red",
        "dump.warning": "bold yellow",
        "dump.op": "bold cyan",
        "dump.key": "dim",
        "dump.common": "magenta",
        "dump.field": "bold",
        "dump.index": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=DUMP_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
