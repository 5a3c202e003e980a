"""Output mode dispatch for ServiceResult.

The CLI renders results for humans (Rich), for scripts (``--quiet``: just
the field names), or for machines (``--json``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dumpctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Which output mode the global flags selected."""

    json_output: bool = False
    quiet: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet; both win over the default Rich rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        from dumpctl.output.renderers import render_quiet

        return render_quiet(result)

    from dumpctl.output.renderers import render_result

    return render_result(result)
