"""Expansion of option field lists into the flat leaf list to print."""

from __future__ import annotations

from collections.abc import Iterable

from dumpctl.domain.fields import FieldId
from dumpctl.domain.options import Agg, OptionField


def expand_fields(options: Iterable[OptionField], detail: bool) -> list[FieldId]:
    """Flatten *options* in order, replacing each group with its members.

    Units pass through unchanged; each ``Agg`` is replaced in place by
    ``group.expand(detail)``. Nothing is deduplicated, so a repeated field
    or overlapping groups print repeated columns.
    """
    resolved: list[FieldId] = []
    for option in options:
        if isinstance(option, Agg):
            resolved.extend(option.group.expand(detail))
        else:
            resolved.append(option.field)
    return resolved
