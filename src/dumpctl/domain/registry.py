"""Per-domain dump configuration and generated help text.

A :class:`DumpDomain` bundles everything static about one dump
subcommand: its field table, its aggregate groups, the default field
list, and example invocations. The long help text is built from those
live definitions the first time it is requested and cached for the rest
of the process.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from dumpctl.domain.expand import expand_fields
from dumpctl.domain.fields import AggregateGroup, CommonField, FieldId
from dumpctl.domain.lazy import Lazy
from dumpctl.domain.options import Agg, Unit, parse_option_fields

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=FieldId)
G = TypeVar("G", bound=AggregateGroup)

_BANNER = "********************** {title} **********************"
_DETAIL_EFFECT = "includes [<agg_field>.*] for each given aggregated field."
_DETAIL_NO_EFFECT = "no effect."


@dataclass(frozen=True)
class Example:
    """One example invocation shown in help, with an optional caption."""

    command: str
    caption: str | None = None


@dataclass(frozen=True)
class DumpDomain(Generic[F, G]):
    """Static description of one dump subcommand.

    Attributes:
        name: Subcommand name, also the ``[patterns.<name>]`` config section.
        about: One-line summary.
        field_type: The domain's leaf field table.
        group_type: The domain's aggregate group table.
        defaults: Option fields printed when nothing is selected.
        examples: Invocations listed at the end of the long help.
        selectable: Whether the domain accepts ``--select`` and the
            row operations that depend on it.
    """

    name: str
    about: str
    field_type: type[F]
    group_type: type[G]
    defaults: tuple[Unit[F] | Agg[G], ...]
    examples: tuple[Example, ...] = ()
    selectable: bool = True
    _long_about: Lazy[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_long_about", Lazy(lambda: build_long_about(self)))

    @property
    def long_about(self) -> str:
        """Generated help text (built once, then cached)."""
        return self._long_about.get()

    @property
    def detail_has_effect(self) -> bool:
        """True if any group's curated and full expansions differ."""
        return any(
            list(group.expand(False)) != list(group.expand(True))
            for group in self.group_type.members()
        )

    def parse(self, tokens: Iterable[str]) -> list[Unit[F] | Agg[G]]:
        """Resolve user tokens against this domain's namespaces."""
        return parse_option_fields(tokens, self.field_type, self.group_type)

    def expand(self, options: Iterable[Unit[F] | Agg[G]], detail: bool) -> list[FieldId]:
        return expand_fields(options, detail)

    def expand_defaults(self, detail: bool) -> list[FieldId]:
        return expand_fields(self.defaults, detail)

    def example_commands(self) -> str:
        """Example invocations, one per line, for ``--examples``."""
        return "\n".join(f"  {example.command}" for example in self.examples)


def join(items: Iterable[object]) -> str:
    """Render items by name, comma separated."""
    return ", ".join(str(item) for item in items)


def _banner(title: str) -> str:
    return _BANNER.format(title=title)


def _group_lines(groups: Sequence[AggregateGroup]) -> list[str]:
    return [f"* {group}: includes [{join(group.expand(False))}]." for group in groups]


def build_long_about(domain: DumpDomain) -> str:
    """Assemble the long help text from the domain's live definitions.

    Pure function of the domain's static configuration; callers should go
    through :attr:`DumpDomain.long_about` to get the cached copy.
    """
    detail = _DETAIL_EFFECT if domain.detail_has_effect else _DETAIL_NO_EFFECT
    paragraphs = [
        domain.about,
        _banner("Available fields"),
        join([*CommonField.members(), *domain.field_type.members()]),
        _banner("Aggregated fields"),
        *_group_lines(domain.group_type.members()),
        f"* --detail: {detail}",
        f"* --default: includes [{join(domain.defaults)}].",
        "* --everything: includes everything (equivalent to --default --detail).",
        _banner("Example Commands"),
    ]
    for example in domain.examples:
        if example.caption:
            paragraphs.append(f"{example.caption}:")
        paragraphs.append(f"$ {example.command}")
    logger.debug("help.generated domain=%s", domain.name)
    return "\n\n".join(paragraphs) + "\n"
