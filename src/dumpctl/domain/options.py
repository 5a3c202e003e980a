"""Option fields — what one ``--fields`` token resolves to.

An option field is either a :class:`Unit` (a single leaf: a common field
or one of the domain's field ids) or an :class:`Agg` (a reference to an
aggregate group, expanded later). Tokens are resolved against three
namespaces in a fixed priority order:

1. common fields
2. aggregate groups
3. field ids

The first namespace that knows the token wins. Collisions between
namespaces are not detected: a lower-priority name that collides with a
higher-priority one is unreachable.
"""

from __future__ import annotations

from collections.abc import Iterable
from contextlib import suppress
from dataclasses import dataclass
from typing import Generic, TypeVar

from dumpctl.domain.errors import UnknownFieldError
from dumpctl.domain.fields import AggregateGroup, CommonField, FieldId

F = TypeVar("F", bound=FieldId)
G = TypeVar("G", bound=AggregateGroup)


@dataclass(frozen=True)
class Unit(Generic[F]):
    """A single leaf field, printed as-is."""

    field: CommonField | F

    def __str__(self) -> str:
        return self.field.render()


@dataclass(frozen=True)
class Agg(Generic[G]):
    """A group reference; renders as the group's own name, not its members."""

    group: G

    def __str__(self) -> str:
        return self.group.render()


OptionField = Unit | Agg


def parse_option_field(token: str, field_type: type[F], group_type: type[G]) -> Unit[F] | Agg[G]:
    """Resolve *token* in priority order: common, group, then field id.

    Raises:
        UnknownFieldError: If none of the three namespaces knows *token*.
    """
    with suppress(UnknownFieldError):
        return Unit(CommonField.parse(token))
    with suppress(UnknownFieldError):
        return Agg(group_type.parse(token))
    with suppress(UnknownFieldError):
        return Unit(field_type.parse(token))
    raise UnknownFieldError(token)


def parse_option_fields(
    tokens: Iterable[str], field_type: type[F], group_type: type[G]
) -> list[Unit[F] | Agg[G]]:
    """Resolve every token, stopping at the first unknown one."""
    return [parse_option_field(token, field_type, group_type) for token in tokens]


def render_option_field(option: OptionField) -> str:
    """Display name reflecting what the user asked for."""
    return str(option)
