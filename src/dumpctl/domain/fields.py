"""Field identifier contracts and the common field set.

Each dump domain describes its leaf statistics as a :class:`FieldId`
table: an ordered ``StrEnum`` whose values are canonical lower-case names.
Parsing, rendering, and enumeration are all derived from that one table,
so the parser, the ``--detail`` expansion, and the help text cannot drift
apart.

INVARIANT: ``cls.parse(member.render()) is member`` for every member.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import Self

from dumpctl.domain.errors import UnknownFieldError


class FieldId(StrEnum):
    """Base for closed, case-insensitively parsed name tables.

    Subclasses only declare members; values are the canonical names.
    """

    @classmethod
    def parse(cls, token: str) -> Self:
        """Return the member whose canonical name is *token*, ignoring case.

        Raises:
            UnknownFieldError: If no member matches.
        """
        try:
            return cls(token.lower())
        except ValueError:
            raise UnknownFieldError(token) from None

    @classmethod
    def members(cls) -> list[Self]:
        """All members in declaration order."""
        return list(cls)

    @classmethod
    def with_prefix(cls, prefix: str) -> list[Self]:
        """Members nested under ``prefix.``, in declaration order."""
        head = f"{prefix}."
        return [member for member in cls if member.value.startswith(head)]

    def render(self) -> str:
        """Canonical short name."""
        return self.value


class CommonField(FieldId):
    """Fields every domain can print alongside its own."""

    TIMESTAMP = "timestamp"
    DATETIME = "datetime"


class AggregateGroup(FieldId):
    """A named shorthand for an ordered subset of one domain's fields.

    Group names form a second token namespace, parsed and rendered exactly
    like field ids. Subclasses implement :meth:`expand`.
    """

    def expand(self, detail: bool) -> Sequence[FieldId]:
        """Return the curated (``detail=False``) or full member list.

        The result is never empty and always drawn from the domain's own
        field table, in the group's fixed order.
        """
        raise NotImplementedError(f"{type(self).__name__} does not define expand()")
