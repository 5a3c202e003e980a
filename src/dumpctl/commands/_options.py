"""Click parameter types and option classes shared by dump commands."""

from __future__ import annotations

import re
from typing import Any

import click

from dumpctl.domain.errors import UnknownFieldError
from dumpctl.domain.fields import FieldId


class GreedyOption(click.Option):
    """A ``multiple=True`` option that also swallows following bare words.

    ``-f datetime cpu hostname`` collects three values, the same as
    ``-f datetime -f cpu -f hostname``. Collection stops at the next
    token that looks like an option (a lone ``-`` is still a value).
    """

    def add_to_parser(self, parser: Any, ctx: click.Context) -> None:
        super().add_to_parser(parser, ctx)
        for opt in self.opts:
            parser_opt = parser._long_opt.get(opt) or parser._short_opt.get(opt)
            if parser_opt is None:
                continue
            store = parser_opt.process

            def process(value: Any, state: Any, _store: Any = store) -> None:
                _store(value, state)
                while state.rargs and _is_value(state.rargs[0]):
                    _store(state.rargs.pop(0), state)

            parser_opt.process = process


def _is_value(arg: str) -> bool:
    return arg == "-" or not arg.startswith("-")


class FieldIdType(click.ParamType):
    """Resolve a token against one field table, case-insensitively."""

    name = "field"

    def __init__(self, field_type: type[FieldId]) -> None:
        self.field_type = field_type

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if isinstance(value, self.field_type):
            return value
        try:
            return self.field_type.parse(value)
        except UnknownFieldError as exc:
            self.fail(str(exc), param, ctx)


class RegexType(click.ParamType):
    """Compile the value as a regular expression."""

    name = "regex"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if isinstance(value, re.Pattern):
            return value
        try:
            return re.compile(value)
        except re.error as exc:
            self.fail(f"invalid regex {value!r}: {exc}", param, ctx)
