"""Click command class for dump subcommands.

``DumpCommand`` renders the domain's generated long description as its
help text (built only when help is actually shown) and adds an eager
``--examples`` flag that prints the example invocations and exits.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

if TYPE_CHECKING:
    from dumpctl.domain.registry import DumpDomain

# Click treats a paragraph whose first line is a lone \b as preformatted.
_NO_REWRAP = "\b"


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


def keep_commands_verbatim(text: str) -> str:
    """Mark ``$ ...`` example paragraphs so Click does not rewrap them."""
    paragraphs = text.strip("\n").split("\n\n")
    return "\n\n".join(
        f"{_NO_REWRAP}\n{p}" if p.startswith("$ ") else p for p in paragraphs
    )


class DumpCommand(click.Command):
    """Click Command bound to a :class:`DumpDomain`."""

    def __init__(self, *args: Any, domain: DumpDomain, **kwargs: Any) -> None:
        kwargs.setdefault("short_help", domain.about)
        super().__init__(*args, **kwargs)
        self.domain = domain
        if domain.examples:
            _add_examples_option(self, domain.example_commands())

    def format_help_text(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Write the generated long description instead of a docstring."""
        formatter.write_paragraph()
        with formatter.indentation():
            formatter.write_text(keep_commands_verbatim(self.domain.long_about))
