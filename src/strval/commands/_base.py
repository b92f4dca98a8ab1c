"""Custom Click base classes with --examples support.

Provides StrvalCommand and StrvalGroup that accept an ``examples`` parameter.
When ``--examples`` is passed, the command prints usage examples and exits.
"""

from __future__ import annotations

from typing import Any

import click

from strval.domain.values import Bool, Float, Int, String, StrValue

# CLI kind names -> wrapper classes.
KINDS: dict[str, type[StrValue[Any]]] = {
    "bool": Bool,
    "int": Int,
    "float": Float,
    "string": String,
}


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
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


class StrvalCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class StrvalGroup(click.Group):
    """Click Group whose subcommands default to :class:`StrvalCommand`."""

    command_class = StrvalCommand
