"""Standalone command: coerce values into one kind."""

from __future__ import annotations

import json

import click

from strval.codecs import jsoncodec
from strval.commands._base import KINDS, StrvalCommand
from strval.errors import StrvalError

_COERCE_EXAMPLES = """\
  strval coerce bool yes N 1 maybe
  strval coerce int 42 -7 abc
  strval coerce --json-token string 123 123.45 true '"text"'"""


@click.command(cls=StrvalCommand, examples=_COERCE_EXAMPLES)
@click.argument("kind", type=click.Choice(sorted(KINDS), case_sensitive=False))
@click.argument("values", nargs=-1, required=True)
@click.option(
    "--json-token",
    is_flag=True,
    help="Read each VALUE as a JSON token instead of raw text.",
)
def coerce(kind: str, values: tuple[str, ...], json_token: bool) -> None:
    """Coerce each VALUE into KIND and print its native JSON token.

    Values that fail to coerce print the kind's zero value; the cause is
    logged to stderr.
    """
    cls = KINDS[kind.lower()]
    for raw in values:
        try:
            token = json.loads(raw) if json_token else raw
        except json.JSONDecodeError as exc:
            msg = f"invalid JSON token {raw!r}: {exc.msg}"
            raise click.BadParameter(msg, param_hint="VALUES") from exc
        try:
            click.echo(jsoncodec.encode_value(cls.from_token(token)))
        except StrvalError as exc:
            raise click.ClickException(str(exc)) from exc
