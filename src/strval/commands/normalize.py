"""Standalone command: normalize selected fields of a JSON/YAML document."""

from __future__ import annotations

from pathlib import Path
from typing import Any, TextIO

import click
from pydantic import BaseModel, ConfigDict, ValidationError, create_model
from ruamel.yaml.error import YAMLError

from strval.codecs import jsoncodec, yamlcodec
from strval.commands._base import KINDS, StrvalCommand
from strval.errors import StrvalError

_NORMALIZE_EXAMPLES = """\
  strval normalize config.json -f enabled=bool -f count=int -f ratio=float
  cat config.yaml | strval normalize --format yaml -f port=int -f name=string"""

_FORMATS = ("json", "yaml")


def _parse_field(spec: str) -> tuple[str, type[Any]]:
    name, sep, kind = spec.partition("=")
    name, kind = name.strip(), kind.strip().lower()
    if not sep or not name:
        msg = f"expected NAME=KIND, got {spec!r}"
        raise click.BadParameter(msg, param_hint="--field")
    if kind not in KINDS:
        msg = f"unknown kind {kind!r} for field {name!r} (choose from {', '.join(sorted(KINDS))})"
        raise click.BadParameter(msg, param_hint="--field")
    return name, KINDS[kind]


def build_record_model(fields: dict[str, type[Any]]) -> type[BaseModel]:
    """Create a pydantic model with one wrapper field per entry.

    Listed fields default to their kind's zero value; unlisted keys are
    kept as extra fields and passed through unchanged.
    """
    definitions: dict[str, Any] = {name: (cls, cls()) for name, cls in fields.items()}
    return create_model(
        "Record",
        __config__=ConfigDict(extra="allow"),
        **definitions,
    )


def _detect_format(name: str) -> str:
    if Path(name).suffix.lower() in (".yaml", ".yml"):
        return "yaml"
    return "json"


@click.command(cls=StrvalCommand, examples=_NORMALIZE_EXAMPLES)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "-f",
    "--field",
    "field_specs",
    multiple=True,
    required=True,
    help="Field to normalize, as NAME=KIND (bool, int, float, string). Repeatable.",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(_FORMATS, case_sensitive=False),
    default=None,
    help="Document format (default: from SOURCE suffix, else json).",
)
def normalize(source: TextIO, field_specs: tuple[str, ...], fmt: str | None) -> None:
    """Decode a JSON/YAML mapping, coerce the listed fields, re-encode it.

    Reads SOURCE, or stdin when SOURCE is omitted or "-".
    """
    fields = dict(_parse_field(spec) for spec in field_specs)
    fmt = (fmt or _detect_format(getattr(source, "name", ""))).lower()
    text = source.read()

    try:
        data = jsoncodec.loads(text) if fmt == "json" else yamlcodec.load(text)
    except (ValueError, YAMLError) as exc:
        msg = f"cannot parse {fmt.upper()} input: {exc}"
        raise click.ClickException(msg) from exc
    if not isinstance(data, dict):
        msg = f"expected a {fmt.upper()} mapping at the top level, got {type(data).__name__}"
        raise click.ClickException(msg)

    model = build_record_model(fields)
    try:
        record = model.model_validate(data)
    except ValidationError as exc:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        msg = f"cannot normalize document: {errors}"
        raise click.ClickException(msg) from exc

    try:
        if fmt == "json":
            click.echo(jsoncodec.dumps(record))
        else:
            click.echo(yamlcodec.dump(record), nl=False)
    except StrvalError as exc:
        raise click.ClickException(str(exc)) from exc
