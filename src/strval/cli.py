"""Root CLI group for strval with global flags and command registration."""

from __future__ import annotations

import click

from strval import __version__
from strval.commands import register_commands
from strval.commands._base import StrvalGroup
from strval.config.logging import configure_logging
from strval.config.settings import StrvalSettings


@click.group(cls=StrvalGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="strval")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, log_json: bool) -> None:
    """strval: lenient bool/int/float/string coercion for documents."""
    settings = StrvalSettings.from_cli(verbose=verbose, log_json=log_json)
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
