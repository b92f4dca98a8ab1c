"""Subcommand modules for strval.

Provides register_commands() which uses deferred imports to keep
``strval --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from strval.commands.coerce import coerce
    from strval.commands.normalize import normalize

    cli.add_command(coerce)
    cli.add_command(normalize)
