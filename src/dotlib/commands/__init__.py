"""Subcommand groups for the dotlib CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the command groups on the root CLI group (deferred imports)."""
    from dotlib.commands.config_cmd import config
    from dotlib.commands.metadata_cmd import metadata

    cli.add_command(config)
    cli.add_command(metadata)
