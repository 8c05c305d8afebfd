"""Commands: inspect resolved toolkit configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dotlib.commands._base import DotGroup
from dotlib.config.systems import SystemType

if TYPE_CHECKING:
    from dotlib.commands._context import AppContext

_SYSTEM_CHOICE = click.Choice([s.value for s in SystemType])


@click.group(cls=DotGroup)
def config() -> None:
    """Show merged configuration and resolved paths."""


@config.command(
    examples="""\
  dotlib config show {system}
  dotlib --json --project-root ~/src/app config show {system}""",
)
@click.argument("system", type=_SYSTEM_CHOICE)
@click.pass_obj
def show(app: AppContext, system: str) -> None:
    """Print the merged config for SYSTEM with its sources."""
    from dotlib.output.formatters import format_config

    result = app.resolve(system)
    app.emit(format_config(result, json_output=app.settings.json_output))


@config.command(
    examples="""\
  dotlib config path {system} {system}.path
  dotlib config path {system} {system}.template""",
)
@click.argument("system", type=_SYSTEM_CHOICE)
@click.argument("key")
@click.pass_obj
def path(app: AppContext, system: str, key: str) -> None:
    """Resolve the logical path stored at KEY (dotted) to an absolute path."""
    from dotlib.config.paths import resolve_logical_path
    from dotlib.output.formatters import format_path

    result = app.resolve(system)
    with app.errors():
        resolved = resolve_logical_path(result, key)
    app.emit(format_path(resolved, json_output=app.settings.json_output))
