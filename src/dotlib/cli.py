"""Root CLI group for dotlib with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from dotlib import __version__
from dotlib.commands import register_commands
from dotlib.commands._base import DotGroup
from dotlib.commands._context import AppContext
from dotlib.config.settings import DotlibSettings


@click.group(cls=DotGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="dotlib")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "--project-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Use this project root instead of discovering one.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    project_root: Path | None,
) -> None:
    """dotlib — shared config and metadata tooling for ADR, RunNote and Req toolkits."""
    settings = DotlibSettings.from_cli(
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
        project_root=project_root,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
