"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``.  Configures logging and turns library errors into
Click errors with exit status 1.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

import click

from dotlib.errors import DotlibError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from dotlib.config.resolver import ConfigResult
    from dotlib.config.settings import DotlibSettings
    from dotlib.config.systems import SystemType


class AppContext:
    """Settings plus helpers shared by every subcommand."""

    def __init__(self, settings: DotlibSettings) -> None:
        self.settings = settings

        from dotlib.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def resolve(self, system_type: SystemType | str) -> ConfigResult:
        """Resolve config for *system_type* honoring ``--project-root``."""
        from dotlib.config.resolver import resolve_config

        with self.errors():
            return resolve_config(system_type, self.settings.project_root)

    @contextmanager
    def errors(self) -> Iterator[None]:
        """Re-raise :class:`DotlibError` as :class:`click.ClickException`."""
        try:
            yield
        except DotlibError as exc:
            raise click.ClickException(str(exc)) from exc

    def emit(self, output: str, *, ok: bool = True) -> None:
        """Write *output* to stdout, exiting with status 1 when not *ok*."""
        click.echo(output)
        if not ok:
            raise SystemExit(1)
