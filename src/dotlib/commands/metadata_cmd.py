"""Commands: check and migrate document metadata blocks."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from dotlib.commands._base import DotGroup
from dotlib.metadata.schema import DocumentType

if TYPE_CHECKING:
    from dotlib.commands._context import AppContext

_DOCTYPE_CHOICE = click.Choice([d.value for d in DocumentType])


@click.group(cls=DotGroup)
def metadata() -> None:
    """Validate and migrate embedded metadata blocks."""


@metadata.command(
    examples="""\
  dotlib metadata check {doctype} docs/
  dotlib --json metadata check {doctype} NOTE.md""",
)
@click.argument("doctype", type=_DOCTYPE_CHOICE)
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, path_type=Path),
)
@click.pass_obj
def check(app: AppContext, doctype: str, paths: tuple[Path, ...]) -> None:
    """Validate metadata in PATHS (files or directories of *.md)."""
    from dotlib.metadata.scan import scan_documents
    from dotlib.output.formatters import format_reports

    doc_type = DocumentType(doctype)
    result = app.resolve(doc_type.system_type)
    reports = scan_documents(paths, doc_type, result)
    app.emit(
        format_reports(reports, json_output=app.settings.json_output),
        ok=all(r.ok for r in reports),
    )


@metadata.command(
    examples="""\
  dotlib metadata migrate {doctype} FILE.md
  dotlib metadata migrate {doctype} FILE.md --write""",
)
@click.argument("doctype", type=_DOCTYPE_CHOICE)
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--write", is_flag=True, help="Rewrite FILE in place instead of printing.")
@click.pass_obj
def migrate(app: AppContext, doctype: str, file: Path, write: bool) -> None:
    """Convert a legacy blockquote header in FILE into a metadata block."""
    from dotlib.metadata.migrate import has_legacy_header, migrate_header

    text = file.read_text(encoding="utf-8")
    if not has_legacy_header(text, doctype):
        click.echo(f"No legacy header found in {file}", err=True)
        return
    migrated = migrate_header(text, doctype)
    if write:
        file.write_text(migrated, encoding="utf-8")
        click.echo(f"Migrated {file}", err=True)
    else:
        click.echo(migrated, nl=False)
