"""Human/JSON renderers for CLI payloads.

Human output goes through a themed rich Console; ``--json`` output is a
single indented JSON document on stdout.
"""

from __future__ import annotations

import json as _json
from collections.abc import Mapping, Sequence, Set
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import UUID

from rich.markup import escape

from dotlib.output.console import create_console, get_output

if TYPE_CHECKING:
    from dotlib.config.resolver import ConfigResult
    from dotlib.metadata.scan import DocumentReport


def to_jsonable(value: Any) -> Any:
    """Convert config and metadata values into JSON-compatible values."""
    if isinstance(value, Mapping):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, Set):
        return sorted((to_jsonable(v) for v in value), key=str)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Path | UUID):
        return str(value)
    if isinstance(value, Sequence) and not isinstance(value, str):
        return [to_jsonable(v) for v in value]
    return value


def config_payload(result: ConfigResult) -> dict[str, Any]:
    return {
        "system_type": result.system_type.value,
        "project_root": str(result.project_root),
        "sources": to_jsonable(result.sources.model_dump(by_alias=True)),
        "config": to_jsonable(result.config),
    }


def format_config(result: ConfigResult, *, json_output: bool = False) -> str:
    """Render a resolved config."""
    payload = config_payload(result)
    if json_output:
        return _json.dumps(payload, indent=2, default=str)

    console = create_console()
    console.print(f"[dot.key]system[/]: {payload['system_type']}")
    console.print(f"[dot.key]project root[/]: [dot.path]{escape(payload['project_root'])}[/]")
    for name, source in payload["sources"].items():
        shown = escape(source) if source else "(none)"
        console.print(f"[dot.key]{name} config[/]: [dot.path]{shown}[/]")
    console.print(escape(_json.dumps(payload["config"], indent=2, default=str)))
    return get_output(console)


def format_path(path: Path, *, json_output: bool = False) -> str:
    if json_output:
        return _json.dumps({"path": str(path)})
    return str(path)


def format_reports(reports: Sequence[DocumentReport], *, json_output: bool = False) -> str:
    """Render metadata check reports, one line per document plus details."""
    if json_output:
        payload = {
            "ok": all(r.ok for r in reports),
            "count": len(reports),
            "reports": [to_jsonable(r.model_dump(mode="json")) for r in reports],
        }
        return _json.dumps(payload, indent=2, default=str)

    styles = {
        "valid": ("OK", "dot.ok"),
        "invalid": ("INVALID", "dot.error"),
        "parse-error": ("PARSE-ERROR", "dot.error"),
        "skipped": ("SKIP", "dot.skip"),
    }
    console = create_console()
    for report in reports:
        label, style = styles[report.status]
        line = f"[{style}]{label}[/] {escape(str(report.path))}"
        if report.message:
            line += f" [dot.skip]({escape(report.message)})[/]"
        console.print(line)
        for error in report.errors:
            console.print(f"  [dot.error]{error.category}[/]: {escape(error.message)}")
        for warning in report.warnings:
            console.print(f"  [dot.warning]{warning.category}[/]: {escape(warning.message)}")
    invalid = sum(1 for r in reports if not r.ok)
    console.print(f"{len(reports)} checked, {invalid} failed")
    return get_output(console)
