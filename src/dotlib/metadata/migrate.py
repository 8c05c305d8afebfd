"""Legacy header migration.

Older documents carry metadata as blockquote-style label lines under the
title::

    # ADR-005: Use Postgres

    > **Date:** 2024-03-01
    > **Status:** Accepted
    > **Tags:** database, storage

The helpers here rewrite that header into a ``:metadata`` block placed
right after the first heading line (or at the top when there is none).
They are pure text transforms: no I/O and no schema validation.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from dotlib.edn import dump_value, keyword
from dotlib.metadata.extract import METADATA_TAG, find_metadata_block
from dotlib.metadata.schema import DocumentType

_LABEL_RE = re.compile(
    r"^\s*(?:>\s*)?\*\*(?P<label>[^*:]+?)(?::\*\*|\*\*:)\s*(?P<value>.*?)\s*$"
)
_BLANK_QUOTE_RE = re.compile(r"^\s*>\s*$")
_HEADING_RE = re.compile(r"^#{1,6}\s+\S")

Converter = Callable[[str], Any]


def _as_string(value: str) -> str:
    return value.strip().strip("`")


def _as_keyword(value: str) -> Any:
    name = re.sub(r"[\s_]+", "-", value.strip().strip("`:").lower())
    return keyword(name)


def _as_tag_set(value: str) -> frozenset[Any]:
    names = (part.strip().lstrip("#:") for part in re.split(r"[,\s]+", value))
    return frozenset(keyword(name) for name in names if name)


def _as_filename_set(value: str) -> frozenset[str]:
    names = (part.strip().strip("`[]()") for part in value.split(","))
    return frozenset(name for name in names if name)


# label (lowercased) -> (metadata key, converter)
_ADR_FIELDS: dict[str, tuple[str, Converter]] = {
    "date": ("date", _as_string),
    "status": ("status", _as_keyword),
    "tags": ("tag", _as_tag_set),
    "tag": ("tag", _as_tag_set),
    "runnotes": ("runnotes", _as_filename_set),
    "updated": ("updated", _as_string),
}

_RUNNOTE_FIELDS: dict[str, tuple[str, Converter]] = {
    "phase": ("phase", _as_keyword),
    "tags": ("tag", _as_tag_set),
    "tag": ("tag", _as_tag_set),
    "status": ("status", _as_keyword),
    "thinking mode": ("thinking-mode", _as_keyword),
    "date": ("date", _as_string),
    "created": ("date.created", _as_string),
    "modified": ("date.modified", _as_string),
    "complexity": ("complexity", _as_keyword),
}

_FIELDS: dict[DocumentType, dict[str, tuple[str, Converter]]] = {
    DocumentType.ADR: _ADR_FIELDS,
    DocumentType.RUNNOTE: _RUNNOTE_FIELDS,
}

_KEY_ORDER: dict[DocumentType, list[str]] = {
    DocumentType.ADR: ["date", "updated", "status", "tag", "runnotes"],
    DocumentType.RUNNOTE: ["phase", "status", "date", "tag", "thinking-mode", "complexity"],
}


def _scan_header(
    lines: list[str], fields: dict[str, tuple[str, Converter]]
) -> tuple[dict[str, Any], set[int]]:
    """Collect recognised fields from the first run of label lines.

    Returns the metadata and the indices of lines to remove.
    """
    data: dict[str, Any] = {}
    dates: dict[str, Any] = {}
    date_lines: dict[str, int] = {}
    remove: set[int] = set()
    blank_quotes: list[int] = []
    kept_labels = False
    in_run = False

    for i, line in enumerate(lines):
        match = _LABEL_RE.match(line)
        if match is None:
            if in_run and _BLANK_QUOTE_RE.match(line):
                blank_quotes.append(i)
                continue
            if in_run and line.strip():
                break
            continue
        spec = fields.get(match.group("label").strip().lower())
        if spec is None:
            if in_run:
                kept_labels = True
            continue
        in_run = True
        key, convert = spec
        value = match.group("value")
        if not value:
            remove.add(i)
            continue
        converted = convert(value)
        if key == "date" or key.startswith("date."):
            dates[key.rpartition(".")[2]] = converted
            date_lines[key.rpartition(".")[2]] = i
            continue
        if converted:
            data[key] = converted
        remove.add(i)

    date, consumed = _fold_dates(dates)
    if date is not None:
        data["date"] = date
    remove.update(date_lines[k] for k in consumed)
    if not kept_labels and consumed == set(date_lines):
        remove.update(blank_quotes)
    return data, remove


def _fold_dates(dates: dict[str, Any]) -> tuple[Any, set[str]]:
    """Combine Date/Created/Modified values into one ``:date`` value.

    Created wins over a plain Date as the creation time; a plain Date
    stands in for it otherwise. Returns the value (None when there is
    nothing to write) and which of the labels it consumed.
    """
    created_key = "created" if dates.get("created") else "date" if dates.get("date") else None
    if created_key is None:
        return None, set()
    modified = dates.get("modified")
    if not modified:
        if created_key == "date":
            return dates["date"], {"date"}
        return {keyword("created"): dates["created"]}, {"created"}
    folded = {keyword("created"): dates[created_key], keyword("modified"): modified}
    return folded, {created_key, "modified"}


def _render_block(data: dict[str, Any], order: list[str]) -> list[str]:
    keys = [k for k in order if k in data] + sorted(k for k in data if k not in order)
    entries = [f"{dump_value(keyword(k))} {dump_value(data[k])}" for k in keys]
    body = ["{" + entries[0]] + [" " + entry for entry in entries[1:]]
    body[-1] += "}"
    return [f"```clojure {METADATA_TAG}", *body, "```"]


def _strip_leading_blank(lines: list[str]) -> list[str]:
    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1
    return lines[start:]


def migrate_header(text: str, document_type: DocumentType | str) -> str:
    """Rewrite a legacy label header in *text* into a metadata block.

    Returns *text* unchanged if it already has a metadata block or no
    recognised legacy field.
    """
    doc_type = DocumentType(document_type)
    if find_metadata_block(text) is not None:
        return text

    lines = text.split("\n")
    data, remove = _scan_header(lines, _FIELDS[doc_type])
    if not data:
        return text

    block = _render_block(data, _KEY_ORDER[doc_type])
    kept = [line for i, line in enumerate(lines) if i not in remove]

    heading = next((i for i, line in enumerate(kept) if _HEADING_RE.match(line)), None)
    if heading is None:
        out = [*block, "", *_strip_leading_blank(kept)]
    else:
        rest = _strip_leading_blank(kept[heading + 1 :])
        out = [*kept[: heading + 1], "", *block, "", *rest]
    return "\n".join(out)


def migrate_adr_header(text: str) -> str:
    """Migrate a legacy ADR header (Date, Status, Tags, RunNotes, Updated)."""
    return migrate_header(text, DocumentType.ADR)


def migrate_runnote_header(text: str) -> str:
    """Migrate a legacy RunNote header (Phase, Tags, Status, Thinking Mode, dates, Complexity)."""
    return migrate_header(text, DocumentType.RUNNOTE)


def has_legacy_header(text: str, document_type: DocumentType | str) -> bool:
    """True when :func:`migrate_header` would change *text*."""
    if find_metadata_block(text) is not None:
        return False
    data, _ = _scan_header(text.split("\n"), _FIELDS[DocumentType(document_type)])
    return bool(data)
