"""Metadata block extraction from markdown.

A metadata block is a fenced code region tagged with ``:metadata``::

    ```clojure :metadata
    {:date "2025-01-01" :status :accepted :tag #{:x}}
    ```

Only the first such block in a document is used.  A document without one
simply has no metadata.  Parse problems are returned as a
:class:`MetadataParseFailure` value rather than raised, so a batch scan
over many documents can report them and keep going.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dotlib.edn import EdnError, read_edn
from dotlib.errors import MetadataParseError

METADATA_TAG = ":metadata"
FENCE_LANGUAGES = ("clojure", "edn")

_OPEN_FENCE_RE = re.compile(
    r"^\s*```\s*(?:" + "|".join(FENCE_LANGUAGES) + r")\s+" + re.escape(METADATA_TAG) + r"\s*$"
)
_CLOSE_FENCE_RE = re.compile(r"^\s*```\s*$")


@dataclass(frozen=True)
class MetadataBlock:
    """Location and body of a metadata block (line numbers are 0-based, fences inclusive)."""

    body: str
    start_line: int
    end_line: int | None


@dataclass(frozen=True)
class MetadataParseFailure:
    """A metadata block was found but could not be read as a map."""

    message: str
    raw: str

    def error(self) -> MetadataParseError:
        return MetadataParseError(self.message, raw=self.raw)


def find_metadata_block(text: str) -> MetadataBlock | None:
    """Locate the first metadata block in *text*.

    An opening fence with no closing fence yields a block whose
    ``end_line`` is None and whose body runs to the end of the text.
    """
    lines = text.replace("\r\n", "\n").split("\n")
    for i, line in enumerate(lines):
        if not _OPEN_FENCE_RE.match(line):
            continue
        for j in range(i + 1, len(lines)):
            if _CLOSE_FENCE_RE.match(lines[j]):
                return MetadataBlock("\n".join(lines[i + 1 : j]), i, j)
        return MetadataBlock("\n".join(lines[i + 1 :]), i, None)
    return None


def parse_metadata(body: str) -> dict[str, Any]:
    """Parse a metadata block body into a dict.

    Raises:
        MetadataParseError: If the body is not valid EDN or not a map.
    """
    try:
        data = read_edn(body)
    except EdnError as exc:
        raise MetadataParseError(f"Invalid EDN in metadata block: {exc}", raw=body) from exc
    if not isinstance(data, dict):
        kind = "nothing" if data is None else type(data).__name__
        raise MetadataParseError(f"Metadata block must contain a map, got {kind}", raw=body)
    return data


def extract(text: str) -> dict[str, Any] | MetadataParseFailure | None:
    """Extract the metadata map from markdown *text*.

    Returns:
        The parsed map, None if the document has no metadata block, or a
        :class:`MetadataParseFailure` if the block is malformed.
    """
    block = find_metadata_block(text)
    if block is None:
        return None
    if block.end_line is None:
        return MetadataParseFailure("Unterminated metadata block", block.body)
    try:
        return parse_metadata(block.body)
    except MetadataParseError as exc:
        return MetadataParseFailure(str(exc), block.body)


def extract_file(path: Path) -> dict[str, Any] | MetadataParseFailure | None:
    """Read *path* as UTF-8 and extract its metadata."""
    return extract(path.read_text(encoding="utf-8"))
