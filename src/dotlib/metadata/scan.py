"""Batch extract-and-validate over many documents.

A bad document never stops the scan: unreadable files and malformed
metadata blocks become reports of their own.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field

from dotlib.config.resolver import ConfigResult
from dotlib.metadata.extract import MetadataParseFailure, extract
from dotlib.metadata.schema import DocumentType
from dotlib.metadata.validate import ErrorDetail, WarningDetail, validate

logger = logging.getLogger(__name__)

ReportStatus = Literal["valid", "invalid", "skipped", "parse-error"]


class DocumentReport(BaseModel):
    """Validation outcome for one document."""

    model_config = {"frozen": True}

    path: Path
    status: ReportStatus
    message: str | None = None
    errors: list[ErrorDetail] = Field(default_factory=list)
    warnings: list[WarningDetail] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status in ("valid", "skipped")


def check_document(
    path: Path,
    document_type: DocumentType | str,
    config: Mapping[str, Any] | ConfigResult | None = None,
) -> DocumentReport:
    """Extract and validate the metadata of the document at *path*."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return DocumentReport(path=path, status="parse-error", message=str(exc))

    metadata = extract(text)
    if metadata is None:
        return DocumentReport(path=path, status="skipped", message="no metadata block")
    if isinstance(metadata, MetadataParseFailure):
        logger.debug("Metadata parse failure in %s: %s", path, metadata.message)
        return DocumentReport(path=path, status="parse-error", message=metadata.message)

    result = validate(metadata, document_type, config)
    return DocumentReport(
        path=path,
        status="valid" if result.valid else "invalid",
        errors=result.errors,
        warnings=result.warnings,
    )


def scan_documents(
    paths: Iterable[Path],
    document_type: DocumentType | str,
    config: Mapping[str, Any] | ConfigResult | None = None,
) -> list[DocumentReport]:
    """Run :func:`check_document` over *paths*, expanding directories to their ``*.md`` files."""
    reports: list[DocumentReport] = []
    for path in paths:
        files = sorted(path.rglob("*.md")) if path.is_dir() else [path]
        reports.extend(check_document(f, document_type, config) for f in files)
    return reports
