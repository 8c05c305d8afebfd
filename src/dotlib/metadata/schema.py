"""Base metadata schemas per document type.

Keys are the EDN keyword names as written in documents (kebab-case),
exposed through pydantic aliases.  Unknown keys are allowed through the
models; :mod:`dotlib.metadata.validate` reports them as warnings.
"""

from __future__ import annotations

import re
from enum import StrEnum
from typing import Annotated, Any

from pydantic import BaseModel, Field, StringConstraints, field_validator

from dotlib.config.systems import SystemType

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TAG_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9_.\-]*$"
RUNNOTE_FILENAME_PATTERN = r"^RunNotes-\d{4}-\d{2}-\d{2}-[A-Za-z0-9-]+\.md$"

DATE_RE = re.compile(DATE_PATTERN)

DateString = Annotated[str, StringConstraints(pattern=DATE_PATTERN)]
TagName = Annotated[str, StringConstraints(pattern=TAG_PATTERN, max_length=64)]
RunNoteFilename = Annotated[str, StringConstraints(pattern=RUNNOTE_FILENAME_PATTERN)]


class DocumentType(StrEnum):
    """Document kinds that carry a metadata block."""

    ADR = "adr"
    RUNNOTE = "runnote"

    @property
    def system_type(self) -> SystemType:
        return SystemType(self.value)


class AdrStatus(StrEnum):
    PROPOSED = "proposed"
    ACCEPTED = "accepted"
    DEPRECATED = "deprecated"
    SUPERSEDED = "superseded"


class RunNotePhase(StrEnum):
    RESEARCH = "research"
    PLANNING = "planning"
    IMPLEMENTATION = "implementation"
    REVIEW = "review"
    DEBUG = "debug"
    HOTFIX = "hotfix"
    TESTING = "testing"
    REFACTOR = "refactor"
    DOCUMENTATION = "documentation"
    DEPLOYMENT = "deployment"


class RunNoteStatus(StrEnum):
    ACTIVE = "active"
    COMPLETED = "completed"
    PAUSED = "paused"
    CANCELLED = "cancelled"


class ThinkingMode(StrEnum):
    THINK = "think"
    THINK_HARD = "think-hard"
    THINK_HARDER = "think-harder"
    ULTRATHINK = "ultrathink"


class Complexity(StrEnum):
    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"
    VERY_COMPLEX = "very-complex"


def _require_set(value: Any) -> Any:
    # EDN vectors and lists arrive as Python lists; only #{...} is accepted.
    if not isinstance(value, (set, frozenset)):
        msg = "must be a set (#{...})"
        raise ValueError(msg)
    return value


class RunNoteDates(BaseModel):
    """Nested ``{:created .. :modified ..}`` date map."""

    model_config = {"frozen": True, "extra": "forbid"}

    created: DateString
    modified: DateString | None = None


class MetadataModel(BaseModel):
    """Common behaviour for base metadata schemas."""

    model_config = {"frozen": True, "extra": "allow"}

    tag: frozenset[TagName] = Field(min_length=1)

    @field_validator("tag", mode="before")
    @classmethod
    def _tag_is_set(cls, value: Any) -> Any:
        return _require_set(value)

    @classmethod
    def base_fields(cls) -> frozenset[str]:
        """Metadata keys (as written in documents) defined by this schema."""
        return frozenset(info.alias or name for name, info in cls.model_fields.items())


class RunNoteMetadata(MetadataModel):
    """Metadata for RunNote documents."""

    phase: RunNotePhase
    status: RunNoteStatus | None = None
    thinking_mode: ThinkingMode | None = Field(default=None, alias="thinking-mode")
    date: DateString | RunNoteDates | None = None
    complexity: Complexity | None = None


class AdrMetadata(MetadataModel):
    """Metadata for Architecture Decision Records."""

    date: DateString
    status: AdrStatus
    runnotes: Annotated[frozenset[RunNoteFilename], Field(min_length=1)] | None = None
    updated: DateString | None = None

    @field_validator("runnotes", mode="before")
    @classmethod
    def _runnotes_is_set(cls, value: Any) -> Any:
        if value is None:
            return value
        return _require_set(value)


SCHEMAS: dict[DocumentType, type[MetadataModel]] = {
    DocumentType.ADR: AdrMetadata,
    DocumentType.RUNNOTE: RunNoteMetadata,
}


def schema_for(document_type: DocumentType | str) -> type[MetadataModel]:
    """Return the base schema model for *document_type*."""
    return SCHEMAS[DocumentType(document_type)]
