"""Metadata validation against base schemas and config-declared extensions.

Three independent checks feed one :class:`ValidationResult`:

- base schema (``invalid-standard-fields`` error);
- required extension fields from ``metadata-extensions`` in config
  (``missing-required-extensions`` error);
- unknown fields (``unknown-fields`` warning, never blocks validity).

Only extensions declared ``{:required true}`` count as known fields.
Declared-optional extensions are reported with the unknown fields.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

from dotlib.config.resolver import ConfigResult
from dotlib.config.systems import system_paths
from dotlib.errors import SchemaValidationError
from dotlib.metadata.schema import DocumentType, schema_for

EXTENSIONS_KEY = "metadata-extensions"

INVALID_STANDARD_FIELDS = "invalid-standard-fields"
MISSING_REQUIRED_EXTENSIONS = "missing-required-extensions"
UNKNOWN_FIELDS = "unknown-fields"


class ErrorDetail(BaseModel):
    """One validation error."""

    model_config = {"frozen": True}

    category: Literal["invalid-standard-fields", "missing-required-extensions"]
    message: str
    fields: list[str] = Field(default_factory=list)


class WarningDetail(BaseModel):
    """One non-fatal validation finding."""

    model_config = {"frozen": True}

    category: Literal["unknown-fields"]
    message: str
    fields: list[str] = Field(default_factory=list)


class ValidationResult(BaseModel):
    """Outcome of validating one metadata map.

    Attributes:
        valid: Base schema passed and no required extension is missing.
        data: The validated metadata when ``valid`` is True.
        errors: Blocking problems.
        warnings: Non-blocking findings.
    """

    model_config = {"frozen": True}

    valid: bool
    data: dict[str, Any] | None = None
    errors: list[ErrorDetail] = Field(default_factory=list)
    warnings: list[WarningDetail] = Field(default_factory=list)

    def raise_for_errors(self) -> None:
        """Raise :class:`SchemaValidationError` if this result is invalid."""
        if self.valid:
            return
        summary = "; ".join(e.message for e in self.errors) or "metadata is invalid"
        raise SchemaValidationError(summary, errors=[e.model_dump() for e in self.errors])


def metadata_extensions(
    config: Mapping[str, Any] | ConfigResult | None,
    document_type: DocumentType | str,
) -> dict[str, Any]:
    """Find the ``metadata-extensions`` map in *config*.

    *config* may be a :class:`ConfigResult`, the full merged config, or the
    document type's own section of it.
    """
    if config is None:
        return {}
    if isinstance(config, ConfigResult):
        config = config.config
    extensions = config.get(EXTENSIONS_KEY)
    if extensions is None:
        root_key = system_paths(DocumentType(document_type).system_type).root_key
        section = config.get(root_key)
        if isinstance(section, Mapping):
            extensions = section.get(EXTENSIONS_KEY)
    return dict(extensions) if isinstance(extensions, Mapping) else {}


def required_extensions(extensions: Mapping[str, Any]) -> list[str]:
    """Names of extension fields declared ``{:required true}``."""
    return sorted(
        name
        for name, spec in extensions.items()
        if isinstance(spec, Mapping) and spec.get("required") is True
    )


def _explain(exc: ValidationError) -> tuple[str, list[str]]:
    lines: list[str] = []
    fields: set[str] = set()
    for err in exc.errors(include_url=False):
        loc = err.get("loc", ())
        name = str(loc[0]) if loc else "<metadata>"
        fields.add(name)
        line = f"{name}: {err['msg']}"
        if line not in lines:
            lines.append(line)
    return "; ".join(lines), sorted(fields)


def validate(
    metadata: Any,
    document_type: DocumentType | str,
    config: Mapping[str, Any] | ConfigResult | None = None,
) -> ValidationResult:
    """Validate *metadata* for *document_type*.

    Args:
        metadata: The extracted metadata map.
        document_type: Selects the base schema.
        config: Optional config declaring ``metadata-extensions``.
    """
    doc_type = DocumentType(document_type)
    if not isinstance(metadata, Mapping):
        return ValidationResult(
            valid=False,
            errors=[
                ErrorDetail(
                    category=INVALID_STANDARD_FIELDS,
                    message=f"metadata must be a map, got {type(metadata).__name__}",
                )
            ],
        )

    schema = schema_for(doc_type)
    errors: list[ErrorDetail] = []
    warnings: list[WarningDetail] = []

    try:
        schema.model_validate(dict(metadata))
    except ValidationError as exc:
        message, fields = _explain(exc)
        errors.append(ErrorDetail(category=INVALID_STANDARD_FIELDS, message=message, fields=fields))

    required = required_extensions(metadata_extensions(config, doc_type))
    missing = [name for name in required if name not in metadata]
    if missing:
        errors.append(
            ErrorDetail(
                category=MISSING_REQUIRED_EXTENSIONS,
                message=f"missing required extension fields: {', '.join(missing)}",
                fields=missing,
            )
        )

    known = schema.base_fields() | set(required)
    unknown = sorted(str(k) for k in metadata if k not in known)
    if unknown:
        warnings.append(
            WarningDetail(
                category=UNKNOWN_FIELDS,
                message=f"unknown fields: {', '.join(unknown)}",
                fields=unknown,
            )
        )

    valid = not errors
    return ValidationResult(
        valid=valid,
        data=dict(metadata) if valid else None,
        errors=errors,
        warnings=warnings,
    )
