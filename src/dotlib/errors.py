"""Exception taxonomy for dotlib.

Loaders return ``None`` for missing-but-optional resources and raise only
for genuinely malformed input.  ``MetadataParseError`` and
``SchemaValidationError`` are recoverable; the config errors are fatal to
the operation that triggered them.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any


class DotlibError(Exception):
    """Base exception for dotlib."""

    context: dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = dict(context) if context is not None else {}

    def to_json_error(self) -> dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ConfigParseError(DotlibError, ValueError):
    """A config file exists but its content is not a valid EDN map."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        message = f"Invalid config in {path}: {reason}"
        DotlibError.__init__(self, message, context={"path": str(path), "reason": reason})
        ValueError.__init__(self, message)


class MissingConfigKeyError(DotlibError, KeyError):
    """A required key path is absent from the merged config."""

    def __init__(self, key_path: Sequence[str]) -> None:
        self.key_path = tuple(key_path)
        dotted = ".".join(self.key_path)
        message = f"Missing config key: {dotted}"
        DotlibError.__init__(self, message, context={"key_path": dotted})
        KeyError.__init__(self, message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0]) if self.args else ""


class InvalidConfigValueError(DotlibError, ValueError):
    """A config value exists but has the wrong type for its use."""

    def __init__(self, key_path: Sequence[str], value: Any, expected: str) -> None:
        self.key_path = tuple(key_path)
        self.value = value
        dotted = ".".join(self.key_path)
        message = f"Config key {dotted} must be {expected}, got {type(value).__name__}"
        DotlibError.__init__(self, message, context={"key_path": dotted, "expected": expected})
        ValueError.__init__(self, message)


class MetadataParseError(DotlibError, ValueError):
    """An embedded metadata block could not be parsed into a map."""

    def __init__(self, message: str, *, raw: str | None = None) -> None:
        self.raw = raw
        DotlibError.__init__(self, message, context={"raw": raw} if raw is not None else None)
        ValueError.__init__(self, message)


class SchemaValidationError(DotlibError, ValueError):
    """Metadata is present but fails its schema."""

    def __init__(self, message: str, *, errors: Sequence[Mapping[str, Any]] = ()) -> None:
        self.errors = [dict(e) for e in errors]
        DotlibError.__init__(self, message, context={"errors": self.errors})
        ValueError.__init__(self, message)
