"""EDN reading and value rendering on top of ``edn_format``.

Parsed values are converted to plain Python so the rest of the library
never sees ``edn_format`` types:

- maps -> ``dict``
- keywords and symbols -> their name strings (``:accepted`` -> ``"accepted"``)
- vectors and lists -> ``list``
- sets -> ``frozenset``
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
from typing import Any

import edn_format
from edn_format import Keyword, Symbol


class EdnError(ValueError):
    """Raised when text cannot be read as a single EDN value."""


def _is_blank(text: str) -> bool:
    """True when *text* holds nothing but whitespace and ``;`` comments."""
    for line in text.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith(";"):
            return False
    return True


def to_python(value: Any) -> Any:
    """Convert an ``edn_format`` value tree into plain Python values."""
    if isinstance(value, (Keyword, Symbol)):
        return value.name
    if isinstance(value, str):
        return str(value)
    if isinstance(value, Mapping):
        return {_to_key(k): to_python(v) for k, v in value.items()}
    if isinstance(value, Set):
        return frozenset(_to_key(v) for v in value)
    if isinstance(value, Sequence):
        return [to_python(v) for v in value]
    return value


def _to_key(value: Any) -> Any:
    converted = to_python(value)
    if isinstance(converted, list):
        return tuple(converted)
    if isinstance(converted, dict):
        return tuple(sorted(converted.items()))
    return converted


def read_edn(text: str) -> Any:
    """Parse *text* as one EDN value and return it as plain Python.

    Empty or comment-only text reads as ``None``.

    Raises:
        EdnError: If the text is not valid EDN.
    """
    if _is_blank(text):
        return None
    try:
        parsed = edn_format.loads(text)
    except (edn_format.EDNDecodeError, ValueError, TypeError) as exc:
        raise EdnError(str(exc) or exc.__class__.__name__) from exc
    return to_python(parsed)


def keyword(name: str) -> Keyword:
    """Build an EDN keyword from a bare name (no leading colon)."""
    return Keyword(name.lstrip(":"))


def dump_value(value: Any) -> str:
    """Render a single value as EDN text.

    Sets are written with members sorted so output is stable.
    Mappings are written on one line with keys in insertion order.
    """
    if isinstance(value, Set):
        members = sorted(dump_value(v) for v in value)
        return "#{" + " ".join(members) + "}"
    if isinstance(value, Mapping):
        pairs = [f"{dump_value(k)} {dump_value(v)}" for k, v in value.items()]
        return "{" + " ".join(pairs) + "}"
    return edn_format.dumps(value)
