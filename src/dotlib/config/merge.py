"""Deep merge for config mappings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _copy(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _copy(v) for k, v in value.items()}
    return value


def _merge_two(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {k: _copy(v) for k, v in base.items()}
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = _merge_two(current, value)
        else:
            result[key] = _copy(value)
    return result


def deep_merge(*mappings: Mapping[str, Any] | None) -> dict[str, Any]:
    """Recursively merge mappings left to right without mutating inputs.

    Where both sides hold a mapping for a key, the two are merged.  Any
    other value (lists included) is replaced wholesale by the later one.
    ``None`` arguments are treated as empty.

    Example:
        >>> deep_merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}})
        {'a': 1, 'b': {'c': 2, 'd': 3}}
    """
    result: dict[str, Any] = {}
    for mapping in mappings:
        if mapping:
            result = _merge_two(result, mapping)
    return result
