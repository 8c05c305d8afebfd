"""Logical path resolution against a resolved config.

Config values such as ``{:adr {:path "doc/adr"}}`` name directories and
templates.  A leading ``~`` expands to the home directory, absolute
values are returned verbatim, and relative values are anchored at the
project root.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotlib.config.resolver import ConfigResult, KeyPath, get_in, split_key_path
from dotlib.config.systems import SystemType
from dotlib.errors import InvalidConfigValueError

PATH_KEY = "path"
TEMPLATE_KEY = "template"


def resolve_logical_path(result: ConfigResult, key_path: KeyPath) -> Path:
    """Resolve the config value at *key_path* to an absolute path.

    Raises:
        MissingConfigKeyError: If *key_path* is absent from the config.
        InvalidConfigValueError: If the value is not a non-empty string.
    """
    keys = split_key_path(key_path)
    value = get_in(result.config, keys)
    if not isinstance(value, str) or not value:
        raise InvalidConfigValueError(keys, value, "a non-empty path string")

    expanded = Path(value).expanduser()
    if expanded.is_absolute():
        return expanded
    return Path(os.path.normpath(result.project_root / expanded))


def artifact_dir(result: ConfigResult) -> Path:
    """Directory holding the system's documents (``<root>.path``)."""
    return resolve_logical_path(result, (result.root_key, PATH_KEY))


def template_path(result: ConfigResult) -> Path:
    """Template file for new documents (``<root>.template``)."""
    return resolve_logical_path(result, (result.root_key, TEMPLATE_KEY))


def _require(result: ConfigResult, expected: SystemType) -> None:
    if result.system_type is not expected:
        msg = f"Expected a {expected.value} config, got {result.system_type.value}"
        raise ValueError(msg)


def adr_dir(result: ConfigResult) -> Path:
    _require(result, SystemType.ADR)
    return artifact_dir(result)


def adr_template(result: ConfigResult) -> Path:
    _require(result, SystemType.ADR)
    return template_path(result)


def runnote_dir(result: ConfigResult) -> Path:
    _require(result, SystemType.RUNNOTE)
    return artifact_dir(result)


def runnote_template(result: ConfigResult) -> Path:
    _require(result, SystemType.RUNNOTE)
    return template_path(result)


def req_dir(result: ConfigResult) -> Path:
    _require(result, SystemType.REQ)
    return artifact_dir(result)


def req_template(result: ConfigResult) -> Path:
    _require(result, SystemType.REQ)
    return template_path(result)
