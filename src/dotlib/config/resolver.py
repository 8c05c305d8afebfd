"""Config resolution: discovery -> global -> project -> merge.

Priority chain (highest to lowest):
  1. Project config — ``<project_root>/<project_config_name>``
  2. Global config  — ``~/<global_config>``

Both files are optional.  A malformed file aborts resolution with
:class:`ConfigParseError`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence, Set
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field, field_validator

from dotlib.config.discovery import discover_project_root
from dotlib.config.loader import load_config_file
from dotlib.config.merge import deep_merge
from dotlib.config.systems import SystemType, system_paths
from dotlib.errors import MissingConfigKeyError

logger = logging.getLogger(__name__)

_MISSING: Any = object()

KeyPath = str | Sequence[str]


def split_key_path(key_path: KeyPath) -> tuple[str, ...]:
    """Normalize ``"adr.path"`` or ``("adr", "path")`` to a key tuple."""
    if isinstance(key_path, str):
        return tuple(part for part in key_path.split(".") if part)
    return tuple(key_path)


def get_in(mapping: Mapping[str, Any], key_path: KeyPath, default: Any = _MISSING) -> Any:
    """Look up a nested key path in *mapping*.

    Raises:
        MissingConfigKeyError: If any segment is absent and no *default* is given.
    """
    keys = split_key_path(key_path)
    current: Any = mapping
    for key in keys:
        if not isinstance(current, Mapping) or key not in current:
            if default is _MISSING:
                raise MissingConfigKeyError(keys)
            return default
        current = current[key]
    return current


def freeze(value: Any) -> Any:
    """Return a read-only copy: mappings become proxies, lists become tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, Set):
        return frozenset(value)
    if isinstance(value, Sequence) and not isinstance(value, str):
        return tuple(freeze(v) for v in value)
    return value


class ConfigSources(BaseModel):
    """Files that contributed to a resolved config (None where absent)."""

    model_config = {"frozen": True}

    global_path: Path | None = Field(default=None, serialization_alias="global")
    project_path: Path | None = Field(default=None, serialization_alias="project")


class ConfigResult(BaseModel):
    """Merged configuration for one system type.

    Attributes:
        config: Read-only view (nested proxies and tuples) of the global
            config deep-merged with the project config.
        system_type: The toolkit this config was resolved for.
        project_root: Absolute project root used for relative paths.
        sources: Paths of the files actually loaded.
    """

    model_config = {"frozen": True}

    config: Mapping[Any, Any] = Field(default_factory=lambda: MappingProxyType({}))
    system_type: SystemType
    project_root: Path
    sources: ConfigSources = Field(default_factory=ConfigSources)

    @property
    def root_key(self) -> str:
        return system_paths(self.system_type).root_key

    @field_validator("config", mode="after")
    @classmethod
    def _freeze_config(cls, value: Mapping[Any, Any]) -> Mapping[Any, Any]:
        return freeze(value)

    @property
    def section(self) -> Mapping[Any, Any]:
        """This system's namespaced section, or an empty mapping."""
        value = self.config.get(self.root_key)
        return value if isinstance(value, Mapping) else MappingProxyType({})

    def get(self, key_path: KeyPath, default: Any = None) -> Any:
        """Nested lookup into :attr:`config` returning *default* when absent."""
        return get_in(self.config, key_path, default)


def resolve_config(
    system_type: SystemType | str,
    project_root: Path | None = None,
    *,
    cwd: Path | None = None,
    home: Path | None = None,
) -> ConfigResult:
    """Resolve the merged config for *system_type*.

    Args:
        system_type: Which toolkit's files to load.
        project_root: Explicit project root; skips discovery when given.
        cwd: Starting directory for discovery (default: process cwd).
        home: Home directory holding the global config (default: ``~``).

    Raises:
        ConfigParseError: If either config file is malformed.
    """
    stype = SystemType(system_type)
    paths = system_paths(stype)

    if project_root is not None:
        root = project_root.expanduser().resolve()
    else:
        root = discover_project_root(cwd)

    global_file = paths.global_config_path(home)
    project_file = root / paths.project_config_name

    global_data = load_config_file(global_file)
    project_data = load_config_file(project_file)

    result = ConfigResult(
        config=deep_merge(global_data, project_data),
        system_type=stype,
        project_root=root,
        sources=ConfigSources(
            global_path=global_file if global_data is not None else None,
            project_path=project_file if project_data is not None else None,
        ),
    )
    logger.debug(
        "Resolved %s config (root=%s, global=%s, project=%s)",
        stype.value,
        root,
        result.sources.global_path,
        result.sources.project_path,
    )
    return result
