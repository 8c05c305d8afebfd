"""System types and their fixed config locations.

Each toolkit (ADR, RunNote, Requirements) owns one global config file
under the user's home directory, one project-local config file at the
project root, and one root key that namespaces its section in both.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel


class SystemType(StrEnum):
    """The toolkits sharing this library."""

    ADR = "adr"
    RUNNOTE = "runnote"
    REQ = "req"


class SystemPaths(BaseModel):
    """Config file locations for one system type."""

    model_config = {"frozen": True}

    global_config: str
    project_config_name: str
    root_key: str

    def global_config_path(self, home: Path | None = None) -> Path:
        """Absolute path of the global config file under *home* (default: ``~``)."""
        return (home or Path.home()) / self.global_config


SYSTEM_PATHS: MappingProxyType[SystemType, SystemPaths] = MappingProxyType(
    {
        SystemType.ADR: SystemPaths(
            global_config=".adr/config.edn",
            project_config_name=".adr.edn",
            root_key="adr",
        ),
        SystemType.RUNNOTE: SystemPaths(
            global_config=".runnote/config.edn",
            project_config_name=".runnote.edn",
            root_key="runnote",
        ),
        SystemType.REQ: SystemPaths(
            global_config=".req/config.edn",
            project_config_name=".req.edn",
            root_key="req",
        ),
    }
)


def system_paths(system_type: SystemType | str) -> SystemPaths:
    """Return the :class:`SystemPaths` for *system_type*.

    Raises:
        ValueError: If *system_type* is not a known system type.
    """
    return SYSTEM_PATHS[SystemType(system_type)]
