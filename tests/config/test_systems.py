"""Tests for system types and their static config locations."""

from __future__ import annotations

from pathlib import Path

import pytest

from dotlib.config.systems import SYSTEM_PATHS, SystemType, system_paths


class TestSystemPaths:
    def test_every_system_type_has_paths(self) -> None:
        assert set(SYSTEM_PATHS) == set(SystemType)

    @pytest.mark.parametrize(
        ("stype", "global_config", "project_name", "root_key"),
        [
            (SystemType.ADR, ".adr/config.edn", ".adr.edn", "adr"),
            (SystemType.RUNNOTE, ".runnote/config.edn", ".runnote.edn", "runnote"),
            (SystemType.REQ, ".req/config.edn", ".req.edn", "req"),
        ],
    )
    def test_constants(
        self, stype: SystemType, global_config: str, project_name: str, root_key: str
    ) -> None:
        paths = system_paths(stype)
        assert paths.global_config == global_config
        assert paths.project_config_name == project_name
        assert paths.root_key == root_key

    def test_accepts_string_value(self) -> None:
        assert system_paths("adr") is SYSTEM_PATHS[SystemType.ADR]

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(ValueError):
            system_paths("wiki")

    def test_global_config_path_uses_home(self, tmp_path: Path) -> None:
        path = system_paths(SystemType.ADR).global_config_path(tmp_path)
        assert path == tmp_path / ".adr" / "config.edn"

    def test_global_config_path_defaults_to_user_home(self, home: Path) -> None:
        assert system_paths("runnote").global_config_path() == home / ".runnote" / "config.edn"

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            SYSTEM_PATHS[SystemType.ADR] = SYSTEM_PATHS[SystemType.REQ]  # type: ignore[index]

    def test_paths_are_frozen(self) -> None:
        with pytest.raises(Exception):
            SYSTEM_PATHS[SystemType.ADR].root_key = "x"  # type: ignore[misc]
