"""Tests for DotlibSettings."""

from __future__ import annotations

from pathlib import Path

import pytest

from dotlib.config.settings import DotlibSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("JSON_OUTPUT", "VERBOSE", "LOG_JSON", "PROJECT_ROOT"):
        monkeypatch.delenv(f"DOTLIB_{name}", raising=False)


class TestDotlibSettings:
    def test_defaults(self) -> None:
        settings = DotlibSettings.from_cli()
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.project_root is None

    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = DotlibSettings.from_cli(json_output=True, project_root=tmp_path)
        assert settings.json_output is True
        assert settings.project_root == tmp_path

    def test_env_vars_apply_when_flag_unset(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DOTLIB_VERBOSE", "1")
        monkeypatch.setenv("DOTLIB_PROJECT_ROOT", str(tmp_path))
        settings = DotlibSettings.from_cli(verbose=False, project_root=None)
        assert settings.verbose is True
        assert settings.project_root == tmp_path

    def test_frozen(self) -> None:
        settings = DotlibSettings.from_cli()
        with pytest.raises(Exception):
            settings.verbose = True  # type: ignore[misc]
