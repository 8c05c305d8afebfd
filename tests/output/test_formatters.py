"""Tests for CLI output formatting."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from uuid import UUID

from dotlib.config.resolver import ConfigResult, ConfigSources
from dotlib.config.systems import SystemType
from dotlib.metadata.scan import DocumentReport
from dotlib.metadata.validate import ErrorDetail, WarningDetail
from dotlib.output.formatters import format_config, format_path, format_reports, to_jsonable


def _result() -> ConfigResult:
    return ConfigResult(
        config={"adr": {"path": "doc/adr", "tags": frozenset({"b", "a"})}},
        system_type=SystemType.ADR,
        project_root=Path("/home/u/proj"),
        sources=ConfigSources(global_path=Path("/home/u/.adr/config.edn")),
    )


class TestToJsonable:
    def test_sets_sorted_paths_stringified(self) -> None:
        assert to_jsonable({"s": frozenset({"b", "a"}), "p": Path("/x"), "l": (1, 2)}) == {
            "s": ["a", "b"],
            "p": "/x",
            "l": [1, 2],
        }

    def test_tagged_values_stringified(self) -> None:
        when = datetime(2025, 1, 1, tzinfo=timezone.utc)
        ident = UUID("6a2f41a3-c54c-fce8-32d2-0324e1c32e22")
        assert to_jsonable({"since": when, "id": ident}) == {
            "since": "2025-01-01T00:00:00+00:00",
            "id": "6a2f41a3-c54c-fce8-32d2-0324e1c32e22",
        }


class TestFormatConfig:
    def test_json(self) -> None:
        data = json.loads(format_config(_result(), json_output=True))
        assert data == {
            "system_type": "adr",
            "project_root": "/home/u/proj",
            "sources": {"global": "/home/u/.adr/config.edn", "project": None},
            "config": {"adr": {"path": "doc/adr", "tags": ["a", "b"]}},
        }

    def test_human(self) -> None:
        out = format_config(_result())
        assert "system: adr" in out
        assert "project root: /home/u/proj" in out
        assert "project config: (none)" in out
        assert '"path": "doc/adr"' in out


class TestFormatPath:
    def test_plain_and_json(self) -> None:
        assert format_path(Path("/a/b")) == "/a/b"
        assert json.loads(format_path(Path("/a/b"), json_output=True)) == {"path": "/a/b"}


class TestFormatReports:
    def _reports(self) -> list[DocumentReport]:
        return [
            DocumentReport(path=Path("a.md"), status="valid"),
            DocumentReport(
                path=Path("b.md"),
                status="invalid",
                errors=[
                    ErrorDetail(
                        category="missing-required-extensions",
                        message="missing required extension fields: ticket",
                        fields=["ticket"],
                    )
                ],
                warnings=[
                    WarningDetail(category="unknown-fields", message="unknown fields: foo", fields=["foo"])
                ],
            ),
            DocumentReport(path=Path("c.md"), status="skipped", message="no metadata block"),
        ]

    def test_human(self) -> None:
        out = format_reports(self._reports())
        assert "OK a.md" in out
        assert "INVALID b.md" in out
        assert "missing-required-extensions: missing required extension fields: ticket" in out
        assert "unknown-fields: unknown fields: foo" in out
        assert "SKIP c.md (no metadata block)" in out
        assert out.endswith("3 checked, 1 failed")

    def test_json(self) -> None:
        data = json.loads(format_reports(self._reports(), json_output=True))
        assert data["ok"] is False
        assert data["count"] == 3
        assert data["reports"][1]["errors"][0]["fields"] == ["ticket"]
        assert data["reports"][0]["path"] == "a.md"
