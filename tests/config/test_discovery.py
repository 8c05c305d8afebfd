"""Tests for project root discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from dotlib.config.discovery import discover_project_root, find_project_root


class TestFindProjectRoot:
    def test_marker_in_start_dir(self, project: Path) -> None:
        assert find_project_root(project) == project.resolve()

    @pytest.mark.parametrize("depth", [1, 3, 6])
    def test_walks_up_any_depth(self, project: Path, depth: int) -> None:
        child = project.joinpath(*[f"d{i}" for i in range(depth)])
        child.mkdir(parents=True)
        assert find_project_root(child) == project.resolve()

    def test_marker_may_be_a_file(self, tmp_path: Path) -> None:
        (tmp_path / ".git").write_text("gitdir: /elsewhere\n")
        child = tmp_path / "src"
        child.mkdir()
        assert find_project_root(child) == tmp_path.resolve()

    def test_nearest_marker_wins(self, project: Path) -> None:
        inner = project / "vendor" / "lib"
        (inner / ".git").mkdir(parents=True)
        deeper = inner / "pkg"
        deeper.mkdir()
        assert find_project_root(deeper) == inner.resolve()

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_project_root(child, marker=".no-such-marker") is None

    def test_terminates_at_filesystem_root(self) -> None:
        root = Path("/")
        assert find_project_root(root, marker=".no-such-marker") is None

    def test_defaults_to_cwd(self, project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        sub = project / "docs"
        sub.mkdir()
        monkeypatch.chdir(sub)
        assert find_project_root() == project.resolve()


class TestDiscoverProjectRoot:
    def test_returns_marker_dir(self, project: Path) -> None:
        child = project / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert discover_project_root(child) == project.resolve()

    def test_falls_back_to_start(self, tmp_path: Path) -> None:
        child = tmp_path / "plain"
        child.mkdir()
        assert discover_project_root(child, marker=".no-such-marker") == child.resolve()

    def test_falls_back_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert discover_project_root(marker=".no-such-marker") == tmp_path.resolve()
