"""Shared pytest fixtures for dotlib tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolated home directory; ``Path.home()`` and ``~`` point here."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Project directory marked as a git repository root."""
    root = tmp_path / "proj"
    (root / ".git").mkdir(parents=True)
    return root


@pytest.fixture
def _in_project(project: Path, home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run with CWD at the project root and an isolated home."""
    monkeypatch.chdir(project)
