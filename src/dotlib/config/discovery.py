"""Project root discovery.

Walk-up finder locates the version-control marker, the same way git
finds ``.git/``.  Callers fall back to the starting directory when no
marker exists anywhere above it.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

ROOT_MARKER = ".git"


def find_project_root(start: Path | None = None, marker: str = ROOT_MARKER) -> Path | None:
    """Walk up from *start* (default: cwd) looking for *marker*.

    The marker may be a directory or a file (git worktrees use a ``.git``
    file).  Returns the first directory containing it, *start* included,
    or None once the filesystem root has been checked.
    """
    current = (start or Path.cwd()).resolve()
    while True:
        if (current / marker).exists():
            return current
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def discover_project_root(start: Path | None = None, marker: str = ROOT_MARKER) -> Path:
    """Return the project root above *start*, or *start* itself if none is found."""
    origin = (start or Path.cwd()).resolve()
    root = find_project_root(origin, marker)
    if root is None:
        logger.debug("No %s marker above %s; using it as project root", marker, origin)
        return origin
    logger.debug("Project root discovered at %s", root)
    return root
