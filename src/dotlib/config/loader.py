"""Config file loading.

A missing file is not an error and reads as ``None``.  A file that exists
but is not an EDN map raises :class:`ConfigParseError`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from dotlib.edn import EdnError, read_edn
from dotlib.errors import ConfigParseError

logger = logging.getLogger(__name__)


def load_config_file(path: Path) -> dict[str, Any] | None:
    """Load an EDN config map from *path*.

    Returns None if the file does not exist, and an empty dict if it
    holds no value at all (empty or comments only).

    Raises:
        ConfigParseError: If the content is unreadable, malformed, or not a map.
    """
    if not path.is_file():
        logger.debug("Config file absent: %s", path)
        return None

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigParseError(path, str(exc)) from exc

    try:
        data = read_edn(raw)
    except EdnError as exc:
        raise ConfigParseError(path, str(exc)) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigParseError(path, f"top-level value must be a map, got {type(data).__name__}")

    logger.debug("Loaded config file %s (%d top-level keys)", path, len(data))
    return data
