"""Settings for the ``dotlib`` diagnostic CLI.

Priority chain (highest to lowest):
  1. Init kwargs — CLI flags passed by Click
  2. Env vars    — ``DOTLIB_*`` prefix
  3. Code defaults

Toolkit configuration itself (the EDN files) is not read here; see
:mod:`dotlib.config.resolver`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings


class DotlibSettings(BaseSettings):
    """Frozen settings object stored on the Click context.

    Attributes:
        project_root: Explicit project root; None means discover from cwd.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DOTLIB_",
    }

    json_output: bool = False
    verbose: bool = False
    log_json: bool = False
    project_root: Path | None = None

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> DotlibSettings:
        """Build settings from CLI flags, letting env vars fill unset ones.

        Flags that are None or False were not given on the command line and
        are dropped so that ``DOTLIB_*`` variables still apply.
        """
        given = {k: v for k, v in cli_flags.items() if v is not None and v is not False}
        return cls(**given)
