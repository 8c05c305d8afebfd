"""Rich Console factory and theme for dotlib output.

Consoles render into a StringIO buffer so formatters can return plain
strings.  Rich drops color codes on its own when output is not a TTY.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DOTLIB_THEME = Theme(
    {
        "dot.ok": "bold green",
        "dot.error": "bold red",
        "dot.warning": "bold yellow",
        "dot.skip": "dim",
        "dot.key": "cyan",
        "dot.path": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=DOTLIB_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Return everything rendered to a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue().rstrip("\n")
