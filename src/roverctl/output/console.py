"""Rich Console factory and theme for roverctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes, so rendered
rover lines stay byte-exact.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ROVER_THEME = Theme(
    {
        "rover.error": "bold red",
        "rover.label": "dim",
        "rover.id": "bold blue",
        "rover.coord": "bold",
        "rover.direction.N": "green",
        "rover.direction.E": "cyan",
        "rover.direction.S": "yellow",
        "rover.direction.W": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ROVER_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_direction(direction: str) -> str:
    """Return the Rich style name for a compass direction letter."""
    if direction in {"N", "E", "S", "W"}:
        return f"rover.direction.{direction}"
    return ""
