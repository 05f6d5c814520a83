"""Filesystem operations for rover command scripts.

Relative paths resolve against a base directory (the CWD by default),
matching how the CLI is invoked from a shell.
"""

from __future__ import annotations

from pathlib import Path

from roverctl.domain.errors import RoverError


class ScriptReadError(RoverError):
    """A script file is missing or unreadable."""

    @property
    def name(self) -> str:
        return "Error"


def resolve_script_path(path: str | Path, base: Path | None = None) -> Path:
    """Resolve *path* against *base* (default: cwd)."""
    return ((base or Path.cwd()) / Path(path)).resolve()


def read_script(
    path: str | Path, *, base: Path | None = None, encoding: str = "utf-8-sig"
) -> str:
    """Read a command script and return its raw text.

    Raises:
        ScriptReadError: The file does not exist or cannot be decoded/read.
    """
    final_path = resolve_script_path(path, base)
    if not final_path.is_file():
        raise ScriptReadError(f"File not found: {path}")

    try:
        return final_path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise ScriptReadError(f"Failed to read file: {path}. {exc}") from exc
