"""Config file discovery.

Lookup order:
  1. ``ROVERCTL_CONFIG`` env var (must point at an existing file)
  2. ``roverctl.toml`` in *start* or the nearest ancestor directory
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "roverctl.toml"
CONFIG_ENV_VAR = "ROVERCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), or None."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
