"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, roverctl.toml only contains
overrides. An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- roverctl.toml sections ---


class InputConfig(BaseModel):
    """[input] section."""

    model_config = {"frozen": True}

    encoding: str = "utf-8-sig"


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    verbose: bool = False
    width: int = 120
