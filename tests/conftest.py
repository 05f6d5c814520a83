"""Shared pytest fixtures and test helpers for roverctl tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from roverctl.domain.plateau import Plateau
from roverctl.domain.rover import Rover
from roverctl.domain.types import Direction, Position


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's ROVERCTL_* environment out of the tests."""
    for var in ("ROVERCTL_CONFIG", "ROVERCTL_VERBOSE", "ROVERCTL_DEBUG", "ROVERCTL_JSON_OUTPUT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and roverctl logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    rover = logging.getLogger("roverctl")
    rover_level = rover.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    rover.setLevel(rover_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change CWD to a temp directory so relative script paths resolve there."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_script(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a script file under ``tmp_path`` and return its path."""

    def _write(content: str, name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def plateau() -> Plateau:
    """Empty 5x5 plateau."""
    return Plateau(5, 5, plateau_id="test-plateau")


@pytest.fixture
def make_rover() -> Callable[..., Rover]:
    """Factory building a rover from plain values."""

    def _make(rover_id: str, x: int, y: int, direction: str = "N") -> Rover:
        return Rover(rover_id, Position(x, y), Direction(direction))

    return _make
