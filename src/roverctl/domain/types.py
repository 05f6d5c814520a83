"""Value types and enums shared by the rover domain.

Directions form the cycle N -> E -> S -> W -> N. Rotating left steps one
position backward in the cycle, rotating right steps one forward.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True)
class Position:
    """Integer grid coordinate. Validity depends on the owning plateau."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Direction(StrEnum):
    """Compass facing of a rover."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"


class Command(StrEnum):
    """Closed set of rover commands."""

    LEFT = "L"
    RIGHT = "R"
    MOVE = "M"


# Cyclic order used by the rotation helpers.
DIRECTION_CYCLE: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)

# Unit step for one forward move in each direction.
DIRECTION_STEPS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}


def rotate_left(direction: Direction) -> Direction:
    """Return the direction 90 degrees counter-clockwise of *direction*."""
    index = DIRECTION_CYCLE.index(direction)
    return DIRECTION_CYCLE[(index - 1) % len(DIRECTION_CYCLE)]


def rotate_right(direction: Direction) -> Direction:
    """Return the direction 90 degrees clockwise of *direction*."""
    index = DIRECTION_CYCLE.index(direction)
    return DIRECTION_CYCLE[(index + 1) % len(DIRECTION_CYCLE)]


def is_integral(value: object) -> bool:
    """Check whether *value* is an integer or an integral float.

    ``bool`` is rejected even though it subclasses ``int``.

    Examples:
        >>> is_integral(3)
        True
        >>> is_integral(3.0)
        True
        >>> is_integral(3.5)
        False
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()
