"""Rover entity — a point on the plateau with a compass facing.

A rover never holds a reference to its plateau. Move validation is done
by passing the owning plateau into :meth:`Rover.move`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

from roverctl.domain.errors import InvalidCommandError, InvalidInitializationError
from roverctl.domain.types import (
    DIRECTION_STEPS,
    Command,
    Direction,
    Position,
    is_integral,
    rotate_left,
    rotate_right,
)

if TYPE_CHECKING:
    from roverctl.domain.plateau import Plateau


class Rover:
    """Mutable rover state: ``(position, direction)`` under a unique id.

    Attributes:
        id: Unique identifier within a plateau.
        position: Current grid position.
        direction: Current facing.
    """

    def __init__(self, rover_id: str, position: Position, direction: Direction) -> None:
        if not is_integral(position.x) or not is_integral(position.y):
            raise InvalidInitializationError("Rover positions must be integers")
        if position.x < 0 or position.y < 0:
            raise InvalidInitializationError("Rover positions must be non-negative")

        self.id = rover_id
        self.position = Position(int(position.x), int(position.y))
        self.direction = Direction(direction)

    def rotate(self, rotation: Literal["L", "R"] | Command) -> None:
        """Turn 90 degrees left (``L``) or right (``R``)."""
        match Command(rotation):
            case Command.LEFT:
                self.direction = rotate_left(self.direction)
            case Command.RIGHT:
                self.direction = rotate_right(self.direction)
            case Command.MOVE:
                raise ValueError("rotate() accepts only 'L' or 'R'")

    def simulate_next_position(self) -> Position:
        """Position one step forward in the current direction. Never mutates."""
        dx, dy = DIRECTION_STEPS[self.direction]
        return Position(self.position.x + dx, self.position.y + dy)

    def move(self, plateau: Plateau | None = None) -> None:
        """Step forward one cell.

        Without a *plateau* the move is unconstrained. With one, the target
        must be inside its boundaries and free of other rovers; otherwise
        :class:`InvalidCommandError` is raised and the position is untouched.
        """
        target = self.simulate_next_position()

        if plateau is not None:
            if not plateau.is_position_inside_plateau_boundaries(target):
                raise InvalidCommandError(
                    f"Rover {self.id} cannot move to position {target} - out of "
                    f"plateau bounds (0, 0) to ({plateau.max_x}, {plateau.max_y})"
                )
            if plateau.is_position_occupied_by_rover(target, exclude_id=self.id):
                raise InvalidCommandError(
                    f"Rover {self.id} cannot move to position {target} - "
                    "already occupied by another rover"
                )

        self.position = target

    def execute(self, command: Command, plateau: Plateau | None = None) -> None:
        """Run a single command against the rover."""
        match command:
            case Command.LEFT | Command.RIGHT:
                self.rotate(command)
            case Command.MOVE:
                self.move(plateau)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "x": self.position.x,
            "y": self.position.y,
            "direction": str(self.direction),
        }

    def __str__(self) -> str:
        return f"{self.position.x} {self.position.y} {self.direction}"

    def __repr__(self) -> str:
        return f"Rover(id={self.id!r}, position={self.position!r}, direction={self.direction!r})"
