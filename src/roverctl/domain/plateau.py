"""Plateau entity — bounded grid that owns its rovers.

Invariants:
- Boundaries are non-negative integers, inclusive, with the lower bound
  fixed at (0, 0).
- Every registered rover lies inside the boundaries.
- No two registered rovers share a cell.

Rovers live in an insertion-ordered dict keyed by id; enumeration follows
the order they were added in.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from roverctl.domain.errors import InvalidInitializationError
from roverctl.domain.types import is_integral

if TYPE_CHECKING:
    from roverctl.domain.rover import Rover
    from roverctl.domain.types import Position

logger = logging.getLogger(__name__)


class Plateau:
    """Rectangular grid from (0, 0) to ``(max_x, max_y)`` inclusive."""

    def __init__(self, max_x: int, max_y: int, plateau_id: str = "1") -> None:
        if not is_integral(max_x) or not is_integral(max_y):
            raise InvalidInitializationError("Plateau boundaries must be integers")
        if max_x < 0 or max_y < 0:
            raise InvalidInitializationError("Plateau boundaries must be non-negative")

        self.id = plateau_id
        self.max_x = int(max_x)
        self.max_y = int(max_y)
        self._rovers: dict[str, Rover] = {}

    @property
    def rovers(self) -> list[Rover]:
        """Registered rovers in insertion order."""
        return list(self._rovers.values())

    def get_rover(self, rover_id: str) -> Rover | None:
        return self._rovers.get(rover_id)

    def add_rover(self, rover: Rover) -> None:
        """Register *rover*, making this plateau its sole owner.

        Raises:
            InvalidInitializationError: The rover's position is out of bounds
                or already taken by a registered rover.
        """
        pos = rover.position
        if not self.is_position_inside_plateau_boundaries(pos):
            raise InvalidInitializationError(
                f"Rover {rover.id} cannot be added - position {pos} is out of "
                f"plateau bounds (0, 0) to ({self.max_x}, {self.max_y})"
            )
        if self.is_position_occupied_by_rover(pos):
            raise InvalidInitializationError(
                f"Rover {rover.id} cannot be added - position {pos} is already occupied"
            )
        self._rovers[rover.id] = rover
        logger.debug("Added rover %s at %s facing %s", rover.id, pos, rover.direction)

    def is_position_inside_plateau_boundaries(self, position: Position) -> bool:
        return 0 <= position.x <= self.max_x and 0 <= position.y <= self.max_y

    def is_position_occupied_by_rover(
        self,
        position: Position,
        exclude_id: str | None = None,
    ) -> bool:
        """True if a registered rover other than *exclude_id* sits on *position*."""
        return any(
            rover_id != exclude_id and rover.position == position
            for rover_id, rover in self._rovers.items()
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "max_x": self.max_x, "max_y": self.max_y}

    def __str__(self) -> str:
        return f"Plateau {self.id}: ({self.max_x}, {self.max_y}) with {len(self._rovers)} rovers"
