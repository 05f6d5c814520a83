"""Tests for the Rover entity."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from roverctl.domain.errors import InvalidCommandError, InvalidInitializationError
from roverctl.domain.plateau import Plateau
from roverctl.domain.rover import Rover
from roverctl.domain.types import Command, Direction, Position

MakeRover = Callable[..., Rover]


@pytest.fixture
def rover(make_rover: MakeRover) -> Rover:
    return make_rover("test-rover", 0, 0, "N")


class TestInitialization:
    def test_initial_properties(self, rover: Rover) -> None:
        assert rover.id == "test-rover"
        assert rover.position == Position(0, 0)
        assert rover.direction is Direction.NORTH

    def test_accepts_direction_letter(self) -> None:
        rover = Rover("r", Position(1, 1), "W")  # type: ignore[arg-type]
        assert rover.direction is Direction.WEST

    def test_integral_float_normalised(self) -> None:
        rover = Rover("r", Position(2.0, 3.0), Direction.NORTH)  # type: ignore[arg-type]
        assert rover.position == Position(2, 3)
        assert isinstance(rover.position.x, int)

    def test_non_integer_rejected(self) -> None:
        with pytest.raises(InvalidInitializationError, match="Rover positions must be integers"):
            Rover("r", Position(1.5, 0), Direction.NORTH)  # type: ignore[arg-type]

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidInitializationError, match="Rover positions must be non-negative"):
            Rover("r", Position(0, -1), Direction.NORTH)


class TestRotation:
    def test_rotate_left_full_circle(self, rover: Rover) -> None:
        seen = []
        for _ in range(4):
            rover.rotate("L")
            seen.append(rover.direction)
        assert seen == [Direction.WEST, Direction.SOUTH, Direction.EAST, Direction.NORTH]

    def test_rotate_right_full_circle(self, rover: Rover) -> None:
        seen = []
        for _ in range(4):
            rover.rotate("R")
            seen.append(rover.direction)
        assert seen == [Direction.EAST, Direction.SOUTH, Direction.WEST, Direction.NORTH]

    def test_rotate_does_not_move(self, rover: Rover) -> None:
        rover.rotate(Command.RIGHT)
        assert rover.position == Position(0, 0)

    def test_rotate_rejects_move(self, rover: Rover) -> None:
        with pytest.raises(ValueError):
            rover.rotate("M")  # type: ignore[arg-type]


class TestSimulateNextPosition:
    @pytest.mark.parametrize(
        ("direction", "expected"),
        [("N", Position(2, 3)), ("E", Position(3, 2)), ("S", Position(2, 1)), ("W", Position(1, 2))],
    )
    def test_step_per_direction(
        self, make_rover: MakeRover, direction: str, expected: Position
    ) -> None:
        assert make_rover("r", 2, 2, direction).simulate_next_position() == expected

    def test_is_pure(self, make_rover: MakeRover) -> None:
        rover = make_rover("r", 2, 2, "E")
        first = rover.simulate_next_position()
        second = rover.simulate_next_position()
        assert first == second == Position(3, 2)
        assert rover.position == Position(2, 2)


class TestUnconstrainedMove:
    def test_move_north(self, rover: Rover) -> None:
        rover.move()
        assert rover.position == Position(0, 1)

    def test_move_east(self, rover: Rover) -> None:
        rover.rotate("R")
        rover.move()
        assert rover.position == Position(1, 0)

    def test_move_south_can_go_negative(self, rover: Rover) -> None:
        rover.rotate("R")
        rover.rotate("R")
        rover.move()
        assert rover.position == Position(0, -1)

    def test_move_west_can_go_negative(self, rover: Rover) -> None:
        rover.rotate("L")
        rover.move()
        assert rover.position == Position(-1, 0)


class TestConstrainedMove:
    def test_move_inside_plateau(self, plateau: Plateau, make_rover: MakeRover) -> None:
        rover = make_rover("1", 1, 1, "N")
        plateau.add_rover(rover)
        rover.move(plateau)
        assert rover.position == Position(1, 2)

    def test_out_of_bounds(self, plateau: Plateau, make_rover: MakeRover) -> None:
        rover = make_rover("1", 2, 5, "N")
        plateau.add_rover(rover)
        with pytest.raises(InvalidCommandError) as exc_info:
            rover.move(plateau)
        assert "(2, 6)" in exc_info.value.message
        assert "out of plateau bounds (0, 0) to (5, 5)" in exc_info.value.message
        assert rover.position == Position(2, 5)

    def test_out_of_bounds_at_origin(self, plateau: Plateau, make_rover: MakeRover) -> None:
        rover = make_rover("1", 0, 0, "W")
        plateau.add_rover(rover)
        with pytest.raises(InvalidCommandError):
            rover.move(plateau)
        assert rover.position == Position(0, 0)

    def test_blocked_by_other_rover(self, plateau: Plateau, make_rover: MakeRover) -> None:
        mover = make_rover("1", 1, 1, "E")
        blocker = make_rover("2", 2, 1, "N")
        plateau.add_rover(mover)
        plateau.add_rover(blocker)
        with pytest.raises(InvalidCommandError, match="already occupied by another rover"):
            mover.move(plateau)
        assert mover.position == Position(1, 1)

    def test_does_not_collide_with_itself(self, make_rover: MakeRover) -> None:
        plateau = Plateau(0, 1)
        rover = make_rover("1", 0, 0, "N")
        plateau.add_rover(rover)
        rover.move(plateau)
        assert rover.position == Position(0, 1)


class TestExecute:
    def test_dispatches_each_command(self, rover: Rover) -> None:
        for command in (Command.MOVE, Command.RIGHT, Command.MOVE, Command.LEFT):
            rover.execute(command)
        assert str(rover) == "1 1 N"


class TestOutput:
    def test_str(self, rover: Rover) -> None:
        assert str(rover) == "0 0 N"
        rover.move()
        rover.rotate("R")
        assert str(rover) == "0 1 E"

    def test_to_dict(self, make_rover: MakeRover) -> None:
        assert make_rover("7", 3, 4, "S").to_dict() == {
            "id": "7",
            "x": 3,
            "y": 4,
            "direction": "S",
        }


class TestCommandSequences:
    def test_lmlmlmlmm(self, make_rover: MakeRover) -> None:
        rover = make_rover("1", 1, 2, "N")
        for char in "LMLMLMLMM":
            rover.execute(Command(char))
        assert rover.position == Position(1, 3)
        assert rover.direction is Direction.NORTH
        assert str(rover) == "1 3 N"

    def test_mmrmmrmrrm(self, make_rover: MakeRover) -> None:
        rover = make_rover("2", 3, 3, "E")
        for char in "MMRMMRMRRM":
            rover.execute(Command(char))
        assert str(rover) == "5 1 E"
