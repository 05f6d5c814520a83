"""Line-oriented parser and interpreter for rover command scripts.

Script format::

    <maxX> <maxY>
    <x> <y> <direction>
    <commands>
    [<x> <y> <direction>
    <commands>]...

The whole input is stripped, split on newlines, and each line stripped
again. Line 1 builds the plateau; every following pair of lines builds a
rover, places it on the plateau and replays its commands immediately.
Rover *N* is always read from lines ``2N`` and ``2N + 1``.

INVARIANT: The line counter advances exactly once per logical line, so a
ParserError raised while validating line *k* reports *k* (1-based).
Domain errors raised while placing or moving rovers propagate unmodified.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from roverctl.domain.errors import RoverError
from roverctl.domain.plateau import Plateau
from roverctl.domain.rover import Rover
from roverctl.domain.types import Command, Direction, Position

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_PREFIXED_INTEGER = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INFINITY = re.compile(r"[+-]?Infinity")

VALID_DIRECTIONS: tuple[str, ...] = tuple(d.value for d in Direction)
VALID_COMMANDS: tuple[str, ...] = tuple(c.value for c in Command)


class ParserError(RoverError):
    """Structural or lexical problem in a script, tied to a 1-based line."""

    def __init__(self, message: str, line_number: int) -> None:
        super().__init__(message)
        self.line_number = line_number

    def __str__(self) -> str:
        return f'"{self.message}" at line number: {self.line_number}'


@dataclass
class ParseOutput:
    """Result of a successful parse."""

    plateau: Plateau


def parse_number(token: str) -> int | float | None:
    """Parse *token* as a number literal, or return None.

    Accepted forms: signed decimal literals with an optional exponent,
    unsigned ``0x``/``0o``/``0b`` integers, and ``Infinity``. Digits are
    ASCII only and underscores are not separators. Integer literals stay
    ``int``; everything else becomes a ``float`` (possibly infinite) so the
    domain can reject non-integers with its own error.

    Examples:
        >>> parse_number("5")
        5
        >>> parse_number("5.5")
        5.5
        >>> parse_number("0x10")
        16
        >>> parse_number("1e400")
        inf
        >>> parse_number("1_0") is None
        True
    """
    if _INTEGER.fullmatch(token):
        return int(token)
    if _PREFIXED_INTEGER.fullmatch(token):
        return int(token, 0)
    if _DECIMAL.fullmatch(token) or _INFINITY.fullmatch(token):
        return float(token)
    return None


class PlateauRoversParser:
    """Single-pass, stateful parser that builds and drives a Plateau."""

    def __init__(self) -> None:
        self._current_line = 0

    @property
    def current_line(self) -> int:
        """1-based number of the line most recently consumed."""
        return self._current_line

    def parse(self, text: str) -> ParseOutput:
        """Parse *text*, execute every rover's commands, and return the plateau.

        Raises:
            ParserError: Malformed or missing line.
            InvalidInitializationError: Invalid plateau, rover, or placement.
            InvalidCommandError: A move left the plateau or hit another rover.
        """
        lines = [line.strip() for line in text.strip().split("\n")]

        self._current_line = 1
        plateau = self._parse_plateau(lines[0])
        logger.debug("Parsed plateau %s", plateau)

        for i in range(1, len(lines), 2):
            index = (i + 1) // 2

            self._current_line += 1
            rover = self._parse_rover(lines[i], index)
            plateau.add_rover(rover)

            self._current_line += 1
            commands_line = lines[i + 1] if i + 1 < len(lines) else ""
            commands = self._parse_commands(commands_line, index)

            for command in commands:
                rover.execute(command, plateau)
            logger.debug("Rover %s ran %d commands, ended at %s", rover.id, len(commands), rover)

        return ParseOutput(plateau=plateau)

    # --- Line parsers ---

    def _require_line(self, line: str, prefix: str) -> None:
        if not line:
            raise ParserError(f"{prefix} line is mandatory and cannot be empty", self._current_line)

    def _parse_plateau(self, line: str) -> Plateau:
        self._require_line(line, "Plateau")

        parts = _WHITESPACE.split(line)
        if len(parts) != 2:
            raise ParserError(
                "Plateau boundary must contain exactly two numbers", self._current_line
            )

        max_x, max_y = (parse_number(p) for p in parts)
        if max_x is None or max_y is None:
            raise ParserError("Plateau boundary must contain valid numbers", self._current_line)

        return Plateau(max_x, max_y)

    def _parse_rover(self, line: str, index: int) -> Rover:
        self._require_line(line, f"Rover {index} position")

        parts = _WHITESPACE.split(line)
        if len(parts) != 3:
            raise ParserError(
                f"Rover {index} position must contain exactly three values (x y direction)",
                self._current_line,
            )

        x, y = parse_number(parts[0]), parse_number(parts[1])
        if x is None or y is None:
            raise ParserError(f"Rover {index} coordinates must be valid numbers", self._current_line)

        facing = parts[2].upper()
        if facing not in VALID_DIRECTIONS:
            raise ParserError(
                f"Rover {index} direction must be one of: {', '.join(VALID_DIRECTIONS)}",
                self._current_line,
            )

        return Rover(str(index), Position(x, y), Direction(facing))  # type: ignore[arg-type]

    def _parse_commands(self, line: str, index: int) -> list[Command]:
        self._require_line(line, f"Rover {index} commands")

        commands: list[Command] = []
        for char in line.upper():
            if char not in VALID_COMMANDS:
                raise ParserError(
                    f"Rover {index} has invalid command '{char}'. "
                    f"Valid commands are: {', '.join(VALID_COMMANDS)}",
                    self._current_line,
                )
            commands.append(Command(char))
        return commands
