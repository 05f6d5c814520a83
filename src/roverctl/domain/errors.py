"""Domain error hierarchy.

INVARIANT: The domain never catches its own errors. They propagate
unmodified to the service layer, which turns them into ServiceResult
failures keyed by :attr:`RoverError.name`.
"""

from __future__ import annotations


class RoverError(Exception):
    """Base class for every error raised by roverctl."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def name(self) -> str:
        """Error kind shown to users as ``<name>: <message>``."""
        return type(self).__name__


class InvalidInitializationError(RoverError):
    """A plateau or rover was built, or a rover placed, in an invalid state."""


class InvalidCommandError(RoverError):
    """A move targets a cell that is out of bounds or already occupied."""
