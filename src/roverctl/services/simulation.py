"""SimulationService — run a rover script and report final rover poses.

This is the single place where roverctl errors are caught. The parser and
domain raise; the service converts the failure into a ServiceResult whose
``error.code`` is the error kind (``ParserError``,
``InvalidInitializationError``, ``InvalidCommandError`` or ``Error``).
A failed run never returns rover data.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from roverctl.domain.errors import RoverError
from roverctl.infrastructure.filesystem import read_script
from roverctl.services.parser import ParserError, PlateauRoversParser
from roverctl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

OP_SIMULATE = "simulate"


class SimulationService:
    """Parse and execute command scripts.

    Usage::

        result = SimulationService(base_dir=Path.cwd()).run_file("input.txt")
        if result.ok:
            for rover in result.data["rovers"]:
                ...
    """

    def __init__(self, *, base_dir: Path | None = None, encoding: str = "utf-8-sig") -> None:
        self._base_dir = base_dir
        self._encoding = encoding

    def run_file(self, path: str | Path) -> ServiceResult:
        """Read the script at *path* and run it."""
        try:
            text = read_script(path, base=self._base_dir, encoding=self._encoding)
        except RoverError as exc:
            return self._failure(exc, source=str(path))
        return self.run_text(text, source=str(path))

    def run_text(self, text: str, *, source: str | None = None) -> ServiceResult:
        """Run an in-memory script."""
        try:
            output = PlateauRoversParser().parse(text)
        except RoverError as exc:
            return self._failure(exc, source=source)

        plateau = output.plateau
        rovers = [rover.to_dict() for rover in plateau.rovers]
        logger.debug("Simulation finished: %s", plateau)

        meta: dict[str, Any] = {"rover_count": len(rovers)}
        if source is not None:
            meta["source"] = source
        return ServiceResult(
            ok=True,
            op=OP_SIMULATE,
            data={"plateau": plateau.to_dict(), "rovers": rovers},
            meta=meta,
        )

    @staticmethod
    def _failure(exc: RoverError, *, source: str | None) -> ServiceResult:
        detail: dict[str, Any] = {"reason": exc.message}
        if isinstance(exc, ParserError):
            detail["line_number"] = exc.line_number
        if source is not None:
            detail["source"] = source

        logger.debug("Simulation failed with %s: %s", exc.name, exc)
        return ServiceResult(
            ok=False,
            op=OP_SIMULATE,
            error=ServiceError(code=exc.name, message=str(exc), detail=detail),
        )
