"""AppContext — shared state for a single CLI invocation.

Created by the root command after settings are resolved. Configures
logging, builds the simulation service, and centralizes result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from roverctl.config.logging import configure_logging
from roverctl.output.formatters import OutputSettings, format_result
from roverctl.services.simulation import SimulationService

if TYPE_CHECKING:
    from roverctl.config.settings import RoverSettings
    from roverctl.services.result import ServiceResult


class AppContext:
    """Per-invocation context stored in ``click.Context.obj``."""

    def __init__(self, settings: RoverSettings) -> None:
        self.settings = settings
        self._simulation: SimulationService | None = None

        configure_logging(verbose=settings.debug, log_json=settings.log_json)

    @property
    def simulation(self) -> SimulationService:
        """The simulation service (created lazily on first access)."""
        if self._simulation is None:
            self._simulation = SimulationService(
                base_dir=self.settings.base_dir,
                encoding=self.settings.input.encoding,
            )
        return self._simulation

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes ``<ErrorKind>: <message>`` (or JSON) to stderr,
          exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            verbose=self.settings.verbose_output,
            width=self.settings.output.width,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            if output:
                click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
