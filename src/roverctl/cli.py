"""Root CLI command: run a rover script and print final rover positions."""

from __future__ import annotations

import click

from roverctl import __version__
from roverctl.commands._base import RoverCommand
from roverctl.commands._context import AppContext
from roverctl.config.settings import RoverSettings


@click.command(
    cls=RoverCommand,
    examples="""\
  roverctl input/example.txt
  roverctl input/example.txt --verbose
  roverctl --json input/example.txt
  roverctl -c ./roverctl.toml --debug --log-json input/example.txt""",
)
@click.version_option(version=__version__, prog_name="roverctl")
@click.argument("file_path", metavar="FILE")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Show plateau info and rover prefixes.",
)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("--debug", is_flag=True, help="Debug log output to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    file_path: str,
    verbose: bool,
    json_output: bool,
    debug: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """roverctl — Mars rovers command simulator.

    Reads FILE (relative to the current directory), moves every rover on
    the plateau, and prints each rover's final position.
    """
    settings = RoverSettings.from_cli(
        config_path=config_path,
        verbose=verbose,
        json_output=json_output,
        debug=debug,
        log_json=log_json,
    )
    app = AppContext(settings)
    ctx.obj = app
    app.emit(app.simulation.run_file(file_path))
