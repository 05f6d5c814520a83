"""Rich renderers for simulation results.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Layouts:
- compact: ``<x> <y> <direction>`` per rover
- verbose: ``Plateau: <maxX> <maxY>`` then ``Rover <id> position: <x> <y> <direction>``
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from roverctl.output.console import create_console, get_output, style_for_direction

if TYPE_CHECKING:
    from rich.console import Console

    from roverctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, width: int | None = None) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

    if not result.ok:
        _render_error(result, console)
    elif verbose:
        _render_verbose(result.data, console)
    else:
        _render_compact(result.data, console)

    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _pose(rover: dict[str, Any]) -> Text:
    direction = str(rover["direction"])
    text = Text()
    text.append(f"{rover['x']} {rover['y']}", style="rover.coord")
    text.append(" ")
    text.append(direction, style=style_for_direction(direction))
    return text


def _render_compact(data: dict[str, Any], console: Console) -> None:
    for rover in data.get("rovers", []):
        console.print(_pose(rover), soft_wrap=True)


def _render_verbose(data: dict[str, Any], console: Console) -> None:
    plateau = data.get("plateau", {})
    header = Text("Plateau: ", style="rover.label")
    header.append(f"{plateau.get('max_x')} {plateau.get('max_y')}", style="rover.coord")
    console.print(header, soft_wrap=True)

    for rover in data.get("rovers", []):
        line = Text("Rover ", style="rover.label")
        line.append(str(rover["id"]), style="rover.id")
        line.append(" position: ", style="rover.label")
        line.append_text(_pose(rover))
        console.print(line, soft_wrap=True)


def _render_error(result: ServiceResult, console: Console) -> None:
    code = result.error.code if result.error else "Error"
    message = result.error.message if result.error else "Unknown error"
    console.print(Text(f"{code}: {message}", style="rover.error"), soft_wrap=True)
