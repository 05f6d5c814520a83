"""Human/JSON output dispatch.

The CLI renders ServiceResult for humans (compact or verbose rover lines
via Rich) or machines (--json). The formatter layer adapts ServiceResult
to the requested output mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from roverctl.output.renderers import render_result

if TYPE_CHECKING:
    from roverctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    verbose: bool = False
    width: int | None = None


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON mode serialises the whole result (including errors); otherwise
    the Rich renderers produce compact or verbose text.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    return render_result(result, verbose=settings.verbose, width=settings.width)
