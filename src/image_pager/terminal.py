"""Measure the terminal window in character cells."""

import io
import logging
import os
import sys
from dataclasses import dataclass
from typing import Protocol, TextIO

from image_pager.config import GridShape
from image_pager.errors import ConfigValidationError, NotATerminalError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WindowGeometry:
    """Terminal size in character cells at the time of the probe."""

    rows: int
    columns: int


class WindowSizeProbe(Protocol):
    """Anything that can report the current window geometry."""

    def probe(self) -> WindowGeometry: ...


class StreamWindowSizeProbe:
    """Query the terminal attached to a stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def _fileno(self) -> int:
        try:
            return self.stream.fileno()
        except (AttributeError, ValueError, io.UnsupportedOperation) as exc:
            raise NotATerminalError(
                "Stream has no file descriptor; cannot read window size."
            ) from exc

    def probe(self) -> WindowGeometry:
        """Return the window size. Raises NotATerminalError for non-terminals."""
        fd = self._fileno()
        if not os.isatty(fd):
            raise NotATerminalError(
                f"File descriptor {fd} is not a terminal (redirected to a file or pipe?)."
            )
        try:
            size = os.get_terminal_size(fd)
        except OSError as exc:
            raise NotATerminalError(f"Cannot read window size: {exc}") from exc
        if size.lines <= 0 or size.columns <= 0:
            raise NotATerminalError(
                f"Terminal reported an empty window ({size.lines} rows, {size.columns} columns)."
            )
        geometry = WindowGeometry(rows=size.lines, columns=size.columns)
        logger.debug("Window geometry: %d rows x %d columns", geometry.rows, geometry.columns)
        return geometry


def probe_window_size(stream: TextIO | None = None) -> WindowGeometry:
    """Probe the terminal attached to stream (default stdout)."""
    return StreamWindowSizeProbe(stream).probe()


def grid_for_window(
    geometry: WindowGeometry,
    cell_columns: int,
    cell_rows: int,
    reserved_rows: int = 0,
) -> GridShape:
    """Fit as many cell_columns x cell_rows image cells as the window holds.

    reserved_rows are kept free for status lines. The result is never
    smaller than 1x1, even on a window too small for one cell.
    """
    if cell_columns <= 0 or cell_rows <= 0:
        raise ConfigValidationError(
            f"Cell size must be positive. Got {cell_columns}x{cell_rows}."
        )
    usable_rows = max(geometry.rows - max(reserved_rows, 0), 0)
    return GridShape(
        columns=max(geometry.columns // cell_columns, 1),
        rows=max(usable_rows // cell_rows, 1),
    )
