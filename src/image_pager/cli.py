"""CLI entry point and orchestration."""

import argparse
import logging
from pathlib import Path

from rich.console import Console

from image_pager.config import GridShape, _config_paths
from image_pager.errors import (
    ConfigError,
    ConfigValidationError,
    DirectoryError,
    NotATerminalError,
)
from image_pager.logging_utils import setup_logger
from image_pager.output import print_page, print_summary
from image_pager.session import open_session
from image_pager.terminal import StreamWindowSizeProbe, grid_for_window


def _parse_cell_size(value: str) -> tuple[int, int]:
    """Parse a COLSxROWS cell size such as '20x10'."""
    parts = value.lower().split("x")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Expected COLSxROWS (e.g. 20x10), got '{value}'")
    try:
        cols, rows = int(parts[0]), int(parts[1])
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Expected COLSxROWS (e.g. 20x10), got '{value}'") from e
    if cols <= 0 or rows <= 0:
        raise argparse.ArgumentTypeError(f"Cell size must be positive, got '{value}'")
    return cols, rows


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Page through the images in a folder on a terminal grid.",
    )
    parser.add_argument(
        "-f",
        "--folder",
        type=Path,
        help="Folder containing JPG/JPEG/PNG/GIF/BMP images",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to config file (optional)",
    )
    parser.add_argument(
        "-p",
        "--page",
        type=int,
        default=1,
        help="Page number to show, starting at 1 (default: 1)",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Show every page",
    )
    parser.add_argument(
        "--auto-grid",
        type=_parse_cell_size,
        metavar="COLSxROWS",
        default=None,
        help="Derive the grid from the terminal size using this cell size per image "
        "instead of the config file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose output including config search paths and debug logging",
    )
    return parser


def main() -> None:
    """Run the image pager CLI."""
    parser = _build_parser()
    args = parser.parse_args()

    console = Console()
    setup_logger(level=logging.DEBUG if args.verbose else logging.INFO)

    if not args.folder:
        parser.error("-f/--folder is required")

    if args.verbose:
        if args.config:
            console.print(f"[dim]Config file:[/] {args.config}")
        elif args.auto_grid is None:
            console.print("[dim]Config search paths:[/]")
            for p in _config_paths(None):
                exists = "✓" if p.exists() else "✗"
                console.print(f"[dim]  {exists} {p}[/]")
        console.print("")

    probe = StreamWindowSizeProbe()
    shape: GridShape | None = None
    if args.auto_grid is not None:
        try:
            geometry = probe.probe()
            # One row stays free for the page title
            shape = grid_for_window(geometry, *args.auto_grid, reserved_rows=1)
        except (NotATerminalError, ConfigValidationError) as e:
            console.print(f"[red]Error:[/] {e}")
            raise SystemExit(1) from e

    try:
        session = open_session(args.folder, args.config, shape=shape)
    except DirectoryError as e:
        console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e
    except ConfigError as e:
        console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e

    try:
        session.geometry = probe.probe()
    except NotATerminalError:
        # Listing still works when output is piped
        session.geometry = None

    if not session.images:
        console.print("[yellow]No image files found in folder.[/]")
        return

    if args.verbose:
        print_summary(session, console)
        console.print("")

    if args.all:
        for index in range(session.page_count):
            session.go_to(index)
            print_page(session, console)
        return

    try:
        session.go_to(args.page - 1)
    except IndexError as e:
        console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e
    print_page(session, console)
