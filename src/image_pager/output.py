"""Rich-formatted page listings."""

from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from image_pager.config import GridShape
from image_pager.session import ViewerSession


def page_table(page: list[Path], shape: GridShape) -> Table:
    """Build a table of image names laid out on the page grid, row by row."""
    table = Table(show_header=False, show_lines=True)
    for _ in range(shape.columns):
        table.add_column(style="cyan")
    names = [p.name for p in page]
    for i in range(0, len(names), shape.columns):
        row = names[i : i + shape.columns]
        while len(row) < shape.columns:
            row.append("")
        table.add_row(*row)
    return table


def print_page(session: ViewerSession, console: Console | None = None) -> None:
    """Print the session's current page as a Rich panel."""
    c = console or Console()
    if not session.pages:
        c.print("[yellow]No pages to show.[/]")
        return
    title = f"Page {session.index + 1}/{session.page_count}"
    c.print(Panel(page_table(session.current_page, session.shape), title=title, border_style="blue"))


def print_summary(session: ViewerSession, console: Console | None = None) -> None:
    """Print folder, grid, image and page counts."""
    c = console or Console()
    c.print(f"[bold]Folder:[/] {session.folder}")
    c.print(
        f"[bold]Grid:[/] {session.shape.columns} column(s) x {session.shape.rows} row(s) "
        f"({session.shape.capacity} per page)"
    )
    c.print(f"[bold]Images:[/] {len(session.images)}")
    c.print(f"[bold]Pages:[/] {session.page_count}")
    if session.geometry is not None:
        c.print(
            f"[bold]Window:[/] {session.geometry.columns} columns x {session.geometry.rows} rows"
        )
