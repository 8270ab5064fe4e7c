"""Viewer session: discovered images, grid and pages for one folder."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from image_pager.config import GridShape, load_config
from image_pager.paginate import paginate
from image_pager.scan import scan_folder
from image_pager.terminal import WindowGeometry, WindowSizeProbe

logger = logging.getLogger(__name__)


@dataclass
class ViewerSession:
    """State for paging through one folder.

    Each session owns its own values, so several folders can be paged in
    one process. ``pages`` is always rebuilt from ``images`` and ``shape``.
    When ``override_shape`` is set the config file is never read and
    reloads keep that grid.
    """

    folder: Path
    config_path: Path | None
    shape: GridShape
    images: list[Path] = field(default_factory=list)
    pages: list[list[Path]] = field(default_factory=list)
    geometry: WindowGeometry | None = None
    index: int = 0
    override_shape: GridShape | None = None

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def current_page(self) -> list[Path]:
        """Images on the current page ([] when the folder has no images)."""
        if not self.pages:
            return []
        return self.pages[self.index]

    def has_next(self) -> bool:
        return self.index + 1 < len(self.pages)

    def has_prev(self) -> bool:
        return self.index > 0

    def next_page(self) -> list[Path]:
        """Advance one page if possible and return the current page."""
        if self.has_next():
            self.index += 1
        return self.current_page

    def prev_page(self) -> list[Path]:
        """Go back one page if possible and return the current page."""
        if self.has_prev():
            self.index -= 1
        return self.current_page

    def go_to(self, index: int) -> list[Path]:
        """Jump to page index (0-based). Raises IndexError when out of range."""
        if not 0 <= index < len(self.pages):
            raise IndexError(
                f"Page {index + 1} out of range (folder has {len(self.pages)} page(s))."
            )
        self.index = index
        return self.current_page

    def repaginate(self, shape: GridShape) -> None:
        """Replace the grid shape and rebuild pages from the current images."""
        self.shape = shape
        self.pages = paginate(self.images, shape)
        self.index = min(self.index, max(len(self.pages) - 1, 0))

    def reload(self) -> None:
        """Rescan the folder and reload the config, replacing previous pages.

        A session opened with an explicit grid keeps it; the config is not read.
        """
        images = scan_folder(self.folder)
        if self.override_shape is not None:
            shape = self.override_shape
        else:
            shape = load_config(self.config_path)
        self.images = images
        self.repaginate(shape)
        logger.debug(
            "Reloaded %s: %d image(s), %d page(s)", self.folder, len(images), len(self.pages)
        )


def open_session(
    folder: Path,
    config_path: Path | None = None,
    probe: WindowSizeProbe | None = None,
    shape: GridShape | None = None,
) -> ViewerSession:
    """Discover images, load the grid and paginate.

    Args:
        folder: Folder to scan for images.
        config_path: Optional config file; default locations are searched if None.
        probe: Optional window size probe; its geometry is stored on the session.
        shape: Optional grid that overrides the config file (config is not read).

    Errors from discovery, config loading and probing propagate unchanged.
    """
    folder = Path(folder)
    images = scan_folder(folder)
    override = shape
    if shape is None:
        shape = load_config(config_path)
    geometry = probe.probe() if probe is not None else None
    session = ViewerSession(
        folder=folder,
        config_path=config_path,
        shape=shape,
        images=images,
        pages=paginate(images, shape),
        geometry=geometry,
        override_shape=override,
    )
    logger.debug(
        "Opened %s: %d image(s), grid %s, %d page(s)",
        folder,
        len(images),
        shape,
        session.page_count,
    )
    return session
