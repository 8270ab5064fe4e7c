"""Discover image files in a folder by extension."""

import logging
import os
from pathlib import Path

from image_pager.errors import DirectoryError

EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".bmp"}
EXTENSIONS_LOWER = {e.lower() for e in EXTENSIONS}

logger = logging.getLogger(__name__)


def is_image(filename: str | Path) -> bool:
    """Return True if filename has a recognised image extension (case-insensitive).

    A bare dotfile such as ".png" has no extension and is not an image.
    """
    return Path(filename).suffix.lower() in EXTENSIONS_LOWER


def scan_folder(folder: Path) -> list[Path]:
    """Return image paths in folder sorted by file name (non-recursive).

    Only regular files are considered; subdirectories are skipped even when
    their name ends in an image extension. File contents are never read.

    Raises:
        DirectoryError: When folder does not exist, is not a directory or
            cannot be listed.
    """
    folder = Path(folder)
    if not folder.exists():
        raise DirectoryError(f"Directory not found: {folder}")
    if not folder.is_dir():
        raise DirectoryError(f"Not a directory: {folder}")
    paths: list[Path] = []
    try:
        with os.scandir(folder) as entries:
            for entry in entries:
                if entry.is_file() and is_image(entry.name):
                    paths.append(folder / entry.name)
    except PermissionError as exc:
        raise DirectoryError(f"Cannot read directory: {folder}") from exc
    except OSError as exc:
        raise DirectoryError(f"Cannot list directory {folder}: {exc}") from exc
    paths.sort(key=lambda p: p.name)
    logger.debug("Found %d image(s) in %s", len(paths), folder)
    return paths
