"""Logging setup for the image_pager package.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves; the CLI calls :func:`setup_logger` once.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "image_pager"


def setup_logger(
        name: str = LOGGER_NAME,
        level: int = logging.INFO,
        console: Console | None = None,
) -> logging.Logger:
    """
    Configure the package logger with a Rich handler.

    Calling it again only updates the level, so handlers are never
    duplicated.

    Args:
        name: Logger name, normally the package name.
        level: Logging level (e.g., logging.INFO, logging.DEBUG).
        console: Optional Rich console for the handler (defaults to stderr).

    Returns:
        The configured logger.

    """
    logger_instance = logging.getLogger(name)
    logger_instance.setLevel(level)
    if not logger_instance.handlers:
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger_instance.addHandler(handler)
        logger_instance.propagate = False
    return logger_instance
