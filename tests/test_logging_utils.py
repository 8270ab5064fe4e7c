"""Tests for logging_utils module."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from image_pager.logging_utils import setup_logger


def test_setup_logger_adds_one_rich_handler() -> None:
    """Repeated setup returns the same logger without duplicate handlers."""
    logger1 = setup_logger("image_pager_test_once")
    logger2 = setup_logger("image_pager_test_once", level=logging.DEBUG)
    assert logger1 is logger2
    assert len(logger1.handlers) == 1
    assert isinstance(logger1.handlers[0], RichHandler)
    assert logger1.level == logging.DEBUG
    assert logger1.propagate is False


def test_setup_logger_writes_to_console() -> None:
    """Records go to the supplied Rich console."""
    console = Console(record=True, width=120, force_terminal=False)
    logger = setup_logger("image_pager_test_console", console=console)
    logger.info("found %d image(s)", 3)
    logger.debug("hidden at INFO")
    text = console.export_text()
    assert "found 3 image(s)" in text
    assert "hidden at INFO" not in text
