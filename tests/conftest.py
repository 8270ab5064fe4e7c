"""Shared pytest fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def temp_config(tmp_path: Path) -> Path:
    """Create a temporary config file with a 4x5 grid and return its path."""
    config_path = tmp_path / "image-pager.yaml"
    config_content = """grid:
  columns: 4
  rows: 5
"""
    config_path.write_text(config_content, encoding="utf-8")
    return config_path


@pytest.fixture
def temp_image_dir(tmp_path: Path) -> Path:
    """Create a folder with two images, a text file and a subdirectory."""
    folder = tmp_path / "photos"
    folder.mkdir()
    (folder / "image.jpg").touch()
    (folder / "image.png").touch()
    (folder / "text.txt").write_text("not an image", encoding="utf-8")
    (folder / "nested.png").mkdir()
    return folder
