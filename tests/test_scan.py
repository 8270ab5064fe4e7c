"""Tests for scan module."""

import os
from pathlib import Path

import pytest

from image_pager.errors import DirectoryError
from image_pager.scan import is_image, scan_folder


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("image.jpg", True),
        ("image.jpeg", True),
        ("image.png", True),
        ("image.gif", True),
        ("image.bmp", True),
        ("IMAGE.JPG", True),
        ("photo.PnG", True),
        ("archive.tar.gif", True),
        ("image.txt", False),
        ("image", False),
        ("x.txt", False),
        ("x", False),
        (".png", False),
        ("png", False),
        ("image.tiff", False),
        ("", False),
    ],
)
def test_is_image(filename: str, expected: bool) -> None:
    """is_image matches known extensions case-insensitively."""
    assert is_image(filename) is expected


def test_is_image_accepts_path() -> None:
    """is_image works on Path objects too."""
    assert is_image(Path("/some/dir/pic.jpeg"))
    assert not is_image(Path("/some/dir.png/readme"))


def test_scan_folder_finds_images(temp_image_dir: Path) -> None:
    """Scan returns exactly the image files, with full paths."""
    paths = scan_folder(temp_image_dir)
    assert len(paths) == 2
    assert paths == [temp_image_dir / "image.jpg", temp_image_dir / "image.png"]


def test_scan_folder_ignores_subdirectories(temp_image_dir: Path) -> None:
    """A directory named like an image is not returned."""
    names = {p.name for p in scan_folder(temp_image_dir)}
    assert "nested.png" not in names
    assert "text.txt" not in names


def test_scan_folder_is_not_recursive(tmp_path: Path) -> None:
    """Images inside subdirectories are not discovered."""
    (tmp_path / "top.gif").touch()
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "deep.jpg").touch()
    assert [p.name for p in scan_folder(tmp_path)] == ["top.gif"]


def test_scan_folder_sorted_by_name(tmp_path: Path) -> None:
    """Scan returns paths sorted by filename."""
    (tmp_path / "z.jpg").touch()
    (tmp_path / "a.jpeg").touch()
    (tmp_path / "m.bmp").touch()
    paths = scan_folder(tmp_path)
    assert [p.name for p in paths] == ["a.jpeg", "m.bmp", "z.jpg"]


def test_scan_folder_not_a_directory(tmp_path: Path) -> None:
    """Scan raises DirectoryError for a file path."""
    file_path = tmp_path / "file.txt"
    file_path.touch()
    with pytest.raises(DirectoryError) as exc_info:
        scan_folder(file_path)
    assert "Not a directory" in str(exc_info.value)


def test_scan_folder_missing(tmp_path: Path) -> None:
    """Scan raises DirectoryError for a path that does not exist."""
    with pytest.raises(DirectoryError) as exc_info:
        scan_folder(tmp_path / "missing")
    assert "not found" in str(exc_info.value)


def test_scan_folder_error_is_not_a_directory_error(tmp_path: Path) -> None:
    """DirectoryError can be caught as the builtin NotADirectoryError."""
    with pytest.raises(NotADirectoryError):
        scan_folder(tmp_path / "missing")


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="permission bits are not enforced for root",
)
def test_scan_folder_unreadable(tmp_path: Path) -> None:
    """Scan raises DirectoryError when the folder cannot be listed."""
    locked = tmp_path / "locked"
    locked.mkdir()
    (locked / "a.jpg").touch()
    locked.chmod(0o000)
    try:
        with pytest.raises(DirectoryError) as exc_info:
            scan_folder(locked)
        assert "Cannot read" in str(exc_info.value)
    finally:
        locked.chmod(0o755)


def test_scan_folder_empty(tmp_path: Path) -> None:
    """Scan returns empty list for empty folder."""
    assert scan_folder(tmp_path) == []
