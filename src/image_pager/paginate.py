"""Split an ordered image list into fixed-size pages."""

from collections.abc import Sequence
from typing import TypeVar

from image_pager.config import GridShape
from image_pager.errors import InvalidShapeError

T = TypeVar("T")


def _capacity(shape: GridShape) -> int:
    capacity = shape.columns * shape.rows
    if capacity < 1:
        raise InvalidShapeError(
            f"Grid {shape.columns}x{shape.rows} has no room for images."
        )
    return capacity


def paginate(images: Sequence[T], shape: GridShape) -> list[list[T]]:
    """Partition images into consecutive pages of shape.capacity items.

    Order is preserved and every page except the last is full. An empty
    list gives no pages at all. The input is not modified.

    Raises:
        InvalidShapeError: When the shape has a capacity below one.
    """
    capacity = _capacity(shape)
    return [list(images[i : i + capacity]) for i in range(0, len(images), capacity)]


def page_count(total: int, shape: GridShape) -> int:
    """Number of pages paginate would produce for total images."""
    capacity = _capacity(shape)
    return -(-max(total, 0) // capacity)
