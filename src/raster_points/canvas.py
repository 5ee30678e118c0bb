"""Hand-off of points to a display surface."""

from collections.abc import Iterable
from typing import Protocol

from .common.schemas import PixelPoint, SimplifiedColor


class PixelSink(Protocol):
    """Anything that can paint a single cell, e.g. a terminal canvas.

    Clipping to the surface bounds is the sink's job.
    """

    def set_pixel(self, x: int, y: int, layer: int, color: SimplifiedColor) -> None: ...


def draw_points(points: Iterable[PixelPoint], sink: PixelSink, layer: int = 1) -> int:
    """Paint every point onto ``sink`` at ``layer``. Returns the number drawn."""
    count = 0
    for x, y, color in points:
        sink.set_pixel(x, y, layer, color)
        count += 1
    return count
