"""Flatten a pixel grid into offset-positioned points."""

import numpy as np
from PIL import Image

from ..common.schemas import PixelPoint, PointList, PositionOffset, SimplifiedColor


def flatten_points(image: Image.Image, offset: PositionOffset) -> PointList:
    """
    Emit one point per pixel, row-major (y outer, x inner).

    Alpha is discarded, so transparent pixels come out like opaque ones.
    Coordinates are shifted by the offset and never clipped.

    Args:
        image: Resampled grid
        offset: Translation added to every coordinate

    Returns:
        List of PixelPoint, length width * height
    """
    if image.width == 0 or image.height == 0:
        return []

    if image.mode != "RGB":
        image = image.convert("RGB")

    rgb = np.asarray(image, dtype=np.uint8).tolist()

    points: PointList = []
    for y, row in enumerate(rgb):
        py = y + offset.y
        for x, (r, g, b) in enumerate(row):
            points.append(PixelPoint(x + offset.x, py, SimplifiedColor(r, g, b)))

    return points
