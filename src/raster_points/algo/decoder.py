"""Decoder adapter: file path -> RGBA pixel grid via Pillow."""

from collections.abc import Iterator
from pathlib import Path

import numpy as np
from loguru import logger
from numpy.typing import NDArray
from PIL import Image, UnidentifiedImageError

from ..common.errors import DecodeError


class ImageHandle:
    """Decoded image at its native resolution, always in RGBA mode.

    Owned by a single pipeline call and dropped once the points are emitted.
    """

    def __init__(self, image: Image.Image, path: str | Path | None = None):
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        self.image: Image.Image = image
        self.path: Path | None = Path(path) if path is not None else None

    @property
    def native_width(self) -> int:
        return self.image.width

    @property
    def native_height(self) -> int:
        return self.image.height

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size

    def to_array(self) -> NDArray[np.uint8]:
        """Pixels as a (height, width, 4) uint8 array."""
        return np.asarray(self.image, dtype=np.uint8)

    def iter_pixels(self) -> Iterator[tuple[int, int, int, int, int, int]]:
        """Yield (x, y, r, g, b, a) for every pixel, y outer and x inner.

        Public enumeration accessor for callers that want the raw RGBA grid.
        The pipeline itself reads to_array() and never calls this.
        """
        pixels = self.to_array()
        for y in range(self.native_height):
            row = pixels[y]
            for x in range(self.native_width):
                r, g, b, a = row[x]
                yield x, y, int(r), int(g), int(b), int(a)


def decode_image(path: str | Path) -> ImageHandle:
    """
    Open and fully decode an image file.

    Args:
        path: Path to an encoded raster image (any format Pillow reads)

    Returns:
        ImageHandle in RGBA mode

    Raises:
        DecodeError: If the file is missing, unreadable, or not a supported image
    """
    path = Path(path)

    try:
        with Image.open(path) as img:
            img.load()
            rgba = img.convert("RGBA")
    except FileNotFoundError as exc:
        logger.error(f"Image not found: {path}")
        raise DecodeError("Image file not found", path) from exc
    except UnidentifiedImageError as exc:
        logger.error(f"Unsupported or corrupt image: {path}")
        raise DecodeError("Unsupported or corrupt image format", path) from exc
    except (OSError, Image.DecompressionBombError) as exc:
        logger.error(f"Failed to decode {path}: {exc}")
        raise DecodeError(f"Failed to decode image: {exc}", path) from exc

    logger.debug(f"Decoded {path} at {rgba.width}x{rgba.height}")
    return ImageHandle(rgba, path)
