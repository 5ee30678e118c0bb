"""Entry point: image file -> positioned point list."""

from pathlib import Path

from loguru import logger

from .algo.decoder import decode_image
from .algo.flattener import flatten_points
from .algo.resampler import resample
from .algo.target_size import resolve_target
from .common.schemas import FilterKind, PointList, PositionOffset, ResizeRequest
from .utils.profiling import timed


@timed
def load_image_request(
    path: str | Path,
    request: ResizeRequest,
    position: PositionOffset | None = None,
) -> PointList:
    """
    Run decode, resolve, resample and flatten for one image.

    Args:
        path: Path to the encoded image
        request: Sizing parameters
        position: Offset applied to every point (default 0, 0)

    Returns:
        Points in row-major order, one per pixel of the resampled grid

    Raises:
        DecodeError: If the image cannot be decoded. Nothing else runs.
    """
    if position is None:
        position = PositionOffset()

    handle = decode_image(path)

    target = resolve_target(
        handle.native_width,
        handle.native_height,
        width=request.width,
        height=request.height,
        scale=request.scale,
    )

    resized = resample(handle, target, request.mode, request.resample)
    points = flatten_points(resized, position)

    logger.info(
        f"Loaded {path}: {handle.native_width}x{handle.native_height} -> "
        f"{resized.width}x{resized.height}, {len(points)} points"
    )
    return points


def load_image(
    path: str | Path,
    *,
    width: int | None = None,
    height: int | None = None,
    position: tuple[int, int] = (0, 0),
    stretch: bool = False,
    scale: float = 1.0,
    resample: FilterKind = FilterKind.TRIANGLE,
) -> PointList:
    """
    Load an image as (x, y, color) points ready to draw on a canvas.

    Args:
        path: Path to the image (PNG, JPEG, WEBP, anything Pillow decodes)
        width: Target width. None uses the native width times ``scale``
        height: Target height. None uses the native height times ``scale``
        position: (x, y) added to every point's coordinates
        stretch: If True and both width and height are given, resize to exactly
            that size. Otherwise the aspect ratio is kept within the target box
        scale: Factor for dimensions that were not given. Explicit width and
            height are used unscaled
        resample: Filter used when a resize runs

    Returns:
        List of PixelPoint(x, y, SimplifiedColor(r, g, b))

    Raises:
        DecodeError: If the file is missing, unreadable, or not an image
    """
    request = ResizeRequest(
        width=width,
        height=height,
        scale=scale,
        stretch=stretch,
        resample=resample,
    )
    return load_image_request(path, request, PositionOffset.from_tuple(position))
