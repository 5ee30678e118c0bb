"""Resampling of the native grid to the resolved target size."""

import math

from loguru import logger
from PIL import Image

from ..common.schemas import FilterKind, ResizeMode, ResolvedTarget
from .decoder import ImageHandle


def fit_dimensions(
    native_width: int,
    native_height: int,
    target_width: int,
    target_height: int,
) -> tuple[int, int]:
    """Largest size with the native aspect ratio that fits inside the target box.

    Scales up as well as down. Each axis is rounded half-up and kept >= 1.
    """
    ratio = min(target_width / native_width, target_height / native_height)
    fit_width = max(math.floor(native_width * ratio + 0.5), 1)
    fit_height = max(math.floor(native_height * ratio + 0.5), 1)
    return fit_width, fit_height


def plan_resize(
    native_size: tuple[int, int],
    target: ResolvedTarget,
    mode: ResizeMode,
) -> tuple[ResizeMode, tuple[int, int]]:
    """
    Decide which resize actually runs and the size it produces.

    Args:
        native_size: (width, height) of the decoded image
        target: Resolved target dimensions
        mode: Requested variant, STRETCH or FIT

    Returns:
        (effective mode, output size). IDENTITY when the target equals the
        native size, regardless of the requested mode.
    """
    native_width, native_height = native_size

    if target.size == native_size:
        return ResizeMode.IDENTITY, native_size

    if mode == ResizeMode.STRETCH:
        # Non-positive axes collapse to an empty grid.
        return ResizeMode.STRETCH, (max(target.target_width, 0), max(target.target_height, 0))

    return ResizeMode.FIT, fit_dimensions(
        native_width, native_height, target.target_width, target.target_height
    )


def resample(
    handle: ImageHandle,
    target: ResolvedTarget,
    mode: ResizeMode,
    filter_kind: FilterKind = FilterKind.TRIANGLE,
) -> Image.Image:
    """
    Produce the pixel grid for the resolved target.

    The identity path hands back the native image object untouched, so no
    filter pass runs and pixel values are exact. Other paths filter the RGB
    bands only: alpha is dropped downstream, and resizing RGBA would
    premultiply it into the colour channels.

    Args:
        handle: Decoded native image
        target: Resolved target dimensions
        mode: Requested variant, STRETCH or FIT
        filter_kind: Reconstruction filter kind

    Returns:
        Native RGBA image, or an RGB image at the planned output size
        (empty when a stretch axis is not positive)
    """
    effective_mode, size = plan_resize(handle.size, target, mode)

    if effective_mode == ResizeMode.IDENTITY:
        logger.debug(f"Native size {handle.size} matches target, skipping resample")
        return handle.image

    logger.debug(
        f"Resampling {handle.size} -> {size} ({effective_mode}, filter={filter_kind})"
    )
    if size[0] == 0 or size[1] == 0:
        return Image.new("RGB", size)

    return handle.image.convert("RGB").resize(size, filter_kind.pillow)
