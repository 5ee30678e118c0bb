"""raster_points - Load raster images as positioned colored points."""

from .algo.decoder import ImageHandle, decode_image
from .canvas import PixelSink, draw_points
from .common.errors import DecodeError
from .common.schemas import (
    FilterKind,
    PixelPoint,
    PointList,
    PositionOffset,
    ResizeMode,
    ResizeRequest,
    ResolvedTarget,
    SimplifiedColor,
)
from .loader import load_image, load_image_request

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "FilterKind",
    "ImageHandle",
    "PixelPoint",
    "PixelSink",
    "PointList",
    "PositionOffset",
    "ResizeMode",
    "ResizeRequest",
    "ResolvedTarget",
    "SimplifiedColor",
    "__version__",
    "decode_image",
    "draw_points",
    "load_image",
    "load_image_request",
]
