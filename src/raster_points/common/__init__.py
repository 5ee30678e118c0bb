from .errors import DecodeError
from .schemas import (
    FilterKind,
    PixelPoint,
    PointList,
    PositionOffset,
    ResizeMode,
    ResizeRequest,
    ResolvedTarget,
    SimplifiedColor,
)

__all__ = [
    "DecodeError",
    "FilterKind",
    "PixelPoint",
    "PointList",
    "PositionOffset",
    "ResizeMode",
    "ResizeRequest",
    "ResolvedTarget",
    "SimplifiedColor",
]
