"""Pydantic schemas and value types for the image-to-points pipeline."""

from enum import StrEnum
from typing import NamedTuple

from PIL import Image
from pydantic import BaseModel, ConfigDict, Field

# ─────────────────────────────────────────────────────────────
# Enumerations
# ─────────────────────────────────────────────────────────────


class ResizeMode(StrEnum):
    IDENTITY = "identity"
    STRETCH = "stretch"
    FIT = "fit"

    @classmethod
    def select(cls, stretch: bool, has_width: bool, has_height: bool) -> "ResizeMode":
        """Pick the resize variant for a request.

        Stretch needs both dimensions given explicitly; everything else fits.
        IDENTITY is never returned here, the resampler decides that from sizes.
        """
        if stretch and has_width and has_height:
            return ResizeMode.STRETCH
        return ResizeMode.FIT


class FilterKind(StrEnum):
    NEAREST = "nearest"
    TRIANGLE = "triangle"
    CATMULL_ROM = "catmull_rom"
    GAUSSIAN = "gaussian"
    LANCZOS3 = "lanczos3"

    @property
    def pillow(self) -> Image.Resampling:
        return _PILLOW_FILTERS[self]


# Pillow has no gaussian kernel; HAMMING is the closest smooth windowed filter.
_PILLOW_FILTERS: dict[FilterKind, Image.Resampling] = {
    FilterKind.NEAREST: Image.Resampling.NEAREST,
    FilterKind.TRIANGLE: Image.Resampling.BILINEAR,
    FilterKind.CATMULL_ROM: Image.Resampling.BICUBIC,
    FilterKind.GAUSSIAN: Image.Resampling.HAMMING,
    FilterKind.LANCZOS3: Image.Resampling.LANCZOS,
}


# ─────────────────────────────────────────────────────────────
# Request / derived values
# ─────────────────────────────────────────────────────────────


class ResizeRequest(BaseModel):
    """How the decoded image should be sized.

    Attributes:
        width: Explicit target width (None = native width * scale)
        height: Explicit target height (None = native height * scale)
        scale: Factor applied to native dimensions that were not given
        stretch: Ignore aspect ratio, only honoured when both width and height are set
        resample: Reconstruction filter used for every resize
    """

    width: int | None = Field(default=None, description="Target width in pixels")
    height: int | None = Field(default=None, description="Target height in pixels")
    scale: float = Field(default=1.0, description="Scale factor for omitted dimensions")
    stretch: bool = Field(default=False, description="Stretch to exact width x height")
    resample: FilterKind = Field(default=FilterKind.TRIANGLE, description="Resampling filter")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def mode(self) -> ResizeMode:
        return ResizeMode.select(self.stretch, self.width is not None, self.height is not None)


class ResolvedTarget(BaseModel):
    target_width: int
    target_height: int

    model_config = ConfigDict(frozen=True)

    @property
    def size(self) -> tuple[int, int]:
        return (self.target_width, self.target_height)


class PositionOffset(BaseModel):
    """Translation added to every emitted point. Negative values are allowed."""

    x: int = 0
    y: int = 0

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_tuple(cls, position: tuple[int, int]) -> "PositionOffset":
        x, y = position
        return cls(x=x, y=y)


# ─────────────────────────────────────────────────────────────
# Output points
# ─────────────────────────────────────────────────────────────


class SimplifiedColor(NamedTuple):
    """RGB sample with alpha dropped, values taken as-is from the pixel."""

    r: int
    g: int
    b: int


class PixelPoint(NamedTuple):
    x: int
    y: int
    color: SimplifiedColor


PointList = list[PixelPoint]
