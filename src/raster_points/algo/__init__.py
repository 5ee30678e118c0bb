"""Pipeline stages: decode, resolve, resample, flatten."""

from .decoder import ImageHandle, decode_image
from .flattener import flatten_points
from .resampler import fit_dimensions, plan_resize, resample
from .target_size import resolve_target

__all__ = [
    "ImageHandle",
    "decode_image",
    "fit_dimensions",
    "flatten_points",
    "plan_resize",
    "resample",
    "resolve_target",
]
