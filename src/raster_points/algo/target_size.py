"""Target-size resolution from explicit dimensions and a scale factor."""

from ..common.schemas import ResolvedTarget


def resolve_target(
    native_width: int,
    native_height: int,
    width: int | None = None,
    height: int | None = None,
    scale: float = 1.0,
) -> ResolvedTarget:
    """
    Compute the output grid size.

    Each axis is resolved on its own: an explicit value is used unscaled,
    an omitted one becomes int(native * scale), truncated toward zero.

    Zero or negative inputs are not rejected or clamped. They are a caller
    contract violation and the resulting pixel output is undefined.

    Args:
        native_width: Decoded image width
        native_height: Decoded image height
        width: Explicit target width, or None
        height: Explicit target height, or None
        scale: Factor for the omitted axes

    Returns:
        ResolvedTarget
    """
    target_width = width if width is not None else int(native_width * scale)
    target_height = height if height is not None else int(native_height * scale)

    return ResolvedTarget(target_width=target_width, target_height=target_height)
