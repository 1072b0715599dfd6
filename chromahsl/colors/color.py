from __future__ import annotations
from .color_base import ColorBase, build_registry
from .rgb import ColorRGBA
from .hsl import ColorHSLA
from ..types.color_types import ColorSpace

unified_space_to_class: dict[str, type[ColorBase]] = {
    **build_registry(ColorRGBA, ColorHSLA),
    # 3-channel names resolve to the alpha-carrying class
    "rgb": ColorRGBA,
    "hsl": ColorHSLA,
}


def get_color_class(color_space: str) -> type[ColorBase]:
    color_class = unified_space_to_class.get(color_space.lower())
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space}")
    return color_class


def color_convert(self: ColorBase, to_space: ColorSpace | None = None) -> ColorBase:
    """
    Convert this color to a different color model.

    Works for scalar and array values alike; array values go through the
    vectorized conversions.

    Args:
        to_space: Target color space ("rgba", "hsla", "rgb" or "hsl").
            Defaults to the current space.

    Returns:
        New ColorBase instance in the target space
    """
    cls = get_color_class(to_space or self.mode)
    return cls(self)


ColorBase.convert = color_convert


def convert_color(value, color_space: str) -> ColorBase:
    """Wrap raw components, or convert an existing color, into ``color_space``."""
    return get_color_class(color_space)(value)
