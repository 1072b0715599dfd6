from .color_types import (
    ColorSpace,
    ColorValue,
    RGBAComponents,
    HSLAComponents,
    ToRGBAComponents,
    HUE_360,
    DEFAULT_ALPHA,
)

__all__ = [
    "ColorSpace",
    "ColorValue",
    "RGBAComponents",
    "HSLAComponents",
    "ToRGBAComponents",
    "HUE_360",
    "DEFAULT_ALPHA",
]
