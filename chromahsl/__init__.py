"""Chromahsl: RGBA ↔ HSLA color conversion."""

from .colors.rgb import ColorRGBA
from .colors.hsl import ColorHSLA
from .colors.color_base import ColorBase
from .colors.color import color_convert, convert_color

# Friendly aliases
ColorRGB = ColorRGBA
ColorHSL = ColorHSLA

from .conversions import (
    rgba_to_hsla,
    hsla_to_rgba,
    np_rgba_to_hsla,
    np_hsla_to_rgba,
    convert,
    np_convert,
    UnreachableHueBranchError,
)
from .types.color_types import ToRGBAComponents, ColorSpace

__version__ = "1.0.0"

__all__ = [
    # core color types
    "ColorBase",
    "ColorRGBA",
    "ColorHSLA",
    "ColorRGB",
    "ColorHSL",
    "ToRGBAComponents",
    "ColorSpace",
    "color_convert",
    "convert_color",
    # conversions
    "rgba_to_hsla",
    "hsla_to_rgba",
    "np_rgba_to_hsla",
    "np_hsla_to_rgba",
    "convert",
    "np_convert",
    "UnreachableHueBranchError",
    "__version__",
]
