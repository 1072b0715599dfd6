"""
Chromahsl Color Classes
=======================

Immutable color values for the RGBA and HSLA color models.

Features
--------
- Immutable color instances (frozen after initialization)
- Scalar colors (single color values) and array colors (numpy, shape (..., 4))
- Construction from 3 or 4 numbers (alpha defaults to 1.0)
- Construction from any object exposing ``to_rgba_components()``
- Lazy conversion: only the native model is stored

Usage
-----
>>> from chromahsl.colors import ColorRGBA, ColorHSLA
>>>
>>> red = ColorRGBA((1.0, 0.0, 0.0))
>>> red.value
(1.0, 0.0, 0.0, 1.0)
>>> ColorHSLA(red).value
(0.0, 1.0, 0.5, 1.0)
>>> ColorHSLA.new_from_rgba(0.0, 0.0, 1.0, 0.5).value
(240.0, 1.0, 0.5, 0.5)

Notes
-----
- Values are never clamped.
- Sequences must hold 3 or 4 numbers; anything else raises ValueError.
- Arrays must have a last dimension of 3 or 4.
"""

from .color_base import ColorBase
from .rgb import ColorRGBA
from .hsl import ColorHSLA
from .color import color_convert, convert_color, get_color_class, unified_space_to_class


__all__ = [
    'ColorBase',
    'ColorRGBA',
    'ColorHSLA',
    'color_convert',
    'convert_color',
    'get_color_class',
    'unified_space_to_class',
]
