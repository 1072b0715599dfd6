"""
Chromahsl Color Space Conversions
=================================

Conversion between the RGBA and HSLA color models, with both scalar and
vectorized (numpy) implementations. Alpha is carried through untouched.

Conversion Functions
-------------------

RGBA → HSLA:
    rgba_to_hsla(r, g, b, a)
        Scalar RGBA to HSLA conversion
    np_rgba_to_hsla(r, g, b, a)
        Vectorized RGBA to HSLA conversion

HSLA → RGBA:
    hsla_to_rgba(h, s, l, a, wrap_phase=False)
        Scalar HSLA to RGBA conversion
    np_hsla_to_rgba(h, s, l, a, wrap_phase=False)
        Vectorized HSLA to RGBA conversion

High-Level API
-------------
    convert(color, from_space, to_space)
        Space-name driven converter for a single color
    np_convert(color, from_space, to_space)
        Vectorized space-name driven converter

Notes
-----
- Inputs are neither validated nor clamped; out-of-range values propagate.
- Grays (max == min) get hue 0 and saturation 0.
- hsla_to_rgba does not wrap the per-channel hue phases unless asked to.

Examples
--------
>>> from chromahsl.conversions import rgba_to_hsla, hsla_to_rgba
>>> rgba_to_hsla(0.0, 1.0, 0.0, 1.0)
(120.0, 1.0, 0.5, 1.0)
>>> hsla_to_rgba(180.0, 0.0, 0.5, 1.0)
(0.5, 0.5, 0.5, 1.0)
"""

# RGBA → HSLA conversions
from .to_hsl import (
    rgba_to_hsla,
    np_rgba_to_hsla,
    UnreachableHueBranchError,
)

# HSLA → RGBA conversions
from .to_rgb import (
    hsla_to_rgba,
    np_hsla_to_rgba,
)

# High-level API
from .wrapper import convert, np_convert

from ..types.color_types import ColorSpace

__all__ = [
    # RGBA → HSLA
    'rgba_to_hsla',
    'np_rgba_to_hsla',
    'UnreachableHueBranchError',

    # HSLA → RGBA
    'hsla_to_rgba',
    'np_hsla_to_rgba',

    # High-level API
    'convert',
    'np_convert',
    'ColorSpace',
]
