from __future__ import annotations
from typing import ClassVar, Tuple, Union
from numpy import ndarray

from ..conversions import rgba_to_hsla, np_rgba_to_hsla, hsla_to_rgba, np_hsla_to_rgba
from ..types.color_types import ColorSpace, DEFAULT_ALPHA, RGBAComponents, HSLAComponents, Scalar
from .color_base import ColorBase


class ColorHSLA(ColorBase):
    """
    Hue in degrees plus saturation, lightness and alpha in [0, 1].

    Only the HSLA components are stored. The RGBA view is recomputed each
    time `to_rgba_components` is called.
    """

    mode:     ClassVar[ColorSpace] = "hsla"
    channels: ClassVar[Tuple[str, str, str, str]] = ("h", "s", "l", "a")

    @classmethod
    def from_components(cls, h: float, s: float, l: float, a: float = DEFAULT_ALPHA) -> ColorHSLA:
        return cls((h, s, l, a))

    @classmethod
    def new_from_rgba(cls, r: float, g: float, b: float, a: float) -> ColorHSLA:
        """Build straight from RGBA components."""
        return cls(rgba_to_hsla(r, g, b, a))

    @classmethod
    def _from_rgba(cls, rgba):
        if isinstance(rgba, ndarray):
            return np_rgba_to_hsla(rgba[..., 0], rgba[..., 1], rgba[..., 2], rgba[..., 3])
        return rgba_to_hsla(*rgba)

    def to_rgba_components(self) -> Union[RGBAComponents, ndarray]:
        if isinstance(self.value, ndarray):
            return np_hsla_to_rgba(*self)
        return hsla_to_rgba(*self.value)

    def to_hsla_components(self) -> Union[HSLAComponents, ndarray]:
        return self.value  # type: ignore[return-value]

    @property
    def h(self) -> Union[Scalar, ndarray]:
        return self._component(0)

    @property
    def s(self) -> Union[Scalar, ndarray]:
        return self._component(1)

    @property
    def l(self) -> Union[Scalar, ndarray]:
        return self._component(2)
