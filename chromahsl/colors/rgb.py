from __future__ import annotations
from typing import ClassVar, Tuple, Union
from numpy import ndarray

from ..conversions import rgba_to_hsla, np_rgba_to_hsla, hsla_to_rgba
from ..types.color_types import ColorSpace, DEFAULT_ALPHA, RGBAComponents, HSLAComponents, Scalar
from .color_base import ColorBase


class ColorRGBA(ColorBase):
    """Red, green, blue and alpha, each conventionally in [0, 1]."""

    mode:     ClassVar[ColorSpace] = "rgba"
    channels: ClassVar[Tuple[str, str, str, str]] = ("r", "g", "b", "a")

    @classmethod
    def from_components(cls, r: float, g: float, b: float, a: float = DEFAULT_ALPHA) -> ColorRGBA:
        return cls((r, g, b, a))

    @classmethod
    def new_from_hsla(cls, h: float, s: float, l: float, a: float) -> ColorRGBA:
        """Build straight from HSLA components."""
        return cls(hsla_to_rgba(h, s, l, a))

    @classmethod
    def _from_rgba(cls, rgba):
        return rgba

    def to_rgba_components(self) -> Union[RGBAComponents, ndarray]:
        return self.value  # type: ignore[return-value]

    def to_hsla_components(self) -> Union[HSLAComponents, ndarray]:
        if isinstance(self.value, ndarray):
            return np_rgba_to_hsla(*self)
        return rgba_to_hsla(*self.value)

    @property
    def r(self) -> Union[Scalar, ndarray]:
        return self._component(0)

    @property
    def g(self) -> Union[Scalar, ndarray]:
        return self._component(1)

    @property
    def b(self) -> Union[Scalar, ndarray]:
        return self._component(2)
