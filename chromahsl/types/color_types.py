from __future__ import annotations
from typing import Literal, Protocol, Tuple, Union, runtime_checkable
import numpy as np
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
RGBAComponents = Tuple[float, float, float, float]
HSLAComponents = Tuple[float, float, float, float]
ColorElement = Union[ScalarVector, list]
ColorValue = Union[Tuple[float, ...], ndarray]  # Includes array support
ColorSpace = Literal["rgb", "rgba", "hsl", "hsla"]
COLOR_SPACES = {"rgb", "rgba", "hsl", "hsla"}

HUE_360 = 360.0
DEFAULT_ALPHA = 1.0

@runtime_checkable
class ToRGBAComponents(Protocol):
    """Anything that can describe itself as red, green, blue and alpha."""

    def to_rgba_components(self) -> Union[RGBAComponents, ndarray]:
        ...

def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float64 numpy array.

    Args:
        element: Tuple, list, or already an ndarray

    Returns:
        numpy array representation
    """
    return np.asarray(element, dtype=np.float64)

def has_alpha_channel(color_space: str) -> bool:
    """Check whether the color space name carries an alpha channel."""
    return color_space.lower().endswith("a")
