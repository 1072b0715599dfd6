import numpy as np
from typing import Callable, Tuple, cast

from .to_hsl import rgba_to_hsla, np_rgba_to_hsla
from .to_rgb import hsla_to_rgba, np_hsla_to_rgba

from ..types.color_types import (
    ColorElement,
    ColorSpace,
    COLOR_SPACES,
    DEFAULT_ALPHA,
    element_to_array,
    has_alpha_channel,
)
from ..utils.dimension import get_dimension

CONVERT_SCALAR: dict[tuple[str, str], Callable[..., Tuple[float, ...]]] = {
    ("rgb", "hsl"): rgba_to_hsla,
    ("hsl", "rgb"): hsla_to_rgba,
}

CONVERT_NUMPY: dict[tuple[str, str], Callable[..., np.ndarray]] = {
    ("rgb", "hsl"): np_rgba_to_hsla,
    ("hsl", "rgb"): np_hsla_to_rgba,
}


def _check_space(space: str) -> str:
    space = space.lower()
    if space not in COLOR_SPACES:
        raise ValueError(f"Unknown space: {space}")
    return space


def _check_channels(channels: int, space: str) -> None:
    expected = 4 if has_alpha_channel(space) else 3
    if channels != expected:
        raise ValueError(f"{space} expects {expected} channels, got {channels}")


def convert(
    color: ColorElement,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> Tuple[float, ...]:
    """
    Convert a single color between rgb(a) and hsl(a).

    A missing input alpha is taken as fully opaque; a 3-channel target drops it.

    Args:
        color: 3 or 4 numbers matching ``from_space``
        from_space: "rgb", "rgba", "hsl" or "hsla"
        to_space: "rgb", "rgba", "hsl" or "hsla"

    Returns:
        Tuple of 3 or 4 floats in ``to_space``
    """
    fs, ts = _check_space(from_space), _check_space(to_space)
    _check_channels(get_dimension(color), fs)
    if fs == ts:
        return tuple(color)  # No conversion needed

    components = tuple(float(c) for c in color)
    if not has_alpha_channel(fs):
        components = components + (DEFAULT_ALPHA,)

    key = (fs[:3], ts[:3])
    converted = CONVERT_SCALAR[key](*components) if key in CONVERT_SCALAR else components

    return converted if has_alpha_channel(ts) else converted[:3]


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> np.ndarray:
    """
    Vectorized `convert` over arrays of shape (..., 3) or (..., 4).
    """
    fs, ts = _check_space(from_space), _check_space(to_space)
    arr = element_to_array(color)
    _check_channels(get_dimension(arr), fs)
    if fs == ts:
        return arr  # No conversion needed

    if not has_alpha_channel(fs):
        alpha = np.full(arr.shape[:-1] + (1,), DEFAULT_ALPHA)
        arr = np.concatenate([arr, alpha], axis=-1)

    key = (fs[:3], ts[:3])
    if key in CONVERT_NUMPY:
        converted = CONVERT_NUMPY[key](arr[..., 0], arr[..., 1], arr[..., 2], arr[..., 3])
    else:
        converted = arr

    return cast(np.ndarray, converted if has_alpha_channel(ts) else converted[..., :3])
