import math

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSLAComponents


class UnreachableHueBranchError(AssertionError):
    """Raised when no hue case matches, which only NaN components can cause."""


## RGBA to HSLA conversions

def rgba_to_hsla(r: float, g: float, b: float, a: float) -> HSLAComponents:
    """
    Convert red, green, blue and alpha to hue, saturation, lightness and alpha.

    No validation or clamping is applied; out-of-range components propagate
    through the arithmetic.

    Args:
        r: Red component, conventionally in [0, 1]
        g: Green component, conventionally in [0, 1]
        b: Blue component, conventionally in [0, 1]
        a: Alpha, returned untouched

    Returns:
        Tuple[float, float, float, float]: (hue [0,360), saturation, lightness, alpha)

    Raises:
        UnreachableHueBranchError: if no hue case applies (NaN input).
    """
    if any(math.isnan(c) for c in (r, g, b)):
        raise UnreachableHueBranchError(
            f"No hue case matched rgba=({r!r}, {g!r}, {b!r}, {a!r})"
        )

    max_c = max(r, g, b)
    min_c = min(r, g, b)

    lightness = (max_c + min_c) / 2.0

    if lightness == 0.0 or max_c == min_c:
        saturation = 0.0
    elif 0 < lightness <= 0.5:
        saturation = (max_c - min_c) / (max_c + min_c)
    else:
        denominator = 2 - (max_c + min_c)
        if denominator == 0:
            # IEEE result, matching the vectorized path
            saturation = math.copysign(math.inf, max_c - min_c)
        else:
            saturation = (max_c - min_c) / denominator

    # Hue is undefined for grays; it is pinned to zero.
    if min_c == max_c:
        hue = 0.0
    elif max_c == r and g >= b:
        hue = 60 * (g - b) / (max_c - min_c)
    elif max_c == r and g < b:
        hue = 60 * (g - b) / (max_c - min_c) + 360
    elif max_c == g:
        hue = 60 * (b - r) / (max_c - min_c) + 120
    elif max_c == b:
        hue = 60 * (r - g) / (max_c - min_c) + 240
    else:
        raise UnreachableHueBranchError(
            f"No hue case matched rgba=({r!r}, {g!r}, {b!r}, {a!r})"
        )

    return float(hue), float(saturation), float(lightness), a


def np_rgba_to_hsla(r: NDArray, g: NDArray, b: NDArray, a: NDArray) -> NDArray:
    """
    Vectorized: Convert RGBA to HSLA with the same case analysis as `rgba_to_hsla`.

    Division by zero (possible only for out-of-range input) yields inf/nan
    instead of raising.

    Args:
        r, g, b, a: array-like or scalar

    Returns:
        hsla: array of shape (..., 4): (hue, saturation, lightness, alpha)
    """
    r = np.asarray(r, dtype=np.float64)
    g = np.asarray(g, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    a = np.asarray(a, dtype=np.float64)

    out_shape = np.broadcast(r, g, b, a).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)
    a = np.broadcast_to(a, out_shape)

    max_c = np.maximum(np.maximum(r, g), b)
    min_c = np.minimum(np.minimum(r, g), b)
    delta = max_c - min_c
    achromatic = max_c == min_c

    lightness = (max_c + min_c) / 2.0

    with np.errstate(divide="ignore", invalid="ignore"):
        low = delta / (max_c + min_c)
        high = delta / (2 - (max_c + min_c))
    saturation = np.where(
        (lightness == 0.0) | achromatic,
        0.0,
        np.where((lightness > 0) & (lightness <= 0.5), low, high),
    )

    # Masks follow the scalar if/elif chain: each case only sees what is left.
    taken = np.array(achromatic, dtype=bool)
    mask_r_up = ~taken & (max_c == r) & (g >= b)
    taken |= mask_r_up
    mask_r_down = ~taken & (max_c == r) & (g < b)
    taken |= mask_r_down
    mask_g = ~taken & (max_c == g)
    taken |= mask_g
    mask_b = ~taken & (max_c == b)
    taken |= mask_b

    if not np.all(taken):
        raise UnreachableHueBranchError(
            f"No hue case matched for {int(np.count_nonzero(~taken))} element(s)"
        )

    with np.errstate(divide="ignore", invalid="ignore"):
        hue = np.select(
            [mask_r_up, mask_r_down, mask_g, mask_b],
            [
                60 * (g - b) / delta,
                60 * (g - b) / delta + 360,
                60 * (b - r) / delta + 120,
                60 * (r - g) / delta + 240,
            ],
            default=0.0,
        )

    return np.stack([hue, saturation, lightness, a], axis=-1)
