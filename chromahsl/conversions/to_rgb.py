import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBAComponents, HUE_360

ONE_SIXTH = 1.0 / 6.0
ONE_THIRD = 1.0 / 3.0
TWO_THIRDS = 2.0 / 3.0


def _calculate_component(p: float, q: float, tc: float) -> float:
    # Rising edge, plateau, falling edge, baseline. tc is not wrapped.
    if tc < ONE_SIXTH:
        return p + (q - p) * tc * 6.0
    elif tc < 0.5:
        return q
    elif tc < TWO_THIRDS:
        return p + (q - p) * (TWO_THIRDS - tc) * 6.0
    else:
        return p


def _np_calculate_component(p: NDArray, q: NDArray, tc: NDArray) -> NDArray:
    return np.select(
        [tc < ONE_SIXTH, tc < 0.5, tc < TWO_THIRDS],
        [p + (q - p) * tc * 6.0, q, p + (q - p) * (TWO_THIRDS - tc) * 6.0],
        default=p,
    )


## HSLA to RGBA conversions

def hsla_to_rgba(
    h: float, s: float, l: float, a: float, *, wrap_phase: bool = False
) -> RGBAComponents:
    """
    Convert hue, saturation, lightness and alpha to red, green, blue and alpha.

    The per-channel hue phases ``hn + 1/3``, ``hn`` and ``hn - 1/3`` are fed to
    the blend as they are, without reducing them modulo 1. Hues outside the
    [120, 240] band therefore land on the rising edge or the baseline of the
    blend instead of wrapping around the wheel. Pass ``wrap_phase=True`` to
    reduce each phase into [0, 1) first.

    Args:
        h: Hue in degrees, conventionally [0, 360)
        s: Saturation, conventionally [0, 1]
        l: Lightness, conventionally [0, 1]
        a: Alpha, returned untouched
        wrap_phase: Reduce hue phases modulo 1 before blending

    Returns:
        Tuple[float, float, float, float]: (r, g, b, a)
    """
    if s == 0.0:
        return float(l), float(l), float(l), a

    q = l * (1.0 + s) if l < 0.5 else l + s - l * s
    p = 2.0 * l - q

    hn = h / HUE_360
    phases = (hn + ONE_THIRD, hn, hn - ONE_THIRD)
    if wrap_phase:
        phases = tuple(tc % 1.0 for tc in phases)

    r, g, b = (float(_calculate_component(p, q, tc)) for tc in phases)
    return r, g, b, a


def np_hsla_to_rgba(
    h: NDArray, s: NDArray, l: NDArray, a: NDArray, *, wrap_phase: bool = False
) -> NDArray:
    """
    Vectorized: Convert HSLA to RGBA, element-wise identical to `hsla_to_rgba`.

    Args:
        h, s, l, a: array-like or scalar
        wrap_phase: Reduce hue phases modulo 1 before blending

    Returns:
        rgba: array of shape (..., 4): (r, g, b, a)
    """
    h = np.asarray(h, dtype=np.float64)
    s = np.asarray(s, dtype=np.float64)
    l = np.asarray(l, dtype=np.float64)
    a = np.asarray(a, dtype=np.float64)

    out_shape = np.broadcast(h, s, l, a).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)
    a = np.broadcast_to(a, out_shape)

    q = np.where(l < 0.5, l * (1.0 + s), l + s - l * s)
    p = 2.0 * l - q

    hn = h / HUE_360
    phases = [hn + ONE_THIRD, hn, hn - ONE_THIRD]
    if wrap_phase:
        phases = [np.mod(tc, 1.0) for tc in phases]

    achromatic = s == 0.0
    r, g, b = (np.where(achromatic, l, _np_calculate_component(p, q, tc)) for tc in phases)

    return np.stack([r, g, b, a], axis=-1)
