from chromahsl.conversions.to_hsl import rgba_to_hsla, np_rgba_to_hsla, UnreachableHueBranchError
import math
import numpy as np
import pytest
from ..samples import samples_rgb_hsl, alphas


def test_rgba_to_hsla():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h_out, s_out, l_out, a_out = rgba_to_hsla(r, g, b, 1.0)

        assert abs(h_out - h_exp) < 1e-9
        assert abs(s_out - s_exp) < 1e-9
        assert abs(l_out - l_exp) < 1e-9
        assert a_out == 1.0


def test_primaries_and_extremes():
    assert rgba_to_hsla(1.0, 0.0, 0.0, 1.0) == (0.0, 1.0, 0.5, 1.0)
    assert rgba_to_hsla(0.0, 1.0, 0.0, 1.0) == (120.0, 1.0, 0.5, 1.0)
    assert rgba_to_hsla(0.0, 0.0, 1.0, 1.0) == (240.0, 1.0, 0.5, 1.0)
    assert rgba_to_hsla(1.0, 1.0, 1.0, 1.0) == (0.0, 0.0, 1.0, 1.0)
    assert rgba_to_hsla(0.0, 0.0, 0.0, 0.5) == (0.0, 0.0, 0.0, 0.5)


@pytest.mark.parametrize("c", [0.0, 0.1, 0.25, 0.5, 0.9, 1.0])
def test_grays_have_zero_hue_and_saturation(c):
    for a in alphas:
        assert rgba_to_hsla(c, c, c, a) == (0.0, 0.0, c, a)


def test_alpha_passes_through_exactly():
    for (r, g, b) in samples_rgb_hsl:
        for a in alphas:
            assert rgba_to_hsla(r, g, b, a)[3] == a


def test_returns_floats():
    result = rgba_to_hsla(1, 0, 0, 1)
    assert all(isinstance(v, float) for v in result[:3])
    assert result[:3] == (0.0, 1.0, 0.5)


def test_red_hue_branches():
    # g >= b stays in [0, 60]; g < b wraps up past 300
    h_up, _, _, _ = rgba_to_hsla(1.0, 0.5, 0.0, 1.0)
    h_down, _, _, _ = rgba_to_hsla(1.0, 0.0, 0.5, 1.0)
    assert h_up == pytest.approx(30.0)
    assert h_down == pytest.approx(330.0)


def test_saturation_above_half_lightness():
    h, s, l, a = rgba_to_hsla(1.0, 0.6, 0.6, 1.0)
    assert l == pytest.approx(0.8)
    assert s == pytest.approx(0.4 / 0.4)


def test_out_of_range_values_are_not_clamped():
    h, s, l, a = rgba_to_hsla(1.5, 0.0, 0.0, 3.0)
    assert l == 0.75
    assert s == 3.0
    assert a == 3.0
    assert h == 0.0


def test_zero_saturation_denominator_gives_inf():
    # s = (max - min) / (2 - (max + min)) == 1 / 0
    h, s, l, a = rgba_to_hsla(1.5, 0.5, 0.5, 1.0)
    assert math.isinf(s) and s > 0
    assert l == 1.0
    assert h == 0.0
    np.testing.assert_array_equal(np_rgba_to_hsla(1.5, 0.5, 0.5, 1.0), [h, s, l, a])


def test_negative_lightness_uses_upper_formula():
    h, s, l, a = rgba_to_hsla(0.0, -0.5, -1.0, 1.0)
    assert l == -0.5
    assert s == pytest.approx(1.0 / 3.0)
    assert h == pytest.approx(30.0)


nan = float("nan")


@pytest.mark.parametrize("rgb", [
    (nan, 0.0, 0.0),
    (0.0, nan, 0.0),
    (0.0, 0.0, nan),
    (0.5, nan, 0.2),
    (1.0, 1.0, nan),
])
def test_nan_in_any_channel_raises_unreachable(rgb):
    with pytest.raises(UnreachableHueBranchError):
        rgba_to_hsla(*rgb, 1.0)
    with pytest.raises(UnreachableHueBranchError):
        np_rgba_to_hsla(*rgb, 1.0)


def test_unreachable_is_an_assertion_error():
    assert issubclass(UnreachableHueBranchError, AssertionError)


def test_rgba_to_hsla_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.keys()))
    expected = np.array(list(samples_rgb_hsl.values()))
    r, g, b = the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2]
    hsla = np_rgba_to_hsla(r, g, b, 0.5)

    assert hsla.shape == (len(samples_rgb_hsl), 4)
    assert np.allclose(hsla[..., :3], expected, atol=1e-9)
    assert np.all(hsla[..., 3] == 0.5)


def test_numpy_matches_scalar():
    rng = np.random.default_rng(7)
    rgba = rng.random((200, 4))
    hsla = np_rgba_to_hsla(rgba[..., 0], rgba[..., 1], rgba[..., 2], rgba[..., 3])
    for row, out in zip(rgba, hsla):
        assert np.allclose(rgba_to_hsla(*row), out, atol=1e-12)


def test_numpy_scalar_inputs():
    hsla = np_rgba_to_hsla(0.0, 0.0, 1.0, 1.0)
    assert hsla.shape == (4,)
    assert np.allclose(hsla, [240.0, 1.0, 0.5, 1.0])


def test_numpy_zero_division_is_ieee():
    hsla = np_rgba_to_hsla(np.array([1.5]), np.array([0.5]), np.array([0.5]), np.array([1.0]))
    assert math.isinf(hsla[0, 1])


def test_numpy_nan_raises_unreachable():
    with pytest.raises(UnreachableHueBranchError):
        np_rgba_to_hsla(np.array([0.5, np.nan]), np.array([0.2, 0.2]), np.array([0.1, 0.1]), 1.0)
