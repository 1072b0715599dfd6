import numpy as np
from chromahsl.utils import get_dimension


def test_none_dimension():
    assert get_dimension(None) == 0


def test_sized_dimension():
    assert get_dimension([0.1, 0.2, 0.3]) == 3
    assert get_dimension((0.1, 0.2, 0.3, 1.0)) == 4


def test_array_dimension_is_last_axis():
    assert get_dimension(np.zeros((5, 3))) == 3
    assert get_dimension(np.zeros((2, 7, 4))) == 4
    assert get_dimension(np.array(0.5)) == 1


def test_non_sized_dimension():
    assert get_dimension(42) == 1
    assert get_dimension(0.5) == 1
