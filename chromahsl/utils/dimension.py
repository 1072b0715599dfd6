from typing import Any
from collections.abc import Sized
from numpy import ndarray


def get_dimension(element: Any) -> int:
    """
    Number of channels carried by ``element``.

    Arrays report the size of their last axis, other sized containers their
    length and bare scalars count as one channel. ``None`` has no channels.
    """
    if element is None:
        return 0
    if isinstance(element, ndarray):
        return element.shape[-1] if element.ndim else 1
    if isinstance(element, Sized):
        return len(element)
    return 1
