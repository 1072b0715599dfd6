from __future__ import annotations
from typing import Any, Callable, ClassVar, Iterator, Tuple, Union, cast, Self
from collections.abc import Sized
from numpy import ndarray
import numpy as np

from ..types.color_types import (
    ColorSpace,
    ColorValue,
    DEFAULT_ALPHA,
    RGBAComponents,
    HSLAComponents,
    Scalar,
    ToRGBAComponents,
)
from ..utils.dimension import get_dimension


class ColorBase:
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    mode:       ClassVar[ColorSpace]
    channels:   ClassVar[Tuple[str, str, str, str]]
    alpha_index: ClassVar[int] = -1
    _is_frozen: bool = False   # class-level default (instance gets its own slot)
    convert: Callable[[ColorBase, ColorSpace | None], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Any) -> None:
        # ---- Handle color input ----
        if not isinstance(value, ndarray) and isinstance(value, ToRGBAComponents):
            if isinstance(value, ColorBase) and value.mode == self.mode:
                value = value.value
            else:
                value = self._from_rgba(value.to_rgba_components())

        # ---- Handle array input ----
        if isinstance(value, ndarray):
            arr = np.array(value, dtype=np.float64)
            channels = get_dimension(arr)
            if arr.ndim == 0 or channels not in (3, 4):
                raise ValueError(
                    f"{self.mode} expects last dimension to be 3 or 4, got shape {arr.shape}"
                )
            if channels == 3:
                alpha = np.full(arr.shape[:-1] + (1,), DEFAULT_ALPHA)
                arr = np.concatenate([arr, alpha], axis=-1)
            arr.setflags(write=False)
            value = arr

        # ---- Handle sequence input ----
        elif isinstance(value, Sized) and not isinstance(value, (str, bytes)):
            value_dim = get_dimension(value)
            if value_dim not in (3, 4):
                raise ValueError(f"{self.mode} expects 3 or 4 components, got {value_dim}")
            value = tuple(float(v) for v in cast(Tuple[Any, ...], value))
            if value_dim == 3:
                value = value + (DEFAULT_ALPHA,)

        else:
            raise TypeError(
                f"{self.__class__.__name__} cannot be built from {type(value).__name__}"
            )

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _from_rgba(cls, rgba: Union[RGBAComponents, ndarray]) -> ColorValue:
        """Translate RGBA components into this class's model."""
        raise NotImplementedError

    def to_rgba_components(self) -> Union[RGBAComponents, ndarray]:
        raise NotImplementedError

    def to_hsla_components(self) -> Union[HSLAComponents, ndarray]:
        raise NotImplementedError

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorValue:
        return self._value

    @property
    def is_array(self) -> bool:
        """Check if this color contains an array of colors."""
        return isinstance(self._value, ndarray)

    @property
    def shape(self) -> Tuple[int, ...] | None:
        """Return shape of the array, or None if scalar."""
        if isinstance(self._value, ndarray):
            return self._value.shape
        return None

    @property
    def alpha(self) -> Union[Scalar, ndarray]:
        """
        Get alpha channel value.

        Returns:
            Scalar if value is a tuple, ndarray if value is an array.
        """
        return self._component(self.alpha_index)

    def _component(self, index: int) -> Union[Scalar, ndarray]:
        if isinstance(self._value, ndarray):
            return self._value[..., index]
        return self._value[index]

    def with_alpha(self, alpha: Union[Scalar, ndarray]) -> Self:
        """
        Return a new instance with the alpha channel replaced.

        Args:
            alpha: New alpha value(s). Can be scalar or array matching shape.

        Returns:
            New color instance with updated alpha.
        """
        if isinstance(self._value, ndarray):
            if isinstance(alpha, ndarray) and alpha.shape != self._value.shape[:-1]:
                raise ValueError(
                    f"Alpha shape {alpha.shape} doesn't match color shape {self._value.shape[:-1]}"
                )
            a = np.broadcast_to(np.asarray(alpha, dtype=np.float64), self._value.shape[:-1])
            new_vals = np.concatenate([self._value[..., :-1], a[..., None]], axis=-1)
            return self.__class__(new_vals)

        if isinstance(alpha, ndarray):
            raise TypeError("Cannot use array alpha with scalar color value")
        return self.__class__(self._value[:-1] + (alpha,))

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[Union[float, ndarray]]:
        if isinstance(self._value, ndarray):
            return iter(np.moveaxis(self._value, -1, 0))
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        other = cast(ColorBase, other)
        if self.is_array or other.is_array:
            return bool(np.array_equal(self._value, other._value))
        return self._value == other._value

    def __hash__(self) -> int:
        if isinstance(self._value, ndarray):
            raise TypeError(f"unhashable array-valued {self.__class__.__name__}")
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        if isinstance(self._value, ndarray):
            return f"{self.__class__.__name__}(shape={self._value.shape})"
        return f"{self.__class__.__name__}({self._value!r})"


def build_registry(*classes: type[ColorBase]) -> dict[str, type[ColorBase]]:
    return {
        cls.mode: cls
        for cls in classes
    }
