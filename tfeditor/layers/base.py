from __future__ import annotations

import numpy as np
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Tuple, Union

from ..conversions import pack
from ..texture import Texture
from ..types.defaults import DEFAULT_VALUE_RANGE, FUNCTION_FILL_COLOR
from ..types.layer_kind import LayerKind
from ..utils import unit_positions


@dataclass(frozen=True)
class ValueRange:
    """Closed interval ``[lower, upper]`` on which a function is defined."""
    lower: float = DEFAULT_VALUE_RANGE[0]
    upper: float = DEFAULT_VALUE_RANGE[1]

    def __post_init__(self) -> None:
        if self.lower > self.upper:
            raise ValueError(f"ValueRange lower bound {self.lower} exceeds upper bound {self.upper}")

    @classmethod
    def coerce(cls, value: Union[ValueRange, Tuple[float, float], None]) -> ValueRange:
        if value is None:
            return cls()
        if isinstance(value, ValueRange):
            return value
        if len(value) != 2:
            raise ValueError(f"ValueRange expects (lower, upper), got {value!r}")
        return cls(float(value[0]), float(value[1]))

    def contains(self, x: float) -> bool:
        return self.lower <= x <= self.upper

    def np_contains(self, xs: np.ndarray) -> np.ndarray:
        return (xs >= self.lower) & (xs <= self.upper)


class Layer(ABC):
    """Anything that can be turned into a pixel buffer."""

    kind: ClassVar[LayerKind]

    @abstractmethod
    def rasterize(self, width: int, height: int) -> Texture:
        """Return a texture of exactly ``width`` x ``height`` pixels."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class Function(Layer):
    """
    1D alpha function over ``value_range``; ``eval(x)`` returns an alpha in [0, 1].

    The default rasterization draws the function as a filled area chart: every
    column ``x`` is evaluated at ``x / (width - 1)`` and filled from the bottom
    row up to ``floor(eval * height)`` with ``FUNCTION_FILL_COLOR``.

    Parameters are fixed at construction, so a function never changes under an
    editor that has already rasterized it.
    """

    def __init__(self, value_range: Union[ValueRange, Tuple[float, float], None] = None) -> None:
        self._value_range = ValueRange.coerce(value_range)

    @property
    def value_range(self) -> ValueRange:
        return self._value_range

    @abstractmethod
    def eval(self, x: float) -> float:
        """Alpha at domain position ``x``; 0 outside ``value_range``."""

    def sample(self, xs: np.ndarray) -> np.ndarray:
        """Evaluate at every position of ``xs``, keeping its shape."""
        xs = np.asarray(xs, dtype=float)
        flat = [self.eval(float(x)) for x in xs.reshape(-1)]
        return np.array(flat, dtype=float).reshape(xs.shape)

    def rasterize(self, width: int, height: int) -> Texture:
        tex = Texture(width, height)
        if tex.width == 0 or tex.height == 0:
            return tex

        heights = np.floor(self.sample(unit_positions(tex.width)) * tex.height)
        heights = np.clip(heights, 0, tex.height).astype(np.int64)

        rows = np.arange(tex.height)[:, np.newaxis]
        covered = rows < heights[np.newaxis, :]
        tex.grid[covered] = np.uint32(pack(FUNCTION_FILL_COLOR))
        return tex

    def __call__(self, x: float) -> float:
        return self.eval(x)

    def __repr__(self) -> str:
        vr = self.value_range
        return f"{self.__class__.__name__}(value_range=({vr.lower}, {vr.upper}))"
