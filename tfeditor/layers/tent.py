from __future__ import annotations

import numpy as np
from typing import ClassVar, Tuple, Union

from ..types.color_types import Vec2
from ..types.layer_kind import LayerKind
from .base import Function, ValueRange
from .piecewise_linear import PiecewiseLinear


class Tent(Function):
    """
    Trapezoid centered on ``tip``.

    The curve rises from 0 at ``tip.x - bottom_width/2`` to ``tip.y`` at
    ``tip.x - top_width/2``, stays flat across the top and falls back to 0 at
    ``tip.x + bottom_width/2``. With ``top_width == 0`` it is a triangle.
    """

    kind: ClassVar[LayerKind] = LayerKind.TENT

    def __init__(
        self,
        tip: Vec2 = (0.5, 1.0),
        top_width: float = 0.0,
        bottom_width: float = 1.0,
        value_range: Union[ValueRange, Tuple[float, float], None] = None,
    ) -> None:
        if len(tip) != 2:
            raise ValueError(f"tip must be an (x, y) pair, got {tip!r}")
        self._tip = (float(tip[0]), float(tip[1]))
        self._top_width = float(top_width)
        self._bottom_width = float(bottom_width)

        super().__init__(value_range)
        tx, ty = self._tip
        self._internal = PiecewiseLinear([
            (tx - self._bottom_width / 2.0, 0.0),
            (tx - self._top_width / 2.0, ty),
            (tx + self._top_width / 2.0, ty),
            (tx + self._bottom_width / 2.0, 0.0),
        ], value_range=self.value_range)

    @property
    def tip(self) -> Vec2:
        return self._tip

    @property
    def top_width(self) -> float:
        return self._top_width

    @property
    def bottom_width(self) -> float:
        return self._bottom_width

    @property
    def control_points(self) -> np.ndarray:
        return self._internal.control_points

    def eval(self, x: float) -> float:
        return self._internal.eval(x)

    def sample(self, xs: np.ndarray) -> np.ndarray:
        return self._internal.sample(xs)

    def __repr__(self) -> str:
        return (
            f"Tent(tip={self._tip}, top_width={self._top_width}, "
            f"bottom_width={self._bottom_width})"
        )
