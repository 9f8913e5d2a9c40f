from __future__ import annotations

import numpy as np
from typing import ClassVar, List, Optional, Sequence, Tuple, Union

from ..types.color_types import Vec2
from ..types.layer_kind import LayerKind
from ..utils import unit_positions
from .base import Function, ValueRange

Segment = Tuple[float, float, float, float]


class PiecewiseLinear(Function):
    """
    Alpha curve through an ordered set of ``(x, y)`` control points.

    Control points are copied and sorted by ``x`` once, at construction.
    ``eval`` interpolates inside the first segment whose ``x`` interval contains
    the query and returns 0 when no segment does. A zero-width segment yields
    the value of its left point.
    """

    kind: ClassVar[LayerKind] = LayerKind.PIECEWISE_LINEAR

    def __init__(
        self,
        control_points: Optional[Union[Sequence[Vec2], np.ndarray]] = None,
        value_range: Union[ValueRange, Tuple[float, float], None] = None,
    ) -> None:
        super().__init__(value_range)

        if control_points is None:
            control_points = [(0.0, 0.0), (1.0, 1.0)]

        points = np.array(control_points, dtype=float)
        if points.size == 0:
            points = points.reshape(0, 2)
        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(f"control_points must have shape (N, 2), got {points.shape}")

        order = np.argsort(points[:, 0], kind="stable")
        points = points[order]
        points.flags.writeable = False
        self._points = points
        self._segments: List[Segment] = [
            (float(x1), float(y1), float(x2), float(y2))
            for (x1, y1), (x2, y2) in zip(points[:-1], points[1:])
        ]

    @classmethod
    def from_alpha_values(
        cls,
        values: Sequence[float],
        value_range: Union[ValueRange, Tuple[float, float], None] = None,
    ) -> PiecewiseLinear:
        """Place raw alpha values at evenly spaced positions on [0, 1]."""
        values = np.asarray(values, dtype=float).reshape(-1)
        xs = unit_positions(len(values))
        return cls(np.stack([xs, values], axis=-1), value_range=value_range)

    @property
    def control_points(self) -> np.ndarray:
        return self._points.copy()

    def __len__(self) -> int:
        return len(self._points)

    def eval(self, x: float) -> float:
        if len(self._points) < 2 or not self.value_range.contains(x):
            return 0.0

        for x1, y1, x2, y2 in self._segments:
            if x1 > x or x2 < x:
                continue
            if x2 == x1:
                return y1
            m = (y2 - y1) / (x2 - x1)
            return y1 + m * (x - x1)

        return 0.0

    def sample(self, xs: np.ndarray) -> np.ndarray:
        xs = np.asarray(xs, dtype=float)
        result = np.zeros(xs.shape, dtype=float)
        if len(self._points) < 2:
            return result

        inside = self.value_range.np_contains(xs)
        # Walk segments last to first so the first bracketing segment wins
        for x1, y1, x2, y2 in reversed(self._segments):
            hit = inside & (xs >= x1) & (xs <= x2)
            if not np.any(hit):
                continue
            if x2 == x1:
                result[hit] = y1
            else:
                m = (y2 - y1) / (x2 - x1)
                result[hit] = y1 + m * (xs[hit] - x1)
        return result

    def __repr__(self) -> str:
        vr = self.value_range
        return (
            f"PiecewiseLinear(control_points={self._points.tolist()}, "
            f"value_range=({vr.lower}, {vr.upper}))"
        )
