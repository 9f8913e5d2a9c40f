from __future__ import annotations

import numpy as np
from typing import ClassVar, Optional

from ..conversions import pack
from ..texture import Texture
from ..types.color_types import Float3
from ..types.defaults import DEFAULT_CHECKER_COLOR1, DEFAULT_CHECKER_COLOR2, DEFAULT_CHECKER_SIZE
from ..types.layer_kind import LayerKind
from .base import Layer


def _rgb(name: str, color: Float3) -> Float3:
    if len(color) != 3:
        raise ValueError(f"{name} must be an RGB triple, got {color!r}")
    return (float(color[0]), float(color[1]), float(color[2]))


class Checkers(Layer):
    """Opaque checkerboard, used as a backdrop so translucent layers stay legible."""

    kind: ClassVar[LayerKind] = LayerKind.CHECKERS

    def __init__(
        self,
        checker_size: int = DEFAULT_CHECKER_SIZE,
        color1: Optional[Float3] = None,
        color2: Optional[Float3] = None,
    ) -> None:
        checker_size = int(checker_size)
        if checker_size <= 0:
            raise ValueError(f"checker_size must be > 0, got {checker_size}")
        self._checker_size = checker_size
        self._color1 = _rgb("color1", DEFAULT_CHECKER_COLOR1 if color1 is None else color1)
        self._color2 = _rgb("color2", DEFAULT_CHECKER_COLOR2 if color2 is None else color2)

    @property
    def checker_size(self) -> int:
        return self._checker_size

    @property
    def color1(self) -> Float3:
        return self._color1

    @property
    def color2(self) -> Float3:
        return self._color2

    def rasterize(self, width: int, height: int) -> Texture:
        tex = Texture(width, height)
        first = np.uint32(pack(self.color1 + (1.0,)))
        second = np.uint32(pack(self.color2 + (1.0,)))

        ys, xs = np.indices((tex.height, tex.width))
        same_parity = (xs // self.checker_size) % 2 == (ys // self.checker_size) % 2
        tex.grid[...] = np.where(same_parity, first, second)
        return tex

    def __repr__(self) -> str:
        return f"Checkers(checker_size={self.checker_size}, color1={self.color1}, color2={self.color2})"
