"""
Transfer function editor: a background layer plus an ordered stack of alpha functions.

The stack is composited bottom to top with the ``over`` operator, the
accumulated result is composited over the background, and the envelope of all
functions (their pointwise maximum) can be drawn on top as a one pixel outline.
"""
from __future__ import annotations

import logging
import warnings
import numpy as np
from typing import List, Optional, Tuple

from .conversions import over_packed, pack
from .layers.base import Function, Layer
from .texture import Texture
from .types.color_types import Vec2
from .types.defaults import OUTLINE_COLOR
from .utils import unit_positions

logger = logging.getLogger(__name__)


class Editor:
    def __init__(self, background: Optional[Layer] = None, show_outline: bool = True) -> None:
        # Constant background; always the bottom layer
        self._background: Optional[Layer] = None
        # Transfer functions layered on top of each other, last is topmost
        self._functions: List[Function] = []
        self._revision = 0
        self.show_outline = show_outline
        if background is not None:
            self.set_background(background)

    # ------------------ STACK ------------------
    @property
    def functions(self) -> Tuple[Function, ...]:
        return tuple(self._functions)

    @property
    def background(self) -> Optional[Layer]:
        return self._background

    @property
    def revision(self) -> int:
        """Incremented by every stack, background or outline change; layers themselves are immutable."""
        return self._revision

    @property
    def show_outline(self) -> bool:
        return self._show_outline

    @show_outline.setter
    def show_outline(self, value: bool) -> None:
        self._show_outline = bool(value)
        self._touch()

    def _touch(self) -> None:
        self._revision += 1

    def _index_of(self, func: Function) -> Optional[int]:
        for i, candidate in enumerate(self._functions):
            if candidate is func:
                return i
        return None

    def __len__(self) -> int:
        return len(self._functions)

    def __contains__(self, func: object) -> bool:
        return any(candidate is func for candidate in self._functions)

    def add_function(self, func: Function) -> None:
        if not isinstance(func, Function):
            raise TypeError(f"add_function expects a Function, got {type(func).__name__}")
        self._functions.append(func)
        self._touch()
        logger.debug("Added %r at position %d", func, len(self._functions) - 1)

    def set_background(self, background: Optional[Layer]) -> None:
        if background is not None and not isinstance(background, Layer):
            raise TypeError(f"set_background expects a Layer, got {type(background).__name__}")
        self._background = background
        self._touch()
        logger.debug("Background set to %r", background)

    def move_to_top(self, func: Function) -> None:
        """If ``func`` is on the stack, make it the topmost function; otherwise do nothing."""
        index = self._index_of(func)
        if index is None:
            logger.debug("move_to_top: %r is not on the stack", func)
            return
        if index == len(self._functions) - 1:
            return
        self._functions.append(self._functions.pop(index))
        self._touch()
        logger.debug("Moved %r from position %d to the top", func, index)

    # ------------------ QUERIES ------------------
    def eval(self, x: float) -> float:
        """Envelope of the stack: the largest alpha any function has at ``x``."""
        result = 0.0
        for func in self._functions:
            result = max(result, func.eval(x))
        return result

    def sample(self, xs: np.ndarray) -> np.ndarray:
        xs = np.asarray(xs, dtype=float)
        result = np.zeros(xs.shape, dtype=float)
        for func in self._functions:
            result = np.maximum(result, func.sample(xs))
        return result

    def select(self, pos: Vec2) -> Optional[Function]:
        """Return the topmost function whose curve lies above ``pos``, or None."""
        x, y = float(pos[0]), float(pos[1])
        for func in reversed(self._functions):
            if y < func.eval(x):
                return func
        return None

    def get_alpha(self, num_samples: int) -> np.ndarray:
        """Envelope sampled at ``i / (num_samples - 1)``; a single sample reads x = 0."""
        if num_samples < 1:
            raise ValueError(f"num_samples must be >= 1, got {num_samples}")
        return self.sample(unit_positions(num_samples))

    def get_rgb(self, num_samples: int) -> np.ndarray:
        """Envelope samples repeated into three channels, shape (num_samples, 3)."""
        alpha = self.get_alpha(num_samples)
        return np.repeat(alpha[:, np.newaxis], 3, axis=1)

    # ------------------ RENDERING ------------------
    def rasterize(self, width: int, height: int) -> Texture:
        tex = Texture(width, height)
        if tex.width == 0 or tex.height == 0:
            warnings.warn(
                f"Rasterizing editor into an empty {tex.width}x{tex.height} texture",
                RuntimeWarning,
            )
            return tex

        for func in self._functions:
            layer = func.rasterize(tex.width, tex.height)
            tex.data = over_packed(layer.data, tex.data)

        if self._background is not None:
            backdrop = self._background.rasterize(tex.width, tex.height)
            tex.data = over_packed(tex.data, backdrop.data)

        if self._show_outline:
            self._draw_outline(tex)

        logger.debug(
            "Rasterized %d function(s) into %dx%d (background=%s)",
            len(self._functions), tex.width, tex.height, self._background is not None,
        )
        return tex

    def _draw_outline(self, tex: Texture) -> None:
        envelope = self.sample(unit_positions(tex.width))
        columns = np.nonzero(envelope > 0.0)[0]
        rows = np.floor(envelope[columns] * tex.height).astype(np.int64)
        rows = np.clip(rows, 0, tex.height - 1)
        tex.grid[rows, columns] = np.uint32(pack(OUTLINE_COLOR))

    def __repr__(self) -> str:
        return (
            f"Editor(functions={len(self._functions)}, "
            f"background={self._background!r}, show_outline={self._show_outline})"
        )
