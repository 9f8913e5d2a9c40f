"""
RGBA8 pixel buffer shared by every layer and by the editor.

Pixels are packed uint32 values (see ``tfeditor.conversions.pack``) stored in a
flat array of ``width * height`` entries. Rows are addressed bottom-up:
``get(x, 0)`` reads the last row of the buffer, so a rasterized curve grows
upward when the buffer is handed to a top-down image consumer.
"""
from __future__ import annotations

import numpy as np
from typing import Optional

from .types.color_types import PackedPixel
from .types.defaults import CHANNEL_SHIFTS


class Texture:
    __slots__ = ("width", "height", "data")

    def __init__(self, width: int, height: int, data: Optional[np.ndarray] = None) -> None:
        width = int(width)
        height = int(height)
        if width < 0 or height < 0:
            raise ValueError(f"Texture dimensions must be >= 0, got {width}x{height}")
        self.width = width
        self.height = height

        if data is None:
            self.data = np.zeros(width * height, dtype=np.uint32)
        else:
            data = np.asarray(data, dtype=np.uint32).reshape(-1)
            if data.size != width * height:
                raise ValueError(
                    f"Texture {width}x{height} expects {width * height} pixels, got {data.size}"
                )
            self.data = data.copy()

    def linear_index(self, x: int, y: int) -> int:
        return x + self.width * y

    def flip(self, y: int) -> int:
        return self.height - y - 1

    def set(self, x: int, y: int, value: PackedPixel) -> None:
        self.data[self.linear_index(x, self.flip(y))] = value

    def get(self, x: int, y: int) -> PackedPixel:
        return int(self.data[self.linear_index(x, self.flip(y))])

    # ------------------ ARRAY VIEWS ------------------
    @property
    def grid(self) -> np.ndarray:
        """
        Writable (height, width) view in logical orientation.

        ``grid[y, x]`` is the same pixel as ``get(x, y)``.
        """
        return self.data.reshape(self.height, self.width)[::-1]

    def to_rgba(self) -> np.ndarray:
        """
        Raw RGBA8 bytes as a (height, width, 4) uint8 array in buffer row order.

        Channel order is R, G, B, A regardless of platform byte order.
        """
        rows = self.data.reshape(self.height, self.width)
        channels = [(rows >> np.uint32(shift)) & np.uint32(0xFF) for shift in CHANNEL_SHIFTS]
        return np.stack(channels, axis=-1).astype(np.uint8)

    def tobytes(self) -> bytes:
        return self.to_rgba().tobytes()

    def copy(self) -> Texture:
        return Texture(self.width, self.height, self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Texture):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.data, other.data)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Texture(width={self.width}, height={self.height})"
