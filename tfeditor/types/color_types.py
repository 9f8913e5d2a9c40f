from __future__ import annotations
from typing import Tuple

Float3 = Tuple[float, float, float]
Float4 = Tuple[float, float, float, float]
Vec2 = Tuple[float, float]
PackedPixel = int
