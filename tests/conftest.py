import sys
import os

import pytest

# Add the project root to sys.path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from tfeditor import pack, unpack, Texture


@pytest.fixture
def opaque_red() -> int:
    return pack((1.0, 0.0, 0.0, 1.0))


@pytest.fixture
def opaque_blue() -> int:
    return pack((0.0, 0.0, 1.0, 1.0))


def column_heights(tex: Texture, value: int):
    """Number of pixels from the bottom row up that equal ``value``, per column."""
    return [
        sum(1 for y in range(tex.height) if tex.get(x, y) == value)
        for x in range(tex.width)
    ]


@pytest.fixture
def count_column():
    return column_heights


@pytest.fixture
def channels():
    """Unpack a pixel to bytes for readable assertions."""
    def _channels(pixel: int):
        return tuple(round(c * 255) for c in unpack(pixel))
    return _channels
