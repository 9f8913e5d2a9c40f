"""
tfeditor - Transfer Function Editor Core
========================================

Renders a stack of 1D alpha transfer functions into an RGBA8 texture so that
opacity ramps can be designed visually.

Key Features
------------
- Packed RGBA8 ``Texture`` with bottom-up row addressing
- Scalar and vectorized pixel conversions and the ``over`` operator
- Piecewise linear and tent shaped alpha curves
- Checkerboard background layer
- ``Editor`` layer stack with compositing, hit-testing and envelope sampling
- ``RasterCache`` that skips re-rasterizing an unchanged editor

Quick Start
-----------
>>> from tfeditor import Editor, Checkers, Tent, PiecewiseLinear
>>>
>>> editor = Editor()
>>> editor.set_background(Checkers(16, (0.0, 0.0, 0.0), (1.0, 1.0, 1.0)))
>>> editor.add_function(PiecewiseLinear([(0.0, 1.0), (0.3, 0.8), (1.0, 1.0)]))
>>> tent = Tent()
>>> editor.add_function(tent)
>>>
>>> tex = editor.rasterize(256, 128)
>>> tex.to_rgba().shape
(128, 256, 4)
>>> editor.select((0.5, 0.9)) is tent
True

Modules
-------
- conversions: float <-> packed pixel conversions, ``over`` compositing
- texture: the RGBA8 pixel buffer
- layers: Layer/Function hierarchy and the concrete curve variants
- editor: the layer stack
- cache: dirty-checked rasterization
"""

from .conversions import to_byte, pack, unpack, over, np_pack, np_unpack, np_over
from .texture import Texture
from .layers import (
    Layer, Function, ValueRange,
    PiecewiseLinear, Tent,
    Box, Gaussian, ColorMap,
    Checkers,
    layer_registry, layer_class,
)
from .types import LayerKind
from .editor import Editor
from .cache import RasterCache

__version__ = "0.1.0"

__all__ = [
    # Conversions
    "to_byte", "pack", "unpack", "over",
    "np_pack", "np_unpack", "np_over",

    # Pixel buffer
    "Texture",

    # Layers
    "Layer", "Function", "ValueRange",
    "PiecewiseLinear", "Tent",
    "Box", "Gaussian", "ColorMap",
    "Checkers",
    "LayerKind", "layer_registry", "layer_class",

    # Editor
    "Editor", "RasterCache",

    # Version
    "__version__",
]
