"""
tfeditor Layers
===============

Layers are anything that can be rasterized into a ``Texture``. Functions are
layers that also map a domain position to an alpha value.

Variants
--------
    PiecewiseLinear  - curve through sorted control points
    Tent             - trapezoid/triangle built on a PiecewiseLinear
    Box, Gaussian, ColorMap - declared, abstract variants without a curve yet
    Checkers         - opaque checkerboard background (not a Function)

Every concrete class carries a ``kind`` tag; ``layer_class`` resolves a tag
(or its string value) to the class.
"""
from typing import Dict, Type, Union

from ..types.layer_kind import LayerKind
from .base import Layer, Function, ValueRange
from .piecewise_linear import PiecewiseLinear
from .tent import Tent
from .placeholders import Box, Gaussian, ColorMap
from .checkers import Checkers


def build_registry(*classes: Type[Layer]) -> Dict[LayerKind, Type[Layer]]:
    return {cls.kind: cls for cls in classes}


layer_registry = build_registry(
    PiecewiseLinear,
    Tent,
    Box,
    Gaussian,
    ColorMap,
    Checkers,
)


def layer_class(kind: Union[LayerKind, str]) -> Type[Layer]:
    """Resolve a layer kind, or its string value, to its class."""
    try:
        key = LayerKind(kind)
    except ValueError:
        raise KeyError(f"Unknown layer kind: {kind!r}") from None
    return layer_registry[key]


__all__ = [
    "Layer", "Function", "ValueRange",
    "PiecewiseLinear", "Tent",
    "Box", "Gaussian", "ColorMap",
    "Checkers",
    "LayerKind", "layer_registry", "layer_class",
]
