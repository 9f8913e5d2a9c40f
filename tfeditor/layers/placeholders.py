"""
Function variants that are declared but have no curve defined yet.

They carry their ``kind`` tag for the registry but leave ``eval`` abstract,
so none of them can be instantiated or pushed onto an editor.
"""
from typing import ClassVar

from ..types.layer_kind import LayerKind
from .base import Function


class Box(Function):
    kind: ClassVar[LayerKind] = LayerKind.BOX


class Gaussian(Function):
    kind: ClassVar[LayerKind] = LayerKind.GAUSSIAN


class ColorMap(Function):
    kind: ClassVar[LayerKind] = LayerKind.COLOR_MAP
