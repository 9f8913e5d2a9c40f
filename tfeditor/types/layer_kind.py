# No dependencies
from enum import Enum

class LayerKind(str, Enum):
    PIECEWISE_LINEAR = "piecewise_linear"
    TENT = "tent"
    BOX = "box"
    GAUSSIAN = "gaussian"
    COLOR_MAP = "color_map"
    CHECKERS = "checkers"
