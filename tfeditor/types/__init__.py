from .color_types import Float3, Float4, Vec2, PackedPixel
from .layer_kind import LayerKind
from .defaults import (
    FUNCTION_FILL_COLOR,
    OUTLINE_COLOR,
    DEFAULT_CHECKER_SIZE,
    DEFAULT_CHECKER_COLOR1,
    DEFAULT_CHECKER_COLOR2,
    DEFAULT_VALUE_RANGE,
)

__all__ = [
    "Float3", "Float4", "Vec2", "PackedPixel",
    "LayerKind",
    "FUNCTION_FILL_COLOR", "OUTLINE_COLOR",
    "DEFAULT_CHECKER_SIZE", "DEFAULT_CHECKER_COLOR1", "DEFAULT_CHECKER_COLOR2",
    "DEFAULT_VALUE_RANGE",
]
