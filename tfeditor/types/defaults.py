# No dependencies
from .color_types import Float3, Float4

# Area fill used by Function.rasterize
FUNCTION_FILL_COLOR: Float4 = (0.6, 0.6, 0.6, 0.95)

# Envelope outline drawn by the editor
OUTLINE_COLOR: Float4 = (1.0, 0.5, 0.0, 1.0)

DEFAULT_CHECKER_SIZE = 8
DEFAULT_CHECKER_COLOR1: Float3 = (0.0, 0.0, 0.0)
DEFAULT_CHECKER_COLOR2: Float3 = (1.0, 1.0, 1.0)

DEFAULT_VALUE_RANGE = (0.0, 1.0)

BYTE_MAX = 255
CHANNEL_SHIFTS = (0, 8, 16, 24)
