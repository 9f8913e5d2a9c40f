import numpy as np


def unit_positions(count: int) -> np.ndarray:
    """
    Return ``count`` evenly spaced positions on [0, 1], computed as ``i / (count - 1)``.

    A single position maps to 0.0 instead of dividing by zero.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if count <= 1:
        return np.zeros(count, dtype=float)
    return np.arange(count, dtype=float) / float(count - 1)
