import numpy as np
from typing import Sequence

from boundednumbers import clamp

from ..types.color_types import Float4, PackedPixel
from ..types.defaults import BYTE_MAX, CHANNEL_SHIFTS


def to_byte(f: float) -> int:
    """Clamp a float channel to [0, 1] and quantize it to 0..255."""
    return int(round(BYTE_MAX * float(clamp(float(f), 0.0, 1.0))))


def np_to_byte(arr: np.ndarray) -> np.ndarray:
    """Vectorized ``to_byte``; returns a uint32 array of the same shape."""
    arr = np.asarray(arr, dtype=float)
    return np.rint(BYTE_MAX * np.clip(arr, 0.0, 1.0)).astype(np.uint32)


def pack(rgba: Sequence[float]) -> PackedPixel:
    """Pack four float channels into one RGBA8 integer, R in the lowest byte."""
    if len(rgba) != 4:
        raise ValueError(f"pack expects 4 channels, got {len(rgba)}")
    packed = 0
    for channel, shift in zip(rgba, CHANNEL_SHIFTS):
        packed |= to_byte(channel) << shift
    return packed


def np_pack(arr: np.ndarray) -> np.ndarray:
    """
    Pack an array of float RGBA samples.

    Args:
        arr: Float array of shape (..., 4)

    Returns:
        uint32 array of shape (...)
    """
    arr = np.asarray(arr, dtype=float)
    if arr.shape[-1] != 4:
        raise ValueError(f"np_pack expects last dimension to be 4, got shape {arr.shape}")
    channels = np_to_byte(arr)
    packed = np.zeros(arr.shape[:-1], dtype=np.uint32)
    for i, shift in enumerate(CHANNEL_SHIFTS):
        packed |= channels[..., i] << np.uint32(shift)
    return packed


def unpack(u: PackedPixel) -> Float4:
    """Unpack one RGBA8 integer into four floats in [0, 1]."""
    u = int(u)
    r, g, b, a = ((u >> shift) & 0xFF for shift in CHANNEL_SHIFTS)
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def np_unpack(arr: np.ndarray) -> np.ndarray:
    """Vectorized ``unpack``; (...) uint32 -> (..., 4) float."""
    arr = np.asarray(arr, dtype=np.uint32)
    channels = [(arr >> np.uint32(shift)) & np.uint32(0xFF) for shift in CHANNEL_SHIFTS]
    return np.stack(channels, axis=-1) / 255.0


def over(a: Sequence[float], b: Sequence[float]) -> Float4:
    """
    Composite sample ``a`` over sample ``b``.

    Uses ``a + (1 - a.alpha) * b`` on every channel, alpha included. The result
    is not divided by the output alpha, so it is only exact for opaque
    backdrops; packed output depends on this exact formula.
    """
    if len(a) != 4 or len(b) != 4:
        raise ValueError("over expects two 4-channel samples")
    k = 1.0 - a[3]
    return (
        a[0] + k * b[0],
        a[1] + k * b[1],
        a[2] + k * b[2],
        a[3] + k * b[3],
    )


def np_over(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Vectorized ``over`` on (..., 4) float arrays."""
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    return a + (1.0 - a[..., 3:4]) * b


def over_packed(top: np.ndarray, bottom: np.ndarray) -> np.ndarray:
    """Composite packed pixels ``top`` over ``bottom``, quantizing the result to RGBA8."""
    top = np.asarray(top, dtype=np.uint32)
    bottom = np.asarray(bottom, dtype=np.uint32)
    if top.shape != bottom.shape:
        raise ValueError(f"Shape mismatch: {top.shape} over {bottom.shape}")
    return np_pack(np_over(np_unpack(top), np_unpack(bottom)))
