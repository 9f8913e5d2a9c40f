"""
tfeditor Pixel Conversions
==========================

Conversions between float color samples and packed RGBA8 pixels, plus the
"over" compositing operator used by the editor.

Every function has a scalar form and an ``np_`` vectorized form operating on
arrays whose last axis holds the four channels. Both forms round half to even
and therefore produce identical bytes.

Conversion Functions
--------------------
    to_byte(f) / np_to_byte(arr)
        Clamp to [0, 1] and quantize to 0..255
    pack(rgba) / np_pack(arr)
        Float RGBA -> packed uint32 (R in bits 0-7, A in bits 24-31)
    unpack(u) / np_unpack(arr)
        Packed uint32 -> float RGBA in [0, 1]

Compositing
-----------
    over(a, b) / np_over(a, b)
        ``a + (1 - a.alpha) * b`` on non-premultiplied samples
    over_packed(top, bottom)
        Unpack, composite and repack packed pixel arrays

Examples
--------
>>> from tfeditor.conversions import pack, unpack, over
>>> pack((1.0, 0.0, 0.0, 1.0))
4278190335
>>> unpack(0xff0000ff)
(1.0, 0.0, 0.0, 1.0)
>>> over((0.5, 0.5, 0.5, 0.5), (0.0, 0.0, 0.0, 1.0))
(0.5, 0.5, 0.5, 1.0)
"""

from .pixels import (
    to_byte,
    np_to_byte,
    pack,
    np_pack,
    unpack,
    np_unpack,
    over,
    np_over,
    over_packed,
)

__all__ = [
    "to_byte", "np_to_byte",
    "pack", "np_pack",
    "unpack", "np_unpack",
    "over", "np_over",
    "over_packed",
]
