"""Re-rasterize an editor only when its stack or the requested size changed."""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from .editor import Editor
from .texture import Texture

logger = logging.getLogger(__name__)


class RasterCache:
    """
    Holds the last texture produced by ``editor.rasterize``.

    A cached texture is reused while ``editor.revision`` and the requested
    size are unchanged. The returned texture is shared; copy it before
    modifying it.
    """

    def __init__(self, editor: Editor) -> None:
        self.editor = editor
        self._texture: Optional[Texture] = None
        self._key: Optional[Tuple[int, int, int]] = None

    @property
    def texture(self) -> Optional[Texture]:
        return self._texture

    def is_stale(self, width: Optional[int] = None, height: Optional[int] = None) -> bool:
        """
        Whether the next ``rasterize`` would redraw.

        Without a size only the editor revision is compared.
        """
        if self._texture is None or self._key is None or self._key[0] != self.editor.revision:
            return True
        if width is not None and int(width) != self._key[1]:
            return True
        return height is not None and int(height) != self._key[2]

    def invalidate(self) -> None:
        self._texture = None
        self._key = None

    def rasterize(self, width: int, height: int) -> Texture:
        key = (self.editor.revision, int(width), int(height))
        if self._texture is not None and key == self._key:
            return self._texture

        logger.debug("Raster cache miss for %dx%d at revision %d", key[1], key[2], key[0])
        self._texture = self.editor.rasterize(width, height)
        self._key = key
        return self._texture
