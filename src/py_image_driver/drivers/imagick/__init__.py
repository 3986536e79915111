"""ImageMagick 驱动包（需要 Wand 与 MagickWand 库）。"""

from .driver import ImagickDriver


__all__ = ["ImagickDriver"]
