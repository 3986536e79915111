"""颜色模块包。"""

from .color import AnyColor, CmykColor, Color, Colorspace
from .processor import AbstractColorProcessor


__all__ = [
    "AbstractColorProcessor",
    "AnyColor",
    "CmykColor",
    "Color",
    "Colorspace",
]
