"""排版模块包。"""

from .font import Alignment, Font, FontFactory, VerticalAlignment
from .font_processor import AbstractFontProcessor
from .text_block import Line, TextBlock


__all__ = [
    "AbstractFontProcessor",
    "Alignment",
    "Font",
    "FontFactory",
    "Line",
    "TextBlock",
    "VerticalAlignment",
]
