"""Pillow 颜色与字体处理器。"""

from functools import lru_cache
from pathlib import Path

from PIL import ImageFont

from ...colors import AbstractColorProcessor, AnyColor, Color, Colorspace
from ...exceptions import FontError
from ...typography import AbstractFontProcessor, Font
from ..specializable import DriverKind


class PillowColorProcessor(AbstractColorProcessor):
    """Pillow 的帧总是 RGBA，原生颜色为 (r, g, b, a) 元组"""

    def __init__(self, colorspace: Colorspace = Colorspace.RGB):
        # 帧没有其他颜色空间，CMYK 颜色统一转换为 RGB
        super().__init__(Colorspace.RGB)

    def _to_native(self, color: AnyColor) -> tuple[int, int, int, int]:
        return color.to_tuple()

    def native_to_color(self, native: tuple[int, ...] | int) -> Color:
        if isinstance(native, int):
            return Color(native, native, native)
        if len(native) == 2:
            return Color(native[0], native[0], native[0], native[1])
        return Color(*native)


@lru_cache(maxsize=32)
def load_font(filename: str | None, size: float) -> ImageFont.FreeTypeFont:
    """加载字体（带缓存）

    Raises:
        FontError: 字体文件无法加载
    """
    if filename is None:
        return ImageFont.load_default(size=size)

    try:
        return ImageFont.truetype(filename, size)
    except OSError as e:
        raise FontError(f"无法加载字体文件 {filename}: {e}") from e


def image_font(font: Font) -> ImageFont.FreeTypeFont:
    filename = str(Path(font.filename)) if font.filename is not None else None
    return load_font(filename, font.size)


class PillowFontProcessor(AbstractFontProcessor):
    driver_kind = DriverKind.PILLOW

    def box_size(self, text: str, font: Font) -> tuple[int, int]:
        if not text:
            return (0, 0)
        left, top, right, bottom = image_font(font).getbbox(text, anchor="ls")
        return (round(right - left), round(bottom - top))
