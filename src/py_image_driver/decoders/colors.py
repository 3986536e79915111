"""颜色解码器。

颜色解码与驱动无关，全部是通用实现。
"""

import re
from dataclasses import dataclass
from typing import Any

from PIL import ImageColor

from ..colors import CmykColor, Color
from ..exceptions import ColorError, DecoderError
from .base import AbstractDecoder


HEX_PATTERN = re.compile(r"^#?(?P<hex>[a-f0-9]{3}|[a-f0-9]{4}|[a-f0-9]{6}|[a-f0-9]{8})$", re.I)
RGB_PATTERN = re.compile(
    r"^rgba?\(\s*(?P<r>\d{1,3})\s*,\s*(?P<g>\d{1,3})\s*,\s*(?P<b>\d{1,3})\s*"
    r"(?:,\s*(?P<a>\d*\.?\d+)\s*)?\)$",
    re.I,
)
CMYK_PATTERN = re.compile(
    r"^cmyk\(\s*(?P<c>\d{1,3})%?\s*,\s*(?P<m>\d{1,3})%?\s*,"
    r"\s*(?P<y>\d{1,3})%?\s*,\s*(?P<k>\d{1,3})%?\s*\)$",
    re.I,
)


@dataclass
class AbstractColorDecoder(AbstractDecoder):
    generic_fallback = True

    def decode(self, value: Any) -> Color | CmykColor:
        try:
            return self.decode_color(value)
        except ColorError as e:
            raise DecoderError(f"颜色值无效: {e.message}") from e

    def decode_color(self, value: Any) -> Color | CmykColor:
        raise NotImplementedError


@dataclass
class ColorObjectDecoder(AbstractColorDecoder):
    """已是颜色对象"""

    def supports(self, value: Any) -> bool:
        return isinstance(value, Color | CmykColor)

    def decode_color(self, value: Any) -> Color | CmykColor:
        return value


@dataclass
class TupleColorDecoder(AbstractColorDecoder):
    """(r, g, b) 或 (r, g, b, a) 整数序列"""

    def supports(self, value: Any) -> bool:
        return (
            isinstance(value, tuple | list)
            and len(value) in (3, 4)
            and all(isinstance(channel, int) for channel in value)
        )

    def decode_color(self, value: Any) -> Color:
        return Color(*value)


@dataclass
class HexColorDecoder(AbstractColorDecoder):
    """十六进制颜色，支持 3/4/6/8 位，可带 #"""

    def supports(self, value: Any) -> bool:
        return isinstance(value, str) and HEX_PATTERN.match(value.strip()) is not None

    def decode_color(self, value: Any) -> Color:
        digits = HEX_PATTERN.match(value.strip()).group("hex")
        if len(digits) in (3, 4):
            digits = "".join(digit * 2 for digit in digits)

        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        return Color(*channels)


@dataclass
class RgbStringColorDecoder(AbstractColorDecoder):
    """rgb(r, g, b) 或 rgba(r, g, b, a)，a 为 0-1 的浮点数"""

    def supports(self, value: Any) -> bool:
        return isinstance(value, str) and RGB_PATTERN.match(value.strip()) is not None

    def decode_color(self, value: Any) -> Color:
        match = RGB_PATTERN.match(value.strip())
        alpha = match.group("a")
        if alpha is None:
            alpha_channel = 255
        else:
            alpha_value = float(alpha)
            if not 0 <= alpha_value <= 1:
                raise ColorError(f"透明度必须在 0-1 之间，得到: {alpha}")
            alpha_channel = round(alpha_value * 255)

        return Color(int(match.group("r")), int(match.group("g")), int(match.group("b")), alpha_channel)


@dataclass
class CmykStringColorDecoder(AbstractColorDecoder):
    """cmyk(c%, m%, y%, k%)"""

    def supports(self, value: Any) -> bool:
        return isinstance(value, str) and CMYK_PATTERN.match(value.strip()) is not None

    def decode_color(self, value: Any) -> CmykColor:
        match = CMYK_PATTERN.match(value.strip())
        return CmykColor(*(int(match.group(name)) for name in "cmyk"))


@dataclass
class TransparentColorDecoder(AbstractColorDecoder):
    """关键字 transparent"""

    def supports(self, value: Any) -> bool:
        return isinstance(value, str) and value.strip().lower() == "transparent"

    def decode_color(self, value: Any) -> Color:
        return Color(255, 255, 255, 0)


@dataclass
class HtmlColornameDecoder(AbstractColorDecoder):
    """HTML 颜色名称（使用 Pillow 的颜色表）"""

    def supports(self, value: Any) -> bool:
        return isinstance(value, str) and value.strip().lower() in ImageColor.colormap

    def decode_color(self, value: Any) -> Color:
        return Color(*ImageColor.getrgb(value.strip().lower()))
