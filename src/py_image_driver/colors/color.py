"""颜色值类型。

Color 与 CmykColor 都是不可变值类型，没有身份，只有取值。
"""

from dataclasses import dataclass
from enum import Enum

from ..exceptions import ColorError


class Colorspace(str, Enum):
    """颜色空间枚举"""

    RGB = "rgb"
    CMYK = "cmyk"


def _check_range(name: str, value: int, upper: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ColorError(f"颜色通道 {name} 必须是整数，得到: {value!r}")
    if not 0 <= value <= upper:
        raise ColorError(f"颜色通道 {name} 必须在 0-{upper} 之间，得到: {value}")


@dataclass(frozen=True)
class Color:
    """RGBA 颜色，各通道 0-255"""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            _check_range(name, getattr(self, name), 255)

    @property
    def colorspace(self) -> Colorspace:
        return Colorspace.RGB

    @property
    def is_transparent(self) -> bool:
        """是否完全透明"""
        return self.alpha == 0

    @property
    def is_greyscale(self) -> bool:
        """是否为灰度色"""
        return self.red == self.green == self.blue

    def to_tuple(self) -> tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.alpha)

    def to_hex(self, prefix: str = "") -> str:
        """转换为十六进制字符串，不透明时省略 alpha"""
        channels = [self.red, self.green, self.blue]
        if self.alpha != 255:
            channels.append(self.alpha)
        return prefix + "".join(f"{channel:02x}" for channel in channels)

    def to_rgb(self) -> "Color":
        return self

    def to_cmyk(self) -> "CmykColor":
        """转换为 CMYK 颜色（丢弃 alpha）"""
        red, green, blue = (channel / 255 for channel in self.to_tuple()[:3])
        key = 1 - max(red, green, blue)
        if key >= 1:
            return CmykColor(0, 0, 0, 100)

        def _component(channel: float) -> int:
            return round((1 - channel - key) / (1 - key) * 100)

        return CmykColor(
            _component(red), _component(green), _component(blue), round(key * 100)
        )

    def convert_to(self, colorspace: Colorspace) -> "Color | CmykColor":
        match colorspace:
            case Colorspace.RGB:
                return self
            case Colorspace.CMYK:
                return self.to_cmyk()

    def __str__(self) -> str:
        return self.to_hex("#")


@dataclass(frozen=True)
class CmykColor:
    """CMYK 颜色，各通道 0-100（百分比）"""

    cyan: int
    magenta: int
    yellow: int
    key: int

    def __post_init__(self) -> None:
        for name in ("cyan", "magenta", "yellow", "key"):
            _check_range(name, getattr(self, name), 100)

    @property
    def colorspace(self) -> Colorspace:
        return Colorspace.CMYK

    @property
    def alpha(self) -> int:
        return 255

    @property
    def is_transparent(self) -> bool:
        return False

    def to_tuple(self) -> tuple[int, int, int, int]:
        return (self.cyan, self.magenta, self.yellow, self.key)

    def to_rgb(self) -> Color:
        key = self.key / 100

        def _channel(value: int) -> int:
            return round(255 * (1 - value / 100) * (1 - key))

        return Color(_channel(self.cyan), _channel(self.magenta), _channel(self.yellow))

    def to_cmyk(self) -> "CmykColor":
        return self

    def convert_to(self, colorspace: Colorspace) -> "Color | CmykColor":
        match colorspace:
            case Colorspace.RGB:
                return self.to_rgb()
            case Colorspace.CMYK:
                return self

    def __str__(self) -> str:
        return f"cmyk({self.cyan}%, {self.magenta}%, {self.yellow}%, {self.key}%)"


AnyColor = Color | CmykColor
