"""分析器：读取图像信息而不修改图像。"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..drivers.specializable import Specializable
from ..exceptions import GeometryError


if TYPE_CHECKING:
    from ..image import Image


@dataclass
class AbstractAnalyzer(Specializable):
    def analyze(self, image: "Image") -> Any:
        raise NotImplementedError


@dataclass
class AbstractPixelAnalyzer(AbstractAnalyzer):
    x: int
    y: int

    def check_position(self, image: "Image") -> None:
        if not (0 <= self.x < image.width and 0 <= self.y < image.height):
            raise GeometryError(f"像素位置 ({self.x}, {self.y}) 超出图像范围 {image.size}")


@dataclass
class PixelColorAnalyzer(AbstractPixelAnalyzer):
    """指定帧上某个像素的颜色"""

    frame: int = 0


@dataclass
class PixelColorsAnalyzer(AbstractPixelAnalyzer):
    """每一帧上某个像素的颜色"""


__all__ = [
    "AbstractAnalyzer",
    "AbstractPixelAnalyzer",
    "PixelColorAnalyzer",
    "PixelColorsAnalyzer",
]
