"""几何变换修改器。"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..exceptions import GeometryError
from .base import AbstractModifier


if TYPE_CHECKING:
    from ..image import Image


def _check_dimension(name: str, value: int | None) -> None:
    if value is not None and value <= 0:
        raise GeometryError(f"{name} 必须大于 0，得到: {value}")


@dataclass
class ResizeModifier(AbstractModifier):
    """缩放到指定尺寸，未指定的边保持原值"""

    width: int | None = None
    height: int | None = None

    def __post_init__(self) -> None:
        _check_dimension("宽度", self.width)
        _check_dimension("高度", self.height)

    def target_size(self, image: "Image") -> tuple[int, int]:
        return (self.width or image.width, self.height or image.height)


@dataclass
class ScaleModifier(AbstractModifier):
    """等比缩放：同时指定宽高时缩放到能放进该区域的最大尺寸"""

    width: int | None = None
    height: int | None = None

    generic_fallback = True

    def __post_init__(self) -> None:
        _check_dimension("宽度", self.width)
        _check_dimension("高度", self.height)

    def target_size(self, image: "Image") -> tuple[int, int]:
        width, height = image.size
        if self.width and self.height:
            ratio = min(self.width / width, self.height / height)
        elif self.width:
            ratio = self.width / width
        elif self.height:
            ratio = self.height / height
        else:
            return (width, height)

        return (max(1, round(width * ratio)), max(1, round(height * ratio)))

    def apply(self, image: "Image") -> "Image":
        return image.modify(ResizeModifier(*self.target_size(image)))


@dataclass
class CropModifier(AbstractModifier):
    """裁剪，超出原图的区域用背景色填充"""

    width: int
    height: int
    x: int = 0
    y: int = 0
    background: Any = "transparent"

    def __post_init__(self) -> None:
        _check_dimension("宽度", self.width)
        _check_dimension("高度", self.height)


@dataclass
class RotateModifier(AbstractModifier):
    """逆时针旋转，露出的区域用背景色填充"""

    angle: float
    background: Any = "ffffff"

    @property
    def rotation_angle(self) -> float:
        return self.angle % 360


@dataclass
class FlipModifier(AbstractModifier):
    """上下翻转"""


@dataclass
class FlopModifier(AbstractModifier):
    """左右翻转"""
