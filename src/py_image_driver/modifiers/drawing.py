"""绘制修改器。

图形由工厂构建，绘制时逐帧先画填充、再画边框，颜色经颜色处理器转换。
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..geometry import Drawable, Ellipse, Line, Point, Polygon, Rectangle
from .base import AbstractModifier


if TYPE_CHECKING:
    from ..image import Image


@dataclass
class DrawPixelModifier(AbstractModifier):
    position: Point
    color: Any


@dataclass
class AbstractDrawModifier(AbstractModifier):
    """图形绘制修改器"""

    drawable: Drawable

    def background_color(self, image: "Image") -> Any:
        """原生填充色，未设置时为 None"""
        if not self.drawable.has_background:
            return None
        return self.native_color(image, self.drawable.background_color)

    def border_color(self, image: "Image") -> Any:
        """原生边框色，没有边框时为 None"""
        if not self.drawable.has_border:
            return None
        return self.native_color(image, self.drawable.border_color)


@dataclass
class DrawRectangleModifier(AbstractDrawModifier):
    drawable: Rectangle


@dataclass
class DrawEllipseModifier(AbstractDrawModifier):
    """椭圆与圆形"""

    drawable: Ellipse


@dataclass
class DrawLineModifier(AbstractDrawModifier):
    drawable: Line

    def line_color(self, image: "Image") -> Any:
        return self.native_color(image, self.drawable.color or "000000")


@dataclass
class DrawPolygonModifier(AbstractDrawModifier):
    drawable: Polygon
