"""图形构建器。

每个工厂从一个位置（或已有图形）开始，通过显式的 setter 配置，
最后由 create() 产出图形。setter 返回工厂本身，便于链式调用。
"""

from typing import Any

from .point import Point
from .shapes import Circle, Drawable, Ellipse, Line, Polygon, Rectangle


class _ShapeFactory:
    """工厂公共部分：填充色与边框"""

    shape: Drawable

    def background(self, color: Any):
        self.shape.set_background_color(color)
        return self

    def border(self, color: Any, size: int = 1):
        self.shape.set_border(color, size)
        return self

    def create(self) -> Any:
        return self.shape

    def __call__(self) -> Any:
        return self.create()


class RectangleFactory(_ShapeFactory):
    """矩形构建器"""

    def __init__(self, pivot: Point | None = None, rectangle: Rectangle | None = None):
        self.shape = rectangle or Rectangle(pivot=pivot or Point())

    def size(self, width: int, height: int) -> "RectangleFactory":
        self.shape.set_size(width, height)
        return self

    def width(self, width: int) -> "RectangleFactory":
        self.shape.set_size(width, self.shape.height)
        return self

    def height(self, height: int) -> "RectangleFactory":
        self.shape.set_size(self.shape.width, height)
        return self


class EllipseFactory(_ShapeFactory):
    """椭圆构建器"""

    def __init__(self, pivot: Point | None = None, ellipse: Ellipse | None = None):
        self.shape = ellipse or Ellipse(pivot=pivot or Point())

    def size(self, width: int, height: int) -> "EllipseFactory":
        self.shape.set_size(width, height)
        return self

    def width(self, width: int) -> "EllipseFactory":
        self.shape.set_size(width, self.shape.height)
        return self

    def height(self, height: int) -> "EllipseFactory":
        self.shape.set_size(self.shape.width, height)
        return self


class CircleFactory(_ShapeFactory):
    """圆形构建器"""

    def __init__(self, pivot: Point | None = None, circle: Circle | None = None):
        self.shape = circle or Circle(pivot=pivot or Point())

    def radius(self, radius: int) -> "CircleFactory":
        self.shape.radius = radius
        return self

    def diameter(self, diameter: int) -> "CircleFactory":
        self.shape.diameter = diameter
        return self


class LineFactory(_ShapeFactory):
    """直线构建器"""

    def __init__(self, line: Line | None = None):
        self.shape = line or Line()

    def from_(self, x: int, y: int) -> "LineFactory":
        self.shape.start = Point(x, y)
        return self

    def to(self, x: int, y: int) -> "LineFactory":
        self.shape.end = Point(x, y)
        return self

    def color(self, color: Any) -> "LineFactory":
        self.shape.set_color(color)
        return self

    def width(self, width: int) -> "LineFactory":
        # 经由构造校验线宽
        self.shape = Line(
            start=self.shape.start,
            end=self.shape.end,
            width=width,
            background_color=self.shape.background_color,
        )
        return self


class PolygonFactory(_ShapeFactory):
    """多边形构建器"""

    def __init__(self, pivot: Point | None = None, polygon: Polygon | None = None):
        self.shape = polygon or Polygon(pivot=pivot or Point())

    def point(self, x: int, y: int) -> "PolygonFactory":
        self.shape.add_point(Point(x, y))
        return self
