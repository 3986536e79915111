"""可绘制图形。

图形只描述绘制区域：位置、尺寸、填充色、边框色与边框宽度。
颜色保存为原始输入值，绘制时由驱动解析并转换为原生颜色。
"""

from dataclasses import dataclass, field
from typing import Any

from ..exceptions import GeometryError
from .point import Point


@dataclass(kw_only=True)
class Drawable:
    """可绘制图形基类"""

    pivot: Point = field(default_factory=Point)
    background_color: Any = None
    border_color: Any = None
    border_size: int = 0

    def __post_init__(self) -> None:
        if self.border_size < 0:
            raise GeometryError(f"边框宽度不能为负数: {self.border_size}")

    @property
    def position(self) -> Point:
        return self.pivot

    def set_position(self, position: Point) -> "Drawable":
        self.pivot = position
        return self

    def set_background_color(self, color: Any) -> "Drawable":
        self.background_color = color
        return self

    def set_border(self, color: Any, size: int = 1) -> "Drawable":
        if size < 0:
            raise GeometryError(f"边框宽度不能为负数: {size}")
        self.border_color = color
        self.border_size = size
        return self

    @property
    def has_background(self) -> bool:
        return self.background_color is not None

    @property
    def has_border(self) -> bool:
        return self.border_color is not None and self.border_size > 0


def _check_size(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise GeometryError(f"尺寸不能为负数: {width}x{height}")


@dataclass
class Rectangle(Drawable):
    """矩形，pivot 为左上角"""

    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        _check_size(self.width, self.height)

    def set_size(self, width: int, height: int) -> "Rectangle":
        _check_size(width, height)
        self.width = width
        self.height = height
        return self

    @property
    def top_left(self) -> Point:
        return self.pivot

    @property
    def bottom_right(self) -> Point:
        return self.pivot.move(self.width, self.height)


@dataclass
class Ellipse(Drawable):
    """椭圆，pivot 为圆心"""

    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        _check_size(self.width, self.height)

    def set_size(self, width: int, height: int) -> "Ellipse":
        _check_size(width, height)
        self.width = width
        self.height = height
        return self

    @property
    def bounding_box(self) -> tuple[int, int, int, int]:
        """外接矩形 (left, top, right, bottom)"""
        left = self.pivot.x - self.width // 2
        top = self.pivot.y - self.height // 2
        return (left, top, left + self.width, top + self.height)


class Circle(Ellipse):
    """圆形：宽高相等的椭圆"""

    def __init__(self, radius: int = 0, pivot: Point | None = None, **options: Any):
        super().__init__(
            width=radius * 2, height=radius * 2, pivot=pivot or Point(), **options
        )

    @property
    def diameter(self) -> int:
        return self.width

    @diameter.setter
    def diameter(self, value: int) -> None:
        self.set_size(value, value)

    @property
    def radius(self) -> int:
        return self.width // 2

    @radius.setter
    def radius(self, value: int) -> None:
        self.set_size(value * 2, value * 2)


@dataclass
class Line(Drawable):
    """直线，颜色取 background_color"""

    start: Point = field(default_factory=Point)
    end: Point = field(default_factory=Point)
    width: int = 1

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.width < 1:
            raise GeometryError(f"线宽必须大于 0: {self.width}")

    @property
    def color(self) -> Any:
        return self.background_color

    def set_color(self, color: Any) -> "Line":
        self.background_color = color
        return self


@dataclass
class Polygon(Drawable):
    """多边形，顶点相对 pivot 偏移"""

    points: list[Point] = field(default_factory=list)

    def add_point(self, point: Point) -> "Polygon":
        self.points.append(point)
        return self

    def absolute_points(self) -> list[tuple[int, int]]:
        """顶点的绝对坐标"""
        return [
            (self.pivot.x + point.x, self.pivot.y + point.y) for point in self.points
        ]

    def __len__(self) -> int:
        return len(self.points)
