"""几何模块包。"""

from .factories import (
    CircleFactory,
    EllipseFactory,
    LineFactory,
    PolygonFactory,
    RectangleFactory,
)
from .point import Point
from .shapes import Circle, Drawable, Ellipse, Line, Polygon, Rectangle


__all__ = [
    "Circle",
    "CircleFactory",
    "Drawable",
    "Ellipse",
    "EllipseFactory",
    "Line",
    "LineFactory",
    "Point",
    "Polygon",
    "PolygonFactory",
    "Rectangle",
    "RectangleFactory",
]
