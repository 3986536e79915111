"""几何模块测试。"""

import pytest

from py_image_driver import GeometryError
from py_image_driver.geometry import (
    Circle,
    CircleFactory,
    Ellipse,
    EllipseFactory,
    Line,
    LineFactory,
    Point,
    Polygon,
    PolygonFactory,
    Rectangle,
    RectangleFactory,
)


class TestPoint:
    """点测试"""

    def test_move(self):
        point = Point(1, 2)
        assert point.move(3, 4) == Point(4, 6)
        assert point == Point(1, 2)

    def test_rotate_around_origin(self):
        """y 轴向下时，正角度为顺时针"""
        assert Point(10, 0).rotate(90) == Point(0, 10)
        assert Point(10, 0).rotate(180) == Point(-10, 0)

    def test_rotate_around_pivot(self):
        assert Point(20, 10).rotate(90, Point(10, 10)) == Point(10, 20)
        assert Point(5, 5).rotate(0, Point(1, 1)) == Point(5, 5)


class TestShapes:
    """图形测试"""

    def test_rectangle(self):
        rectangle = Rectangle(10, 20, pivot=Point(5, 5))
        assert rectangle.top_left == Point(5, 5)
        assert rectangle.bottom_right == Point(15, 25)
        assert not rectangle.has_background
        assert not rectangle.has_border

    def test_negative_sizes_rejected(self):
        with pytest.raises(GeometryError):
            Rectangle(-1, 10)
        with pytest.raises(GeometryError):
            Ellipse(10, 10).set_size(10, -2)
        with pytest.raises(GeometryError):
            Rectangle(10, 10).set_border("ff0000", -1)

    def test_ellipse_bounding_box(self):
        ellipse = Ellipse(10, 6, pivot=Point(20, 20))
        assert ellipse.bounding_box == (15, 17, 25, 23)

    def test_circle(self):
        circle = Circle(5, Point(10, 10))
        assert circle.radius == 5
        assert circle.diameter == 10
        circle.radius = 8
        assert (circle.width, circle.height) == (16, 16)

    def test_line_width(self):
        with pytest.raises(GeometryError):
            Line(width=0)
        assert Line().set_color("ff0000").color == "ff0000"

    def test_polygon_points(self):
        polygon = Polygon(pivot=Point(10, 10))
        polygon.add_point(Point(0, 0)).add_point(Point(5, 0)).add_point(Point(0, 5))
        assert len(polygon) == 3
        assert polygon.absolute_points() == [(10, 10), (15, 10), (10, 15)]


class TestFactories:
    """图形构建器测试"""

    def test_rectangle_factory(self):
        rectangle = (
            RectangleFactory(Point(1, 2)).size(30, 40).background("red").border("blue", 2).create()
        )
        assert (rectangle.width, rectangle.height) == (30, 40)
        assert rectangle.background_color == "red"
        assert rectangle.border_color == "blue"
        assert rectangle.border_size == 2
        assert rectangle.has_border

    def test_ellipse_factory_width_height(self):
        ellipse = EllipseFactory(Point(0, 0)).width(10).height(4)()
        assert (ellipse.width, ellipse.height) == (10, 4)

    def test_circle_factory(self):
        assert CircleFactory(Point(5, 5)).radius(3).create().diameter == 6
        assert CircleFactory().diameter(10).create().radius == 5

    def test_line_factory(self):
        line = LineFactory().from_(0, 0).to(10, 5).color("ff0000").width(3).create()
        assert line.start == Point(0, 0)
        assert line.end == Point(10, 5)
        assert line.color == "ff0000"
        assert line.width == 3

    def test_polygon_factory(self):
        polygon = PolygonFactory().point(0, 0).point(4, 0).point(2, 3).create()
        assert len(polygon) == 3
