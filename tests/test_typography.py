"""排版模块测试。

使用固定字宽的字体处理器，验证换行、对齐与行距计算。
"""

import pytest

from py_image_driver import Alignment, Font, FontError, FontFactory, VerticalAlignment
from py_image_driver.geometry import Point
from py_image_driver.typography import AbstractFontProcessor, Line, TextBlock


class FixedWidthFontProcessor(AbstractFontProcessor):
    """每个字符宽 10 像素，大写字母高 8，含降部高 10"""

    def box_size(self, text: str, font: Font) -> tuple[int, int]:
        if not text:
            return (0, 0)
        height = 8 if text == "T" else 10
        return (len(text) * 10, height)


@pytest.fixture
def processor() -> FixedWidthFontProcessor:
    return FixedWidthFontProcessor()


class TestFont:
    """字体配置测试"""

    def test_defaults(self):
        font = Font()
        assert font.size == 12
        assert font.alignment == Alignment.LEFT
        assert font.valignment == VerticalAlignment.BOTTOM
        assert font.line_height == 1.25
        assert not font.has_filename
        assert not font.has_stroke

    def test_stroke_width_range(self):
        """测试描边宽度必须在 0-10 之间"""
        with pytest.raises(FontError):
            Font(stroke_width=11)
        with pytest.raises(FontError):
            FontFactory().stroke("ffffff", -1).create()
        assert Font(stroke_width=10).has_stroke

    def test_factory(self):
        font = (
            FontFactory()
            .size(24)
            .color("ff0000")
            .stroke("000000", 2)
            .align("center")
            .valign("top")
            .line_height(1.5)
            .wrap(100)
            .angle(45)
            .create()
        )
        assert font.size == 24
        assert font.color == "ff0000"
        assert font.stroke_width == 2
        assert font.alignment == Alignment.CENTER
        assert font.valignment == VerticalAlignment.TOP
        assert font.line_height == 1.5
        assert font.wrap_width == 100
        assert font.angle == 45

    def test_factory_invalid_option(self):
        with pytest.raises(FontError):
            FontFactory().size(-1).create()


class TestTextBlock:
    """文本块测试"""

    def test_lines(self):
        block = TextBlock("hello world\nfoo")
        assert len(block) == 2
        assert str(block[0]) == "hello world"
        assert block[0].segments == ["hello", "world"]
        assert str(block.longest_line()) == "hello world"

    def test_empty(self):
        block = TextBlock("")
        assert len(block) == 0
        assert str(block.longest_line()) == ""

    def test_line_length(self):
        assert len(Line("ab cd")) == 5


class TestFontProcessor:
    """排版计算测试"""

    def test_leading(self, processor: FixedWidthFontProcessor):
        assert processor.typographical_size(Font()) == 10
        assert processor.cap_height(Font()) == 8
        assert processor.leading(Font(line_height=2)) == 20

    def test_top_left_block(self, processor: FixedWidthFontProcessor):
        """左上对齐时首行基线位于锚点下方大写字母高度处"""
        font = Font(valignment="top")
        block = processor.text_block("ab\ncd", font, Point(10, 10))

        assert [line.position for line in block] == [Point(10, 18), Point(10, 30)]

    def test_bottom_alignment(self, processor: FixedWidthFontProcessor):
        """底部对齐时文本块整体在锚点上方"""
        block = processor.text_block("ab", Font(), Point(0, 50))
        assert block[0].position == Point(0, 50)

    def test_center_alignment(self, processor: FixedWidthFontProcessor):
        font = Font(alignment="center", valignment="top")
        block = processor.text_block("abcd\nab", font, Point(100, 0))

        # 块宽 40，左边缘在 80；第二行宽 20，居中后在 90
        assert block[0].position == Point(80, 8)
        assert block[1].position == Point(90, 20)

    def test_right_alignment(self, processor: FixedWidthFontProcessor):
        font = Font(alignment="right", valignment="top")
        block = processor.text_block("abcd\nab", font, Point(100, 0))

        assert block[0].position == Point(60, 8)
        assert block[1].position == Point(80, 20)

    def test_wrap(self, processor: FixedWidthFontProcessor):
        """测试按宽度自动换行"""
        font = Font(wrap_width=50, valignment="top")
        block = processor.text_block("aa bb cc", font, Point(0, 0))

        assert [str(line) for line in block] == ["aa bb", "cc"]

    def test_single_long_word_not_split(self, processor: FixedWidthFontProcessor):
        block = processor.text_block("abcdefgh", Font(wrap_width=20), Point(0, 0))
        assert [str(line) for line in block] == ["abcdefgh"]

    def test_rotation(self, processor: FixedWidthFontProcessor):
        """旋转 90 度时各行沿锚点顺时针转动"""
        font = Font(valignment="top", angle=90)
        block = processor.text_block("ab", font, Point(0, 0))

        assert block[0].position == Point(-8, 0)

    def test_empty_text(self, processor: FixedWidthFontProcessor):
        assert len(processor.text_block("", Font(), Point(0, 0))) == 0
