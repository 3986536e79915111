"""字体处理器基类。

负责文本排版：换行、对齐、行距与旋转。只计算位置，不接触图像。
驱动子类只需提供 box_size()，即给定字体下一段文本的像素宽高。
"""

from abc import ABC, abstractmethod

from ..geometry import Point
from .font import Alignment, Font, VerticalAlignment
from .text_block import Line, TextBlock


class AbstractFontProcessor(ABC):
    """字体处理器"""

    # 所属驱动类型，由驱动子类设置
    driver_kind = None

    @abstractmethod
    def box_size(self, text: str, font: Font) -> tuple[int, int]:
        """文本在该字体下的 (宽, 高)"""

    def typographical_size(self, font: Font) -> int:
        """含升部与降部的字形高度"""
        return self.box_size("Hy", font)[1]

    def cap_height(self, font: Font) -> int:
        """大写字母高度，即首行基线到文本块顶部的距离"""
        return self.box_size("T", font)[1]

    def leading(self, font: Font) -> int:
        """相邻两行基线之间的距离"""
        return round(self.typographical_size(font) * font.line_height)

    def text_block(self, text: str, font: Font, position: Point) -> TextBlock:
        """排版文本，返回每行带基线位置的文本块

        Args:
            text: 文本，可包含换行符
            font: 字体
            position: 锚点，对齐方式相对它计算

        Returns:
            TextBlock: 已定位的文本行
        """
        block = self.wrap_text_block(TextBlock(text), font)
        if not len(block):
            return block

        pivot = self.build_pivot(block, font, position)
        leading = self.leading(font)
        block_width = self._block_width(block, font)
        y = pivot.y + self.cap_height(font)

        for line in block:
            line_width = self.box_size(str(line), font)[0]
            match font.alignment:
                case Alignment.LEFT:
                    x_adjustment = 0
                case Alignment.CENTER:
                    x_adjustment = round((block_width - line_width) / 2)
                case Alignment.RIGHT:
                    x_adjustment = block_width - line_width

            line.set_position(
                Point(pivot.x + x_adjustment, y).rotate(font.angle, pivot)
            )
            y += leading

        return block

    def build_pivot(self, block: TextBlock, font: Font, position: Point) -> Point:
        """文本块左上角位置（已按字体角度绕锚点旋转）"""
        width = self._block_width(block, font)
        height = self.leading(font) * (len(block) - 1) + self.cap_height(font)

        match font.alignment:
            case Alignment.LEFT:
                dx = 0
            case Alignment.CENTER:
                dx = -round(width / 2)
            case Alignment.RIGHT:
                dx = -width

        match font.valignment:
            case VerticalAlignment.TOP:
                dy = 0
            case VerticalAlignment.MIDDLE:
                dy = -round(height / 2)
            case VerticalAlignment.BOTTOM:
                dy = -height

        return position.move(dx, dy).rotate(font.angle, position)

    def wrap_text_block(self, block: TextBlock, font: Font) -> TextBlock:
        """按字体的换行宽度拆分每一行"""
        if font.wrap_width is None:
            return block

        wrapped = TextBlock()
        for line in block:
            for wrapped_line in self._wrap_line(line, font):
                wrapped.add(wrapped_line)
        return wrapped

    def _wrap_line(self, line: Line, font: Font) -> list[Line]:
        lines: list[Line] = []
        current = Line()
        for word in line.segments:
            candidate = f"{current} {word}" if current.segments else word
            if current.segments and self.box_size(candidate, font)[0] > font.wrap_width:
                lines.append(current)
                current = Line()
            current.add(word)
        lines.append(current)
        return lines

    def _block_width(self, block: TextBlock, font: Font) -> int:
        return max(self.box_size(str(line), font)[0] for line in block)
