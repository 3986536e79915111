"""文字修改器。

逐帧、逐行绘制：先在描边偏移位置绘制描边色副本，再在原位置绘制文字。
描边偏移覆盖 8 个方向、1 到 stroke_width 的每个半径，保证轮廓闭合。
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..exceptions import FontError
from ..geometry import Point
from ..typography import AbstractFontProcessor, Font, Line
from .base import AbstractModifier


if TYPE_CHECKING:
    from ..drivers.core import AbstractFrame
    from ..image import Image


# 8 个方向的单位偏移，顺时针
COMPASS_DIRECTIONS: tuple[tuple[int, int], ...] = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)


@dataclass
class TextModifier(AbstractModifier):
    """绘制文字"""

    text: str
    position: Point
    font: Font

    def stroke_offsets(self) -> list[tuple[int, int]]:
        """描边偏移量，stroke_width <= 0 时为空"""
        return [
            (dx * radius, dy * radius)
            for radius in range(1, self.font.stroke_width + 1)
            for dx, dy in COMPASS_DIRECTIONS
        ]

    def font_processor(self) -> AbstractFontProcessor:
        """当前驱动的字体处理器

        Raises:
            FontError: 字体处理器与驱动不匹配
        """
        processor = self.driver.font_processor()
        if processor.driver_kind != self.driver.kind:
            raise FontError(
                f"字体处理器 {type(processor).__name__} 与驱动 {self.driver.id} 不匹配"
            )
        return processor

    def apply(self, image: "Image") -> "Image":
        processor = self.font_processor()
        block = processor.text_block(self.text, self.font, self.position)
        fill_color = self.native_color(image, self.font.color)
        offsets = self.stroke_offsets()
        stroke_color = self.native_color(image, self.font.stroke_color) if offsets else None

        for frame in image:
            for line in block:
                for dx, dy in offsets:
                    self.draw_line(frame, line, line.position.move(dx, dy), stroke_color)
                self.draw_line(frame, line, line.position, fill_color)

        return image

    def draw_line(
        self, frame: "AbstractFrame", line: Line, position: Point, color: Any
    ) -> None:
        """在帧上绘制一行文字，position 为基线起点"""
        raise NotImplementedError
