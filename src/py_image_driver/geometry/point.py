"""二维点。"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """图像坐标系中的点（y 轴向下）"""

    x: int = 0
    y: int = 0

    def move(self, x: int, y: int) -> "Point":
        """按偏移量移动，返回新点"""
        return Point(self.x + x, self.y + y)

    def rotate(self, angle: float, pivot: "Point | None" = None) -> "Point":
        """绕 pivot 顺时针旋转 angle 度，返回新点"""
        pivot = pivot or Point()
        sin = round(math.sin(math.radians(angle)), 6)
        cos = round(math.cos(math.radians(angle)), 6)
        dx = self.x - pivot.x
        dy = self.y - pivot.y

        return Point(
            int(cos * dx - sin * dy + pivot.x),
            int(sin * dx + cos * dy + pivot.y),
        )

    def to_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)
