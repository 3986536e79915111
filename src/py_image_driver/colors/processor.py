"""颜色处理器基类。

把抽象颜色转换为当前驱动、当前颜色空间需要的原生像素值。
"""

from abc import ABC, abstractmethod
from typing import Any

from .color import AnyColor, Colorspace


class AbstractColorProcessor(ABC):
    """颜色处理器

    同一个处理器实例内，按输入颜色缓存转换结果，避免在一次绘制中
    重复创建原生颜色对象。
    """

    def __init__(self, colorspace: Colorspace = Colorspace.RGB):
        self.colorspace = colorspace
        self._cache: dict[AnyColor, Any] = {}

    def color_to_native(self, color: AnyColor) -> Any:
        """转换为原生颜色值（先转换到处理器的颜色空间）"""
        if color not in self._cache:
            self._cache[color] = self._to_native(color.convert_to(self.colorspace))
        return self._cache[color]

    @abstractmethod
    def _to_native(self, color: AnyColor) -> Any:
        """把已处于目标颜色空间的颜色转换为原生值"""

    @abstractmethod
    def native_to_color(self, native: Any) -> AnyColor:
        """把原生颜色值转换为抽象颜色"""
