"""颜色修改器。"""

from dataclasses import dataclass

from ..colors import Colorspace
from .base import AbstractModifier


@dataclass
class GreyscaleModifier(AbstractModifier):
    """转为灰度（保留 alpha）"""


@dataclass
class InvertModifier(AbstractModifier):
    """反相（保留 alpha）"""


@dataclass
class ColorspaceModifier(AbstractModifier):
    """转换颜色空间"""

    target: Colorspace = Colorspace.RGB
