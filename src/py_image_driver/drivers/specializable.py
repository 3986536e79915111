"""可特化组件基类。

解码器、编码器、修改器与分析器都以通用数据类声明操作，
各驱动在 SPECIALIZED 表中登记自己的特化子类。驱动解析组件时只做静态查表：
{Pillow 变体, Wand 变体, 通用回退}，查不到且没有通用回退即不支持。
"""

from enum import Enum
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from .abstract import AbstractDriver


class DriverKind(str, Enum):
    """驱动类型"""

    PILLOW = "pillow"
    IMAGICK = "imagick"


class Specializable:
    """可特化组件

    Attributes:
        driver_kind: 特化子类所属的驱动类型，通用组件为 None
        generic_fallback: 没有特化子类时是否允许直接使用通用实现
    """

    driver_kind: DriverKind | None = None
    generic_fallback = False

    driver: "AbstractDriver"

    @property
    def is_specialized(self) -> bool:
        return self.driver_kind is not None

    def bind(self, driver: "AbstractDriver") -> "Specializable":
        """绑定执行该组件的驱动"""
        self.driver = driver
        return self
