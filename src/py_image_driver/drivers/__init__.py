"""驱动模块包。

具体驱动（pillow、imagick）按需导入，Wand 是可选依赖。
"""

from .specializable import DriverKind, Specializable


__all__ = ["DriverKind", "Specializable"]
