"""Pillow 驱动包。"""

from .driver import PillowDriver


__all__ = ["PillowDriver"]
