"""Pillow 帧。

每帧持有一个独立的 RGBA 模式 PIL 图像。
"""

from PIL import Image as PILImage

from ..core import AbstractFrame


class PillowFrame(AbstractFrame):
    native: PILImage.Image

    @property
    def size(self) -> tuple[int, int]:
        return self.native.size

    def clone(self) -> "PillowFrame":
        return PillowFrame(self.native.copy(), self.delay, self.dispose)

    def close(self) -> None:
        self.native.close()

    def replace(self, native: PILImage.Image) -> "PillowFrame":
        """换用新的原生图像并释放旧图像"""
        previous, self.native = self.native, native
        if previous is not native:
            previous.close()
        return self
