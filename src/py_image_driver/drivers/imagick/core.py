"""Wand 帧。

每帧持有一个独立的单帧 Wand 图像，由解码时的图像序列逐帧复制而来。
"""

from wand.image import Image as WandImage

from ...colors import Colorspace
from ..core import AbstractFrame


class ImagickFrame(AbstractFrame):
    native: WandImage

    @property
    def size(self) -> tuple[int, int]:
        return (self.native.width, self.native.height)

    @property
    def colorspace(self) -> Colorspace:
        if self.native.colorspace == "cmyk":
            return Colorspace.CMYK
        return Colorspace.RGB

    def clone(self) -> "ImagickFrame":
        return ImagickFrame(self.native.clone(), self.delay, self.dispose)

    def close(self) -> None:
        self.native.close()
