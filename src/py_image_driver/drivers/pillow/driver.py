"""Pillow 驱动。

Pillow 每个句柄只有一张真彩色图像，多帧图像拆成独立的 RGBA 帧，
GIF 动画输出由 GifBuilder 组装。
"""

from PIL import Image as PILImage
from PIL import features

from ...colors import Colorspace
from ...exceptions import GeometryError
from ...utils.logging_helpers import get_logger
from ..abstract import AbstractDriver
from ..specializable import DriverKind
from . import analyzers, decoders, encoders, modifiers
from .core import PillowFrame
from .processors import PillowColorProcessor, PillowFontProcessor


logger = get_logger()


class PillowDriver(AbstractDriver):
    kind = DriverKind.PILLOW
    id = "pillow"
    SPECIALIZED = {
        **decoders.SPECIALIZED,
        **encoders.SPECIALIZED,
        **modifiers.SPECIALIZED,
        **analyzers.SPECIALIZED,
    }

    def check_health(self) -> None:
        # Pillow 是必需依赖，这里只提示可选特性
        if not features.check("freetype2"):
            logger.warning("Pillow 未启用 FreeType，文字绘制不可用")

    def new_frame(self, width: int, height: int, delay: float = 0) -> PillowFrame:
        if width <= 0 or height <= 0:
            raise GeometryError(f"画布尺寸无效: {width}x{height}")
        return PillowFrame(PILImage.new("RGBA", (width, height), (255, 255, 255, 0)), delay)

    def new_color_processor(self, colorspace: Colorspace) -> PillowColorProcessor:
        return PillowColorProcessor(colorspace)

    def font_processor(self) -> PillowFontProcessor:
        return PillowFontProcessor()
