"""ImageMagick 驱动（通过 Wand）。

Wand 原生支持图像序列、帧合并、自动方向与多帧写入。
"""

from wand.color import Color as WandColor
from wand.image import Image as WandImage
from wand.version import MAGICK_VERSION_INFO

from ...colors import Colorspace
from ...exceptions import GeometryError
from ...utils.logging_helpers import get_logger
from ..abstract import AbstractDriver
from ..specializable import DriverKind
from . import analyzers, decoders, encoders, modifiers
from .core import ImagickFrame
from .processors import ImagickColorProcessor, ImagickFontProcessor


logger = get_logger()


class ImagickDriver(AbstractDriver):
    kind = DriverKind.IMAGICK
    id = "imagick"
    SPECIALIZED = {
        **decoders.SPECIALIZED,
        **encoders.SPECIALIZED,
        **modifiers.SPECIALIZED,
        **analyzers.SPECIALIZED,
    }

    def check_health(self) -> None:
        # 能导入 wand 即说明 MagickWand 库已加载
        logger.debug(f"ImageMagick 版本: {'.'.join(map(str, MAGICK_VERSION_INFO))}")

    def new_frame(self, width: int, height: int, delay: float = 0) -> ImagickFrame:
        if width <= 0 or height <= 0:
            raise GeometryError(f"画布尺寸无效: {width}x{height}")
        native = WandImage(width=width, height=height, background=WandColor("transparent"))
        return ImagickFrame(native, delay)

    def new_color_processor(self, colorspace: Colorspace) -> ImagickColorProcessor:
        return ImagickColorProcessor(colorspace)

    def font_processor(self) -> ImagickFontProcessor:
        return ImagickFontProcessor()
