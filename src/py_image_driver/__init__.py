"""与驱动无关的 Python 图像处理库。

统一的图像门面，底层可切换 Pillow 或 ImageMagick（Wand）驱动。
"""

__version__ = "0.1.0"
__author__ = "crper"
__description__ = "驱动无关的图像处理库，支持 Pillow 与 ImageMagick"

# 核心功能导出
from .colors import CmykColor, Color, Colorspace
from .encoded_image import EncodedImage
from .exceptions import (
    AnimationError,
    ColorError,
    DecoderError,
    DriverError,
    EncoderError,
    FontError,
    GeometryError,
    ImageError,
    InputError,
    NotSupportedError,
)
from .image import Image
from .image_manager import ImageManager
from .typography import Alignment, Font, FontFactory, VerticalAlignment


__all__ = [
    "Alignment",
    "AnimationError",
    "CmykColor",
    "Color",
    "ColorError",
    "Colorspace",
    "DecoderError",
    "DriverError",
    "EncodedImage",
    "EncoderError",
    "Font",
    "FontError",
    "FontFactory",
    "GeometryError",
    "Image",
    "ImageError",
    "ImageManager",
    "InputError",
    "NotSupportedError",
    "VerticalAlignment",
    "get_version",
]


def get_version() -> str:
    """获取版本号。"""
    return __version__
