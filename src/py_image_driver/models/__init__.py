"""数据模型包。

图像格式常量、来源信息与对外输出的图像摘要。
"""

from .constants import (
    ImageFormats,
    MagicNumbers,
    detect_format,
    get_extension,
    get_format_alias,
    get_mime_type,
    supports_transparency,
)
from .image_info import FrameInfo, ImageInfo
from .origin import Origin


__all__ = [
    "FrameInfo",
    "ImageFormats",
    "ImageInfo",
    "MagicNumbers",
    "Origin",
    "detect_format",
    "get_extension",
    "get_format_alias",
    "get_mime_type",
    "supports_transparency",
]
