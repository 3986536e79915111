"""格式编码器（由驱动特化）。"""

from dataclasses import dataclass, field
from typing import ClassVar

from ..config import get_config
from .base import AbstractEncoder, check_quality


@dataclass
class JpegEncoder(AbstractEncoder):
    quality: int = field(default_factory=lambda: get_config().encoder.JPEG_QUALITY)
    progressive: bool = False
    strip: bool | None = None

    format_name: ClassVar[str] = "JPEG"
    mime_type: ClassVar[str] = "image/jpeg"

    def __post_init__(self) -> None:
        check_quality(self.quality)


@dataclass
class PngEncoder(AbstractEncoder):
    interlaced: bool = False
    indexed: bool = False

    format_name: ClassVar[str] = "PNG"
    mime_type: ClassVar[str] = "image/png"


@dataclass
class GifEncoder(AbstractEncoder):
    """GIF 编码器，多帧图像输出为动画"""

    interlaced: bool = False

    format_name: ClassVar[str] = "GIF"
    mime_type: ClassVar[str] = "image/gif"


@dataclass
class WebpEncoder(AbstractEncoder):
    quality: int = field(default_factory=lambda: get_config().encoder.WEBP_QUALITY)
    strip: bool | None = None

    format_name: ClassVar[str] = "WEBP"
    mime_type: ClassVar[str] = "image/webp"

    def __post_init__(self) -> None:
        check_quality(self.quality)


@dataclass
class BmpEncoder(AbstractEncoder):
    format_name: ClassVar[str] = "BMP"
    mime_type: ClassVar[str] = "image/bmp"
