"""按媒体类型、扩展名或来源格式选择编码器。

这些分发编码器只有通用实现：选出具体的格式编码器后交回图像编码，
由驱动解析出特化实现。
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..exceptions import EncoderError
from ..models.constants import ImageFormats
from ..utils.logging_helpers import get_logger
from .base import AbstractEncoder
from .formats import BmpEncoder, GifEncoder, JpegEncoder, PngEncoder, WebpEncoder


if TYPE_CHECKING:
    from ..encoded_image import EncodedImage
    from ..image import Image


logger = get_logger()

ENCODERS: dict[str, type[AbstractEncoder]] = {
    "JPEG": JpegEncoder,
    "PNG": PngEncoder,
    "GIF": GifEncoder,
    "WEBP": WebpEncoder,
    "BMP": BmpEncoder,
}

# 来源格式未知（如新建画布）时使用的格式
DEFAULT_FORMAT = "PNG"


def encoder_for_format(format_name: str | None, options: dict[str, Any]) -> AbstractEncoder:
    """创建指定格式的编码器

    Raises:
        EncoderError: 格式不受支持或编码参数无效
    """
    encoder_class = ENCODERS.get(format_name or "")
    if encoder_class is None:
        raise EncoderError(f"不支持编码为该格式: {format_name}")

    try:
        return encoder_class(**options)
    except TypeError as e:
        raise EncoderError(f"{format_name} 编码参数无效: {e}") from e


@dataclass
class MediaTypeEncoder(AbstractEncoder):
    """按 MIME 类型选择编码器，未指定时使用图像来源的类型"""

    media_type: str | None = None
    options: dict[str, Any] = field(default_factory=dict)

    generic_fallback = True

    def encode(self, image: "Image") -> "EncodedImage":
        media_type = self.media_type or image.origin.media_type
        encoder = encoder_for_format(ImageFormats.from_mime_type(media_type), self.options)
        logger.debug(f"{media_type} -> {type(encoder).__name__}")
        return image.encode(encoder)


@dataclass
class FileExtensionEncoder(AbstractEncoder):
    """按文件扩展名选择编码器，未指定时使用图像来源文件的扩展名"""

    extension: str | None = None
    options: dict[str, Any] = field(default_factory=dict)

    generic_fallback = True

    def encode(self, image: "Image") -> "EncodedImage":
        extension = self.extension or image.origin.file_extension
        if extension is None:
            return image.encode(AutoEncoder(self.options))

        encoder = encoder_for_format(ImageFormats.from_extension(extension), self.options)
        logger.debug(f".{extension.lstrip('.')} -> {type(encoder).__name__}")
        return image.encode(encoder)


@dataclass
class AutoEncoder(AbstractEncoder):
    """按来源格式编码，PNG 保留来源的索引色标记"""

    options: dict[str, Any] = field(default_factory=dict)

    generic_fallback = True

    def encode(self, image: "Image") -> "EncodedImage":
        format_name = image.origin.format or DEFAULT_FORMAT
        options = dict(self.options)
        if format_name == "PNG":
            options.setdefault("indexed", image.origin.indexed)

        encoder = encoder_for_format(format_name, options)
        logger.debug(f"自动选择编码器: {type(encoder).__name__}")
        return image.encode(encoder)
