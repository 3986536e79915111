"""图像解码器。

BinaryImageDecoder 与 NativeObjectDecoder 由各驱动特化；
文件路径、文件对象、Data URI 与 Base64 解码器是通用的，
读出字节后交给当前驱动的二进制解码器。
"""

import base64
import binascii
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any
from urllib.parse import unquote_to_bytes

from ..exceptions import DecoderError
from ..utils.logging_helpers import get_logger
from ..utils.message_formatter import MessageFormatter
from .base import AbstractImageDecoder


if TYPE_CHECKING:
    from ..image import Image


logger = get_logger()

DATA_URI_PATTERN = re.compile(
    r"^data:(?P<media_type>[\w.+-]+/[\w.+-]+)?(?P<params>(?:;[\w-]+=[^;,]*)*)"
    r"(?P<base64>;base64)?,(?P<data>.*)$",
    re.DOTALL,
)
BASE64_PATTERN = re.compile(r"^[A-Za-z0-9+/\r\n]+={0,2}$")

# 超过该长度的字符串不会被当作文件路径
MAX_PATH_LENGTH = 4096


@dataclass
class NativeObjectDecoder(AbstractImageDecoder):
    """后端原生图像对象解码器（由驱动特化）"""

    def supports(self, value: Any) -> bool:
        return False


@dataclass
class BinaryImageDecoder(AbstractImageDecoder):
    """二进制图像数据解码器（由驱动特化）"""

    def supports(self, value: Any) -> bool:
        return isinstance(value, bytes | bytearray | memoryview) and len(value) > 0


@dataclass
class ImageObjectDecoder(AbstractImageDecoder):
    """已解码的 Image 对象，原样返回"""

    generic_fallback = True

    def supports(self, value: Any) -> bool:
        from ..image import Image

        return isinstance(value, Image)

    def decode(self, value: Any) -> "Image":
        return value


@dataclass
class FilePointerImageDecoder(AbstractImageDecoder):
    """类文件对象解码器"""

    generic_fallback = True

    def supports(self, value: Any) -> bool:
        return hasattr(value, "read") and hasattr(value, "seek")

    def decode(self, value: Any) -> "Image":
        try:
            value.seek(0)
            data = value.read()
        except (OSError, ValueError) as e:
            raise DecoderError(MessageFormatter.operation_failed("读取文件对象", error=e)) from e

        if isinstance(data, str) or not data:
            raise DecoderError(MessageFormatter.unable_to_decode(value))

        return self.decode_binary(data)


@dataclass
class FilePathImageDecoder(AbstractImageDecoder):
    """文件路径解码器"""

    generic_fallback = True

    def supports(self, value: Any) -> bool:
        if isinstance(value, Path):
            return True
        if not isinstance(value, str) or len(value) > MAX_PATH_LENGTH or "\0" in value:
            return False
        try:
            return Path(value).is_file()
        except OSError:
            return False

    def decode(self, value: Any) -> "Image":
        path = Path(value)
        if not path.is_file():
            raise DecoderError(MessageFormatter.file_not_found(path))

        try:
            data = path.read_bytes()
        except OSError as e:
            raise DecoderError(MessageFormatter.operation_failed("读取文件", path, e)) from e

        image = self.decode_binary(data)
        image.origin.file_path = path
        return image


@dataclass
class DataUriImageDecoder(AbstractImageDecoder):
    """Data URI 解码器"""

    generic_fallback = True

    def supports(self, value: Any) -> bool:
        return isinstance(value, str) and DATA_URI_PATTERN.match(value) is not None

    def decode(self, value: Any) -> "Image":
        match = DATA_URI_PATTERN.match(value)
        if match is None:
            raise DecoderError(MessageFormatter.unable_to_decode(value))

        payload = match.group("data")
        if match.group("base64"):
            try:
                data = base64.b64decode(payload, validate=True)
            except (binascii.Error, ValueError) as e:
                raise DecoderError(f"Data URI 中的 Base64 数据无效: {e}") from e
        else:
            data = unquote_to_bytes(payload)

        return self.decode_binary(data)


@dataclass
class Base64ImageDecoder(AbstractImageDecoder):
    """Base64 字符串解码器"""

    generic_fallback = True

    def supports(self, value: Any) -> bool:
        return (
            isinstance(value, str)
            and len(value) >= 8
            and BASE64_PATTERN.match(value) is not None
        )

    def decode(self, value: Any) -> "Image":
        try:
            data = base64.b64decode(value, validate=False)
        except (binascii.Error, ValueError) as e:
            raise DecoderError(f"Base64 数据无效: {e}") from e

        return self.decode_binary(data)
