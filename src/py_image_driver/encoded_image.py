"""编码结果。"""

import base64
import io
from pathlib import Path

import humanize

from .exceptions import EncoderError
from .models.constants import ImageFormats
from .utils.logging_helpers import get_logger


logger = get_logger()


class EncodedImage:
    """编码后的图像数据

    Attributes:
        data: 编码后的字节
        media_type: MIME 类型
    """

    def __init__(self, data: bytes, media_type: str = "application/octet-stream"):
        self.data = bytes(data)
        self.media_type = media_type

    @property
    def size(self) -> int:
        """字节数"""
        return len(self.data)

    @property
    def format(self) -> str | None:
        return ImageFormats.from_mime_type(self.media_type)

    @property
    def extension(self) -> str | None:
        return ImageFormats.get_extension(self.format) if self.format else None

    def get_size_human(self) -> str:
        """人类可读的大小"""
        return humanize.naturalsize(self.size, binary=True)

    def to_bytes(self) -> bytes:
        return self.data

    def to_file_pointer(self) -> io.BytesIO:
        """以新的内存文件对象返回数据（位置在开头）"""
        return io.BytesIO(self.data)

    def to_data_uri(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.media_type};base64,{encoded}"

    def save(self, path: str | Path) -> Path:
        """写入文件，必要时创建父目录

        Raises:
            EncoderError: 写入失败
        """
        target = Path(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(self.data)
        except OSError as e:
            raise EncoderError(f"无法写入文件 {target}: {e}") from e

        logger.debug(f"已写入 {target} ({self.get_size_human()})")
        return target

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"EncodedImage(media_type={self.media_type!r}, size={self.size})"
