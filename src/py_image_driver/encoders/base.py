"""编码器基类。"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from ..drivers.specializable import Specializable
from ..exceptions import EncoderError


if TYPE_CHECKING:
    from ..encoded_image import EncodedImage
    from ..image import Image


def check_quality(quality: int) -> None:
    """校验编码质量

    Raises:
        EncoderError: 质量不在 1-100 之间
    """
    if isinstance(quality, bool) or not isinstance(quality, int) or not 1 <= quality <= 100:
        raise EncoderError(f"编码质量必须是 1-100 之间的整数，得到: {quality!r}")


@dataclass
class AbstractEncoder(Specializable):
    """编码器：encode(image) -> EncodedImage

    编码只读取图像，不修改调用方的图像。
    """

    format_name: ClassVar[str] = ""
    mime_type: ClassVar[str] = "application/octet-stream"

    def encode(self, image: "Image") -> "EncodedImage":
        raise NotImplementedError

    def should_strip(self, strip: bool | None) -> bool:
        """显式设置优先，否则读取驱动配置"""
        return self.driver.config.strip if strip is None else strip
