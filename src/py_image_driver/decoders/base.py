"""解码器基类。"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..drivers.specializable import Specializable


if TYPE_CHECKING:
    from ..image import Image


@dataclass
class AbstractDecoder(Specializable):
    """解码器

    supports() 只做廉价的认领检查（类型、文件头、类名），
    decode() 负责真正的解码与结构校验。
    """

    def supports(self, value: Any) -> bool:
        raise NotImplementedError

    def decode(self, value: Any) -> Any:
        raise NotImplementedError


@dataclass
class AbstractImageDecoder(AbstractDecoder):
    """图像解码器，提供解码后的统一处理"""

    def normalize(self, image: "Image") -> "Image":
        """按驱动配置丢弃动画帧、校正方向"""
        from ..modifiers import AlignRotationModifier, RemoveAnimationModifier

        if not self.driver.config.decode_animation:
            image.modify(RemoveAnimationModifier())
        if self.driver.config.auto_orientation:
            image.modify(AlignRotationModifier())
        return image

    def decode_binary(self, data: bytes) -> "Image":
        """交给当前驱动的二进制解码器"""
        from .images import BinaryImageDecoder

        return self.driver.specialize(BinaryImageDecoder()).decode(data)
