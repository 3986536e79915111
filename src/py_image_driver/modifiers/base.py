"""修改器基类。"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..drivers.specializable import Specializable


if TYPE_CHECKING:
    from ..image import Image


@dataclass
class AbstractModifier(Specializable):
    """修改器：apply(image) -> image

    通用类只声明操作及其参数，驱动特化子类提供实现。
    """

    def apply(self, image: "Image") -> "Image":
        raise NotImplementedError

    def native_color(self, image: "Image", value: Any) -> Any:
        """解析颜色输入，并按图像颜色空间转换为原生颜色"""
        color = self.driver.handle_color(value)
        return self.driver.color_processor(image.colorspace).color_to_native(color)
