"""动画与方向修改器（通用实现）。"""

import math
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..exceptions import AnimationError, InputError
from ..utils.logging_helpers import get_logger
from .base import AbstractModifier


if TYPE_CHECKING:
    from ..image import Image


logger = get_logger()

PERCENT_PATTERN = re.compile(r"^(?P<percent>\d{1,3})%$")


@dataclass
class RemoveAnimationModifier(AbstractModifier):
    """只保留一帧

    position 为帧序号，或 "0%"-"100%" 的百分比字符串。
    """

    position: int | str = 0

    generic_fallback = True

    def frame_position(self, image: "Image") -> int:
        """解析为帧序号

        Raises:
            InputError: position 格式无效
            AnimationError: 帧序号超出范围
        """
        total = len(image)

        if isinstance(self.position, int) and not isinstance(self.position, bool):
            position = self.position
        elif isinstance(self.position, str) and (match := PERCENT_PATTERN.match(self.position)):
            percent = int(match.group("percent"))
            if percent > 100:
                raise InputError(f"百分比必须在 0-100 之间，得到: {self.position}")
            position = math.ceil(total * percent / 100) - 1 if percent else 0
        else:
            raise InputError(f"帧位置必须是整数或百分比字符串，得到: {self.position!r}")

        if not 0 <= position < total:
            raise AnimationError(f"帧位置超出范围: {position}（共 {total} 帧）")
        return position

    def apply(self, image: "Image") -> "Image":
        position = self.frame_position(image)
        image.core.keep(position)
        logger.debug(f"已移除动画，保留第 {position} 帧")
        return image


@dataclass
class AlignRotationModifier(AbstractModifier):
    """按 EXIF Orientation 校正方向，完成后方向记为 1"""

    generic_fallback = True

    def apply(self, image: "Image") -> "Image":
        orientation = image.exif.get("Orientation")

        match orientation:
            case 2:
                image.flop()
            case 3:
                image.rotate(180)
            case 4:
                image.rotate(180).flop()
            case 5:
                image.rotate(270).flop()
            case 6:
                image.rotate(270)
            case 7:
                image.rotate(90).flop()
            case 8:
                image.rotate(90)
            case _:
                return image

        logger.debug(f"已按 EXIF 方向 {orientation} 校正图像")
        image.exif["Orientation"] = 1
        return image
