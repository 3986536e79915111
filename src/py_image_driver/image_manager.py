"""图像管理器。

与驱动无关的入口：选择驱动，读取、创建图像与动画。
"""

from typing import Any

from .colors import AnyColor
from .drivers.abstract import AbstractDriver
from .exceptions import DecoderError, DriverError, InputError
from .image import Image
from .utils.logging_helpers import get_logger
from .utils.message_formatter import MessageFormatter


logger = get_logger()

DRIVERS = ("pillow", "imagick")


def create_driver(driver: str | AbstractDriver = "pillow", **options: Any) -> AbstractDriver:
    """按名称创建驱动

    Raises:
        InputError: 驱动名称或配置项未知
        DriverError: 驱动依赖的后端库不可用
    """
    if isinstance(driver, AbstractDriver):
        driver.config.set_options(**options)
        return driver

    match str(driver).lower():
        case "pillow" | "gd":
            from .drivers.pillow import PillowDriver

            return PillowDriver(**options)
        case "imagick" | "imagemagick" | "wand":
            try:
                from .drivers.imagick import ImagickDriver
            except ImportError as e:
                raise DriverError(f"ImageMagick 驱动不可用，需要安装 Wand 与 MagickWand: {e}") from e

            return ImagickDriver(**options)
        case _:
            raise InputError(f"未知的驱动: {driver}，可选: {', '.join(DRIVERS)}")


class ImageManager:
    """图像管理器

    Example:
        >>> manager = ImageManager("pillow", auto_orientation=False)
        >>> image = manager.read("photo.jpg")
        >>> manager.create(100, 100).draw_circle(50, 50, 20, "ff0000")
    """

    def __init__(self, driver: str | AbstractDriver = "pillow", **options: Any):
        """初始化管理器

        Args:
            driver: 驱动名称（pillow/imagick）或驱动实例
            **options: 驱动配置项（auto_orientation、decode_animation、
                blending_color、strip）
        """
        self.driver = create_driver(driver, **options)
        logger.debug(f"使用驱动: {self.driver.id}")

    @classmethod
    def with_driver(cls, driver: str | AbstractDriver, **options: Any) -> "ImageManager":
        return cls(driver, **options)

    @classmethod
    def pillow(cls, **options: Any) -> "ImageManager":
        return cls("pillow", **options)

    @classmethod
    def imagick(cls, **options: Any) -> "ImageManager":
        return cls("imagick", **options)

    def create(self, width: int, height: int) -> Image:
        """创建透明画布"""
        return self.driver.create_image(width, height)

    def read(self, value: Any, decoders: Any = None) -> Image:
        """读取图像

        Args:
            value: 文件路径、二进制数据、文件对象、Data URI、Base64、原生图像对象等
            decoders: 单个解码器或候选解码器列表（类或实例），按顺序尝试

        Raises:
            DecoderError: 输入无法解码为图像
        """
        result = self.driver.handle_input(value, decoders)
        if not isinstance(result, Image):
            raise DecoderError(MessageFormatter.unable_to_decode(value))
        return result

    def color(self, value: Any) -> AnyColor:
        """解析颜色"""
        return self.driver.handle_color(value)

    def animate(self, frames: list[tuple[Any, float]], loops: int = 0) -> Image:
        """由 (输入, 延迟秒数) 序列创建动画

        Example:
            >>> manager.animate([("a.png", 0.25), ("b.png", 0.5)], loops=3)
        """
        return self.driver.create_animation(frames, loops)

    def __repr__(self) -> str:
        return f"ImageManager(driver={self.driver.id!r})"
