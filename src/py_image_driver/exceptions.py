"""图像处理异常模块。

定义统一的异常层级，以及把后端原生异常转换为统一异常的装饰器。
"""

from collections.abc import Callable
from functools import wraps
from typing import TypeVar

from PIL.Image import DecompressionBombError, UnidentifiedImageError

from .utils.logging_helpers import get_logger


logger = get_logger()
T = TypeVar("T")


class ImageError(Exception):
    """图像处理错误基类"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DecoderError(ImageError):
    """解码错误：输入无法识别或结构无效"""

    pass


class EncoderError(ImageError):
    """编码错误：格式编码或动画组装失败，总是保留原始异常"""

    pass


class FontError(ImageError):
    """字体错误：字体参数无效或字体处理器与驱动不匹配"""

    pass


class ColorError(ImageError):
    """颜色错误：颜色值无效或无法解析"""

    pass


class GeometryError(ImageError):
    """几何错误：尺寸或坐标无效"""

    pass


class AnimationError(ImageError):
    """动画错误：帧位置无效等"""

    pass


class DriverError(ImageError):
    """驱动运行时错误：后端库缺失或原生调用失败"""

    pass


class NotSupportedError(ImageError):
    """当前驱动不支持该操作"""

    pass


class InputError(ImageError):
    """参数错误：未知的驱动名称或配置项"""

    pass


def handle_native_errors(
    operation_name: str = "图像处理",
    error_class: type[ImageError] = DriverError,
):
    """把后端原生异常转换为统一异常的装饰器

    已经属于 ImageError 的异常原样抛出，其他异常包装为 error_class，
    并通过 ``raise ... from e`` 保留原始异常。

    Args:
        operation_name: 操作名称，用于日志记录
        error_class: 未识别异常对应的统一异常类型
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except ImageError:
                raise
            except UnidentifiedImageError as e:
                logger.debug(f"{operation_name} - 无法识别图像格式: {e}")
                raise DecoderError(f"无法识别的图像数据: {e}") from e
            except DecompressionBombError as e:
                logger.error(f"{operation_name} - 图像过大: {e}")
                raise DecoderError(f"图像过大，可能存在安全风险: {e}") from e
            except Exception as e:
                logger.error(f"{operation_name} - 后端错误: {e}")
                raise error_class(f"{operation_name}失败: {e}") from e

        return wrapper

    return decorator
