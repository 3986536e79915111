"""输入分发。

按顺序询问候选解码器是否认领输入，第一个认领者负责解码，
之后的候选者不再被调用。
"""

from typing import TYPE_CHECKING, Any

from ..decoders import (
    Base64ImageDecoder,
    BinaryImageDecoder,
    CmykStringColorDecoder,
    ColorObjectDecoder,
    DataUriImageDecoder,
    FilePathImageDecoder,
    FilePointerImageDecoder,
    HexColorDecoder,
    HtmlColornameDecoder,
    ImageObjectDecoder,
    NativeObjectDecoder,
    RgbStringColorDecoder,
    TransparentColorDecoder,
    TupleColorDecoder,
)
from ..decoders.base import AbstractDecoder
from ..exceptions import DecoderError
from ..utils.logging_helpers import get_logger
from ..utils.message_formatter import MessageFormatter


if TYPE_CHECKING:
    from .abstract import AbstractDriver


logger = get_logger()


COLOR_DECODERS: tuple[type[AbstractDecoder], ...] = (
    ColorObjectDecoder,
    TupleColorDecoder,
    HexColorDecoder,
    RgbStringColorDecoder,
    CmykStringColorDecoder,
    TransparentColorDecoder,
    HtmlColornameDecoder,
)

DEFAULT_DECODERS: tuple[type[AbstractDecoder], ...] = (
    NativeObjectDecoder,
    ImageObjectDecoder,
    *COLOR_DECODERS,
    FilePointerImageDecoder,
    FilePathImageDecoder,
    BinaryImageDecoder,
    DataUriImageDecoder,
    Base64ImageDecoder,
)


class InputHandler:
    """输入处理器

    Args:
        decoders: 单个解码器或候选解码器序列（类或实例），None 时使用默认顺序
        driver: 执行解码的驱动
    """

    def __init__(
        self,
        decoders: Any = None,
        driver: "AbstractDriver | None" = None,
    ):
        if decoders is None:
            decoders = DEFAULT_DECODERS
        elif not isinstance(decoders, (list, tuple)):
            decoders = [decoders]
        self.decoders = list(decoders)
        self.driver = driver

    @classmethod
    def with_color_decoders(cls, driver: "AbstractDriver | None" = None) -> "InputHandler":
        return cls(COLOR_DECODERS, driver=driver)

    def handle(self, value: Any) -> Any:
        """解码输入

        Raises:
            DecoderError: 没有解码器认领输入，或认领者解码失败
        """
        for candidate in self.decoders:
            decoder = self._resolve(candidate)
            if decoder.supports(value):
                logger.debug(
                    f"{type(decoder).__name__} 认领输入 "
                    f"{MessageFormatter.describe_input(value)}"
                )
                return decoder.decode(value)

        raise DecoderError(MessageFormatter.unable_to_decode(value))

    def _resolve(self, candidate: Any) -> Any:
        decoder = candidate() if isinstance(candidate, type) else candidate
        if self.driver is None:
            return decoder
        return self.driver.specialize(decoder)
