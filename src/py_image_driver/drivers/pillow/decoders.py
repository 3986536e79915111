"""Pillow 解码器。"""

import io
from typing import Any

from PIL import ExifTags, ImageSequence
from PIL import Image as PILImage

from ...decoders import BinaryImageDecoder, NativeObjectDecoder
from ...drivers.core import Core
from ...exceptions import DecoderError, handle_native_errors
from ...image import Image
from ...models.constants import get_mime_type
from ...models.origin import Origin
from ...utils.logging_helpers import get_logger
from ...utils.message_formatter import MessageFormatter
from ..specializable import DriverKind
from .core import PillowFrame


logger = get_logger()

# 调色板模式
PALETTE_MODES = ("P", "PA")


def read_exif(native: PILImage.Image) -> dict[str, Any]:
    """读取 EXIF，键为标签名称"""
    try:
        exif = native.getexif()
    except (OSError, ValueError, SyntaxError) as e:
        logger.debug(f"读取 EXIF 失败，忽略: {e}")
        return {}
    return {ExifTags.TAGS.get(tag, str(tag)): value for tag, value in exif.items()}


class PillowNativeObjectDecoder(NativeObjectDecoder):
    driver_kind = DriverKind.PILLOW

    def supports(self, value: Any) -> bool:
        return isinstance(value, PILImage.Image)

    @handle_native_errors("Pillow 图像解码", DecoderError)
    def decode(self, value: Any) -> Image:
        if not isinstance(value, PILImage.Image):
            raise DecoderError(MessageFormatter.unable_to_decode(value))

        # 必须在转换为 RGBA 之前读取
        indexed = value.mode in PALETTE_MODES

        frames = []
        # Pillow 读取 GIF 时已按处置方式合成每一帧
        for frame in ImageSequence.Iterator(value):
            frames.append(
                PillowFrame(
                    frame.convert("RGBA"),
                    delay=frame.info.get("duration", 0) / 1000,
                    dispose=getattr(frame, "disposal_method", 0),
                )
            )
        if getattr(value, "n_frames", 1) > 1:
            value.seek(0)

        # 没有 NETSCAPE 扩展的 GIF 记为 0，重新编码后变为无限循环
        image = Image(self.driver, Core(frames, loops=value.info.get("loop", 0)), read_exif(value))
        image.origin = Origin(
            media_type=get_mime_type(value.format) if value.format else Origin().media_type,
            indexed=indexed,
        )
        return self.normalize(image)


class PillowBinaryImageDecoder(BinaryImageDecoder):
    driver_kind = DriverKind.PILLOW

    @handle_native_errors("Pillow 二进制解码", DecoderError)
    def decode(self, value: Any) -> Image:
        with PILImage.open(io.BytesIO(bytes(value))) as native:
            return self.driver.specialize(NativeObjectDecoder()).decode(native)


SPECIALIZED = {
    NativeObjectDecoder: PillowNativeObjectDecoder,
    BinaryImageDecoder: PillowBinaryImageDecoder,
}
