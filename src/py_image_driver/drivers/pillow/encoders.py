"""Pillow 编码器。

静态路径：复制当前帧，按格式准备像素，写入内存缓冲区，任何路径上都释放副本。
多帧 GIF 通过 GifBuilder 组装，每帧先经静态路径编码为单帧 GIF。
"""

import io
from collections.abc import Callable
from typing import Any

from PIL import Image as PILImage

from ...config import get_config
from ...encoded_image import EncodedImage
from ...encoders import BmpEncoder, GifEncoder, JpegEncoder, PngEncoder, WebpEncoder
from ...exceptions import EncoderError, handle_native_errors
from ...image import Image
from ...utils.gif_builder import GifBuilder
from ...utils.logging_helpers import get_logger
from ...utils.message_formatter import MessageFormatter
from ..core import AbstractFrame
from ..specializable import DriverKind


logger = get_logger()


def encode_frame(
    frame: AbstractFrame,
    format_name: str,
    prepare: Callable[[PILImage.Image], PILImage.Image] | None = None,
    **params: Any,
) -> bytes:
    """把一帧的副本编码为字节"""
    clone = frame.clone()
    prepared = None
    try:
        prepared = prepare(clone.native) if prepare else clone.native
        buffer = io.BytesIO()
        prepared.save(buffer, format=format_name, **params)
        return buffer.getvalue()
    finally:
        if prepared is not None and prepared is not clone.native:
            prepared.close()
        clone.close()


class PillowJpegEncoder(JpegEncoder):
    driver_kind = DriverKind.PILLOW

    def _flatten(self, native: PILImage.Image) -> PILImage.Image:
        """JPEG 不支持透明度，合成到底色上"""
        blending = self.driver.blending_color()
        background = PILImage.new("RGB", native.size, blending.to_tuple()[:3])
        background.paste(native, mask=native.getchannel("A"))
        return background

    @handle_native_errors("JPEG 编码", EncoderError)
    def encode(self, image: Image) -> EncodedImage:
        data = encode_frame(
            image.frame(0),
            "JPEG",
            self._flatten,
            quality=self.quality,
            progressive=self.progressive,
            optimize=True,
        )
        return EncodedImage(data, self.mime_type)


class PillowPngEncoder(PngEncoder):
    driver_kind = DriverKind.PILLOW

    def _prepare(self, native: PILImage.Image) -> PILImage.Image:
        if self.indexed:
            return native.quantize(256)
        return native

    @handle_native_errors("PNG 编码", EncoderError)
    def encode(self, image: Image) -> EncodedImage:
        if self.interlaced:
            # Pillow 的 PNG 写入器不支持 Adam7 隔行
            logger.debug("Pillow 无法写入隔行 PNG，忽略 interlaced")

        data = encode_frame(
            image.frame(0),
            "PNG",
            self._prepare,
            compress_level=get_config().encoder.PNG_COMPRESS_LEVEL,
        )
        return EncodedImage(data, self.mime_type)


class PillowGifEncoder(GifEncoder):
    driver_kind = DriverKind.PILLOW

    @handle_native_errors("GIF 编码", EncoderError)
    def encode(self, image: Image) -> EncodedImage:
        if not image.is_animated:
            data = encode_frame(image.frame(0), "GIF", interlace=self.interlaced)
            return EncodedImage(data, self.mime_type)

        return EncodedImage(self._encode_animated(image), self.mime_type)

    def _encode_animated(self, image: Image) -> bytes:
        builder = GifBuilder.canvas(image.width, image.height)
        try:
            for frame in image:
                source = encode_frame(frame, "GIF", interlace=self.interlaced)
                builder.add_frame(source, frame.delay, self.interlaced)
            builder.set_loops(image.loops)
            return builder.encode()
        except Exception as e:
            raise EncoderError(MessageFormatter.unable_to_encode("GIF 动画", e)) from e
        finally:
            builder.close()


class PillowWebpEncoder(WebpEncoder):
    driver_kind = DriverKind.PILLOW

    @handle_native_errors("WEBP 编码", EncoderError)
    def encode(self, image: Image) -> EncodedImage:
        data = encode_frame(image.frame(0), "WEBP", quality=self.quality)
        return EncodedImage(data, self.mime_type)


class PillowBmpEncoder(BmpEncoder):
    driver_kind = DriverKind.PILLOW

    @handle_native_errors("BMP 编码", EncoderError)
    def encode(self, image: Image) -> EncodedImage:
        data = encode_frame(image.frame(0), "BMP")
        return EncodedImage(data, self.mime_type)


SPECIALIZED = {
    JpegEncoder: PillowJpegEncoder,
    PngEncoder: PillowPngEncoder,
    GifEncoder: PillowGifEncoder,
    WebpEncoder: PillowWebpEncoder,
    BmpEncoder: PillowBmpEncoder,
}
