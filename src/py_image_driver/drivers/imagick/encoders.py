"""Wand 编码器。

静态路径与 Pillow 相同：复制当前帧、设置格式参数、输出字节、释放副本。
多帧 GIF 由 Wand 原生写入图像序列。
"""

from collections.abc import Callable

from wand.image import Image as WandImage

from ...encoded_image import EncodedImage
from ...encoders import BmpEncoder, GifEncoder, JpegEncoder, PngEncoder, WebpEncoder
from ...exceptions import EncoderError, handle_native_errors
from ...image import Image
from ...utils.gif_builder import check_loops
from ...utils.message_formatter import MessageFormatter
from ..core import AbstractFrame
from ..specializable import DriverKind


def encode_frame(
    frame: AbstractFrame,
    format_name: str,
    prepare: Callable[[WandImage], None] | None = None,
) -> bytes:
    """把一帧的副本编码为字节"""
    clone = frame.clone()
    try:
        native = clone.native
        native.format = format_name
        if prepare:
            prepare(native)
        return native.make_blob(format_name)
    finally:
        clone.close()


class ImagickJpegEncoder(JpegEncoder):
    driver_kind = DriverKind.IMAGICK

    def _prepare(self, native: WandImage) -> None:
        processor = self.driver.color_processor()
        native.background_color = processor.color_to_native(self.driver.blending_color())
        native.alpha_channel = "remove"
        native.compression_quality = self.quality
        native.interlace_scheme = "plane" if self.progressive else "no"
        if self.should_strip(self.strip):
            native.strip()

    @handle_native_errors("JPEG 编码", EncoderError)
    def encode(self, image: Image) -> EncodedImage:
        return EncodedImage(encode_frame(image.frame(0), "jpeg", self._prepare), self.mime_type)


class ImagickPngEncoder(PngEncoder):
    driver_kind = DriverKind.IMAGICK

    def _prepare(self, native: WandImage) -> None:
        native.interlace_scheme = "png" if self.interlaced else "no"
        if self.indexed:
            native.quantize(
                number_colors=256,
                colorspace_type="srgb",
                treedepth=0,
                dither=False,
                measure_error=False,
            )
            native.type = "palettealpha" if native.alpha_channel else "palette"

    @handle_native_errors("PNG 编码", EncoderError)
    def encode(self, image: Image) -> EncodedImage:
        return EncodedImage(encode_frame(image.frame(0), "png", self._prepare), self.mime_type)


class ImagickGifEncoder(GifEncoder):
    driver_kind = DriverKind.IMAGICK

    def _prepare(self, native: WandImage) -> None:
        native.interlace_scheme = "gif" if self.interlaced else "no"

    @handle_native_errors("GIF 编码", EncoderError)
    def encode(self, image: Image) -> EncodedImage:
        if not image.is_animated:
            return EncodedImage(encode_frame(image.frame(0), "gif", self._prepare), self.mime_type)

        return EncodedImage(self._encode_animated(image), self.mime_type)

    def _encode_animated(self, image: Image) -> bytes:
        container = WandImage()
        try:
            for frame in image:
                container.sequence.append(frame.native)
            for index, frame in enumerate(image):
                # Wand 以 1/100 秒为单位记录帧延迟
                container.sequence[index].delay = round(frame.delay * 100)
            container.loop = check_loops(image.loops)
            container.format = "gif"
            self._prepare(container)
            return container.make_blob("gif")
        except Exception as e:
            raise EncoderError(MessageFormatter.unable_to_encode("GIF 动画", e)) from e
        finally:
            container.close()


class ImagickWebpEncoder(WebpEncoder):
    driver_kind = DriverKind.IMAGICK

    def _prepare(self, native: WandImage) -> None:
        native.compression_quality = self.quality
        if self.should_strip(self.strip):
            native.strip()

    @handle_native_errors("WEBP 编码", EncoderError)
    def encode(self, image: Image) -> EncodedImage:
        return EncodedImage(encode_frame(image.frame(0), "webp", self._prepare), self.mime_type)


class ImagickBmpEncoder(BmpEncoder):
    driver_kind = DriverKind.IMAGICK

    @handle_native_errors("BMP 编码", EncoderError)
    def encode(self, image: Image) -> EncodedImage:
        return EncodedImage(encode_frame(image.frame(0), "bmp"), self.mime_type)


SPECIALIZED = {
    JpegEncoder: ImagickJpegEncoder,
    PngEncoder: ImagickPngEncoder,
    GifEncoder: ImagickGifEncoder,
    WebpEncoder: ImagickWebpEncoder,
    BmpEncoder: ImagickBmpEncoder,
}
