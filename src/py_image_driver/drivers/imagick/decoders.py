"""Wand 解码器。"""

from typing import Any

from wand.image import Image as WandImage

from ...decoders import BinaryImageDecoder, NativeObjectDecoder
from ...drivers.core import Core
from ...exceptions import DecoderError, handle_native_errors
from ...image import Image
from ...models.origin import Origin
from ...utils.logging_helpers import get_logger
from ...utils.message_formatter import MessageFormatter
from ..specializable import DriverKind
from .core import ImagickFrame


logger = get_logger()

# 合并帧会把 JPEG 输出成背景色填充的图像，这些格式跳过合并
SKIP_COALESCE_FORMATS = frozenset({"JPEG"})


def is_palette(native: WandImage) -> bool:
    """ImageMagick 报告的类型以 palette 开头即为调色板图像"""
    return str(native.type).lower().startswith("palette")


def read_exif(native: WandImage) -> dict[str, Any]:
    exif: dict[str, Any] = {}
    for key, value in native.metadata.items():
        if not key.startswith("exif:"):
            continue
        name = key[len("exif:") :]
        exif[name] = int(value) if value.isdigit() else value
    return exif


class ImagickNativeObjectDecoder(NativeObjectDecoder):
    driver_kind = DriverKind.IMAGICK

    def supports(self, value: Any) -> bool:
        return isinstance(value, WandImage)

    @handle_native_errors("Wand 图像解码", DecoderError)
    def decode(self, value: Any) -> Image:
        if not isinstance(value, WandImage):
            raise DecoderError(MessageFormatter.unable_to_decode(value))

        # 必须在合并帧之前读取，合并会改变报告的类型
        indexed = is_palette(value)
        media_type = value.mimetype or Origin().media_type
        exif = read_exif(value)

        with value.clone() as native:
            if native.format in SKIP_COALESCE_FORMATS:
                logger.debug(f"{native.format} 图像跳过帧合并")
            else:
                native.coalesce()

            frames = [
                ImagickFrame(WandImage(image=single), delay=single.delay / 100, dispose=0)
                for single in native.sequence
            ]
            loops = native.loop

        image = Image(self.driver, Core(frames, loops=loops), exif)
        image.origin = Origin(media_type=media_type, indexed=indexed)
        return self.normalize(image)


class ImagickBinaryImageDecoder(BinaryImageDecoder):
    driver_kind = DriverKind.IMAGICK

    @handle_native_errors("Wand 二进制解码", DecoderError)
    def decode(self, value: Any) -> Image:
        with WandImage(blob=bytes(value)) as native:
            return self.driver.specialize(NativeObjectDecoder()).decode(native)


SPECIALIZED = {
    NativeObjectDecoder: ImagickNativeObjectDecoder,
    BinaryImageDecoder: ImagickBinaryImageDecoder,
}
