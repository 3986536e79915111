"""ImageMagick 解码策略测试。"""

import io
import logging
from types import SimpleNamespace

import pytest
from PIL import Image as PILImage
from PIL import ImageDraw

pytest.importorskip("wand.image")

from wand.image import Image as WandImage  # noqa: E402

from py_image_driver import Color, ImageManager  # noqa: E402
from py_image_driver.drivers.imagick.decoders import SKIP_COALESCE_FORMATS, is_palette  # noqa: E402
from tests.conftest import make_animated_gif, make_image_bytes  # noqa: E402


DECODER_LOGGER = "py_image_driver.drivers.imagick.decoders"


def assert_close(color: Color, expected: Color, tolerance: int = 40) -> None:
    for actual_channel, expected_channel in zip(color.to_tuple()[:3], expected.to_tuple()[:3], strict=True):
        assert abs(actual_channel - expected_channel) <= tolerance, (color, expected)


def palette_png() -> bytes:
    """红蓝两色的调色板 PNG"""
    image = PILImage.new("RGB", (16, 16), "red")
    ImageDraw.Draw(image).rectangle([0, 0, 7, 7], fill="blue")
    buffer = io.BytesIO()
    image.convert("P", palette=PILImage.Palette.ADAPTIVE, colors=2).save(buffer, "PNG")
    return buffer.getvalue()


def truecolor_png() -> bytes:
    """超过 256 种颜色的真彩色 PNG"""
    image = PILImage.new("RGB", (32, 32))
    image.putdata([(x * 8, y * 8, (x + y) * 4) for y in range(32) for x in range(32)])
    buffer = io.BytesIO()
    image.save(buffer, "PNG")
    return buffer.getvalue()


@pytest.fixture
def imagick_manager() -> ImageManager:
    return ImageManager("imagick")


class TestCoalescePolicy:
    """JPEG 跳过帧合并"""

    def test_jpeg_in_skip_formats(self):
        assert "JPEG" in SKIP_COALESCE_FORMATS
        assert "GIF" not in SKIP_COALESCE_FORMATS

    def test_jpeg_decodes_single_frame(self, imagick_manager: ImageManager, caplog):
        data = make_image_bytes((20, 10), "red", "JPEG", mode="RGB")

        with caplog.at_level(logging.DEBUG, logger=DECODER_LOGGER):
            image = imagick_manager.read(data)

        assert len(image) == 1
        assert image.size == (20, 10)
        assert_close(image.pick_color(10, 5), Color(255, 0, 0))
        assert "跳过帧合并" in caplog.text

    def test_gif_is_coalesced(self, imagick_manager: ImageManager, caplog):
        with caplog.at_level(logging.DEBUG, logger=DECODER_LOGGER):
            image = imagick_manager.read(make_animated_gif(["red", "blue"], [100, 100]))

        assert len(image) == 2
        assert "跳过帧合并" not in caplog.text


class TestPaletteDetection:
    """调色板图像识别"""

    def test_palette_png(self):
        with WandImage(blob=palette_png()) as native:
            assert is_palette(native)

    def test_truecolor_png(self):
        with WandImage(blob=truecolor_png()) as native:
            assert not is_palette(native)

    @pytest.mark.parametrize(
        "image_type,expected",
        [("Palette", True), ("PaletteAlpha", True), ("palettematte", True), ("TrueColor", False)],
    )
    def test_type_is_case_insensitive(self, image_type: str, expected: bool):
        assert is_palette(SimpleNamespace(type=image_type)) is expected

    def test_palette_origin(self, imagick_manager: ImageManager):
        assert imagick_manager.read(palette_png()).origin.indexed
        assert not imagick_manager.read(truecolor_png()).origin.indexed
