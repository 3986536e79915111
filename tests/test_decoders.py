"""输入解码测试。"""

import base64
import io
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
from PIL import Image as PILImage

from py_image_driver import Color, DecoderError, Image, ImageManager
from py_image_driver.decoders import AbstractDecoder
from py_image_driver.drivers.input_handler import InputHandler
from tests.conftest import make_image_bytes


@dataclass
class RecordingDecoder(AbstractDecoder):
    """记录调用情况的测试解码器"""

    claims: bool = False
    result: Any = None
    calls: list | None = None

    generic_fallback = True

    def supports(self, value: Any) -> bool:
        self.calls.append(("supports", self.result))
        return self.claims

    def decode(self, value: Any) -> Any:
        self.calls.append(("decode", self.result))
        return self.result


class TestInputHandler:
    """候选解码器顺序测试"""

    def test_first_claimant_wins(self, pillow_manager: ImageManager):
        """第一个认领者解码，之后的候选者不再被询问"""
        calls: list = []
        decoders = [
            RecordingDecoder(False, "a", calls),
            RecordingDecoder(True, "b", calls),
            RecordingDecoder(True, "c", calls),
        ]

        result = InputHandler(decoders, driver=pillow_manager.driver).handle("anything")

        assert result == "b"
        assert calls == [("supports", "a"), ("supports", "b"), ("decode", "b")]

    def test_no_claimant(self):
        with pytest.raises(DecoderError):
            InputHandler([RecordingDecoder(False, "a", [])]).handle("anything")

    def test_unknown_input(self, pillow_manager: ImageManager):
        with pytest.raises(DecoderError):
            pillow_manager.read(12345)

    def test_color_is_not_an_image(self, pillow_manager: ImageManager):
        """颜色输入可以被解码，但 read() 只接受图像"""
        assert pillow_manager.driver.handle_input("ff0000") == Color(255, 0, 0)
        with pytest.raises(DecoderError):
            pillow_manager.read("ff0000")


class TestImageDecoders:
    """各类图像输入测试"""

    def test_binary(self, manager: ImageManager, red_png: bytes):
        image = manager.read(red_png)
        assert image.size == (20, 10)
        assert image.origin.media_type == "image/png"
        assert image.pick_color(0, 0) == Color(255, 0, 0)

    def test_file_path(self, manager: ImageManager, sample_files: dict[str, Path]):
        image = manager.read(sample_files["png"])
        assert image.size == (40, 30)
        assert image.origin.file_path == sample_files["png"]

        image = manager.read(str(sample_files["jpeg"]))
        assert image.origin.media_type == "image/jpeg"
        assert image.origin.file_extension == "jpg"

    def test_missing_file(self, pillow_manager: ImageManager, temp_dir: Path):
        with pytest.raises(DecoderError):
            pillow_manager.read(temp_dir / "missing.png")

    def test_file_pointer(self, manager: ImageManager, red_png: bytes):
        pointer = io.BytesIO(red_png)
        pointer.read(4)
        image = manager.read(pointer)
        assert image.size == (20, 10)

    def test_data_uri(self, manager: ImageManager, red_png: bytes):
        uri = "data:image/png;base64," + base64.b64encode(red_png).decode()
        assert manager.read(uri).size == (20, 10)

    def test_base64(self, manager: ImageManager, red_png: bytes):
        assert manager.read(base64.b64encode(red_png).decode()).size == (20, 10)

    def test_image_object_passthrough(self, pillow_manager: ImageManager, red_png: bytes):
        image = pillow_manager.read(red_png)
        assert pillow_manager.read(image) is image

    def test_native_object(self, pillow_manager: ImageManager):
        native = PILImage.new("RGB", (7, 3), "blue")
        image = pillow_manager.read(native)
        assert isinstance(image, Image)
        assert image.size == (7, 3)
        assert image.pick_color(1, 1) == Color(0, 0, 255)

    def test_corrupt_binary(self, pillow_manager: ImageManager):
        """测试损坏的二进制数据抛出 DecoderError"""
        with pytest.raises(DecoderError):
            pillow_manager.read(b"\x89PNG\r\n\x1a\nbroken")

    def test_palette_origin(self, pillow_manager: ImageManager, sample_files: dict[str, Path]):
        """测试记录原图是否为调色板图像"""
        assert pillow_manager.read(sample_files["palette"]).origin.indexed
        assert not pillow_manager.read(sample_files["png"]).origin.indexed

    def test_decode_animation_disabled(self, sample_files: dict[str, Path]):
        manager = ImageManager("pillow", decode_animation=False)
        image = manager.read(sample_files["gif"])
        assert len(image) == 1

    def test_explicit_decoders(self, pillow_manager: ImageManager):
        """显式指定解码器列表时只使用这些解码器"""
        from py_image_driver.decoders import FilePathImageDecoder

        with pytest.raises(DecoderError):
            pillow_manager.read(make_image_bytes(), decoders=[FilePathImageDecoder])

    def test_single_decoder_class(self, manager: ImageManager, sample_files: dict[str, Path]):
        """可以直接传入单个解码器类"""
        from py_image_driver.decoders import FilePathImageDecoder

        image = manager.read(sample_files["png"], FilePathImageDecoder)
        assert image.size == (40, 30)

    def test_single_decoder_instance(self, manager: ImageManager, sample_files: dict[str, Path]):
        """可以直接传入单个解码器实例"""
        from py_image_driver.decoders import FilePathImageDecoder

        image = manager.read(sample_files["png"], FilePathImageDecoder())
        assert image.size == (40, 30)

    def test_single_decoder_rejects_input(self, pillow_manager: ImageManager, sample_files: dict[str, Path]):
        from py_image_driver.decoders import BinaryImageDecoder

        with pytest.raises(DecoderError):
            pillow_manager.read(sample_files["png"], BinaryImageDecoder())

    def test_decoder_list_falls_through(self, manager: ImageManager, sample_files: dict[str, Path]):
        """列表中不认领的解码器被跳过"""
        from py_image_driver.decoders import BinaryImageDecoder, FilePathImageDecoder

        image = manager.read(str(sample_files["png"]), [BinaryImageDecoder(), FilePathImageDecoder()])
        assert image.size == (40, 30)
