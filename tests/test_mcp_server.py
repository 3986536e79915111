"""MCP 服务器测试。"""

from pathlib import Path

import pytest
from PIL import Image as PILImage

from py_image_driver import Color, InputError
from py_image_driver.mcp_server import (
    MCPResponseBuilder,
    apply_operation,
    describe_image,
    get_image_info,
    mcp,
    process_file,
    process_image,
)
from py_image_driver.exceptions import DecoderError, EncoderError, GeometryError


class TestMCPServer:
    """MCP服务器测试"""

    def test_mcp_server_import(self):
        """测试MCP服务器导入"""
        assert mcp is not None
        assert get_image_info is not None
        assert process_image is not None

    def test_tools_registered(self):
        """测试工具注册"""
        assert get_image_info.name == "get_image_info"
        assert process_image.name == "process_image"


class TestDescribeImage:
    """图片信息测试"""

    def test_static_image(self, sample_files: dict[str, Path]):
        result = describe_image(str(sample_files["png"]))

        assert result["success"]
        assert result["width"] == 40
        assert result["height"] == 30
        assert result["media_type"] == "image/png"
        assert result["frame_count"] == 1
        assert result["file_size_human"]

    def test_animated_image(self, sample_files: dict[str, Path]):
        result = describe_image(str(sample_files["gif"]))

        assert result["success"]
        assert result["is_animated"]
        assert result["loops"] == 3
        assert [frame["delay"] for frame in result["frames"]] == [0.25, 0.5]

    def test_missing_file(self, temp_dir: Path):
        result = describe_image(str(temp_dir / "missing.png"))

        assert not result["success"]
        assert result["error_type"] == "file"

    def test_unknown_driver(self, sample_files: dict[str, Path]):
        result = describe_image(str(sample_files["png"]), driver="vips")

        assert not result["success"]
        assert result["error_type"] == "validation"


class TestProcessFile:
    """图片处理测试"""

    def test_operations(self, sample_files: dict[str, Path], temp_dir: Path):
        output = temp_dir / "out" / "result.png"
        result = process_file(
            str(sample_files["png"]),
            str(output),
            [
                {"type": "resize", "width": 20, "height": 15},
                {"type": "draw_rectangle", "x": 0, "y": 0, "width": 5, "height": 5,
                 "background_color": "ff0000"},
                {"type": "flop"},
            ],
        )

        assert result["success"], result
        assert result["media_type"] == "image/png"
        assert (result["width"], result["height"]) == (20, 15)
        with PILImage.open(output) as native:
            assert native.size == (20, 15)
            assert native.convert("RGBA").getpixel((19, 0)) == (255, 0, 0, 255)

    def test_quality_for_jpeg(self, sample_files: dict[str, Path], temp_dir: Path):
        result = process_file(str(sample_files["png"]), str(temp_dir / "out.jpg"), quality=60)

        assert result["success"], result
        assert result["media_type"] == "image/jpeg"

    def test_quality_ignored_for_png(self, sample_files: dict[str, Path], temp_dir: Path):
        result = process_file(str(sample_files["png"]), str(temp_dir / "out.png"), quality=60)
        assert result["success"], result

    def test_invalid_quality(self, sample_files: dict[str, Path], temp_dir: Path):
        result = process_file(str(sample_files["png"]), str(temp_dir / "out.jpg"), quality=0)

        assert not result["success"]
        assert result["error_type"] == "encode"

    def test_unknown_operation(self, sample_files: dict[str, Path], temp_dir: Path):
        result = process_file(
            str(sample_files["png"]), str(temp_dir / "out.png"), [{"type": "explode"}]
        )

        assert not result["success"]
        assert result["error_type"] == "validation"

    def test_animated_gif_preserved(self, sample_files: dict[str, Path], temp_dir: Path):
        output = temp_dir / "out.gif"
        result = process_file(str(sample_files["gif"]), str(output), [{"type": "resize", "width": 4}])

        assert result["success"], result
        assert result["frame_count"] == 2
        with PILImage.open(output) as native:
            assert native.n_frames == 2


class TestApplyOperation:
    """单个操作测试"""

    @pytest.fixture
    def image(self, pillow_manager):
        return pillow_manager.create(10, 10)

    def test_text_operation(self, image):
        apply_operation(
            image,
            {"type": "text", "text": "Hi", "x": 1, "y": 9, "font": {"size": 8, "color": "ff0000"}},
        )
        assert image.size == (10, 10)

    def test_missing_arguments(self, image):
        with pytest.raises(InputError):
            apply_operation(image, {"type": "crop"})

    def test_remove_animation(self, image):
        assert len(apply_operation(image, {"type": "remove_animation", "position": "100%"})) == 1

    def test_draw_line(self, image):
        apply_operation(
            image, {"type": "draw_line", "start": (0, 0), "end": (9, 0), "color": "0000ff"}
        )
        assert image.pick_color(5, 0) == Color(0, 0, 255)


class TestResponseBuilder:
    """响应构建测试"""

    @pytest.mark.parametrize(
        "error,error_type",
        [
            (InputError("x"), "validation"),
            (DecoderError("x"), "decode"),
            (EncoderError("x"), "encode"),
            (GeometryError("x"), "processing"),
        ],
    )
    def test_from_exception(self, error, error_type: str):
        result = MCPResponseBuilder.from_exception(error, "测试")

        assert not result["success"]
        assert result["error"] == "x"
        assert result["error_type"] == error_type
