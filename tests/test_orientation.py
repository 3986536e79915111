"""EXIF 方向校正测试。"""

from pathlib import Path

import pytest

from py_image_driver import Color, Image, ImageManager
from py_image_driver.modifiers import AlignRotationModifier


def assert_close(color: Color, expected: Color, tolerance: int = 40) -> None:
    """JPEG 有损压缩，按容差比较颜色"""
    for actual_channel, expected_channel in zip(color.to_tuple()[:3], expected.to_tuple()[:3], strict=True):
        assert abs(actual_channel - expected_channel) <= tolerance, (color, expected)


class TestAutoOrientation:
    """解码时自动校正方向"""

    def test_orientation_6(self, manager: ImageManager, oriented_jpeg: Path):
        """方向 6 需要顺时针旋转 90 度：左半边红色转到上半边"""
        image = manager.read(oriented_jpeg)

        assert image.size == (10, 20)
        assert_close(image.pick_color(5, 2), Color(255, 0, 0))
        assert_close(image.pick_color(5, 17), Color(0, 0, 255))

    def test_orientation_reset(self, pillow_manager: ImageManager, oriented_jpeg: Path):
        image = pillow_manager.read(oriented_jpeg)
        assert image.exif.get("Orientation") == 1

    def test_auto_orientation_disabled(self, oriented_jpeg: Path):
        manager = ImageManager("pillow", auto_orientation=False)
        image = manager.read(oriented_jpeg)

        assert image.size == (20, 10)
        assert image.exif.get("Orientation") == 6

        image.orient()
        assert image.size == (10, 20)
        assert image.exif.get("Orientation") == 1


class TestAlignRotation:
    """按方向值的变换组合"""

    @pytest.fixture
    def marked(self, pillow_manager: ImageManager) -> Image:
        """3x2 画布，左上角为红色"""
        image = pillow_manager.create(3, 2)
        image.draw_pixel(0, 0, "ff0000")
        return image

    @pytest.mark.parametrize(
        "orientation,size,red_at",
        [
            (1, (3, 2), (0, 0)),
            (2, (3, 2), (2, 0)),
            (3, (3, 2), (2, 1)),
            (4, (3, 2), (0, 1)),
            (5, (2, 3), (0, 0)),
            (6, (2, 3), (1, 0)),
            (7, (2, 3), (1, 2)),
            (8, (2, 3), (0, 2)),
        ],
    )
    def test_orientations(self, marked: Image, orientation: int, size, red_at):
        marked.exif["Orientation"] = orientation
        marked.modify(AlignRotationModifier())

        assert marked.size == size
        assert marked.pick_color(*red_at) == Color(255, 0, 0)

    def test_missing_orientation_is_noop(self, marked: Image):
        marked.modify(AlignRotationModifier())
        assert marked.size == (3, 2)
        assert "Orientation" not in marked.exif
