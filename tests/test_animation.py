"""动画测试。"""

import io
from pathlib import Path

import pytest
from PIL import Image as PILImage

from py_image_driver import AnimationError, Color, DecoderError, EncoderError, ImageManager, InputError
from py_image_driver.modifiers import RemoveAnimationModifier
from py_image_driver.utils.gif_builder import GifBuilder, check_loops
from tests.conftest import make_animated_gif, make_image_bytes


RED = Color(255, 0, 0)
BLUE = Color(0, 0, 255)


class TestAnimationDecoding:
    """动画解码测试"""

    def test_single_frame_gif(self, manager: ImageManager):
        image = manager.read(make_animated_gif(["red"], [100]))

        assert len(image) == 1
        assert not image.is_animated
        assert image.pick_color(0, 0) == RED

    def test_frames_delays_loops(self, manager: ImageManager, sample_files: dict[str, Path]):
        image = manager.read(sample_files["gif"])

        assert len(image) == 2
        assert image.is_animated
        assert [frame.delay for frame in image] == [0.25, 0.5]
        assert image.loops == 3
        assert image.pick_colors(0, 0) == [RED, BLUE]

    def test_missing_loop_extension(self, pillow_manager: ImageManager):
        """没有循环扩展的 GIF 读取为 0 次"""
        frames = [PILImage.new("RGB", (1, 1), color) for color in ("red", "blue")]
        buffer = io.BytesIO()
        frames[0].save(buffer, format="GIF", save_all=True, append_images=frames[1:], duration=100)
        assert pillow_manager.read(buffer.getvalue()).loops == 0


class TestAnimationCreation:
    """由输入序列创建动画"""

    def test_animate(self, manager: ImageManager):
        animation = manager.animate(
            [(make_image_bytes((4, 4), "red"), 0.25), (make_image_bytes((4, 4), "blue"), 0.5)],
            loops=3,
        )

        assert len(animation) == 2
        assert animation.loops == 3
        assert [frame.delay for frame in animation] == [0.25, 0.5]

    def test_animate_resizes_to_first_frame(self, pillow_manager: ImageManager):
        animation = pillow_manager.animate(
            [(make_image_bytes((4, 4), "red"), 0.1), (make_image_bytes((8, 2), "blue"), 0.1)]
        )
        assert [frame.size for frame in animation] == [(4, 4), (4, 4)]

    def test_animate_does_not_close_source(self, pillow_manager: ImageManager):
        """传入的 Image 对象在创建动画后仍然可用"""
        source = pillow_manager.read(make_image_bytes((4, 4), "red"))
        pillow_manager.animate([(source, 0.1), (make_image_bytes((4, 4), "blue"), 0.1)])

        assert source.pick_color(0, 0) == RED

    def test_animate_empty(self, pillow_manager: ImageManager):
        with pytest.raises(DecoderError):
            pillow_manager.animate([])

    def test_animate_invalid_frame(self, pillow_manager: ImageManager):
        with pytest.raises(DecoderError):
            pillow_manager.animate([(make_image_bytes(), 0.1), ("ff0000", 0.1)])


class TestAnimationEncoding:
    """动画编码测试"""

    def test_gif_round_trip(self, manager: ImageManager, sample_files: dict[str, Path]):
        encoded = manager.read(sample_files["gif"]).to_gif()
        image = manager.read(encoded.to_bytes())

        assert len(image) == 2
        assert [frame.delay for frame in image] == [0.25, 0.5]
        assert image.loops == 3
        assert image.pick_colors(0, 0) == [RED, BLUE]

    def test_encoded_gif_readable_by_pillow(self, manager: ImageManager, sample_files: dict[str, Path]):
        encoded = manager.read(sample_files["gif"]).to_gif()

        with PILImage.open(io.BytesIO(encoded.to_bytes())) as native:
            assert native.n_frames == 2
            assert native.info.get("loop") == 3

    def test_identical_adjacent_frames_kept(self, manager: ImageManager):
        """相邻的相同帧不会被合并，帧数与延迟保持不变"""
        red = make_image_bytes((4, 4), "red")
        blue = make_image_bytes((4, 4), "blue")
        encoded = manager.animate([(red, 0.1), (red, 0.2), (blue, 0.3)], loops=2).to_gif()

        image = manager.read(encoded.to_bytes())
        assert len(image) == 3
        assert [frame.delay for frame in image] == [0.1, 0.2, 0.3]
        assert image.loops == 2
        assert image.pick_colors(0, 0) == [RED, RED, BLUE]

    @pytest.mark.parametrize("loops", [-1, 65536])
    def test_invalid_loops(self, manager: ImageManager, sample_files: dict[str, Path], loops: int):
        """循环次数超出范围时编码失败，图像保持不变"""
        image = manager.read(sample_files["gif"])
        image.loops = loops

        with pytest.raises(EncoderError):
            image.to_gif()

        assert len(image) == 2
        assert image.loops == loops

    def test_static_formats_use_first_frame(self, pillow_manager: ImageManager, sample_files: dict[str, Path]):
        encoded = pillow_manager.read(sample_files["gif"]).to_png()
        assert pillow_manager.read(encoded.to_bytes()).pick_color(0, 0) == RED


class TestRemoveAnimation:
    """移除动画测试"""

    @pytest.fixture
    def four_frames(self, pillow_manager: ImageManager):
        colors = ["red", "lime", "blue", "white"]
        return pillow_manager.read(make_animated_gif(colors, [100] * 4))

    def test_by_index(self, four_frames):
        image = four_frames.remove_animation(2)
        assert len(image) == 1
        assert image.pick_color(0, 0) == BLUE

    @pytest.mark.parametrize(
        "position,expected",
        [("0%", 0), ("25%", 0), ("50%", 1), ("60%", 2), ("100%", 3)],
    )
    def test_percent_position(self, four_frames, position: str, expected: int):
        assert RemoveAnimationModifier(position).frame_position(four_frames) == expected

    def test_out_of_range(self, four_frames):
        with pytest.raises(AnimationError):
            four_frames.remove_animation(4)

    @pytest.mark.parametrize("position", ["101%", "half", "-1%"])
    def test_invalid_position(self, four_frames, position: str):
        with pytest.raises(InputError):
            four_frames.remove_animation(position)

    def test_frame_access_out_of_range(self, four_frames):
        with pytest.raises(AnimationError):
            four_frames.frame(10)


class TestGifBuilder:
    """GIF 构建器测试"""

    def test_check_loops(self):
        assert check_loops(0) == 0
        assert check_loops(65535) == 65535
        with pytest.raises(ValueError):
            check_loops(65536)
        with pytest.raises(ValueError):
            check_loops(-1)

    def test_build(self):
        red = make_image_bytes((2, 2), "red", "GIF", mode="RGB")
        blue = make_image_bytes((2, 2), "blue", "GIF", mode="RGB")

        with GifBuilder.canvas(2, 2) as builder:
            builder.add_frame(red, 0.1).add_frame(blue, 0.2).set_loops(5)
            data = builder.encode()

        with PILImage.open(io.BytesIO(data)) as native:
            assert native.n_frames == 2
            assert native.info.get("loop") == 5

    def test_frame_size_mismatch(self):
        builder = GifBuilder.canvas(2, 2)
        with pytest.raises(ValueError):
            builder.add_frame(make_image_bytes((3, 3), "red", "GIF", mode="RGB"))
        builder.close()

    def test_identical_frames(self):
        red = make_image_bytes((2, 2), "red", "GIF", mode="RGB")

        with GifBuilder.canvas(2, 2) as builder:
            data = builder.add_frame(red, 0.1).add_frame(red, 0.1).add_frame(red, 0.2).encode()

        with PILImage.open(io.BytesIO(data)) as native:
            assert native.n_frames == 3

    def test_transparency_kept(self):
        """透明像素写为透明色索引"""
        frame = make_image_bytes((2, 2), (0, 0, 0, 0), "GIF")
        opaque = make_image_bytes((2, 2), "blue", "GIF", mode="RGB")

        with GifBuilder.canvas(2, 2) as builder:
            data = builder.add_frame(frame, 0.1).add_frame(opaque, 0.1).encode()

        with PILImage.open(io.BytesIO(data)) as native:
            assert native.convert("RGBA").getpixel((0, 0))[3] == 0
            native.seek(1)
            assert native.convert("RGBA").getpixel((0, 0)) == (0, 0, 255, 255)
