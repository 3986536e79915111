"""测试配置文件。

提供测试所需的fixtures和配置。所有测试图片都用 Pillow 现场生成。
"""

import io
import tempfile
from pathlib import Path

import pytest
from PIL import Image, ImageDraw

from py_image_driver import ImageManager


DRIVERS = ["pillow", "imagick"]


def make_image_bytes(
    size: tuple[int, int] = (20, 20),
    color: str | tuple[int, ...] = "red",
    format_name: str = "PNG",
    mode: str = "RGBA",
    **params,
) -> bytes:
    """生成单色图片的编码字节"""
    image = Image.new(mode, size, color)
    buffer = io.BytesIO()
    image.save(buffer, format=format_name, **params)
    image.close()
    return buffer.getvalue()


def make_animated_gif(
    colors: list[str], durations: list[int], loop: int = 0, size: tuple[int, int] = (1, 1)
) -> bytes:
    """生成多帧 GIF（相邻帧颜色必须不同，否则 Pillow 会合并帧）"""
    frames = [Image.new("RGB", size, color) for color in colors]
    buffer = io.BytesIO()
    frames[0].save(
        buffer,
        format="GIF",
        save_all=True,
        append_images=frames[1:],
        duration=durations,
        loop=loop,
    )
    for frame in frames:
        frame.close()
    return buffer.getvalue()


@pytest.fixture
def temp_dir():
    """临时目录fixture"""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture(params=DRIVERS)
def manager(request) -> ImageManager:
    """按驱动参数化的图像管理器，缺少 Wand/ImageMagick 时跳过 imagick"""
    if request.param == "imagick":
        pytest.importorskip("wand.image")
    return ImageManager(request.param)


@pytest.fixture
def pillow_manager() -> ImageManager:
    return ImageManager("pillow")


@pytest.fixture
def red_png() -> bytes:
    return make_image_bytes((20, 10), "red")


@pytest.fixture
def sample_files(temp_dir: Path) -> dict[str, Path]:
    """常用格式的测试文件"""
    files = {}

    png_path = temp_dir / "sample.png"
    png_path.write_bytes(make_image_bytes((40, 30), "blue"))
    files["png"] = png_path

    jpeg_path = temp_dir / "sample.jpg"
    jpeg_path.write_bytes(make_image_bytes((40, 30), "green", "JPEG", mode="RGB"))
    files["jpeg"] = jpeg_path

    gif_path = temp_dir / "animated.gif"
    gif_path.write_bytes(make_animated_gif(["red", "blue"], [250, 500], loop=3))
    files["gif"] = gif_path

    palette_path = temp_dir / "palette.png"
    palette = Image.new("P", (16, 16))
    ImageDraw.Draw(palette).rectangle([0, 0, 7, 7], fill=1)
    palette.save(palette_path, "PNG")
    files["palette"] = palette_path

    return files


@pytest.fixture
def oriented_jpeg(temp_dir: Path) -> Path:
    """EXIF 方向为 6 的 20x10 JPEG，左半边红色、右半边蓝色"""
    image = Image.new("RGB", (20, 10), "blue")
    ImageDraw.Draw(image).rectangle([0, 0, 9, 9], fill="red")

    exif = Image.Exif()
    exif[0x0112] = 6

    path = temp_dir / "oriented.jpg"
    image.save(path, "JPEG", quality=95, exif=exif)
    image.close()
    return path
