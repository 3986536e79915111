"""驱动无关的图像对象。

Image 持有驱动、帧序列（Core）、EXIF 信息与来源信息。
修改器原地修改帧的原生对象；编码总是在副本上进行，不会修改调用方的图像。
"""

from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .analyzers import PixelColorAnalyzer, PixelColorsAnalyzer
from .colors import Color, Colorspace
from .drivers.core import AbstractFrame, Core
from .encoders import (
    AutoEncoder,
    BmpEncoder,
    FileExtensionEncoder,
    GifEncoder,
    JpegEncoder,
    MediaTypeEncoder,
    PngEncoder,
    WebpEncoder,
)
from .exceptions import InputError
from .geometry import (
    CircleFactory,
    EllipseFactory,
    LineFactory,
    Point,
    PolygonFactory,
    RectangleFactory,
)
from .models.origin import Origin
from .modifiers import (
    AlignRotationModifier,
    ColorspaceModifier,
    CropModifier,
    DrawEllipseModifier,
    DrawLineModifier,
    DrawPixelModifier,
    DrawPolygonModifier,
    DrawRectangleModifier,
    FlipModifier,
    FlopModifier,
    GreyscaleModifier,
    InvertModifier,
    RemoveAnimationModifier,
    ResizeModifier,
    RotateModifier,
    ScaleModifier,
    TextModifier,
)
from .typography import Font


if TYPE_CHECKING:
    from .drivers.abstract import AbstractDriver
    from .encoded_image import EncodedImage


class Image:
    """图像

    Example:
        >>> with manager.read("photo.jpg") as image:
        ...     image.resize(320, 240).greyscale().to_png().save("thumb.png")
    """

    def __init__(
        self,
        driver: "AbstractDriver",
        core: Core,
        exif: dict[str, Any] | None = None,
    ):
        self.driver = driver
        self.core = core
        self.exif: dict[str, Any] = exif or {}
        self.origin = Origin()

    # 基本属性

    def __iter__(self) -> Iterator[AbstractFrame]:
        return iter(self.core)

    def __len__(self) -> int:
        return len(self.core)

    @property
    def width(self) -> int:
        return self.core.size[0]

    @property
    def height(self) -> int:
        return self.core.size[1]

    @property
    def size(self) -> tuple[int, int]:
        return self.core.size

    @property
    def is_animated(self) -> bool:
        return len(self.core) > 1

    @property
    def loops(self) -> int:
        """循环次数，0 表示无限循环"""
        return self.core.loops

    @loops.setter
    def loops(self, value: int) -> None:
        # 不做范围检查，超出范围由编码时的动画构建器报告
        self.core.loops = value

    def set_loops(self, value: int) -> "Image":
        self.loops = value
        return self

    @property
    def colorspace(self) -> Colorspace:
        return self.core.frame(0).colorspace

    def frame(self, position: int = 0) -> AbstractFrame:
        return self.core.frame(position)

    # 管线入口

    def modify(self, modifier: Any) -> "Image":
        """应用修改器（先由驱动解析为特化实现）"""
        return self.driver.specialize(modifier).apply(self)

    def analyze(self, analyzer: Any) -> Any:
        """运行分析器"""
        return self.driver.specialize(analyzer).analyze(self)

    def encode(self, encoder: Any = None) -> "EncodedImage":
        """编码图像，默认按来源格式编码"""
        return self.driver.specialize(encoder or AutoEncoder()).encode(self)

    def clone(self) -> "Image":
        """深复制图像（含全部帧）"""
        image = Image(self.driver, self.core.clone(), dict(self.exif))
        image.origin = self.origin.model_copy()
        return image

    def close(self) -> None:
        """释放全部原生对象"""
        self.core.close()

    def __enter__(self) -> "Image":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"Image(driver={self.driver.id!r}, size={self.size}, "
            f"frames={len(self)}, media_type={self.origin.media_type!r})"
        )

    # 几何变换

    def resize(self, width: int | None = None, height: int | None = None) -> "Image":
        return self.modify(ResizeModifier(width, height))

    def scale(self, width: int | None = None, height: int | None = None) -> "Image":
        return self.modify(ScaleModifier(width, height))

    def crop(
        self, width: int, height: int, x: int = 0, y: int = 0, background: Any = "transparent"
    ) -> "Image":
        return self.modify(CropModifier(width, height, x, y, background))

    def rotate(self, angle: float, background: Any = "ffffff") -> "Image":
        """逆时针旋转 angle 度"""
        return self.modify(RotateModifier(angle, background))

    def flip(self) -> "Image":
        """上下翻转"""
        return self.modify(FlipModifier())

    def flop(self) -> "Image":
        """左右翻转"""
        return self.modify(FlopModifier())

    def orient(self) -> "Image":
        """按 EXIF 方向信息校正旋转"""
        return self.modify(AlignRotationModifier())

    # 颜色

    def greyscale(self) -> "Image":
        return self.modify(GreyscaleModifier())

    def invert(self) -> "Image":
        return self.modify(InvertModifier())

    def set_colorspace(self, colorspace: Colorspace | str) -> "Image":
        return self.modify(ColorspaceModifier(Colorspace(colorspace)))

    def pick_color(self, x: int, y: int, frame: int = 0) -> Color:
        return self.analyze(PixelColorAnalyzer(x, y, frame))

    def pick_colors(self, x: int, y: int) -> list[Color]:
        return self.analyze(PixelColorsAnalyzer(x, y))

    # 绘制

    def text(self, text: str, x: int, y: int, font: Font | None = None) -> "Image":
        return self.modify(TextModifier(text, Point(x, y), font or Font()))

    def draw_pixel(self, x: int, y: int, color: Any) -> "Image":
        return self.modify(DrawPixelModifier(Point(x, y), color))

    def draw_rectangle(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        background_color: Any = None,
        border_color: Any = None,
        border_size: int = 1,
    ) -> "Image":
        factory = RectangleFactory(Point(x, y)).size(width, height)
        return self.modify(
            DrawRectangleModifier(
                self._configure(factory, background_color, border_color, border_size)
            )
        )

    def draw_ellipse(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        background_color: Any = None,
        border_color: Any = None,
        border_size: int = 1,
    ) -> "Image":
        factory = EllipseFactory(Point(x, y)).size(width, height)
        return self.modify(
            DrawEllipseModifier(
                self._configure(factory, background_color, border_color, border_size)
            )
        )

    def draw_circle(
        self,
        x: int,
        y: int,
        radius: int,
        background_color: Any = None,
        border_color: Any = None,
        border_size: int = 1,
    ) -> "Image":
        factory = CircleFactory(Point(x, y)).radius(radius)
        return self.modify(
            DrawEllipseModifier(
                self._configure(factory, background_color, border_color, border_size)
            )
        )

    def draw_line(
        self, start: tuple[int, int], end: tuple[int, int], color: Any, width: int = 1
    ) -> "Image":
        line = LineFactory().from_(*start).to(*end).color(color).width(width).create()
        return self.modify(DrawLineModifier(line))

    def draw_polygon(
        self,
        points: list[tuple[int, int]],
        background_color: Any = None,
        border_color: Any = None,
        border_size: int = 1,
    ) -> "Image":
        factory = PolygonFactory()
        for x, y in points:
            factory.point(x, y)
        return self.modify(
            DrawPolygonModifier(
                self._configure(factory, background_color, border_color, border_size)
            )
        )

    @staticmethod
    def _configure(factory: Any, background_color: Any, border_color: Any, border_size: int):
        if background_color is not None:
            factory.background(background_color)
        if border_color is not None:
            factory.border(border_color, border_size)
        return factory.create()

    # 动画

    def remove_animation(self, position: int | str = 0) -> "Image":
        """只保留一帧，position 可为帧序号或百分比字符串（如 "50%"）"""
        return self.modify(RemoveAnimationModifier(position))

    # 编码

    def to_jpeg(self, quality: int | None = None, progressive: bool = False) -> "EncodedImage":
        options: dict[str, Any] = {"progressive": progressive}
        if quality is not None:
            options["quality"] = quality
        return self.encode(JpegEncoder(**options))

    def to_png(self, interlaced: bool = False, indexed: bool = False) -> "EncodedImage":
        return self.encode(PngEncoder(interlaced, indexed))

    def to_gif(self, interlaced: bool = False) -> "EncodedImage":
        return self.encode(GifEncoder(interlaced))

    def to_webp(self, quality: int | None = None) -> "EncodedImage":
        return self.encode(WebpEncoder() if quality is None else WebpEncoder(quality))

    def to_bmp(self) -> "EncodedImage":
        return self.encode(BmpEncoder())

    def encode_by_media_type(self, media_type: str | None = None, **options: Any) -> "EncodedImage":
        return self.encode(MediaTypeEncoder(media_type, options))

    def encode_by_extension(self, extension: str | None = None, **options: Any) -> "EncodedImage":
        return self.encode(FileExtensionEncoder(extension, options))

    def save(self, path: str | Path | None = None, **options: Any) -> "Image":
        """按扩展名编码并写入文件，未指定路径时写回来源文件"""
        target = Path(path) if path is not None else self.origin.file_path
        if target is None:
            raise InputError("未指定保存路径，且图像没有来源文件")

        extension = target.suffix.lstrip(".") or None
        self.encode_by_extension(extension, **options).save(target)
        return self
