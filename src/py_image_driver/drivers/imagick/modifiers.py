"""Wand 修改器。"""

from wand.color import Color as WandColor
from wand.drawing import Drawing
from wand.image import Image as WandImage

from ...colors import Colorspace
from ...exceptions import handle_native_errors
from ...geometry import Point
from ...image import Image
from ...modifiers import (
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
    ResizeModifier,
    RotateModifier,
    TextModifier,
)
from ...typography import Line
from ...utils.logging_helpers import get_logger
from ..core import AbstractFrame
from ..specializable import DriverKind
from .processors import drawing_for


logger = get_logger()

# Wand 的颜色空间名称
COLORSPACES = {
    Colorspace.RGB: "srgb",
    Colorspace.CMYK: "cmyk",
}


def _shape_drawing(background, border, border_size: int) -> Drawing:
    drawing = Drawing()
    drawing.fill_color = background if background is not None else WandColor("transparent")
    if border is not None:
        drawing.stroke_color = border
        drawing.stroke_width = border_size
    else:
        drawing.stroke_color = WandColor("transparent")
    return drawing


class ImagickResizeModifier(ResizeModifier):
    driver_kind = DriverKind.IMAGICK

    @handle_native_errors("缩放")
    def apply(self, image: Image) -> Image:
        width, height = self.target_size(image)
        for frame in image:
            frame.native.resize(width, height)
        return image


class ImagickCropModifier(CropModifier):
    driver_kind = DriverKind.IMAGICK

    @handle_native_errors("裁剪")
    def apply(self, image: Image) -> Image:
        background = self.native_color(image, self.background)
        for frame in image:
            # 画到背景画布上，超出原图的区域统一为背景色
            canvas = WandImage(width=self.width, height=self.height, background=background)
            canvas.composite(frame.native, left=-self.x, top=-self.y, operator="copy")
            frame.native.close()
            frame.native = canvas
        return image


class ImagickRotateModifier(RotateModifier):
    driver_kind = DriverKind.IMAGICK

    @handle_native_errors("旋转")
    def apply(self, image: Image) -> Image:
        angle = self.rotation_angle
        if angle == 0:
            return image

        background = self.native_color(image, self.background)
        for frame in image:
            # ImageMagick 顺时针旋转
            frame.native.rotate(-angle, background=background)
        return image


class ImagickFlipModifier(FlipModifier):
    driver_kind = DriverKind.IMAGICK

    def apply(self, image: Image) -> Image:
        for frame in image:
            frame.native.flip()
        return image


class ImagickFlopModifier(FlopModifier):
    driver_kind = DriverKind.IMAGICK

    def apply(self, image: Image) -> Image:
        for frame in image:
            frame.native.flop()
        return image


class ImagickGreyscaleModifier(GreyscaleModifier):
    driver_kind = DriverKind.IMAGICK

    def apply(self, image: Image) -> Image:
        for frame in image:
            frame.native.modulate(brightness=100, saturation=0, hue=100)
        return image


class ImagickInvertModifier(InvertModifier):
    driver_kind = DriverKind.IMAGICK

    def apply(self, image: Image) -> Image:
        for frame in image:
            frame.native.negate()
        return image


class ImagickColorspaceModifier(ColorspaceModifier):
    driver_kind = DriverKind.IMAGICK

    @handle_native_errors("颜色空间转换")
    def apply(self, image: Image) -> Image:
        target = COLORSPACES[Colorspace(self.target)]
        for frame in image:
            frame.native.transform_colorspace(target)
        return image


class ImagickDrawPixelModifier(DrawPixelModifier):
    driver_kind = DriverKind.IMAGICK

    def apply(self, image: Image) -> Image:
        color = self.native_color(image, self.color)
        for frame in image:
            with Drawing() as drawing:
                drawing.fill_color = color
                drawing.point(self.position.x, self.position.y)
                drawing(frame.native)
        return image


class ImagickDrawRectangleModifier(DrawRectangleModifier):
    driver_kind = DriverKind.IMAGICK

    @handle_native_errors("绘制矩形")
    def apply(self, image: Image) -> Image:
        rectangle = self.drawable
        background = self.background_color(image)
        border = self.border_color(image)

        for frame in image:
            with _shape_drawing(background, border, rectangle.border_size) as drawing:
                drawing.rectangle(
                    left=rectangle.pivot.x,
                    top=rectangle.pivot.y,
                    right=rectangle.pivot.x + rectangle.width - 1,
                    bottom=rectangle.pivot.y + rectangle.height - 1,
                )
                drawing(frame.native)
        return image


class ImagickDrawEllipseModifier(DrawEllipseModifier):
    driver_kind = DriverKind.IMAGICK

    @handle_native_errors("绘制椭圆")
    def apply(self, image: Image) -> Image:
        ellipse = self.drawable
        background = self.background_color(image)
        border = self.border_color(image)

        for frame in image:
            with _shape_drawing(background, border, ellipse.border_size) as drawing:
                drawing.ellipse(
                    ellipse.pivot.to_tuple(), (ellipse.width / 2, ellipse.height / 2)
                )
                drawing(frame.native)
        return image


class ImagickDrawLineModifier(DrawLineModifier):
    driver_kind = DriverKind.IMAGICK

    @handle_native_errors("绘制直线")
    def apply(self, image: Image) -> Image:
        line = self.drawable
        color = self.line_color(image)

        for frame in image:
            with Drawing() as drawing:
                drawing.stroke_color = color
                drawing.stroke_width = line.width
                drawing.line(line.start.to_tuple(), line.end.to_tuple())
                drawing(frame.native)
        return image


class ImagickDrawPolygonModifier(DrawPolygonModifier):
    driver_kind = DriverKind.IMAGICK

    @handle_native_errors("绘制多边形")
    def apply(self, image: Image) -> Image:
        polygon = self.drawable
        background = self.background_color(image)
        border = self.border_color(image)

        for frame in image:
            with _shape_drawing(background, border, polygon.border_size) as drawing:
                drawing.polygon(polygon.absolute_points())
                drawing(frame.native)
        return image


class ImagickTextModifier(TextModifier):
    driver_kind = DriverKind.IMAGICK

    def draw_line(self, frame: AbstractFrame, line: Line, position: Point, color) -> None:
        with drawing_for(self.font) as drawing:
            drawing.fill_color = color
            frame.native.annotate(
                str(line), drawing, left=position.x, baseline=position.y, angle=self.font.angle
            )


class ImagickAlignRotationModifier(AlignRotationModifier):
    """使用 ImageMagick 原生的自动方向校正"""

    driver_kind = DriverKind.IMAGICK

    def apply(self, image: Image) -> Image:
        for frame in image:
            frame.native.auto_orient()

        if "Orientation" in image.exif:
            image.exif["Orientation"] = 1
        logger.debug("已使用 ImageMagick 校正方向")
        return image


SPECIALIZED = {
    ResizeModifier: ImagickResizeModifier,
    CropModifier: ImagickCropModifier,
    RotateModifier: ImagickRotateModifier,
    FlipModifier: ImagickFlipModifier,
    FlopModifier: ImagickFlopModifier,
    GreyscaleModifier: ImagickGreyscaleModifier,
    InvertModifier: ImagickInvertModifier,
    ColorspaceModifier: ImagickColorspaceModifier,
    DrawPixelModifier: ImagickDrawPixelModifier,
    DrawRectangleModifier: ImagickDrawRectangleModifier,
    DrawEllipseModifier: ImagickDrawEllipseModifier,
    DrawLineModifier: ImagickDrawLineModifier,
    DrawPolygonModifier: ImagickDrawPolygonModifier,
    TextModifier: ImagickTextModifier,
    AlignRotationModifier: ImagickAlignRotationModifier,
}
