"""Pillow 修改器。"""

import numpy as np
from PIL import Image as PILImage
from PIL import ImageDraw

from ...colors import Colorspace
from ...exceptions import NotSupportedError, handle_native_errors
from ...geometry import Point
from ...image import Image
from ...modifiers import (
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
from ..core import AbstractFrame
from ..specializable import DriverKind
from .processors import image_font


def _draw(frame: AbstractFrame) -> ImageDraw.ImageDraw:
    # RGBA 模式下半透明颜色与原像素混合
    return ImageDraw.Draw(frame.native, "RGBA")


class PillowResizeModifier(ResizeModifier):
    driver_kind = DriverKind.PILLOW

    @handle_native_errors("缩放")
    def apply(self, image: Image) -> Image:
        size = self.target_size(image)
        for frame in image:
            frame.replace(frame.native.resize(size, PILImage.Resampling.LANCZOS))
        return image


class PillowCropModifier(CropModifier):
    driver_kind = DriverKind.PILLOW

    @handle_native_errors("裁剪")
    def apply(self, image: Image) -> Image:
        background = self.native_color(image, self.background)
        # 裁剪区域与原图的交集
        box = (
            max(self.x, 0),
            max(self.y, 0),
            min(self.x + self.width, image.width),
            min(self.y + self.height, image.height),
        )

        for frame in image:
            canvas = PILImage.new("RGBA", (self.width, self.height), background)
            if box[0] < box[2] and box[1] < box[3]:
                with frame.native.crop(box) as region:
                    canvas.paste(region, (box[0] - self.x, box[1] - self.y))
            frame.replace(canvas)
        return image


class PillowRotateModifier(RotateModifier):
    driver_kind = DriverKind.PILLOW

    @handle_native_errors("旋转")
    def apply(self, image: Image) -> Image:
        angle = self.rotation_angle
        if angle == 0:
            return image

        background = self.native_color(image, self.background)
        for frame in image:
            frame.replace(
                frame.native.rotate(
                    angle,
                    resample=PILImage.Resampling.BICUBIC,
                    expand=True,
                    fillcolor=background,
                )
            )
        return image


class PillowFlipModifier(FlipModifier):
    driver_kind = DriverKind.PILLOW

    def apply(self, image: Image) -> Image:
        for frame in image:
            frame.replace(frame.native.transpose(PILImage.Transpose.FLIP_TOP_BOTTOM))
        return image


class PillowFlopModifier(FlopModifier):
    driver_kind = DriverKind.PILLOW

    def apply(self, image: Image) -> Image:
        for frame in image:
            frame.replace(frame.native.transpose(PILImage.Transpose.FLIP_LEFT_RIGHT))
        return image


class PillowGreyscaleModifier(GreyscaleModifier):
    driver_kind = DriverKind.PILLOW

    def apply(self, image: Image) -> Image:
        for frame in image:
            grey = frame.native.convert("L").convert("RGBA")
            grey.putalpha(frame.native.getchannel("A"))
            frame.replace(grey)
        return image


class PillowInvertModifier(InvertModifier):
    driver_kind = DriverKind.PILLOW

    def apply(self, image: Image) -> Image:
        for frame in image:
            pixels = np.array(frame.native, dtype=np.uint8)
            pixels[..., :3] = 255 - pixels[..., :3]
            frame.replace(PILImage.fromarray(pixels))
        return image


class PillowColorspaceModifier(ColorspaceModifier):
    driver_kind = DriverKind.PILLOW

    def apply(self, image: Image) -> Image:
        if Colorspace(self.target) != Colorspace.RGB:
            raise NotSupportedError(f"Pillow 驱动只支持 RGB 颜色空间，无法转换为 {self.target}")
        return image


class PillowDrawPixelModifier(DrawPixelModifier):
    driver_kind = DriverKind.PILLOW

    def apply(self, image: Image) -> Image:
        if not (0 <= self.position.x < image.width and 0 <= self.position.y < image.height):
            return image

        color = self.native_color(image, self.color)
        for frame in image:
            frame.native.putpixel(self.position.to_tuple(), color)
        return image


class PillowDrawRectangleModifier(DrawRectangleModifier):
    driver_kind = DriverKind.PILLOW

    @handle_native_errors("绘制矩形")
    def apply(self, image: Image) -> Image:
        rectangle = self.drawable
        box = (
            rectangle.pivot.x,
            rectangle.pivot.y,
            rectangle.pivot.x + rectangle.width - 1,
            rectangle.pivot.y + rectangle.height - 1,
        )
        background = self.background_color(image)
        border = self.border_color(image)

        for frame in image:
            draw = _draw(frame)
            if background is not None:
                draw.rectangle(box, fill=background)
            if border is not None:
                draw.rectangle(box, outline=border, width=rectangle.border_size)
        return image


class PillowDrawEllipseModifier(DrawEllipseModifier):
    driver_kind = DriverKind.PILLOW

    @handle_native_errors("绘制椭圆")
    def apply(self, image: Image) -> Image:
        left, top, right, bottom = self.drawable.bounding_box
        box = (left, top, right - 1, bottom - 1)
        background = self.background_color(image)
        border = self.border_color(image)

        for frame in image:
            draw = _draw(frame)
            if background is not None:
                draw.ellipse(box, fill=background)
            if border is not None:
                draw.ellipse(box, outline=border, width=self.drawable.border_size)
        return image


class PillowDrawLineModifier(DrawLineModifier):
    driver_kind = DriverKind.PILLOW

    @handle_native_errors("绘制直线")
    def apply(self, image: Image) -> Image:
        line = self.drawable
        color = self.line_color(image)
        for frame in image:
            _draw(frame).line(
                [line.start.to_tuple(), line.end.to_tuple()], fill=color, width=line.width
            )
        return image


class PillowDrawPolygonModifier(DrawPolygonModifier):
    driver_kind = DriverKind.PILLOW

    @handle_native_errors("绘制多边形")
    def apply(self, image: Image) -> Image:
        points = self.drawable.absolute_points()
        background = self.background_color(image)
        border = self.border_color(image)

        for frame in image:
            draw = _draw(frame)
            if background is not None:
                draw.polygon(points, fill=background)
            if border is not None:
                draw.polygon(points, outline=border, width=self.drawable.border_size)
        return image


class PillowTextModifier(TextModifier):
    driver_kind = DriverKind.PILLOW

    def draw_line(self, frame: AbstractFrame, line: Line, position: Point, color) -> None:
        font = image_font(self.font)

        if self.font.angle % 360 == 0:
            _draw(frame).text(position.to_tuple(), str(line), fill=color, font=font, anchor="ls")
            return

        # 在透明图层上绘制，再绕基线起点顺时针旋转后合成
        layer = PILImage.new("RGBA", frame.size, (0, 0, 0, 0))
        ImageDraw.Draw(layer).text(
            position.to_tuple(), str(line), fill=color, font=font, anchor="ls"
        )
        rotated = layer.rotate(
            -self.font.angle, resample=PILImage.Resampling.BICUBIC, center=position.to_tuple()
        )
        frame.native.alpha_composite(rotated)
        layer.close()
        rotated.close()


SPECIALIZED = {
    ResizeModifier: PillowResizeModifier,
    CropModifier: PillowCropModifier,
    RotateModifier: PillowRotateModifier,
    FlipModifier: PillowFlipModifier,
    FlopModifier: PillowFlopModifier,
    GreyscaleModifier: PillowGreyscaleModifier,
    InvertModifier: PillowInvertModifier,
    ColorspaceModifier: PillowColorspaceModifier,
    DrawPixelModifier: PillowDrawPixelModifier,
    DrawRectangleModifier: PillowDrawRectangleModifier,
    DrawEllipseModifier: PillowDrawEllipseModifier,
    DrawLineModifier: PillowDrawLineModifier,
    DrawPolygonModifier: PillowDrawPolygonModifier,
    TextModifier: PillowTextModifier,
}
