"""Wand 颜色与字体处理器。"""

from wand.color import Color as WandColor
from wand.drawing import Drawing
from wand.image import Image as WandImage

from ...colors import AbstractColorProcessor, AnyColor, CmykColor, Color, Colorspace
from ...typography import AbstractFontProcessor, Font
from ..specializable import DriverKind


class ImagickColorProcessor(AbstractColorProcessor):
    """原生颜色为 wand.color.Color，按处理器颜色空间构造"""

    def _to_native(self, color: AnyColor) -> WandColor:
        if isinstance(color, CmykColor):
            return WandColor(
                f"cmyk({color.cyan}%,{color.magenta}%,{color.yellow}%,{color.key}%)"
            )
        alpha = round(color.alpha / 255, 4)
        return WandColor(f"srgba({color.red},{color.green},{color.blue},{alpha})")

    def native_to_color(self, native: WandColor) -> AnyColor:
        if self.colorspace == Colorspace.CMYK:
            return CmykColor(
                round(native.cyan * 100),
                round(native.magenta * 100),
                round(native.yellow * 100),
                round(native.black * 100),
            )
        return Color(native.red_int8, native.green_int8, native.blue_int8, native.alpha_int8)


def drawing_for(font: Font) -> Drawing:
    """按字体配置创建 Drawing（调用方负责释放）"""
    drawing = Drawing()
    if font.filename is not None:
        drawing.font = str(font.filename)
    drawing.font_size = font.size
    drawing.text_antialias = True
    return drawing


class ImagickFontProcessor(AbstractFontProcessor):
    driver_kind = DriverKind.IMAGICK

    def box_size(self, text: str, font: Font) -> tuple[int, int]:
        if not text:
            return (0, 0)

        with WandImage(width=1, height=1) as canvas, drawing_for(font) as drawing:
            metrics = drawing.get_font_metrics(canvas, text, multiline=False)
        # descender 为负数
        return (round(metrics.text_width), round(metrics.ascender - metrics.descender))
