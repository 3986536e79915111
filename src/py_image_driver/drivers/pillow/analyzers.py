"""Pillow 分析器。"""

from ...analyzers import PixelColorAnalyzer, PixelColorsAnalyzer
from ...colors import Color
from ...image import Image
from ..specializable import DriverKind


class PillowPixelColorAnalyzer(PixelColorAnalyzer):
    driver_kind = DriverKind.PILLOW

    def analyze(self, image: Image) -> Color:
        self.check_position(image)
        native = image.frame(self.frame).native.getpixel((self.x, self.y))
        return self.driver.color_processor(image.colorspace).native_to_color(native)


class PillowPixelColorsAnalyzer(PixelColorsAnalyzer):
    driver_kind = DriverKind.PILLOW

    def analyze(self, image: Image) -> list[Color]:
        self.check_position(image)
        processor = self.driver.color_processor(image.colorspace)
        return [processor.native_to_color(frame.native.getpixel((self.x, self.y))) for frame in image]


SPECIALIZED = {
    PixelColorAnalyzer: PillowPixelColorAnalyzer,
    PixelColorsAnalyzer: PillowPixelColorsAnalyzer,
}
