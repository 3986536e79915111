"""Wand 分析器。"""

from ...analyzers import PixelColorAnalyzer, PixelColorsAnalyzer
from ...colors import AnyColor
from ...image import Image
from ..specializable import DriverKind


class ImagickPixelColorAnalyzer(PixelColorAnalyzer):
    driver_kind = DriverKind.IMAGICK

    def analyze(self, image: Image) -> AnyColor:
        self.check_position(image)
        native = image.frame(self.frame).native[self.x, self.y]
        return self.driver.color_processor(image.colorspace).native_to_color(native)


class ImagickPixelColorsAnalyzer(PixelColorsAnalyzer):
    driver_kind = DriverKind.IMAGICK

    def analyze(self, image: Image) -> list[AnyColor]:
        self.check_position(image)
        processor = self.driver.color_processor(image.colorspace)
        return [processor.native_to_color(frame.native[self.x, self.y]) for frame in image]


SPECIALIZED = {
    PixelColorAnalyzer: ImagickPixelColorAnalyzer,
    PixelColorsAnalyzer: ImagickPixelColorsAnalyzer,
}
