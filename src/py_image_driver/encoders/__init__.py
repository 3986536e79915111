"""编码器模块包。"""

from .auto import AutoEncoder, FileExtensionEncoder, MediaTypeEncoder
from .base import AbstractEncoder
from .formats import BmpEncoder, GifEncoder, JpegEncoder, PngEncoder, WebpEncoder


__all__ = [
    "AbstractEncoder",
    "AutoEncoder",
    "BmpEncoder",
    "FileExtensionEncoder",
    "GifEncoder",
    "JpegEncoder",
    "MediaTypeEncoder",
    "PngEncoder",
    "WebpEncoder",
]
