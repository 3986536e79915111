"""解码器模块包。"""

from .base import AbstractDecoder, AbstractImageDecoder
from .colors import (
    CmykStringColorDecoder,
    ColorObjectDecoder,
    HexColorDecoder,
    HtmlColornameDecoder,
    RgbStringColorDecoder,
    TransparentColorDecoder,
    TupleColorDecoder,
)
from .images import (
    Base64ImageDecoder,
    BinaryImageDecoder,
    DataUriImageDecoder,
    FilePathImageDecoder,
    FilePointerImageDecoder,
    ImageObjectDecoder,
    NativeObjectDecoder,
)


__all__ = [
    "AbstractDecoder",
    "AbstractImageDecoder",
    "Base64ImageDecoder",
    "BinaryImageDecoder",
    "CmykStringColorDecoder",
    "ColorObjectDecoder",
    "DataUriImageDecoder",
    "FilePathImageDecoder",
    "FilePointerImageDecoder",
    "HexColorDecoder",
    "HtmlColornameDecoder",
    "ImageObjectDecoder",
    "NativeObjectDecoder",
    "RgbStringColorDecoder",
    "TransparentColorDecoder",
    "TupleColorDecoder",
]
