"""图像格式相关常量定义。

格式名称、MIME 类型、扩展名之间的映射，以及基于文件头的快速格式检测。
"""

from typing import Final


class ImageFormats:
    """图像格式映射"""

    # 用户友好的别名
    ALIASES: Final[dict[str, str]] = {
        "JPG": "JPEG",
        "TIF": "TIFF",
    }

    # 格式到首选 MIME 类型
    MIME_TYPES: Final[dict[str, str]] = {
        "JPEG": "image/jpeg",
        "PNG": "image/png",
        "GIF": "image/gif",
        "WEBP": "image/webp",
        "BMP": "image/bmp",
        "TIFF": "image/tiff",
    }

    # 额外接受的 MIME 类型写法
    MIME_ALIASES: Final[dict[str, str]] = {
        "image/jpg": "JPEG",
        "image/pjpeg": "JPEG",
        "image/x-png": "PNG",
        "image/x-ms-bmp": "BMP",
        "image/x-bmp": "BMP",
        "image/x-webp": "WEBP",
    }

    # 格式到首选扩展名
    PREFERRED_EXTENSIONS: Final[dict[str, str]] = {
        "JPEG": ".jpg",
        "PNG": ".png",
        "GIF": ".gif",
        "WEBP": ".webp",
        "BMP": ".bmp",
        "TIFF": ".tiff",
    }

    # 扩展名到格式
    EXTENSIONS: Final[dict[str, str]] = {
        ".jpg": "JPEG",
        ".jpeg": "JPEG",
        ".jpe": "JPEG",
        ".png": "PNG",
        ".gif": "GIF",
        ".webp": "WEBP",
        ".bmp": "BMP",
        ".tif": "TIFF",
        ".tiff": "TIFF",
    }

    # 业务相关的格式分类
    TRANSPARENCY_FORMATS: Final[set[str]] = {"PNG", "WEBP", "GIF", "TIFF", "BMP"}
    ANIMATION_FORMATS: Final[set[str]] = {"GIF"}
    QUALITY_FORMATS: Final[set[str]] = {"JPEG", "WEBP"}

    @classmethod
    def get_mime_type(cls, format_name: str) -> str:
        """获取格式的 MIME 类型"""
        format_upper = get_format_alias(format_name)
        return cls.MIME_TYPES.get(format_upper, f"image/{format_upper.lower()}")

    @classmethod
    def from_mime_type(cls, media_type: str) -> str | None:
        """从 MIME 类型获取格式名称"""
        media_type = media_type.lower().split(";")[0].strip()
        if media_type in cls.MIME_ALIASES:
            return cls.MIME_ALIASES[media_type]
        for format_name, mime in cls.MIME_TYPES.items():
            if mime == media_type:
                return format_name
        return None

    @classmethod
    def from_extension(cls, extension: str) -> str | None:
        """从扩展名获取格式名称"""
        extension = extension.lower()
        if not extension.startswith("."):
            extension = f".{extension}"
        return cls.EXTENSIONS.get(extension)

    @classmethod
    def get_extension(cls, format_name: str) -> str:
        """获取格式的首选扩展名"""
        format_upper = get_format_alias(format_name)
        return cls.PREFERRED_EXTENSIONS.get(format_upper, f".{format_upper.lower()}")


class MagicNumbers:
    """常见图像格式的文件头"""

    SIGNATURES: Final[tuple[tuple[bytes, str], ...]] = (
        (b"\xff\xd8\xff", "JPEG"),
        (b"\x89PNG\r\n\x1a\n", "PNG"),
        (b"GIF87a", "GIF"),
        (b"GIF89a", "GIF"),
        (b"BM", "BMP"),
        (b"II*\x00", "TIFF"),
        (b"MM\x00*", "TIFF"),
    )


# 便捷访问函数
def get_format_alias(format_str: str) -> str:
    """获取格式的标准名称"""
    format_upper = format_str.upper()
    return ImageFormats.ALIASES.get(format_upper, format_upper)


def get_mime_type(format_str: str) -> str:
    """获取格式的 MIME 类型"""
    return ImageFormats.get_mime_type(format_str)


def get_extension(format_str: str) -> str:
    """获取格式的首选扩展名"""
    return ImageFormats.get_extension(format_str)


def supports_transparency(format_str: str) -> bool:
    """检查格式是否支持透明度"""
    return get_format_alias(format_str) in ImageFormats.TRANSPARENCY_FORMATS


def detect_format(data: bytes) -> str | None:
    """根据文件头快速检测图像格式

    Args:
        data: 图像二进制数据（只读取开头若干字节）

    Returns:
        str | None: 格式名称，无法识别时返回 None
    """
    head = bytes(data[:16])

    # WEBP 是 RIFF 容器，需要额外检查第 8-12 字节
    if head[:4] == b"RIFF" and head[8:12] == b"WEBP":
        return "WEBP"

    for signature, format_name in MagicNumbers.SIGNATURES:
        if head.startswith(signature):
            return format_name

    return None
