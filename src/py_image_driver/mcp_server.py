"""图像处理 MCP 服务器。

提供两个工具：读取图片信息，以及按操作列表处理图片并保存。
"""

from pathlib import Path
from typing import Any

from fastmcp import FastMCP

from .exceptions import (
    DecoderError,
    DriverError,
    EncoderError,
    ImageError,
    InputError,
)
from .image import Image
from .image_manager import ImageManager
from .models.constants import ImageFormats
from .models.image_info import ImageInfo
from .typography import Font
from .utils.logging_helpers import configure_logging, get_logger
from .utils.message_formatter import MessageFormatter


# MCP 服务器响应类型定义
MCPImageInfoResponse = dict[str, Any]
MCPProcessResponse = dict[str, Any]


class MCPResponseBuilder:
    """MCP 服务器响应构建器"""

    @staticmethod
    def error(
        message: str,
        error_type: str = "general",
        details: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """构建错误结果。

        Args:
            message: 错误消息
            error_type: 错误类型
            details: 额外的错误详情

        Returns:
            dict: 标准化的错误响应
        """
        result = {
            "success": False,
            "error": message,
            "error_type": error_type,
        }

        if details:
            result["details"] = details

        return result

    @staticmethod
    def validation_error(message: str, field: str | None = None) -> dict[str, Any]:
        details = {"field": field} if field else None
        return MCPResponseBuilder.error(message, "validation", details)

    @staticmethod
    def file_error(message: str, file_path: str | None = None) -> dict[str, Any]:
        details = {"file_path": file_path} if file_path else None
        return MCPResponseBuilder.error(message, "file", details)

    @staticmethod
    def processing_error(message: str, operation: str | None = None) -> dict[str, Any]:
        details = {"operation": operation} if operation else None
        return MCPResponseBuilder.error(message, "processing", details)

    @staticmethod
    def from_exception(error: ImageError, operation: str) -> dict[str, Any]:
        """按异常类型映射为响应"""
        match error:
            case InputError():
                return MCPResponseBuilder.validation_error(error.message)
            case DecoderError():
                return MCPResponseBuilder.error(error.message, "decode")
            case EncoderError():
                return MCPResponseBuilder.error(error.message, "encode")
            case DriverError():
                return MCPResponseBuilder.error(error.message, "driver")
            case _:
                return MCPResponseBuilder.processing_error(error.message, operation)


configure_logging()
logger = get_logger()

# 创建MCP应用
mcp: FastMCP[Any] = FastMCP("图像处理服务")


def apply_operation(image: Image, operation: dict[str, Any]) -> Image:
    """把一条操作描述应用到图像上

    Raises:
        InputError: 操作类型未知或缺少参数
    """
    params = {key: value for key, value in operation.items() if key != "type"}
    try:
        match operation.get("type"):
            case "resize":
                return image.resize(params.get("width"), params.get("height"))
            case "scale":
                return image.scale(params.get("width"), params.get("height"))
            case "crop":
                return image.crop(**params)
            case "rotate":
                return image.rotate(**params)
            case "flip":
                return image.flip()
            case "flop":
                return image.flop()
            case "greyscale" | "grayscale":
                return image.greyscale()
            case "invert":
                return image.invert()
            case "orient":
                return image.orient()
            case "remove_animation":
                return image.remove_animation(params.get("position", 0))
            case "text":
                font = Font(**params.pop("font", {}))
                return image.text(font=font, **params)
            case "draw_rectangle":
                return image.draw_rectangle(**params)
            case "draw_ellipse":
                return image.draw_ellipse(**params)
            case "draw_circle":
                return image.draw_circle(**params)
            case "draw_line":
                return image.draw_line(**params)
            case other:
                raise InputError(f"未知的操作类型: {other}")
    except TypeError as e:
        raise InputError(
            MessageFormatter.validation_error("operation", operation, str(e))
        ) from e


def describe_image(input_path: str, driver: str = "pillow") -> MCPImageInfoResponse:
    """获取图片信息。

    Args:
        input_path: 输入图像文件路径
        driver: 使用的驱动（pillow/imagick）

    Returns:
        dict: 尺寸、格式、颜色空间、帧与循环信息
    """
    path = Path(input_path)
    if not path.is_file():
        return MCPResponseBuilder.file_error(MessageFormatter.file_not_found(input_path), input_path)

    try:
        manager = ImageManager(driver, auto_orientation=False)
        with manager.read(path) as image:
            info = ImageInfo.from_image(image, path.stat().st_size)

        return {
            "success": True,
            **info.model_dump(mode="json"),
            "file_size_human": info.get_file_size_human(),
        }

    except ImageError as e:
        logger.error(MessageFormatter.operation_failed("获取图片信息", input_path, e))
        return MCPResponseBuilder.from_exception(e, "图片信息获取")


def process_file(
    input_path: str,
    output_path: str,
    operations: list[dict[str, Any]] | None = None,
    driver: str = "pillow",
    quality: int | None = None,
) -> MCPProcessResponse:
    """按顺序执行操作并保存结果。

    Args:
        input_path: 输入图像文件路径
        output_path: 输出文件路径，按扩展名选择格式
        operations: 操作列表，如 [{"type": "resize", "width": 320},
            {"type": "text", "text": "hi", "x": 10, "y": 20, "font": {"size": 24}}]
        driver: 使用的驱动（pillow/imagick）
        quality: JPEG/WEBP 编码质量 1-100

    Returns:
        dict: 处理结果，包含输出路径与输出图片信息
    """
    path = Path(input_path)
    if not path.is_file():
        return MCPResponseBuilder.file_error(MessageFormatter.file_not_found(input_path), input_path)

    try:
        manager = ImageManager(driver)
        with manager.read(path) as image:
            for operation in operations or []:
                apply_operation(image, operation)

            extension = Path(output_path).suffix.lstrip(".") or None
            options = {}
            if quality is not None:
                if extension and ImageFormats.from_extension(extension) in ImageFormats.QUALITY_FORMATS:
                    options["quality"] = quality
                else:
                    logger.debug(f"输出格式不支持质量参数，已忽略 quality={quality}")
            encoded = image.encode_by_extension(extension, **options)
            saved = encoded.save(output_path)
            info = ImageInfo.from_image(image, encoded.size)

        logger.info(f"已处理 {input_path} -> {saved} ({encoded.get_size_human()})")
        return {
            "success": True,
            "output_path": str(saved),
            "media_type": encoded.media_type,
            "output_size": encoded.size,
            "output_size_human": encoded.get_size_human(),
            "width": info.width,
            "height": info.height,
            "frame_count": info.frame_count,
        }

    except ImageError as e:
        logger.error(MessageFormatter.operation_failed("处理图片", input_path, e))
        return MCPResponseBuilder.from_exception(e, "图片处理")


# ============================================================================
# MCP 工具
# ============================================================================


@mcp.tool()
def get_image_info(input_path: str, driver: str = "pillow") -> MCPImageInfoResponse:
    """获取图片信息：尺寸、格式、颜色空间、帧数与循环次数。"""
    return describe_image(input_path, driver)


@mcp.tool()
def process_image(
    input_path: str,
    output_path: str,
    operations: list[dict[str, Any]] | None = None,
    driver: str = "pillow",
    quality: int | None = None,
) -> MCPProcessResponse:
    """按操作列表处理图片并按输出扩展名编码保存。

    支持的操作类型：resize、scale、crop、rotate、flip、flop、greyscale、
    invert、orient、remove_animation、text、draw_rectangle、draw_ellipse、
    draw_circle、draw_line。
    """
    return process_file(input_path, output_path, operations, driver, quality)


# ============================================================================
# 应用入口
# ============================================================================


def main() -> None:
    """启动 MCP 服务器"""
    logger.info("启动图像处理 MCP 服务器")
    mcp.run()


if __name__ == "__main__":
    main()
