"""消息格式化工具模块。

提供统一的错误消息格式化功能。
"""

from pathlib import Path
from typing import Any


class MessageFormatter:
    """统一的消息格式化器"""

    @staticmethod
    def file_not_found(file_path: str | Path) -> str:
        """文件不存在错误消息"""
        return f"文件不存在: {file_path}"

    @staticmethod
    def unable_to_decode(value: Any = None) -> str:
        """无法解码输入的错误消息"""
        if value is None:
            return "无法解码输入"
        return f"无法解码输入: {MessageFormatter.describe_input(value)}"

    @staticmethod
    def unable_to_encode(format_name: str, error: Exception | None = None) -> str:
        """编码失败消息"""
        msg = f"无法编码为 {format_name}"
        if error:
            msg += f" - {error}"
        return msg

    @staticmethod
    def not_supported(component: object, driver_id: str) -> str:
        """驱动不支持某组件的消息"""
        name = type(component).__name__
        return f"{name} 不被驱动 {driver_id} 支持"

    @staticmethod
    def operation_failed(
        operation: str, target: Any = None, error: Exception | None = None
    ) -> str:
        """操作失败消息"""
        msg = f"{operation}失败"
        if target is not None:
            msg += f": {target}"
        if error:
            msg += f" - {error}"
        return msg

    @staticmethod
    def validation_error(field: str, value: Any, reason: str | None = None) -> str:
        """参数验证错误消息"""
        msg = f"参数验证失败 - {field}: {value}"
        if reason:
            msg += f" ({reason})"
        return msg

    @staticmethod
    def describe_input(value: Any) -> str:
        """生成输入值的简短描述，避免把大块二进制写进日志"""
        if isinstance(value, bytes | bytearray | memoryview):
            return f"<{len(value)} 字节二进制数据>"
        if isinstance(value, str) and len(value) > 64:
            return f"{value[:61]}..."
        if isinstance(value, str | Path | int | float | tuple):
            return repr(value)
        return f"<{type(value).__name__} 对象>"
