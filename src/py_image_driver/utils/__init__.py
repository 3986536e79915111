"""工具函数包。"""

from .logging_helpers import configure_logging, get_logger
from .message_formatter import MessageFormatter


__all__ = [
    "MessageFormatter",
    "configure_logging",
    "get_logger",
]
