"""日志工具模块。

提供统一的日志记录功能，标准化日志格式和配置。
"""

import inspect
import logging


def get_logger(name: str | None = None) -> logging.Logger:
    """获取标准化配置的日志记录器。

    Args:
        name: 日志记录器名称，默认使用调用模块的 __name__

    Returns:
        logging.Logger: 配置好的日志记录器
    """
    if name is None:
        # 获取调用者的模块名
        frame = inspect.currentframe()
        if frame and frame.f_back:
            name = frame.f_back.f_globals.get("__name__", "unknown")
        else:
            name = "unknown"

    return logging.getLogger(name)


def configure_logging(level: str | None = None) -> None:
    """按全局日志配置初始化根日志记录器。

    Args:
        level: 日志级别，None 时使用 LoggingDefaults.LOG_LEVEL
    """
    from ..config import get_config

    defaults = get_config().logging
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if defaults.ENABLE_FILE_LOGGING:
        from logging.handlers import RotatingFileHandler

        handlers.append(
            RotatingFileHandler(
                defaults.LOG_FILE_PATH,
                maxBytes=defaults.LOG_FILE_MAX_SIZE,
                backupCount=defaults.LOG_FILE_BACKUP_COUNT,
            )
        )

    logging.basicConfig(
        level=(level or defaults.LOG_LEVEL).upper(),
        format=defaults.LOG_FORMAT,
        handlers=handlers,
    )
