"""统一配置管理模块。

提供应用程序的全局默认配置（支持环境变量覆盖），以及驱动读取的 DriverConfig。
"""

import os
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


@dataclass(frozen=True)
class DriverDefaults:
    """驱动相关的默认配置"""

    # 解码后按 EXIF 方向自动旋转
    AUTO_ORIENTATION: bool = True
    # 保留动画的全部帧，False 时只保留第一帧
    DECODE_ANIMATION: bool = True
    # 编码为不支持透明度的格式时使用的底色
    BLENDING_COLOR: str = "ffffff"
    # 编码时移除元数据
    STRIP: bool = False


@dataclass(frozen=True)
class EncoderDefaults:
    """编码相关的默认配置"""

    JPEG_QUALITY: int = 75
    WEBP_QUALITY: int = 75
    PNG_COMPRESS_LEVEL: int = 6

    def get_format_defaults(self, format_name: str) -> dict[str, Any]:
        """获取格式特定的默认参数"""
        defaults = {
            "JPEG": {"quality": self.JPEG_QUALITY},
            "WEBP": {"quality": self.WEBP_QUALITY},
            "PNG": {"compress_level": self.PNG_COMPRESS_LEVEL},
        }
        return defaults.get(format_name.upper(), {})


@dataclass(frozen=True)
class LoggingDefaults:
    """日志相关的默认配置"""

    # 日志级别
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # 文件日志
    ENABLE_FILE_LOGGING: bool = False
    LOG_FILE_PATH: str = "py_image_driver.log"
    LOG_FILE_MAX_SIZE: int = 10 * 1024 * 1024  # 10MB
    LOG_FILE_BACKUP_COUNT: int = 5


def _env_flag(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


class AppConfig:
    """应用程序配置管理器

    支持环境变量覆盖默认配置
    """

    def __init__(self):
        self.driver = DriverDefaults()
        self.encoder = EncoderDefaults()
        self.logging = LoggingDefaults()

        # 从环境变量加载配置
        self._load_from_env()

    def _load_from_env(self):
        """从环境变量加载配置"""
        # 驱动配置
        if auto_orientation := os.getenv("PID_AUTO_ORIENTATION"):
            object.__setattr__(
                self.driver, "AUTO_ORIENTATION", _env_flag(auto_orientation)
            )

        if decode_animation := os.getenv("PID_DECODE_ANIMATION"):
            object.__setattr__(
                self.driver, "DECODE_ANIMATION", _env_flag(decode_animation)
            )

        if blending_color := os.getenv("PID_BLENDING_COLOR"):
            object.__setattr__(self.driver, "BLENDING_COLOR", blending_color)

        if strip := os.getenv("PID_STRIP"):
            object.__setattr__(self.driver, "STRIP", _env_flag(strip))

        # 编码配置
        if jpeg_quality := os.getenv("PID_JPEG_QUALITY"):
            object.__setattr__(self.encoder, "JPEG_QUALITY", int(jpeg_quality))

        if webp_quality := os.getenv("PID_WEBP_QUALITY"):
            object.__setattr__(self.encoder, "WEBP_QUALITY", int(webp_quality))

        # 日志配置
        if log_level := os.getenv("PID_LOG_LEVEL"):
            object.__setattr__(self.logging, "LOG_LEVEL", log_level.upper())

        if enable_file_log := os.getenv("PID_ENABLE_FILE_LOGGING"):
            object.__setattr__(
                self.logging, "ENABLE_FILE_LOGGING", _env_flag(enable_file_log)
            )


# 全局配置实例
config = AppConfig()


def get_config() -> AppConfig:
    """获取全局配置实例"""
    return config


def reset_config():
    """重置配置（主要用于测试）"""
    global config
    config = AppConfig()


class DriverConfig(BaseModel):
    """驱动配置

    每个驱动实例持有一份，解码器和编码器从这里读取行为开关。
    """

    model_config = ConfigDict(validate_assignment=True)

    auto_orientation: bool = Field(
        default_factory=lambda: get_config().driver.AUTO_ORIENTATION,
        description="解码后按 EXIF 方向自动旋转",
    )
    decode_animation: bool = Field(
        default_factory=lambda: get_config().driver.DECODE_ANIMATION,
        description="保留动画的全部帧",
    )
    blending_color: str = Field(
        default_factory=lambda: get_config().driver.BLENDING_COLOR,
        description="透明区域合成底色",
    )
    strip: bool = Field(
        default_factory=lambda: get_config().driver.STRIP,
        description="编码时移除元数据",
    )

    @field_validator("blending_color")
    @classmethod
    def validate_blending_color(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("底色不能为空")
        return v.strip()

    def set_options(self, **options: Any) -> "DriverConfig":
        """批量设置配置项

        Raises:
            InputError: 出现未知配置项时
        """
        from .exceptions import InputError

        unknown = set(options) - set(type(self).model_fields)
        if unknown:
            raise InputError(f"未知的配置项: {', '.join(sorted(unknown))}")

        try:
            for key, value in options.items():
                setattr(self, key, value)
        except ValidationError as e:
            raise InputError(f"配置项无效: {e.errors()[0]['msg']}") from e

        return self
