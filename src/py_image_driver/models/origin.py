"""图像来源信息模型。

记录解码时的原始格式信息，用于编码时还原原始格式。
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .constants import ImageFormats


class Origin(BaseModel):
    """图像来源信息"""

    model_config = ConfigDict(validate_assignment=True)

    media_type: str = Field("application/octet-stream", description="原始 MIME 类型")
    file_path: Path | None = Field(None, description="原始文件路径")
    indexed: bool = Field(False, description="原图是否为调色板（索引色）图像")

    @property
    def format(self) -> str | None:
        """原始格式名称"""
        return ImageFormats.from_mime_type(self.media_type)

    @property
    def file_extension(self) -> str | None:
        """原始文件扩展名（不含点）"""
        if self.file_path is None or not self.file_path.suffix:
            return None
        return self.file_path.suffix.lstrip(".").lower()
