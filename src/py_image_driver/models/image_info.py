"""图像信息模型。

对外（MCP 工具等）输出的图像摘要信息。
"""

from pathlib import Path
from typing import TYPE_CHECKING

from humanize import naturalsize
from pydantic import BaseModel, Field, computed_field


if TYPE_CHECKING:
    from ..image import Image


class FrameInfo(BaseModel):
    """单帧信息"""

    index: int = Field(ge=0, description="帧序号")
    delay: float = Field(ge=0.0, description="帧延迟（秒）")


class ImageInfo(BaseModel):
    """图像摘要信息"""

    driver: str = Field(description="使用的驱动")
    width: int = Field(gt=0, description="图片宽度")
    height: int = Field(gt=0, description="图片高度")
    media_type: str = Field(description="原始 MIME 类型")
    colorspace: str = Field(description="颜色空间")
    indexed: bool = Field(default=False, description="原图是否为调色板图像")
    loops: int = Field(default=0, description="动画循环次数，0 为无限循环")
    frames: list[FrameInfo] = Field(default_factory=list, description="帧信息")
    exif_orientation: int | None = Field(None, description="EXIF 方向标记")
    file_path: Path | None = Field(None, description="原始文件路径")
    file_size: int | None = Field(None, ge=0, description="文件大小（字节）")

    @computed_field
    def frame_count(self) -> int:
        """帧数"""
        return len(self.frames)

    @computed_field
    def is_animated(self) -> bool:
        """是否为动画图片"""
        return len(self.frames) > 1

    @computed_field
    def aspect_ratio(self) -> float:
        """宽高比"""
        return self.width / self.height

    @computed_field
    def orientation(self) -> str:
        """图片方向"""
        if self.width > self.height:
            return "landscape"
        if self.height > self.width:
            return "portrait"
        return "square"

    def get_file_size_human(self) -> str | None:
        """人性化显示文件大小"""
        if self.file_size is None:
            return None
        return naturalsize(self.file_size, binary=True)

    @classmethod
    def from_image(cls, image: "Image", file_size: int | None = None) -> "ImageInfo":
        """从 Image 对象构建摘要信息"""
        return cls(
            driver=image.driver.id,
            width=image.width,
            height=image.height,
            media_type=image.origin.media_type,
            colorspace=image.colorspace.value,
            indexed=image.origin.indexed,
            loops=image.loops,
            frames=[
                FrameInfo(index=index, delay=frame.delay)
                for index, frame in enumerate(image)
            ],
            exif_orientation=image.exif.get("Orientation"),
            file_path=image.origin.file_path,
            file_size=file_size,
        )
