"""字体模型与字体构建器。"""

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import FontError


class Alignment(str, Enum):
    """水平对齐方式"""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalAlignment(str, Enum):
    """垂直对齐方式"""

    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class Font(BaseModel):
    """字体配置

    颜色保存为原始输入（十六进制、颜色名、Color 对象等），
    绘制时由驱动解析。
    """

    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)

    filename: Path | None = Field(None, description="TrueType 字体文件，None 表示内置字体")
    size: float = Field(12, gt=0, description="字号（像素）")
    color: Any = Field("000000", description="文字颜色")
    stroke_color: Any = Field("ffffff", description="描边颜色")
    stroke_width: int = Field(0, description="描边宽度（0-10）")
    angle: float = Field(0, description="旋转角度（顺时针，度）")
    alignment: Alignment = Field(Alignment.LEFT, description="水平对齐")
    valignment: VerticalAlignment = Field(VerticalAlignment.BOTTOM, description="垂直对齐")
    line_height: float = Field(1.25, gt=0, description="行高倍数")
    wrap_width: int | None = Field(None, gt=0, description="自动换行宽度（像素）")

    @field_validator("stroke_width")
    @classmethod
    def validate_stroke_width(cls, v: int) -> int:
        if not 0 <= v <= 10:
            raise FontError(f"描边宽度必须在 0-10 之间，得到: {v}")
        return v

    @property
    def has_filename(self) -> bool:
        return self.filename is not None

    @property
    def has_stroke(self) -> bool:
        return self.stroke_width > 0


class FontFactory:
    """字体构建器

    Example:
        >>> font = FontFactory().size(24).color("ff0000").align("center").create()
    """

    def __init__(self, font: Font | None = None):
        self._options: dict[str, Any] = font.model_dump() if font else {}

    def _set(self, key: str, value: Any) -> "FontFactory":
        self._options[key] = value
        return self

    def filename(self, filename: str | Path) -> "FontFactory":
        return self._set("filename", filename)

    def file(self, filename: str | Path) -> "FontFactory":
        return self.filename(filename)

    def size(self, size: float) -> "FontFactory":
        return self._set("size", size)

    def color(self, color: Any) -> "FontFactory":
        return self._set("color", color)

    def stroke(self, color: Any, width: int = 1) -> "FontFactory":
        self._set("stroke_color", color)
        return self._set("stroke_width", width)

    def angle(self, angle: float) -> "FontFactory":
        return self._set("angle", angle)

    def align(self, alignment: str) -> "FontFactory":
        return self._set("alignment", alignment)

    def valign(self, valignment: str) -> "FontFactory":
        return self._set("valignment", valignment)

    def line_height(self, line_height: float) -> "FontFactory":
        return self._set("line_height", line_height)

    def wrap(self, width: int) -> "FontFactory":
        return self._set("wrap_width", width)

    def create(self) -> Font:
        """创建字体

        Raises:
            FontError: 字体参数无效时
        """
        try:
            return Font(**self._options)
        except ValidationError as e:
            raise FontError(f"字体参数无效: {e}") from e

    def __call__(self) -> Font:
        return self.create()
