"""驱动无关的帧与帧序列。

每个 Frame 独占一个原生图像对象。复制一定是深复制，
因为后端的像素操作都是原地修改。
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from ..colors import Colorspace
from ..exceptions import AnimationError, GeometryError
from ..utils.logging_helpers import get_logger


if TYPE_CHECKING:
    from ..image import Image
    from .abstract import AbstractDriver


logger = get_logger()


class AbstractFrame(ABC):
    """动画中的一帧

    Attributes:
        native: 独占的原生图像对象
        delay: 帧延迟（秒）
        dispose: 帧处置方式提示
    """

    def __init__(self, native: Any, delay: float = 0, dispose: int = 0):
        self.native = native
        self.delay = delay
        self.dispose = dispose

    @property
    @abstractmethod
    def size(self) -> tuple[int, int]:
        """(宽, 高)"""

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]

    @property
    def colorspace(self) -> Colorspace:
        return Colorspace.RGB

    @abstractmethod
    def clone(self) -> "AbstractFrame":
        """深复制，包括原生对象"""

    @abstractmethod
    def close(self) -> None:
        """释放原生对象"""

    def to_image(self, driver: "AbstractDriver") -> "Image":
        """以本帧的副本创建单帧图像"""
        from ..image import Image

        return Image(driver, Core([self.clone()]))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, delay={self.delay})"


class Core:
    """帧序列

    所有帧共享相同的宽高，第一帧的原生对象即 native。
    """

    def __init__(self, frames: list[AbstractFrame] | None = None, loops: int = 0):
        self.frames: list[AbstractFrame] = []
        self.loops = loops
        for frame in frames or []:
            self.add(frame)

    @property
    def native(self) -> Any:
        return self.frame(0).native

    @property
    def size(self) -> tuple[int, int]:
        return self.frame(0).size

    def add(self, frame: AbstractFrame) -> "Core":
        """追加一帧

        Raises:
            GeometryError: 帧尺寸与已有帧不同
        """
        if self.frames and frame.size != self.size:
            raise GeometryError(f"帧尺寸 {frame.size} 与图像尺寸 {self.size} 不一致")
        self.frames.append(frame)
        return self

    def frame(self, position: int = 0) -> AbstractFrame:
        """获取指定位置的帧

        Raises:
            AnimationError: 位置超出范围
        """
        if not 0 <= position < len(self.frames):
            raise AnimationError(f"帧位置超出范围: {position}（共 {len(self.frames)} 帧）")
        return self.frames[position]

    def keep(self, position: int) -> "Core":
        """只保留指定位置的帧，释放其余帧"""
        kept = self.frame(position)
        for frame in self.frames:
            if frame is not kept:
                frame.close()
        self.frames = [kept]
        return self

    def replace(self, frames: list[AbstractFrame]) -> "Core":
        """替换全部帧（旧帧已由调用方释放或复用）"""
        self.frames = []
        for frame in frames:
            self.add(frame)
        return self

    def clone(self) -> "Core":
        return Core([frame.clone() for frame in self.frames], self.loops)

    def close(self) -> None:
        for frame in self.frames:
            frame.close()
        logger.debug(f"已释放 {len(self.frames)} 帧")
        self.frames = []

    def __iter__(self) -> Iterator[AbstractFrame]:
        return iter(self.frames)

    def __len__(self) -> int:
        return len(self.frames)
