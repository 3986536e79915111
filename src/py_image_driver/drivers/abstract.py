"""驱动基类。

驱动负责三件事：把通用组件解析为自己的特化实现、处理输入、
以及提供颜色与字体处理器。具体的像素操作全部交给后端库。
"""

from abc import ABC, abstractmethod
from dataclasses import fields
from typing import TYPE_CHECKING, Any, ClassVar

from ..colors import AbstractColorProcessor, AnyColor, Color, Colorspace
from ..config import DriverConfig
from ..exceptions import ColorError, DecoderError, NotSupportedError
from ..typography import AbstractFontProcessor
from ..utils.logging_helpers import get_logger
from ..utils.message_formatter import MessageFormatter
from .core import AbstractFrame, Core
from .specializable import DriverKind, Specializable


if TYPE_CHECKING:
    from ..image import Image


logger = get_logger()


class AbstractDriver(ABC):
    """驱动基类

    子类需要设置 kind、id 与 SPECIALIZED（通用类 -> 特化类）。
    """

    kind: ClassVar[DriverKind]
    id: ClassVar[str]
    SPECIALIZED: ClassVar[dict[type, type]] = {}

    def __init__(self, config: DriverConfig | None = None, **options: Any):
        self.check_health()
        self.config = config or DriverConfig()
        self.config.set_options(**options)
        self._color_processors: dict[Colorspace, AbstractColorProcessor] = {}

    @abstractmethod
    def check_health(self) -> None:
        """检查后端库是否可用

        Raises:
            DriverError: 后端库缺失
        """

    # 组件解析

    def specialize(self, component: Specializable) -> Any:
        """把通用组件解析为当前驱动的实现

        Raises:
            NotSupportedError: 组件属于其他驱动，或没有特化实现也没有通用回退
        """
        if component.is_specialized:
            if component.driver_kind != self.kind:
                raise NotSupportedError(MessageFormatter.not_supported(component, self.id))
            return component.bind(self)

        specialized_class = self.SPECIALIZED.get(type(component))
        if specialized_class is not None:
            specialized = specialized_class(
                **{f.name: getattr(component, f.name) for f in fields(component)}
            )
            logger.debug(f"{type(component).__name__} -> {specialized_class.__name__}")
            return specialized.bind(self)

        if component.generic_fallback:
            return component.bind(self)

        raise NotSupportedError(MessageFormatter.not_supported(component, self.id))

    def specialize_multiple(self, components: list[Specializable]) -> list[Any]:
        return [self.specialize(component) for component in components]

    # 输入处理

    def handle_input(self, value: Any, decoders: Any = None) -> "Image | AnyColor":
        """解码任意支持的输入，返回图像或颜色"""
        from .input_handler import InputHandler

        return InputHandler(decoders, driver=self).handle(value)

    def handle_color(self, value: Any) -> AnyColor:
        """把输入解析为颜色

        Raises:
            ColorError: 无法解析为颜色
        """
        from .input_handler import InputHandler

        try:
            return InputHandler.with_color_decoders(driver=self).handle(value)
        except DecoderError as e:
            raise ColorError(f"无法解析颜色: {MessageFormatter.describe_input(value)}") from e

    def blending_color(self) -> Color:
        """透明区域合成到不支持透明度的格式时使用的底色"""
        return self.handle_color(self.config.blending_color).to_rgb()

    # 图像创建

    @abstractmethod
    def new_frame(self, width: int, height: int, delay: float = 0) -> AbstractFrame:
        """创建透明帧"""

    def create_image(self, width: int, height: int) -> "Image":
        """创建透明画布"""
        from ..image import Image

        return Image(self, Core([self.new_frame(width, height)]))

    def create_animation(self, frames: list[tuple[Any, float]], loops: int = 0) -> "Image":
        """由 (输入, 延迟秒数) 序列创建动画

        尺寸与第一帧不同的输入会先缩放到第一帧的尺寸。
        """
        from ..image import Image
        from ..modifiers import ResizeModifier

        core = Core(loops=loops)
        try:
            for source, delay in frames:
                image = self.handle_input(source)
                if not isinstance(image, Image):
                    raise DecoderError(MessageFormatter.unable_to_decode(source))
                if image is source:
                    # 不能释放调用方传入的图像
                    image = image.clone()
                with image:
                    if core.frames and image.size != core.size:
                        image.modify(ResizeModifier(*core.size))
                    frame = image.frame(0).clone()
                frame.delay = delay
                core.add(frame)
        except Exception:
            core.close()
            raise

        if not core.frames:
            raise DecoderError("动画至少需要一帧")

        logger.debug(f"已创建 {len(core)} 帧动画，循环 {loops} 次")
        return Image(self, core)

    # 处理器

    def color_processor(self, colorspace: Colorspace = Colorspace.RGB) -> AbstractColorProcessor:
        """颜色处理器

        每个颜色空间只创建一个处理器，转换结果在驱动的生命周期内复用。
        """
        if colorspace not in self._color_processors:
            self._color_processors[colorspace] = self.new_color_processor(colorspace)
        return self._color_processors[colorspace]

    @abstractmethod
    def new_color_processor(self, colorspace: Colorspace) -> AbstractColorProcessor:
        """创建颜色处理器"""

    @abstractmethod
    def font_processor(self) -> AbstractFontProcessor:
        """字体处理器"""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.config!r})"
