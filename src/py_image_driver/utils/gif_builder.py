"""GIF 动画构建器。

每帧以单帧 GIF 字节提供，构建器用 Pillow 的 GifImagePlugin 逐块写出
文件头、循环扩展与每一帧（带局部调色板），不经过 save_all，
因此相邻的相同帧不会被合并。
"""

import io

from PIL import GifImagePlugin, Image

from .logging_helpers import get_logger


logger = get_logger()

# GIF 的 NETSCAPE 扩展用 16 位无符号整数记录循环次数
MAX_LOOPS = 65535

# 量化后保留最后一个调色板索引作为透明色
TRANSPARENT_INDEX = 255

# 恢复为背景色，透明区域不会透出上一帧
DISPOSAL_RESTORE_BACKGROUND = 2


def check_loops(loops: int) -> int:
    """校验循环次数

    Raises:
        ValueError: 不在 0-65535 之间
    """
    if isinstance(loops, bool) or not isinstance(loops, int) or not 0 <= loops <= MAX_LOOPS:
        raise ValueError(f"循环次数必须是 0-{MAX_LOOPS} 之间的整数，得到: {loops!r}")
    return loops


def to_palette(frame: Image.Image) -> tuple[Image.Image, int | None]:
    """把 RGBA 帧量化为 256 色调色板图像

    Returns:
        (调色板图像, 透明色索引)，没有透明像素时索引为 None
    """
    transparent = frame.getchannel("A").point(lambda alpha: 255 if alpha < 128 else 0)
    quantized = frame.convert("RGB").quantize(colors=TRANSPARENT_INDEX)

    palette = quantized.getpalette()[: TRANSPARENT_INDEX * 3]
    quantized.putpalette(palette + [0] * (768 - len(palette)))

    if transparent.getbbox() is None:
        return quantized, None
    quantized.paste(TRANSPARENT_INDEX, mask=transparent)
    return quantized, TRANSPARENT_INDEX


class GifBuilder:
    """GIF 动画构建器

    Example:
        >>> builder = GifBuilder.canvas(100, 100)
        >>> builder.add_frame(frame_bytes, delay=0.5)
        >>> builder.set_loops(0)
        >>> data = builder.encode()
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"画布尺寸无效: {width}x{height}")
        self.width = width
        self.height = height
        self.loops = 0
        self._frames: list[tuple[Image.Image, int | None]] = []
        self._durations: list[int] = []

    @classmethod
    def canvas(cls, width: int, height: int) -> "GifBuilder":
        return cls(width, height)

    def add_frame(self, source: bytes, delay: float = 0, interlaced: bool = False) -> "GifBuilder":
        """添加一帧

        Args:
            source: 单帧 GIF 字节
            delay: 帧延迟（秒）
            interlaced: 是否隔行（逐块写出的帧总是非隔行）
        """
        if interlaced:
            logger.debug("动画帧不支持隔行写入，忽略 interlaced")

        with Image.open(io.BytesIO(source)) as frame:
            frame.load()
            if frame.size != (self.width, self.height):
                raise ValueError(f"帧尺寸 {frame.size} 与画布 {self.width}x{self.height} 不一致")
            with frame.convert("RGBA") as rgba:
                self._frames.append(to_palette(rgba))

        # Pillow 以毫秒记录帧延迟
        self._durations.append(round(delay * 1000))
        return self

    def set_loops(self, loops: int) -> "GifBuilder":
        self.loops = check_loops(loops)
        return self

    def encode(self) -> bytes:
        """输出 GIF 字节"""
        if not self._frames:
            raise ValueError("动画至少需要一帧")

        buffer = io.BytesIO()
        first, _ = self._frames[0]
        header, _ = GifImagePlugin.getheader(first, info={"loop": self.loops, "optimize": False})
        for block in header:
            buffer.write(block)

        for (frame, transparency), duration in zip(self._frames, self._durations, strict=True):
            params = {
                "include_color_table": True,
                "duration": duration,
                "disposal": DISPOSAL_RESTORE_BACKGROUND,
            }
            if transparency is not None:
                params["transparency"] = transparency
            for block in GifImagePlugin.getdata(frame, **params):
                buffer.write(block)

        buffer.write(b";")
        logger.debug(f"已组装 {len(self._frames)} 帧 GIF 动画")
        return buffer.getvalue()

    def close(self) -> None:
        for frame, _ in self._frames:
            frame.close()
        self._frames = []
        self._durations = []

    def __enter__(self) -> "GifBuilder":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
