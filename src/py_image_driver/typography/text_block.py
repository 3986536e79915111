"""文本排版结果。"""

from collections.abc import Iterator

from ..geometry import Point


class Line:
    """一行文本：单词序列加上基线位置"""

    def __init__(self, text: str = "", position: Point | None = None):
        self.segments: list[str] = text.split(" ") if text else []
        self.position = position or Point()

    def add(self, word: str) -> "Line":
        self.segments.append(word)
        return self

    def set_position(self, position: Point) -> "Line":
        self.position = position
        return self

    def __len__(self) -> int:
        return len(str(self))

    def __str__(self) -> str:
        return " ".join(self.segments)

    def __repr__(self) -> str:
        return f"Line({str(self)!r}, {self.position!r})"


class TextBlock:
    """按顺序排列的多行文本"""

    def __init__(self, text: str = ""):
        self.lines: list[Line] = [Line(line) for line in text.splitlines()] if text else []

    @classmethod
    def from_lines(cls, lines: list[Line]) -> "TextBlock":
        block = cls()
        block.lines = list(lines)
        return block

    def add(self, line: Line) -> "TextBlock":
        self.lines.append(line)
        return self

    def longest_line(self) -> Line:
        """字符数最多的一行"""
        if not self.lines:
            return Line()
        return max(self.lines, key=len)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, index: int) -> Line:
        return self.lines[index]

    def __str__(self) -> str:
        return "\n".join(str(line) for line in self.lines)
