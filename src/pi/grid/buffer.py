"""A grid of styled character cells that widgets draw into.

The buffer is the only mutable output of a render pass.  Writes are always
clipped to the buffer area; reading back happens through :meth:`Buffer.lines`
(plain text, for tests) or :meth:`Buffer.to_ansi_lines` (for a terminal).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from pi.grid.layout import Rect
from pi.grid.style import Color, ColorValue, Modifier, Style, sgr_sequence
from pi.grid.text import Line, Span
from pi.grid.utils import iter_graphemes

_SEGMENT_RESET = "\x1b[0m"


@dataclass
class BufferCell:
    """One terminal cell.

    A wide glyph occupies its own cell plus the next one, whose symbol is the
    empty string.
    """

    symbol: str = " "
    fg: ColorValue = Color.RESET
    bg: ColorValue = Color.RESET
    modifier: Modifier = Modifier.NONE

    def set_style(self, style: Style) -> None:
        if style.fg is not None:
            self.fg = style.fg
        if style.bg is not None:
            self.bg = style.bg
        self.modifier = (self.modifier | style.add_modifier) & ~style.sub_modifier

    def style(self) -> Style:
        return Style(fg=self.fg, bg=self.bg, add_modifier=self.modifier)

    def reset(self) -> None:
        self.symbol = " "
        self.fg = Color.RESET
        self.bg = Color.RESET
        self.modifier = Modifier.NONE


@dataclass
class Buffer:
    area: Rect
    content: list[BufferCell] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.content:
            self.content = [BufferCell() for _ in range(self.area.area)]

    @classmethod
    def empty(cls, area: Rect) -> Buffer:
        return cls(area)

    @classmethod
    def with_lines(cls, lines: Sequence[str | Line]) -> Buffer:
        """Build a buffer sized to fit *lines*, mostly for test expectations."""
        parsed = [Line.from_value(line) for line in lines]
        width = max((line.width for line in parsed), default=0)
        buf = cls(Rect(0, 0, width, len(parsed)))
        for y, line in enumerate(parsed):
            buf.set_line(0, y, line, width)
        return buf

    # -- Access -------------------------------------------------------------

    def _contains(self, x: int, y: int) -> bool:
        return self.area.left <= x < self.area.right and self.area.top <= y < self.area.bottom

    def index_of(self, x: int, y: int) -> int:
        if not self._contains(x, y):
            raise IndexError(f"({x}, {y}) is outside the buffer area {self.area}")
        return (y - self.area.y) * self.area.width + (x - self.area.x)

    def get(self, x: int, y: int) -> BufferCell:
        return self.content[self.index_of(x, y)]

    # -- Writes -------------------------------------------------------------

    def set_style(self, area: Rect, style: Style) -> None:
        """Apply *style* to every cell of *area* without touching glyphs."""
        target = self.area.intersection(area)
        for y in range(target.top, target.bottom):
            for x in range(target.left, target.right):
                self.get(x, y).set_style(style)

    def set_stringn(
        self, x: int, y: int, text: str, max_width: int, style: Style
    ) -> tuple[int, int]:
        """Draw at most *max_width* columns of *text* starting at ``(x, y)``.

        Returns the position just after the last drawn cell.
        """
        if not self._contains(x, y):
            return (x, y)
        limit = min(x + max(max_width, 0), self.area.right)
        for g, width in iter_graphemes(text):
            if width == 0:
                continue
            if x + width > limit:
                break
            cell = self.get(x, y)
            cell.symbol = g
            cell.set_style(style)
            for trailing in range(x + 1, x + width):
                # Continuation of the wide glyph to the left.
                self.get(trailing, y).symbol = ""
            x += width
        return (x, y)

    def set_string(self, x: int, y: int, text: str, style: Style) -> tuple[int, int]:
        return self.set_stringn(x, y, text, self.area.right - x, style)

    def set_span(self, x: int, y: int, span: Span, max_width: int) -> tuple[int, int]:
        return self.set_stringn(x, y, span.content, max_width, span.style)

    def set_line(self, x: int, y: int, line: Line, max_width: int) -> tuple[int, int]:
        """Draw *line* clipped to *max_width* columns; span styles patch the line style."""
        remaining = max_width
        for span in line.spans:
            if remaining <= 0:
                break
            new_x, _ = self.set_stringn(x, y, span.content, remaining, line.style.patch(span.style))
            remaining -= new_x - x
            x = new_x
        return (x, y)

    def reset(self) -> None:
        for cell in self.content:
            cell.reset()

    # -- Export -------------------------------------------------------------

    def _rows(self) -> list[list[BufferCell]]:
        width = self.area.width
        return [self.content[i : i + width] for i in range(0, len(self.content), width)] if width else []

    def lines(self) -> list[str]:
        """Return the glyphs of each row as plain strings."""
        return ["".join(cell.symbol for cell in row) for row in self._rows()]

    def to_ansi_lines(self) -> list[str]:
        """Return each row as a string with SGR sequences for cell styles."""
        result: list[str] = []
        for row in self._rows():
            parts: list[str] = []
            current = ""
            for cell in row:
                sgr = sgr_sequence(cell.fg, cell.bg, cell.modifier)
                if sgr != current:
                    if current:
                        parts.append(_SEGMENT_RESET)
                    parts.append(sgr)
                    current = sgr
                parts.append(cell.symbol)
            if current:
                parts.append(_SEGMENT_RESET)
            result.append("".join(parts))
        return result
