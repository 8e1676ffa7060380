"""Block - a frame with optional borders and title drawn around a widget."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, Flag

from pi.grid.buffer import Buffer
from pi.grid.layout import Rect
from pi.grid.style import Style
from pi.grid.text import Alignment, Line


class Borders(Flag):
    NONE = 0
    TOP = 1 << 0
    RIGHT = 1 << 1
    BOTTOM = 1 << 2
    LEFT = 1 << 3
    ALL = TOP | RIGHT | BOTTOM | LEFT


@dataclass(frozen=True)
class _BorderSymbols:
    horizontal: str
    vertical: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str


class BorderType(Enum):
    PLAIN = _BorderSymbols("─", "│", "┌", "┐", "└", "┘")
    ROUNDED = _BorderSymbols("─", "│", "╭", "╮", "╰", "╯")
    DOUBLE = _BorderSymbols("═", "║", "╔", "╗", "╚", "╝")
    THICK = _BorderSymbols("━", "┃", "┏", "┓", "┗", "┛")


@dataclass(frozen=True)
class Block:
    """Frame drawn around a widget.

    ``inner`` gives the area left for the wrapped widget and ``render``
    paints the block itself; callers paint the frame first and the content
    second.
    """

    title: str | Line | None = None
    title_alignment: Alignment = Alignment.LEFT
    borders: Borders = Borders.NONE
    border_type: BorderType = BorderType.PLAIN
    border_style: Style = field(default_factory=Style)
    style: Style = field(default_factory=Style)

    def inner(self, area: Rect) -> Rect:
        x, y, width, height = area.x, area.y, area.width, area.height
        if Borders.LEFT in self.borders:
            x = min(x + 1, area.right)
            width = max(0, width - 1)
        if Borders.TOP in self.borders or self.title is not None:
            y = min(y + 1, area.bottom)
            height = max(0, height - 1)
        if Borders.RIGHT in self.borders:
            width = max(0, width - 1)
        if Borders.BOTTOM in self.borders:
            height = max(0, height - 1)
        return Rect(x, y, width, height)

    @property
    def vertical_space(self) -> int:
        """Rows taken by the frame, used to size content to fit."""
        rows = 1 if Borders.TOP in self.borders or self.title is not None else 0
        return rows + (1 if Borders.BOTTOM in self.borders else 0)

    def render(self, area: Rect, buf: Buffer) -> None:
        if area.area == 0:
            return
        buf.set_style(area, self.style)
        self._render_borders(area, buf)
        self._render_title(area, buf)

    def _render_borders(self, area: Rect, buf: Buffer) -> None:
        symbols: _BorderSymbols = self.border_type.value
        style = self.border_style
        left, right = area.left, area.right - 1
        top, bottom = area.top, area.bottom - 1

        if Borders.TOP in self.borders:
            for x in range(left, area.right):
                buf.set_string(x, top, symbols.horizontal, style)
        if Borders.BOTTOM in self.borders:
            for x in range(left, area.right):
                buf.set_string(x, bottom, symbols.horizontal, style)
        if Borders.LEFT in self.borders:
            for y in range(top, area.bottom):
                buf.set_string(left, y, symbols.vertical, style)
        if Borders.RIGHT in self.borders:
            for y in range(top, area.bottom):
                buf.set_string(right, y, symbols.vertical, style)

        corners = (
            (Borders.TOP | Borders.LEFT, left, top, symbols.top_left),
            (Borders.TOP | Borders.RIGHT, right, top, symbols.top_right),
            (Borders.BOTTOM | Borders.LEFT, left, bottom, symbols.bottom_left),
            (Borders.BOTTOM | Borders.RIGHT, right, bottom, symbols.bottom_right),
        )
        for sides, x, y, symbol in corners:
            if sides in self.borders:
                buf.set_string(x, y, symbol, style)

    def _render_title(self, area: Rect, buf: Buffer) -> None:
        if self.title is None:
            return
        left = area.left + (1 if Borders.LEFT in self.borders else 0)
        right = area.right - (1 if Borders.RIGHT in self.borders else 0)
        available = right - left
        if available <= 0:
            return

        title = Line.from_value(self.title).truncated(available)

        if self.title_alignment is Alignment.CENTER:
            x = left + max(0, (available - title.width) // 2)
        elif self.title_alignment is Alignment.RIGHT:
            x = left + max(0, available - title.width)
        else:
            x = left
        buf.set_line(x, area.top, title, available)
