"""Tests for the Block frame."""

from __future__ import annotations

from pi.grid.block import Block, Borders, BorderType
from pi.grid.buffer import Buffer
from pi.grid.layout import Rect
from pi.grid.style import Color, Style
from pi.grid.text import Alignment, Line, Span


def _render(block: Block, width: int, height: int) -> Buffer:
    buf = Buffer.empty(Rect(0, 0, width, height))
    block.render(buf.area, buf)
    return buf


class TestBlockInner:
    def test_no_borders_keeps_area(self) -> None:
        assert Block().inner(Rect(0, 0, 10, 5)) == Rect(0, 0, 10, 5)

    def test_all_borders_shrink_each_side(self) -> None:
        assert Block(borders=Borders.ALL).inner(Rect(1, 1, 10, 5)) == Rect(2, 2, 8, 3)

    def test_title_takes_top_row(self) -> None:
        assert Block(title="T").inner(Rect(0, 0, 10, 5)) == Rect(0, 1, 10, 4)

    def test_tiny_area_does_not_go_negative(self) -> None:
        inner = Block(borders=Borders.ALL).inner(Rect(0, 0, 1, 1))
        assert inner.width == 0
        assert inner.height == 0

    def test_vertical_space(self) -> None:
        assert Block(borders=Borders.ALL).vertical_space == 2
        assert Block(borders=Borders.LEFT | Borders.RIGHT).vertical_space == 0
        assert Block(title="T").vertical_space == 1


class TestBlockRender:
    def test_plain_borders(self) -> None:
        buf = _render(Block(borders=Borders.ALL), 4, 3)
        assert buf == Buffer.with_lines(["┌──┐", "│  │", "└──┘"])

    def test_rounded_borders_with_title(self) -> None:
        block = Block(title="Hi", borders=Borders.ALL, border_type=BorderType.ROUNDED)
        buf = _render(block, 6, 3)
        assert buf.lines() == ["╭Hi──╮", "│    │", "╰────╯"]

    def test_centered_title(self) -> None:
        buf = _render(Block(title="ab", title_alignment=Alignment.CENTER), 6, 1)
        assert buf.lines() == ["  ab  "]

    def test_right_title_is_truncated(self) -> None:
        buf = _render(Block(title="abcdefgh", title_alignment=Alignment.RIGHT), 5, 1)
        assert buf.lines() == ["ab..."]

    def test_truncated_title_keeps_span_styles(self) -> None:
        title = Line(spans=(Span("ab", Style(fg=Color.RED)), Span("cdefgh", Style(fg=Color.GREEN))))
        buf = _render(Block(title=title), 6, 1)
        assert buf.lines() == ["abc..."]
        assert buf.get(1, 0).fg == Color.RED
        assert buf.get(2, 0).fg == Color.GREEN
        assert buf.get(5, 0).fg == Color.GREEN

    def test_border_style_applies_to_borders_only(self) -> None:
        block = Block(borders=Borders.LEFT, border_style=Style(fg=Color.RED))
        buf = _render(block, 3, 1)
        assert buf.get(0, 0).fg == Color.RED
        assert buf.get(1, 0).fg == Color.RESET

    def test_zero_area_is_noop(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 3, 1))
        Block(borders=Borders.ALL).render(Rect(0, 0, 0, 0), buf)
        assert buf.lines() == ["   "]
