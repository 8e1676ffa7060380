"""Tests for the line-based TableView component."""

from __future__ import annotations

from pi.grid.block import Block, Borders
from pi.grid.components.table import Row, Table, TableState
from pi.grid.components.table_view import TableView
from pi.grid.layout import Length
from pi.grid.style import Color, Style
from pi.grid.utils import strip_ansi, visible_width


def _digits(count: int) -> Table:
    return Table(rows=[[str(i)] for i in range(count)], widths=[Length(1)])


class TestTableView:
    def test_natural_height(self) -> None:
        table = Table(
            rows=[["a"], ["b"]],
            widths=[Length(1)],
            header=Row(cells=["H"]),
            block=Block(borders=Borders.ALL),
        )
        view = TableView(table)
        assert view.natural_height() == 5
        lines = [strip_ansi(line) for line in view.render(3)]
        assert lines == ["┌─┐", "│H│", "│a│", "│b│", "└─┘"]

    def test_lines_match_width(self) -> None:
        lines = TableView(_digits(3)).render(10)
        assert len(lines) == 3
        assert all(visible_width(line) == 10 for line in lines)

    def test_fixed_height_scrolls_to_selection(self) -> None:
        state = TableState(selected=3)
        view = TableView(_digits(4), state=state, height=2)
        assert [strip_ansi(line) for line in view.render(1)] == ["2", "3"]
        assert view.state is state
        assert state.offset == 2

    def test_state_survives_set_table(self) -> None:
        view = TableView(_digits(4), height=2)
        view.state.select(3)
        view.render(1)
        view.set_table(_digits(6))
        assert [strip_ansi(line) for line in view.render(1)] == ["2", "3"]

    def test_set_height(self) -> None:
        view = TableView(_digits(4))
        view.set_height(1)
        assert len(view.render(1)) == 1
        view.set_height(None)
        assert len(view.render(1)) == 4

    def test_highlight_style_emitted(self) -> None:
        table = Table(rows=[["a"], ["b"]], widths=[Length(1)], highlight_style=Style(fg=Color.RED))
        lines = TableView(table, state=TableState(selected=0)).render(1)
        assert lines == ["\x1b[31ma\x1b[0m", "b"]

    def test_empty_sizes_render_nothing(self) -> None:
        assert TableView(_digits(2)).render(0) == []
        assert TableView(Table(widths=[Length(1)])).render(5) == []
        assert TableView(_digits(2), height=0).render(5) == []
