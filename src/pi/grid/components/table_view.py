"""TableView component - renders a Table as terminal lines."""

from __future__ import annotations

from pi.grid.buffer import Buffer
from pi.grid.components.table import Table, TableState
from pi.grid.layout import Rect


class TableView:
    """Line-based component wrapping a ``Table`` and its ``TableState``.

    ``render(width)`` draws into a scratch buffer and returns one ANSI string
    per row.  Without a fixed ``height`` the table's natural height is used.
    """

    def __init__(
        self,
        table: Table,
        state: TableState | None = None,
        height: int | None = None,
    ) -> None:
        self._table = table
        self._state = state if state is not None else TableState()
        self._height = height

    @property
    def state(self) -> TableState:
        return self._state

    def set_table(self, table: Table) -> None:
        self._table = table

    def set_height(self, height: int | None) -> None:
        self._height = height

    def invalidate(self) -> None:
        pass

    def natural_height(self) -> int:
        table = self._table
        height = sum(row.total_height for row in table.rows)
        if table.header is not None:
            height += table.header.total_height
        if table.block is not None:
            height += table.block.vertical_space
        return height

    def render(self, width: int) -> list[str]:
        height = self._height if self._height is not None else self.natural_height()
        if width <= 0 or height <= 0:
            return []
        buf = Buffer.empty(Rect(0, 0, width, height))
        self._table.render(buf.area, buf, self._state)
        return buf.to_ansi_lines()
