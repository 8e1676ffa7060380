"""Table component - rows of styled cells with a scrollable, highlighted selection.

A ``Table`` is an immutable description: rows, an optional header, one width
constraint per column and the highlight settings.  Rendering it into a
``Buffer`` takes a caller-owned ``TableState`` whose ``offset`` is rewritten
so that the selected row stays inside the visible window.

Two pure functions carry the geometry:

* :func:`allocate_columns` turns width constraints into ``(x, width)`` spans,
  reserving room for the highlight symbol in front of the first column.
* :func:`visible_row_bounds` picks the ``[start, end)`` slice of rows that
  fits the available height and contains the selection.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from pi.grid.block import Block
from pi.grid.buffer import Buffer
from pi.grid.layout import (
    Constraint,
    Direction,
    Layout,
    Length,
    Percentage,
    Rect,
    SegmentSize,
)
from pi.grid.style import Style
from pi.grid.text import Alignment, Text, TextLike
from pi.grid.utils import visible_width

logger = logging.getLogger(__name__)


class HighlightSpacing(str, Enum):
    """When to reserve the column in front of the cells for the highlight symbol."""

    ALWAYS = "Always"
    WHEN_SELECTED = "WhenSelected"
    NEVER = "Never"

    def __str__(self) -> str:
        return self.value

    def should_add(self, has_selection: bool) -> bool:
        if self is HighlightSpacing.ALWAYS:
            return True
        if self is HighlightSpacing.WHEN_SELECTED:
            return has_selection
        return False


# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Cell:
    """The content of one column in a row."""

    content: Text = field(default_factory=Text)
    style: Style = field(default_factory=Style)

    @classmethod
    def from_value(cls, value: CellLike) -> Cell:
        if isinstance(value, Cell):
            return value
        return cls(content=Text.from_value(value))


CellLike = Union[Cell, TextLike]


@dataclass(frozen=True)
class Row:
    """A horizontal group of cells.

    Only the first ``height`` lines of each cell are drawn.  ``bottom_margin``
    blank lines follow the row and count towards scrolling.
    """

    cells: tuple[Cell, ...] = ()
    height: int = 1
    style: Style = field(default_factory=Style)
    bottom_margin: int = 0

    def __post_init__(self) -> None:
        if self.height < 0 or self.bottom_margin < 0:
            raise ValueError("Row height and bottom margin must not be negative.")
        object.__setattr__(self, "cells", tuple(Cell.from_value(c) for c in self.cells))

    @property
    def total_height(self) -> int:
        return self.height + self.bottom_margin


def _ensure_percentages_in_range(widths: Sequence[Constraint]) -> None:
    for constraint in widths:
        if isinstance(constraint, Percentage) and not 0 <= constraint.value <= 100:
            raise ValueError("Percentages should be between 0 and 100 inclusively.")


@dataclass(frozen=True)
class Table:
    """Configuration of a table widget.

    ``rows`` may hold ``Row`` values or plain sequences of cell content.
    ``highlight_spacing`` and ``segment_size`` also accept their names, e.g.
    ``"Always"`` or ``"EvenDistribution"``.
    """

    rows: tuple[Row, ...] = ()
    widths: tuple[Constraint, ...] = ()
    header: Row | None = None
    block: Block | None = None
    style: Style = field(default_factory=Style)
    column_spacing: int = 1
    highlight_style: Style = field(default_factory=Style)
    highlight_symbol: str | None = None
    highlight_spacing: HighlightSpacing = HighlightSpacing.WHEN_SELECTED
    segment_size: SegmentSize = SegmentSize.NONE

    def __post_init__(self) -> None:
        widths = tuple(self.widths)
        _ensure_percentages_in_range(widths)
        if self.column_spacing < 0:
            raise ValueError("Column spacing must not be negative.")
        rows = tuple(row if isinstance(row, Row) else Row(cells=tuple(row)) for row in self.rows)

        object.__setattr__(self, "widths", widths)
        object.__setattr__(self, "rows", rows)
        object.__setattr__(self, "highlight_spacing", HighlightSpacing(self.highlight_spacing))
        object.__setattr__(self, "segment_size", SegmentSize(self.segment_size))

    def column_widths(self, max_width: int, selection_width: int) -> list[tuple[int, int]]:
        return allocate_columns(
            max_width, selection_width, self.widths, self.column_spacing, self.segment_size
        )

    def row_bounds(self, selected: int | None, offset: int, max_height: int) -> tuple[int, int]:
        return visible_row_bounds(self.rows, selected, offset, max_height)

    def render(self, area: Rect, buf: Buffer, state: TableState | None = None) -> None:
        """Draw the table into *buf*; *state* defaults to a fresh, unselected one."""
        render_table(self, area, buf, state if state is not None else TableState())


@dataclass
class TableState:
    """Scroll offset and selection, kept by the caller between renders."""

    offset: int = 0
    selected: int | None = None

    def select(self, index: int | None) -> None:
        self.selected = index
        if index is None:
            self.offset = 0


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


def allocate_columns(
    max_width: int,
    selection_width: int,
    widths: Sequence[Constraint],
    column_spacing: int = 1,
    segment_size: SegmentSize = SegmentSize.NONE,
) -> list[tuple[int, int]]:
    """Return the ``(x, width)`` span of every column.

    The highlight column and the spacers between columns take part in the
    layout but are left out of the result.
    """
    constraints: list[Constraint] = [Length(selection_width)]
    for i, width in enumerate(widths):
        if i > 0:
            constraints.append(Length(column_spacing))
        constraints.append(width)

    layout = Layout(Direction.HORIZONTAL, tuple(constraints), segment_size)
    areas = layout.split(Rect(0, 0, max_width, 1))
    return [(area.x, area.width) for area in areas[1::2]]


def visible_row_bounds(
    rows: Sequence[Row],
    selected: int | None,
    offset: int,
    max_height: int,
) -> tuple[int, int]:
    """Return the ``[start, end)`` range of rows to draw.

    Rows are taken from *offset* onwards while their own height fits; the
    bottom margin of the last accepted row may run past *max_height*.  When
    the selection lies outside that window, the window slides towards it one
    row at a time, dropping rows from the opposite side.  Without a selection
    the first row stands in for it.  The selected row itself is never
    dropped, even when it is taller than *max_height*.
    """
    if not rows or max_height <= 0:
        return (0, 0)

    last = len(rows) - 1
    offset = max(0, min(offset, last))
    start = end = offset
    height = 0
    for row in rows[offset:]:
        if height + row.height > max_height:
            break
        height += row.total_height
        end += 1

    target = max(0, min(selected if selected is not None else 0, last))
    while target >= end:
        height += rows[end].total_height
        end += 1
        while height > max_height and start < target:
            height -= rows[start].total_height
            start += 1
    while target < start:
        start -= 1
        height += rows[start].total_height
        while height > max_height and end - 1 > target:
            end -= 1
            height -= rows[end].total_height

    logger.debug(
        "row window [%d, %d) for offset=%d selected=%s max_height=%d",
        start, end, offset, selected, max_height,
    )
    return (start, end)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render_table(table: Table, area: Rect, buf: Buffer, state: TableState) -> None:
    if area.area == 0:
        return
    buf.set_style(area, table.style)
    table_area = area
    if table.block is not None:
        table_area = table.block.inner(area)
        table.block.render(area, buf)

    has_selection = state.selected is not None
    selection_width = 0
    if table.highlight_spacing.should_add(has_selection) and table.highlight_symbol:
        selection_width = visible_width(table.highlight_symbol)
    columns = table.column_widths(table_area.width, selection_width)
    current_height = 0
    rows_height = table_area.height

    if table.header is not None:
        header = table.header
        max_header_height = min(table_area.height, header.total_height)
        buf.set_style(
            Rect(table_area.left, table_area.top, table_area.width, min(table_area.height, header.height)),
            header.style,
        )
        _render_cells(buf, header, columns, table_area.left, table_area.top, max_header_height)
        current_height += max_header_height
        rows_height = max(0, rows_height - max_header_height)

    if not table.rows or rows_height == 0:
        return

    start, end = table.row_bounds(state.selected, state.offset, rows_height)
    state.offset = start

    for i in range(start, end):
        row = table.rows[i]
        y = table_area.top + current_height
        if y >= table_area.bottom:
            break
        current_height += row.total_height
        # Clipped to the viewport; a selected row may be taller than it.
        row_area = table_area.intersection(Rect(table_area.left, y, table_area.width, row.height))
        buf.set_style(row_area, row.style)

        is_selected = state.selected == i
        if selection_width > 0 and is_selected:
            buf.set_stringn(table_area.left, y, table.highlight_symbol or "", table_area.width, row.style)
        _render_cells(buf, row, columns, table_area.left, y, row_area.height)
        if is_selected:
            buf.set_style(row_area, table.highlight_style)


def _render_cells(
    buf: Buffer,
    row: Row,
    columns: Sequence[tuple[int, int]],
    left: int,
    top: int,
    height: int,
) -> None:
    if len(row.cells) != len(columns):
        logger.debug("row has %d cells for %d columns", len(row.cells), len(columns))
    for (x, width), cell in zip(columns, row.cells):
        _render_cell(buf, cell, Rect(left + x, top, width, height))


def _render_cell(buf: Buffer, cell: Cell, area: Rect) -> None:
    buf.set_style(area, cell.style)
    for i, line in enumerate(cell.content.lines):
        if i >= area.height:
            break
        if line.alignment is Alignment.CENTER:
            x_offset = max(0, area.width // 2 - line.width // 2)
        elif line.alignment is Alignment.RIGHT:
            x_offset = max(0, area.width - line.width)
        else:
            x_offset = 0
        buf.set_line(area.x + x_offset, area.y + i, line, area.width)
