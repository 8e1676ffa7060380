"""Grid components."""

from pi.grid.components.table import (
    Cell,
    HighlightSpacing,
    Row,
    Table,
    TableState,
    allocate_columns,
    visible_row_bounds,
)
from pi.grid.components.table_view import TableView

__all__ = [
    "Cell",
    "HighlightSpacing",
    "Row",
    "Table",
    "TableState",
    "TableView",
    "allocate_columns",
    "visible_row_bounds",
]
