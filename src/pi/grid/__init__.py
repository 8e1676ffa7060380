"""pi-grid: table rendering for terminal UIs."""

# Frame
from pi.grid.block import Block, Borders, BorderType

# Cell buffer
from pi.grid.buffer import Buffer, BufferCell

# Components (re-exported from components package)
from pi.grid.components import (
    Cell,
    HighlightSpacing,
    Row,
    Table,
    TableState,
    TableView,
    allocate_columns,
    visible_row_bounds,
)

# Layout
from pi.grid.layout import (
    Constraint,
    Direction,
    Layout,
    Length,
    Max,
    Min,
    Percentage,
    Ratio,
    Rect,
    SegmentSize,
)

# Styles and rich text
from pi.grid.style import Color, Modifier, Style
from pi.grid.text import Alignment, Line, Span, Text

# Utilities
from pi.grid.utils import strip_ansi, truncate_to_width, visible_width

__all__ = [
    # Frame
    "Block",
    "Borders",
    "BorderType",
    # Buffer
    "Buffer",
    "BufferCell",
    # Components
    "Cell",
    "HighlightSpacing",
    "Row",
    "Table",
    "TableState",
    "TableView",
    "allocate_columns",
    "visible_row_bounds",
    # Layout
    "Constraint",
    "Direction",
    "Layout",
    "Length",
    "Max",
    "Min",
    "Percentage",
    "Ratio",
    "Rect",
    "SegmentSize",
    # Styles and text
    "Alignment",
    "Color",
    "Line",
    "Modifier",
    "Span",
    "Style",
    "Text",
    # Utilities
    "strip_ansi",
    "truncate_to_width",
    "visible_width",
]
