"""Rich text: styled spans, aligned lines and multi-line text."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Union

from pi.grid.style import Style
from pi.grid.utils import take_columns, visible_width


class Alignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class Span:
    """A run of text drawn with a single style."""

    content: str
    style: Style = field(default_factory=Style)

    @property
    def width(self) -> int:
        return visible_width(self.content)


@dataclass(frozen=True)
class Line:
    """A single line of spans with an optional alignment."""

    spans: tuple[Span, ...] = ()
    style: Style = field(default_factory=Style)
    alignment: Alignment | None = None

    @classmethod
    def raw(cls, content: str, alignment: Alignment | None = None) -> Line:
        return cls(spans=(Span(content),), alignment=alignment)

    @classmethod
    def styled(cls, content: str, style: Style) -> Line:
        return cls(spans=(Span(content, style),))

    @classmethod
    def from_value(cls, value: LineLike) -> Line:
        if isinstance(value, Line):
            return value
        if isinstance(value, Span):
            return cls(spans=(value,))
        if isinstance(value, str):
            return cls.raw(value)
        return cls(spans=tuple(value))

    @property
    def width(self) -> int:
        return sum(span.width for span in self.spans)

    def aligned(self, alignment: Alignment) -> Line:
        return replace(self, alignment=alignment)

    def plain(self) -> str:
        return "".join(span.content for span in self.spans)

    def truncated(self, max_width: int, ellipsis: str = "...") -> Line:
        """Clip the line to *max_width* columns, ending it with *ellipsis*.

        Spans before the cut keep their style; the ellipsis takes the style of
        the span that was cut.
        """
        if self.width <= max_width:
            return self
        if max_width <= 0:
            return replace(self, spans=())

        target = max_width - visible_width(ellipsis)
        if target <= 0:
            style = self.spans[0].style if self.spans else Style()
            return replace(self, spans=(Span(take_columns(ellipsis, max_width), style),))

        spans: list[Span] = []
        ellipsis_style = Style()
        remaining = target
        for span in self.spans:
            content = take_columns(span.content, remaining)
            if content:
                spans.append(replace(span, content=content))
            if visible_width(content) < span.width:
                ellipsis_style = span.style
                break
            remaining -= span.width
        spans.append(Span(ellipsis, ellipsis_style))
        return replace(self, spans=tuple(spans))


@dataclass(frozen=True)
class Text:
    """An ordered sequence of lines, e.g. the content of a table cell."""

    lines: tuple[Line, ...] = ()

    @classmethod
    def raw(cls, content: str) -> Text:
        """Build unstyled text, one line per ``\\n``-separated segment."""
        return cls(lines=tuple(Line.raw(part) for part in content.split("\n")))

    @classmethod
    def from_value(cls, value: TextLike) -> Text:
        if isinstance(value, Text):
            return value
        if isinstance(value, str):
            return cls.raw(value)
        if isinstance(value, (Span, Line)):
            return cls(lines=(Line.from_value(value),))
        return cls(lines=tuple(Line.from_value(line) for line in value))

    @property
    def height(self) -> int:
        return len(self.lines)

    @property
    def width(self) -> int:
        return max((line.width for line in self.lines), default=0)


LineLike = Union[Line, Span, str, Iterable[Span]]
TextLike = Union[Text, Line, Span, str, Iterable[LineLike]]
