"""Styles: foreground/background colours and text modifiers.

A ``Style`` only records the attributes it wants to change.  Styles compose
with :meth:`Style.patch`, where the later style wins for every attribute it
sets, and buffer cells resolve them into concrete SGR sequences.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, Flag
from typing import Union


class Color(Enum):
    """Named terminal colours, valued by their SGR foreground code."""

    RESET = 39
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    GRAY = 37
    DARK_GRAY = 90
    LIGHT_RED = 91
    LIGHT_GREEN = 92
    LIGHT_YELLOW = 93
    LIGHT_BLUE = 94
    LIGHT_MAGENTA = 95
    LIGHT_CYAN = 96
    WHITE = 97


# A named colour, a 256-colour palette index, or an (r, g, b) triple.
ColorValue = Union[Color, int, tuple[int, int, int]]


class Modifier(Flag):
    NONE = 0
    BOLD = 1 << 0
    DIM = 1 << 1
    ITALIC = 1 << 2
    UNDERLINED = 1 << 3
    SLOW_BLINK = 1 << 4
    RAPID_BLINK = 1 << 5
    REVERSED = 1 << 6
    HIDDEN = 1 << 7
    CROSSED_OUT = 1 << 8


ALL_MODIFIERS = (
    Modifier.BOLD
    | Modifier.DIM
    | Modifier.ITALIC
    | Modifier.UNDERLINED
    | Modifier.SLOW_BLINK
    | Modifier.RAPID_BLINK
    | Modifier.REVERSED
    | Modifier.HIDDEN
    | Modifier.CROSSED_OUT
)

_MODIFIER_SGR: tuple[tuple[Modifier, int], ...] = (
    (Modifier.BOLD, 1),
    (Modifier.DIM, 2),
    (Modifier.ITALIC, 3),
    (Modifier.UNDERLINED, 4),
    (Modifier.SLOW_BLINK, 5),
    (Modifier.RAPID_BLINK, 6),
    (Modifier.REVERSED, 7),
    (Modifier.HIDDEN, 8),
    (Modifier.CROSSED_OUT, 9),
)


@dataclass(frozen=True)
class Style:
    """A partial set of display attributes.

    ``fg``/``bg`` of ``None`` leave the underlying colour untouched.
    ``add_modifier`` turns modifiers on and ``sub_modifier`` turns them off.
    """

    fg: ColorValue | None = None
    bg: ColorValue | None = None
    add_modifier: Modifier = Modifier.NONE
    sub_modifier: Modifier = Modifier.NONE

    @classmethod
    def reset(cls) -> Style:
        """A style that resets every attribute when patched on top."""
        return cls(fg=Color.RESET, bg=Color.RESET, sub_modifier=ALL_MODIFIERS)

    def with_fg(self, color: ColorValue) -> Style:
        return replace(self, fg=color)

    def with_bg(self, color: ColorValue) -> Style:
        return replace(self, bg=color)

    def with_modifier(self, modifier: Modifier) -> Style:
        return replace(
            self,
            add_modifier=self.add_modifier | modifier,
            sub_modifier=self.sub_modifier & ~modifier,
        )

    def without_modifier(self, modifier: Modifier) -> Style:
        return replace(
            self,
            add_modifier=self.add_modifier & ~modifier,
            sub_modifier=self.sub_modifier | modifier,
        )

    def bold(self) -> Style:
        return self.with_modifier(Modifier.BOLD)

    def dim(self) -> Style:
        return self.with_modifier(Modifier.DIM)

    def italic(self) -> Style:
        return self.with_modifier(Modifier.ITALIC)

    def reversed(self) -> Style:
        return self.with_modifier(Modifier.REVERSED)

    def patch(self, other: Style) -> Style:
        """Return this style with *other* applied on top of it."""
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            add_modifier=(self.add_modifier & ~other.sub_modifier) | other.add_modifier,
            sub_modifier=(self.sub_modifier & ~other.add_modifier) | other.sub_modifier,
        )


# ---------------------------------------------------------------------------
# SGR encoding
# ---------------------------------------------------------------------------


def _color_params(color: ColorValue, background: bool) -> str:
    if isinstance(color, Color):
        return str(color.value + 10 if background else color.value)
    base = 48 if background else 38
    if isinstance(color, tuple):
        r, g, b = color
        return f"{base};2;{r};{g};{b}"
    return f"{base};5;{color}"


def sgr_sequence(fg: ColorValue, bg: ColorValue, modifier: Modifier) -> str:
    """Encode resolved cell attributes as a single SGR escape sequence.

    Returns an empty string for the default attributes.
    """
    params: list[str] = [str(code) for flag, code in _MODIFIER_SGR if flag in modifier]
    if fg != Color.RESET:
        params.append(_color_params(fg, background=False))
    if bg != Color.RESET:
        params.append(_color_params(bg, background=True))
    if not params:
        return ""
    return f"\x1b[{';'.join(params)}m"
