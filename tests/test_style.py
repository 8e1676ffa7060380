"""Tests for styles and SGR encoding."""

from __future__ import annotations

from pi.grid.style import Color, Modifier, Style, sgr_sequence


class TestStyleHelpers:
    """Fluent helpers return new styles and leave the original untouched."""

    def test_with_fg_and_bg(self) -> None:
        style = Style().with_fg(Color.BLACK).with_bg(Color.WHITE)
        assert style == Style(fg=Color.BLACK, bg=Color.WHITE)

    def test_modifiers_add_and_remove(self) -> None:
        style = Style().bold().without_modifier(Modifier.DIM)
        assert style.add_modifier == Modifier.BOLD
        assert style.sub_modifier == Modifier.DIM

    def test_with_modifier_cancels_previous_removal(self) -> None:
        style = Style().without_modifier(Modifier.ITALIC).italic()
        assert style.add_modifier == Modifier.ITALIC
        assert style.sub_modifier == Modifier.NONE

    def test_helpers_do_not_mutate(self) -> None:
        base = Style()
        base.bold()
        assert base == Style()


class TestStylePatch:
    """Later styles win per attribute."""

    def test_colours_override_only_when_set(self) -> None:
        base = Style(fg=Color.RED, bg=Color.BLUE)
        patched = base.patch(Style(bg=Color.GREEN))
        assert patched.fg == Color.RED
        assert patched.bg == Color.GREEN

    def test_patch_removes_modifier(self) -> None:
        base = Style().bold().italic()
        patched = base.patch(Style().without_modifier(Modifier.BOLD))
        assert patched.add_modifier == Modifier.ITALIC
        assert patched.sub_modifier == Modifier.BOLD

    def test_patch_adds_modifier_previously_removed(self) -> None:
        base = Style().without_modifier(Modifier.REVERSED)
        patched = base.patch(Style().reversed())
        assert patched.add_modifier == Modifier.REVERSED
        assert patched.sub_modifier == Modifier.NONE

    def test_reset_clears_everything(self) -> None:
        patched = Style(fg=Color.RED).bold().patch(Style.reset())
        assert patched.fg == Color.RESET
        assert patched.bg == Color.RESET
        assert patched.add_modifier == Modifier.NONE


class TestSgrSequence:
    def test_default_attributes_are_empty(self) -> None:
        assert sgr_sequence(Color.RESET, Color.RESET, Modifier.NONE) == ""

    def test_named_colours(self) -> None:
        assert sgr_sequence(Color.RED, Color.BLUE, Modifier.NONE) == "\x1b[31;44m"

    def test_bright_background(self) -> None:
        assert sgr_sequence(Color.RESET, Color.WHITE, Modifier.NONE) == "\x1b[107m"

    def test_modifiers_come_first(self) -> None:
        assert sgr_sequence(Color.GREEN, Color.RESET, Modifier.BOLD | Modifier.UNDERLINED) == (
            "\x1b[1;4;32m"
        )

    def test_indexed_and_rgb_colours(self) -> None:
        assert sgr_sequence(208, (1, 2, 3), Modifier.NONE) == "\x1b[38;5;208;48;2;1;2;3m"
