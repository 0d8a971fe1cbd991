"""Colours, text modifiers and styles for terminal cells."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Color(enum.Enum):
    """A terminal colour."""

    RESET = "reset"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    GRAY = "gray"
    DARK_GRAY = "dark_gray"
    LIGHT_RED = "light_red"
    LIGHT_GREEN = "light_green"
    LIGHT_YELLOW = "light_yellow"
    LIGHT_BLUE = "light_blue"
    LIGHT_MAGENTA = "light_magenta"
    LIGHT_CYAN = "light_cyan"
    WHITE = "white"


class Modifier(enum.Flag):
    """Text attributes that can be combined."""

    BOLD = enum.auto()
    DIM = enum.auto()
    ITALIC = enum.auto()
    UNDERLINED = enum.auto()
    SLOW_BLINK = enum.auto()
    RAPID_BLINK = enum.auto()
    REVERSED = enum.auto()
    HIDDEN = enum.auto()
    CROSSED_OUT = enum.auto()


@dataclass(frozen=True)
class Style:
    """A set of optional colours plus modifiers to add and remove."""

    fg: Color | None = None
    bg: Color | None = None
    add_modifier: Modifier = Modifier(0)
    sub_modifier: Modifier = Modifier(0)

    def patch(self, other: Style) -> Style:
        """Return this style with ``other`` laid on top of it."""
        add = (self.add_modifier & ~other.sub_modifier) | other.add_modifier
        sub = (self.sub_modifier & ~other.add_modifier) | other.sub_modifier
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            add_modifier=add,
            sub_modifier=sub,
        )