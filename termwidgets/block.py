"""A box with optional borders and a title drawn around other widgets."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from termwidgets.buffer import Buffer
from termwidgets.layout import Rect
from termwidgets.style import Style
from termwidgets.text import Line

_HORIZONTAL = "─"
_VERTICAL = "│"
_TOP_LEFT = "┌"
_TOP_RIGHT = "┐"
_BOTTOM_LEFT = "└"
_BOTTOM_RIGHT = "┘"


class Borders(enum.Flag):
    """Which sides of a block carry a border."""

    NONE = 0
    TOP = enum.auto()
    RIGHT = enum.auto()
    BOTTOM = enum.auto()
    LEFT = enum.auto()
    ALL = TOP | RIGHT | BOTTOM | LEFT


@dataclass(frozen=True)
class Block:
    """Borders and a title around an area; ``inner`` gives the space left inside."""

    borders: Borders = Borders.NONE
    title: str = ""
    style: Style = Style()

    def inner(self, area: Rect) -> Rect:
        """The part of ``area`` not taken by the borders."""
        x, y, width, height = area.x, area.y, area.width, area.height
        if Borders.LEFT in self.borders:
            x = min(x + 1, area.right)
            width = max(width - 1, 0)
        if Borders.TOP in self.borders:
            y = min(y + 1, area.bottom)
            height = max(height - 1, 0)
        if Borders.RIGHT in self.borders:
            width = max(width - 1, 0)
        if Borders.BOTTOM in self.borders:
            height = max(height - 1, 0)
        return Rect(x, y, width, height)

    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw the borders and title into ``buf``, clipped to its area."""
        area = area.intersection(buf.area)
        if area.area() == 0:
            return
        buf.set_style(area, self.style)
        borders = self.borders
        left, right = area.left, area.right - 1
        top, bottom = area.top, area.bottom - 1

        if Borders.LEFT in borders:
            for y in range(area.top, area.bottom):
                buf[left, y].symbol = _VERTICAL
        if Borders.TOP in borders:
            for x in range(area.left, area.right):
                buf[x, top].symbol = _HORIZONTAL
        if Borders.RIGHT in borders:
            for y in range(area.top, area.bottom):
                buf[right, y].symbol = _VERTICAL
        if Borders.BOTTOM in borders:
            for x in range(area.left, area.right):
                buf[x, bottom].symbol = _HORIZONTAL

        corners = (
            (Borders.RIGHT | Borders.BOTTOM, (right, bottom), _BOTTOM_RIGHT),
            (Borders.TOP | Borders.RIGHT, (right, top), _TOP_RIGHT),
            (Borders.LEFT | Borders.BOTTOM, (left, bottom), _BOTTOM_LEFT),
            (Borders.TOP | Borders.LEFT, (left, top), _TOP_LEFT),
        )
        for sides, position, symbol in corners:
            if sides in borders:
                buf[position].symbol = symbol

        if self.title:
            left_offset = 1 if Borders.LEFT in borders else 0
            right_offset = 1 if Borders.RIGHT in borders else 0
            width = max(area.width - left_offset - right_offset, 0)
            Line(self.title).render(Rect(area.x + left_offset, area.y, width, 1), buf)