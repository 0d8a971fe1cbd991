"""A grid of styled cells and a frame to draw into it."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from wcwidth import wcwidth

from termwidgets.layout import Position, Rect
from termwidgets.style import Color, Modifier, Style
from termwidgets.text import Line


def _char_width(char: str) -> int:
    return max(wcwidth(char), 0)


def _symbol_width(symbol: str) -> int:
    return sum(_char_width(char) for char in symbol)


@dataclass
class Cell:
    """One cell of the grid: a symbol and its colours and modifiers."""

    symbol: str = " "
    fg: Color = Color.RESET
    bg: Color = Color.RESET
    modifier: Modifier = Modifier(0)


def _apply_style(cell: Cell, style: Style) -> None:
    if style.fg is not None:
        cell.fg = style.fg
    if style.bg is not None:
        cell.bg = style.bg
    cell.modifier = (cell.modifier | style.add_modifier) & ~style.sub_modifier


def _reset(cell: Cell) -> None:
    cell.symbol = " "
    cell.fg = Color.RESET
    cell.bg = Color.RESET
    cell.modifier = Modifier(0)


@dataclass
class Buffer:
    """A rectangle of cells, indexed by absolute ``(x, y)`` positions."""

    area: Rect
    content: list[Cell]

    @classmethod
    def empty(cls, area: Rect) -> Buffer:
        """A buffer of blank cells covering ``area``."""
        return cls(area, [Cell() for _ in range(area.area())])

    @classmethod
    def with_lines(cls, lines: Iterable[str | Line]) -> Buffer:
        """A buffer at the origin holding the given lines, as wide as the widest."""
        converted = [line if isinstance(line, Line) else Line(line) for line in lines]
        width = max((line.width() for line in converted), default=0)
        buffer = cls.empty(Rect(0, 0, width, len(converted)))
        for y, line in enumerate(converted):
            line.render(Rect(0, y, width, 1), buffer)
        return buffer

    def _index(self, key: Position | tuple[int, int]) -> int:
        x, y = key
        area = self.area
        if not (area.left <= x < area.right and area.top <= y < area.bottom):
            raise IndexError(f"position ({x}, {y}) is outside the buffer area {area}")
        return (y - area.y) * area.width + (x - area.x)

    def __getitem__(self, key: Position | tuple[int, int]) -> Cell:
        return self.content[self._index(key)]

    def __setitem__(self, key: Position | tuple[int, int], cell: Cell) -> None:
        self.content[self._index(key)] = cell

    def set_string(self, x: int, y: int, string: str, style: Style = Style()) -> int:
        """Write ``string`` from ``(x, y)``, clipped at the right edge; return the end column."""
        remaining = max(self.area.right - x, 0)
        for char in string:
            width = wcwidth(char)
            if width <= 0:
                continue
            if width > remaining:
                break
            remaining -= width
            cell = self[x, y]
            cell.symbol = char
            _apply_style(cell, style)
            for offset in range(1, width):
                _reset(self[x + offset, y])
            x += width
        return x

    def set_style(self, area: Rect, style: Style) -> None:
        """Patch ``style`` onto every cell of ``area`` inside the buffer."""
        for position in area.intersection(self.area).positions():
            _apply_style(self[position], style)

    def lines(self) -> list[str]:
        """The symbols of each row as text, wide characters counted once."""
        result = []
        for row in self.area.rows():
            symbols = []
            skip = 0
            for position in row.positions():
                if skip:
                    skip -= 1
                    continue
                symbol = self[position].symbol
                symbols.append(symbol)
                skip = max(_symbol_width(symbol) - 1, 0)
            result.append("".join(symbols))
        return result


@dataclass
class Frame:
    """A drawing surface over a buffer that also records the cursor position."""

    buffer: Buffer
    cursor_position: Position | None = field(default=None)

    @property
    def area(self) -> Rect:
        return self.buffer.area

    def render_widget(self, widget: Any, area: Rect) -> None:
        widget.render(area, self.buffer)

    def render_stateful_widget(self, widget: Any, area: Rect, state: Any) -> None:
        widget.render(area, self.buffer, state)

    def set_cursor_position(self, position: Position | tuple[int, int]) -> None:
        self.cursor_position = Position(*position)