"""A scrollbar showing how far content has been scrolled."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterator
from dataclasses import dataclass

from termwidgets.buffer import Buffer
from termwidgets.layout import Rect
from termwidgets.style import Style
from termwidgets.text import Span


class ScrollbarOrientation(enum.Enum):
    """Which edge of the area the scrollbar is drawn on."""

    VERTICAL_RIGHT = "vertical_right"
    VERTICAL_LEFT = "vertical_left"
    HORIZONTAL_BOTTOM = "horizontal_bottom"
    HORIZONTAL_TOP = "horizontal_top"

    def is_vertical(self) -> bool:
        return self in (ScrollbarOrientation.VERTICAL_RIGHT, ScrollbarOrientation.VERTICAL_LEFT)


@dataclass(frozen=True)
class ScrollbarSymbols:
    """The symbols a scrollbar is drawn with; ``None`` leaves that part out."""

    track: str | None
    thumb: str
    begin: str | None
    end: str | None


_VERTICAL_SYMBOLS = ScrollbarSymbols(track="║", thumb="█", begin="▲", end="▼")
_HORIZONTAL_SYMBOLS = ScrollbarSymbols(track="═", thumb="█", begin="◄", end="►")


@dataclass
class ScrollbarState:
    """The length of the content, the scroll position and the visible length."""

    content_length: int = 0
    position: int = 0
    viewport_content_length: int = 0


def _round(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass
class Scrollbar:
    """A scrollbar of arrows, a track and a thumb along one edge of an area."""

    orientation: ScrollbarOrientation = ScrollbarOrientation.VERTICAL_RIGHT
    symbols: ScrollbarSymbols | None = None
    style: Style = Style()

    def __post_init__(self) -> None:
        if self.symbols is None:
            self.symbols = (
                _VERTICAL_SYMBOLS if self.orientation.is_vertical() else _HORIZONTAL_SYMBOLS
            )

    @property
    def _symbols(self) -> ScrollbarSymbols:
        assert self.symbols is not None
        return self.symbols

    def _track_length(self, area: Rect) -> int:
        symbols = self._symbols
        arrows = sum(Span(s).width() for s in (symbols.begin, symbols.end) if s is not None)
        length = area.height if self.orientation.is_vertical() else area.width
        return max(length - arrows, 0)

    def _viewport_length(self, state: ScrollbarState, area: Rect) -> int:
        if state.viewport_content_length:
            return state.viewport_content_length
        return area.height if self.orientation.is_vertical() else area.width

    def _part_lengths(self, area: Rect, state: ScrollbarState) -> tuple[int, int, int]:
        track_length = self._track_length(area)
        viewport_length = self._viewport_length(state, area)

        max_position = max(state.content_length - 1, 0)
        start_position = min(max(state.position, 0), max_position)
        max_viewport_position = max_position + viewport_length
        end_position = start_position + viewport_length

        thumb_start = start_position * track_length / max_viewport_position
        thumb_end = end_position * track_length / max_viewport_position

        start = min(max(_round(thumb_start), 0), track_length - 1)
        end = min(max(_round(thumb_end), 0), track_length)
        thumb_length = max(end - start, 1)
        track_end_length = max(track_length - (start + thumb_length), 0)
        return start, thumb_length, track_end_length

    def _bar_symbols(self, area: Rect, state: ScrollbarState) -> Iterator[str | None]:
        symbols = self._symbols
        track_start, thumb_length, track_end = self._part_lengths(area, state)
        if symbols.begin is not None:
            yield symbols.begin
        yield from [symbols.track] * track_start
        yield from [symbols.thumb] * thumb_length
        yield from [symbols.track] * track_end
        if symbols.end is not None:
            yield symbols.end

    def _bar_area(self, area: Rect) -> Rect:
        orientation = self.orientation
        if orientation.is_vertical():
            if area.width == 0:
                raise ValueError("Scrollbar area is empty")
            x = area.x if orientation is ScrollbarOrientation.VERTICAL_LEFT else area.right - 1
            return Rect(x, area.y, 1, area.height)
        if area.height == 0:
            raise ValueError("Scrollbar area is empty")
        y = area.y if orientation is ScrollbarOrientation.HORIZONTAL_TOP else area.bottom - 1
        return Rect(area.x, y, area.width, 1)

    def render(self, area: Rect, buf: Buffer, state: ScrollbarState) -> None:
        """Draw the scrollbar along its edge of ``area``.

        Nothing is drawn when there is no content or no room for a track.
        Raises ``ValueError`` when the edge to draw on has no cells.
        """
        if state.content_length == 0 or self._track_length(area) == 0:
            return
        bar = list(self._bar_symbols(area, state))
        for position, symbol in zip(self._bar_area(area).positions(), bar):
            if symbol is not None:
                buf.set_string(position.x, position.y, symbol, self.style)