"""A widget that shows a scrollable window onto a larger buffer."""

from __future__ import annotations

import enum
from dataclasses import replace
from typing import Any

from termwidgets.buffer import Buffer
from termwidgets.layout import Position, Rect, Size
from termwidgets.scroll_state import ScrollViewState
from termwidgets.scrollbar import Scrollbar, ScrollbarOrientation, ScrollbarState


def _saturating_sub(a: int, b: int) -> int:
    return max(a - b, 0)


class ScrollbarVisibility(enum.Enum):
    """When a scrollbar is drawn."""

    AUTOMATIC = "automatic"
    """Only when the content does not fit."""
    ALWAYS = "always"
    NEVER = "never"


class ScrollView:
    """Content drawn into its own buffer, shown through a scrollable window.

    The content buffer always starts at ``(0, 0)`` and has the size given at
    construction. Rendering copies the visible part into the target buffer and
    adds scrollbars as configured.
    """

    def __init__(self, size: Size | tuple[int, int]) -> None:
        size = size if isinstance(size, Size) else Size(*size)
        self.size = size
        self.buf = Buffer.empty(Rect(0, 0, size.width, size.height))
        self._vertical_visibility = ScrollbarVisibility.AUTOMATIC
        self._horizontal_visibility = ScrollbarVisibility.AUTOMATIC

    def __repr__(self) -> str:
        return (
            f"ScrollView(size={self.size!r}, "
            f"vertical={self._vertical_visibility.name}, "
            f"horizontal={self._horizontal_visibility.name})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScrollView):
            return NotImplemented
        return (
            self.size == other.size
            and self.buf == other.buf
            and self._vertical_visibility is other._vertical_visibility
            and self._horizontal_visibility is other._horizontal_visibility
        )

    @property
    def area(self) -> Rect:
        """The area of the content buffer."""
        return self.buf.area

    def vertical_scrollbar_visibility(self, visibility: ScrollbarVisibility) -> ScrollView:
        """Set when the vertical scrollbar is drawn; returns this view."""
        self._vertical_visibility = visibility
        return self

    def horizontal_scrollbar_visibility(self, visibility: ScrollbarVisibility) -> ScrollView:
        """Set when the horizontal scrollbar is drawn; returns this view."""
        self._horizontal_visibility = visibility
        return self

    def scrollbars_visibility(self, visibility: ScrollbarVisibility) -> ScrollView:
        """Set when both scrollbars are drawn; returns this view."""
        self._vertical_visibility = visibility
        self._horizontal_visibility = visibility
        return self

    def render_widget(self, widget: Any, area: Rect) -> None:
        """Render ``widget`` into the content buffer at ``area``."""
        widget.render(area, self.buf)

    def render_stateful_widget(self, widget: Any, area: Rect, state: Any) -> None:
        """Render a stateful ``widget`` into the content buffer at ``area``."""
        widget.render(area, self.buf, state)

    def render(self, area: Rect, buf: Buffer, state: ScrollViewState) -> None:
        """Draw the visible part of the content and the scrollbars into ``buf``."""
        x, y = state.offset
        max_x = _saturating_sub(self.buf.area.width, _saturating_sub(area.width, 1))
        max_y = _saturating_sub(self.buf.area.height, _saturating_sub(area.height, 1))
        state.offset = Position(min(x, max_x), min(y, max_y))
        state.size = self.size
        state.page_size = Size(area.width, area.height)
        visible_area = self._render_scrollbars(area, buf, state).intersection(self.buf.area)
        self._render_visible_area(area, buf, visible_area)

    def _render_scrollbars(self, area: Rect, buf: Buffer, state: ScrollViewState) -> Rect:
        """Draw the needed scrollbars; return the visible part of the content."""
        horizontal_space = area.width - self.size.width
        vertical_space = area.height - self.size.height

        if horizontal_space > 0:
            state.offset = replace(state.offset, x=0)
        if vertical_space > 0:
            state.offset = replace(state.offset, y=0)

        show_horizontal, show_vertical = self._visible_scrollbars(
            horizontal_space, vertical_space
        )

        new_width, new_height = area.width, area.height

        if show_horizontal:
            width = _saturating_sub(area.width, int(show_vertical))
            self._render_horizontal_scrollbar(replace(area, width=width), buf, state)
            new_height = _saturating_sub(area.height, 1)

        if show_vertical:
            height = _saturating_sub(area.height, int(show_horizontal))
            self._render_vertical_scrollbar(replace(area, height=height), buf, state)
            new_width = _saturating_sub(area.width, 1)

        return Rect(state.offset.x, state.offset.y, new_width, new_height)

    def _visible_scrollbars(self, horizontal_space: int, vertical_space: int) -> tuple[bool, bool]:
        """Decide which scrollbars to draw, as ``(horizontal, vertical)``.

        A space below zero means the content does not fit in that direction;
        zero is an exact fit, which the other scrollbar can break by taking a line.
        """
        auto = ScrollbarVisibility.AUTOMATIC
        always = ScrollbarVisibility.ALWAYS
        never = ScrollbarVisibility.NEVER
        pair = (self._horizontal_visibility, self._vertical_visibility)

        if pair == (always, always):
            return True, True
        if pair == (never, never):
            return False, False
        if pair == (always, never):
            return True, False
        if pair == (never, always):
            return False, True
        if pair == (auto, never):
            return horizontal_space < 0, False
        if pair == (never, auto):
            return False, vertical_space < 0
        if pair == (always, auto):
            return True, vertical_space <= 0
        if pair == (auto, always):
            return horizontal_space <= 0, True

        if horizontal_space >= 0 and vertical_space >= 0:
            return False, False
        if horizontal_space < 0 and vertical_space < 0:
            return True, True
        if horizontal_space > 0 and vertical_space < 0:
            return False, True
        if horizontal_space < 0 and vertical_space > 0:
            return True, False
        # One direction fits exactly and the other does not: the other
        # scrollbar takes a line, so both are needed.
        return True, True

    def _render_vertical_scrollbar(
        self, area: Rect, buf: Buffer, state: ScrollViewState
    ) -> None:
        content_length = _saturating_sub(self.size.height, area.height)
        scrollbar_state = ScrollbarState(content_length=content_length, position=state.offset.y)
        Scrollbar(ScrollbarOrientation.VERTICAL_RIGHT).render(area, buf, scrollbar_state)

    def _render_horizontal_scrollbar(
        self, area: Rect, buf: Buffer, state: ScrollViewState
    ) -> None:
        content_length = _saturating_sub(self.size.width, area.width)
        scrollbar_state = ScrollbarState(content_length=content_length, position=state.offset.x)
        Scrollbar(ScrollbarOrientation.HORIZONTAL_BOTTOM).render(area, buf, scrollbar_state)

    def _render_visible_area(self, area: Rect, buf: Buffer, visible_area: Rect) -> None:
        for src_row, dst_row in zip(visible_area.rows(), area.rows()):
            for src, dst in zip(src_row.positions(), dst_row.positions()):
                buf[dst] = replace(self.buf[src])