"""The scroll offset of a scroll view and the moves that change it."""

from __future__ import annotations

from dataclasses import dataclass, replace

from termwidgets.layout import Position, Size

_MAX_OFFSET = 0xFFFF


def _clamp(value: int) -> int:
    return min(max(value, 0), _MAX_OFFSET)


@dataclass
class ScrollViewState:
    """Where a scroll view is scrolled to.

    ``offset`` is the number of columns and rows the content is shifted by.
    ``size`` and ``page_size`` are filled in by the first render.
    """

    offset: Position = Position()
    size: Size | None = None
    page_size: Size | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.offset, Position):
            self.offset = Position(*self.offset)

    @classmethod
    def with_offset(cls, offset: Position | tuple[int, int]) -> ScrollViewState:
        """A state starting at ``offset``."""
        return cls(offset=Position(*offset))

    def _set_y(self, y: int) -> None:
        self.offset = replace(self.offset, y=_clamp(y))

    def _set_x(self, x: int) -> None:
        self.offset = replace(self.offset, x=_clamp(x))

    def _page_height(self) -> int:
        return self.page_size.height if self.page_size is not None else 1

    def scroll_up(self) -> None:
        """Move up by one row."""
        self._set_y(self.offset.y - 1)

    def scroll_down(self) -> None:
        """Move down by one row."""
        self._set_y(self.offset.y + 1)

    def scroll_page_down(self) -> None:
        """Move down by one page, keeping one row of overlap."""
        self._set_y(_clamp(self.offset.y + self._page_height()) - 1)

    def scroll_page_up(self) -> None:
        """Move up by one page, keeping one row of overlap."""
        self._set_y(_clamp(self.offset.y + 1) - self._page_height())

    def scroll_left(self) -> None:
        """Move left by one column."""
        self._set_x(self.offset.x - 1)

    def scroll_right(self) -> None:
        """Move right by one column."""
        self._set_x(self.offset.x + 1)

    def scroll_to_top(self) -> None:
        """Move to the top left corner."""
        self.offset = Position(0, 0)

    def scroll_to_bottom(self) -> None:
        """Move to the last row; rendering clamps the offset to the content."""
        if self.size is None:
            bottom = _MAX_OFFSET
        else:
            bottom = max(self.size.height - 1, 0)
        self._set_y(bottom)