"""Positions, sizes and rectangles on a terminal grid."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A column and row on the grid."""

    x: int = 0
    y: int = 0

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Size:
    """A width and height."""

    width: int = 0
    height: int = 0

    def __iter__(self) -> Iterator[int]:
        yield self.width
        yield self.height


@dataclass(frozen=True)
class Rect:
    """A rectangular region of the grid."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"rectangle dimensions must not be negative: {self}")

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def area(self) -> int:
        """The number of cells covered."""
        return self.width * self.height

    def intersection(self, other: Rect) -> Rect:
        """The overlap of the two rectangles; empty if they do not overlap."""
        x1 = max(self.x, other.x)
        y1 = max(self.y, other.y)
        x2 = min(self.right, other.right)
        y2 = min(self.bottom, other.bottom)
        return Rect(x1, y1, max(0, x2 - x1), max(0, y2 - y1))

    def positions(self) -> Iterator[Position]:
        """Every position inside, row by row."""
        for y in range(self.top, self.bottom):
            for x in range(self.left, self.right):
                yield Position(x, y)

    def rows(self) -> Iterator[Rect]:
        """One single-row rectangle for every row inside."""
        for y in range(self.top, self.bottom):
            yield Rect(self.x, y, self.width, 1)