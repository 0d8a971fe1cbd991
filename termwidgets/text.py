"""Styled spans, lines and paragraphs of text."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Union

from wcwidth import wcwidth

from termwidgets.layout import Rect
from termwidgets.style import Color, Modifier, Style

if TYPE_CHECKING:
    from termwidgets.buffer import Buffer


def _char_width(char: str) -> int:
    return max(wcwidth(char), 0)


def _truncate(content: str, width: int) -> str:
    total = 0
    for index, char in enumerate(content):
        total += _char_width(char)
        if total > width:
            return content[:index]
    return content


@dataclass(frozen=True)
class Span:
    """A piece of text with a single style."""

    content: str = ""
    style: Style = Style()

    def width(self) -> int:
        """The display width in terminal columns."""
        return sum(_char_width(char) for char in self.content)

    def split_at(self, mid: int) -> tuple[Span, Span]:
        """Split the content at character index ``mid``, keeping the style on both halves."""
        if not 0 <= mid <= len(self.content):
            raise ValueError(f"split index {mid} out of range for {self.content!r}")
        return (
            Span(self.content[:mid], self.style),
            Span(self.content[mid:], self.style),
        )

    def styled(self, style: Style) -> Span:
        """This span with ``style`` patched onto its style."""
        return replace(self, style=self.style.patch(style))

    def cyan(self) -> Span:
        return self.styled(Style(fg=Color.CYAN))

    def red(self) -> Span:
        return self.styled(Style(fg=Color.RED))

    def green(self) -> Span:
        return self.styled(Style(fg=Color.GREEN))

    def bold(self) -> Span:
        return self.styled(Style(add_modifier=Modifier.BOLD))

    def dim(self) -> Span:
        return self.styled(Style(add_modifier=Modifier.DIM))

    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw on the first row of ``area``."""
        Line([self]).render(area, buf)


SpanLike = Union[str, Span]


@dataclass
class Line:
    """A sequence of spans drawn on one row."""

    spans: list[Span] = field(default_factory=list)
    style: Style = Style()

    def __post_init__(self) -> None:
        spans: Iterable[SpanLike]
        if isinstance(self.spans, (str, Span)):
            spans = [self.spans]
        else:
            spans = self.spans
        self.spans = [span if isinstance(span, Span) else Span(str(span)) for span in spans]

    def width(self) -> int:
        """The display width in terminal columns."""
        return sum(span.width() for span in self.spans)

    def split_at(self, mid: int) -> tuple[Line, Line]:
        """Split into the part within the first ``mid`` columns and the rest."""
        first = Line(style=self.style)
        second = Line(style=self.style)
        for span in self.spans:
            first_width = first.width()
            if first_width + span.width() <= mid:
                first.spans.append(span)
            elif first_width < mid:
                head, tail = span.split_at(mid - first_width)
                first.spans.append(head)
                second.spans.append(tail)
            else:
                second.spans.append(span)
        return first, second

    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw on the first row of ``area``, clipped to its width."""
        area = area.intersection(buf.area)
        if area.area() == 0:
            return
        row = Rect(area.x, area.y, area.width, 1)
        buf.set_style(row, self.style)
        x = area.x
        for span in self.spans:
            remaining = area.right - x
            if remaining <= 0:
                break
            x = buf.set_string(
                x, area.y, _truncate(span.content, remaining), self.style.patch(span.style)
            )


def wrap_line(line: Line, width: int) -> Iterator[Line]:
    """Cut a line into pieces of at most ``width`` columns, character by character."""
    while line.width() > width:
        if width <= 0:
            raise ValueError("cannot wrap a non-empty line to a width below 1")
        first, line = line.split_at(width)
        yield first
    if line.width() > 0:
        yield line


@dataclass
class Paragraph:
    """Lines of text drawn one per row into an area."""

    lines: list[Line] = field(default_factory=list)
    style: Style = Style()

    def __post_init__(self) -> None:
        text = self.lines
        if isinstance(text, str):
            self.lines = [Line(part) for part in text.split("\n")]
        elif isinstance(text, Span):
            self.lines = [Line([text])]
        elif isinstance(text, Line):
            self.lines = [text]
        else:
            self.lines = [item if isinstance(item, Line) else Line(item) for item in text]

    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw the lines from the top of ``area``, clipped to it."""
        area = area.intersection(buf.area)
        if area.area() == 0:
            return
        buf.set_style(area, self.style)
        for line, row in zip(self.lines, area.rows()):
            line.render(row, buf)