"""A prompt widget showing a status symbol, a message and an editable value."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from itertools import islice

from termwidgets.block import Block
from termwidgets.buffer import Buffer, Frame
from termwidgets.layout import Rect
from termwidgets.text import Line, Paragraph, Span, wrap_line
from termwidgets.text_state import TextState


class TextRenderStyle(enum.Enum):
    """How the value of a prompt is shown."""

    DEFAULT = "default"
    PASSWORD = "password"
    INVISIBLE = "invisible"

    def render(self, state: TextState) -> str:
        """The text shown for the value of ``state``."""
        if self is TextRenderStyle.PASSWORD:
            return "*" * len(state.value)
        if self is TextRenderStyle.INVISIBLE:
            return ""
        return state.value


@dataclass(frozen=True)
class TextPrompt:
    """A message followed by a text input, optionally wrapped in a block."""

    message: str = ""
    block: Block | None = None
    render_style: TextRenderStyle = TextRenderStyle.DEFAULT

    def with_block(self, block: Block) -> TextPrompt:
        return replace(self, block=block)

    def with_render_style(self, render_style: TextRenderStyle) -> TextPrompt:
        return replace(self, render_style=render_style)

    def render(self, area: Rect, buf: Buffer, state: TextState) -> None:
        """Draw the prompt into ``buf`` and store the cursor cell in ``state``."""
        if self.block is not None:
            inner = self.block.inner(area)
            self.block.render(area, buf)
            area = inner
        if area.area() == 0:
            raise ValueError(f"prompt area is empty: {area}")

        width, height = area.width, area.height
        value = self.render_style.render(state)

        line = Line(
            [
                state.status.symbol(),
                Span(" "),
                Span(self.message).bold(),
                Span(" › ").cyan().dim(),
                Span(value),
            ]
        )
        prompt_length = line.width() - len(value)
        lines = list(islice(wrap_line(line, width), height))

        position = min(state.position + prompt_length, area.area() - 1)
        row, column = divmod(position, width)
        state.cursor = (area.x + column, area.y + row)
        Paragraph(lines).render(area, buf)

    def draw(self, frame: Frame, area: Rect, state: TextState) -> None:
        """Render into ``frame`` and place its cursor when the prompt is focused."""
        frame.render_stateful_widget(self, area, state)
        if state.is_focused():
            frame.set_cursor_position(state.cursor)