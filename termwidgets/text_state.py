"""The state of a single-line text prompt."""

from __future__ import annotations

from dataclasses import dataclass, replace

from termwidgets.prompt import FocusState, State
from termwidgets.status import Status


@dataclass
class TextState(State):
    """Status, focus, cursor and value of a text prompt."""

    status: Status = Status.PENDING
    focus_state: FocusState = FocusState.UNFOCUSED
    position: int = 0
    cursor: tuple[int, int] = (0, 0)
    value: str = ""

    def with_status(self, status: Status) -> TextState:
        return replace(self, status=status)

    def with_focus(self, focus: FocusState) -> TextState:
        return replace(self, focus_state=focus)

    def with_value(self, value: str) -> TextState:
        return replace(self, value=value)

    def is_finished(self) -> bool:
        return self.status.is_finished()