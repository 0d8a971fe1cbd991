"""Key events, focus and the editing behaviour shared by prompt states."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from termwidgets.status import Status


class FocusState(enum.Enum):
    """Whether a prompt has the keyboard focus; unfocused by default."""

    UNFOCUSED = "unfocused"
    FOCUSED = "focused"


class KeyCode(enum.Enum):
    """Keys that do not produce a character."""

    ENTER = "enter"
    ESC = "esc"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    TAB = "tab"
    BACK_TAB = "back_tab"
    BACKSPACE = "backspace"
    DELETE = "delete"
    INSERT = "insert"


class KeyModifiers(enum.Flag):
    """Modifier keys held during a key event."""

    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()


class KeyEventKind(enum.Enum):
    """Whether a key was pressed, repeated or released."""

    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    """A key event; ``code`` is a :class:`KeyCode` or a single character."""

    code: Union[KeyCode, str]
    modifiers: KeyModifiers = KeyModifiers.NONE
    kind: KeyEventKind = KeyEventKind.PRESS


_CONTROL_ACTIONS = {
    "c": "abort",
    "b": "move_left",
    "f": "move_right",
    "a": "move_start",
    "e": "move_end",
    "h": "backspace",
    "d": "delete",
    "k": "kill",
    "u": "truncate",
}

_KEY_ACTIONS = {
    KeyCode.ENTER: "complete",
    KeyCode.ESC: "abort",
    KeyCode.LEFT: "move_left",
    KeyCode.RIGHT: "move_right",
    KeyCode.HOME: "move_start",
    KeyCode.END: "move_end",
    KeyCode.BACKSPACE: "backspace",
    KeyCode.DELETE: "delete",
}


class State:
    """Editing behaviour for a prompt's state.

    Subclasses provide the attributes ``status``, ``focus_state``,
    ``position`` (a character index into ``value``), ``cursor`` and ``value``.

    Keybindings:
    Enter completes; Esc or Ctrl+C aborts; Left/Ctrl+B and Right/Ctrl+F move;
    Home/Ctrl+A and End/Ctrl+E jump to the ends; Backspace/Ctrl+H and
    Delete/Ctrl+D delete a character; Ctrl+K deletes to the end of the line;
    Ctrl+U clears the line.
    """

    status: Status
    focus_state: FocusState
    position: int
    cursor: tuple[int, int]
    value: str

    def focus(self) -> None:
        self.focus_state = FocusState.FOCUSED

    def blur(self) -> None:
        self.focus_state = FocusState.UNFOCUSED

    def is_focused(self) -> bool:
        return self.focus_state is FocusState.FOCUSED

    def __len__(self) -> int:
        return len(self.value)

    def is_empty(self) -> bool:
        return not self.value

    def handle_key_event(self, key_event: KeyEvent) -> None:
        """Apply the edit bound to ``key_event``; unbound keys are ignored."""
        if key_event.kind is KeyEventKind.RELEASE:
            return
        code, modifiers = key_event.code, key_event.modifiers
        if isinstance(code, KeyCode):
            action = _KEY_ACTIONS.get(code)
            if action is not None:
                getattr(self, action)()
            return
        if modifiers == KeyModifiers.CONTROL:
            action = _CONTROL_ACTIONS.get(code)
            if action is not None:
                getattr(self, action)()
        elif modifiers in (KeyModifiers.NONE, KeyModifiers.SHIFT):
            self.push(code)

    def complete(self) -> None:
        self.status = Status.DONE

    def abort(self) -> None:
        self.status = Status.ABORTED

    def delete(self) -> None:
        """Remove the character under the cursor."""
        position = self.position
        if position == len(self.value):
            return
        self.value = self.value[:position] + self.value[position + 1 :]

    def backspace(self) -> None:
        """Remove the character before the cursor."""
        position = self.position
        if position == 0:
            return
        self.value = self.value[: position - 1] + self.value[position:]
        self.position = position - 1

    def move_right(self) -> None:
        if self.position == len(self.value):
            return
        self.position += 1

    def move_left(self) -> None:
        self.position = max(self.position - 1, 0)

    def move_end(self) -> None:
        self.position = len(self.value)

    def move_start(self) -> None:
        self.position = 0

    def kill(self) -> None:
        """Remove everything from the cursor to the end."""
        self.value = self.value[: self.position]

    def truncate(self) -> None:
        """Clear the value and move the cursor to the start."""
        self.value = ""
        self.position = 0

    def push(self, c: str) -> None:
        """Insert one character at the cursor and move past it."""
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        position = self.position
        if position == len(self.value):
            self.value += c
        else:
            self.value = self.value[:position] + c + self.value[position:]
        self.position = position + 1