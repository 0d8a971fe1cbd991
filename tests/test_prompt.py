from dataclasses import dataclass

import pytest

from termwidgets.prompt import (
    FocusState,
    KeyCode,
    KeyEvent,
    KeyEventKind,
    KeyModifiers,
    State,
)
from termwidgets.status import Status
from termwidgets.text import Span


@dataclass
class _Editor(State):
    status: Status = Status.PENDING
    focus_state: FocusState = FocusState.UNFOCUSED
    position: int = 0
    cursor: tuple = (0, 0)
    value: str = ""


CTRL = KeyModifiers.CONTROL


def test_status_symbols():
    assert Status.PENDING.symbol() == Span("?").cyan()
    assert Status.ABORTED.symbol() == Span("✘").red()
    assert Status.DONE.symbol() == Span("✔").green()


def test_focus_and_blur():
    editor = _Editor()
    assert not State.is_focused(editor)
    State.focus(editor)
    assert editor.focus_state is FocusState.FOCUSED
    assert State.is_focused(editor)
    State.blur(editor)
    assert editor.focus_state is FocusState.UNFOCUSED


def test_len_and_is_empty():
    editor = _Editor(value="äë")
    assert len(editor) == 2
    assert not State.is_empty(editor)
    assert State.is_empty(_Editor())


def test_typing_characters():
    editor = _Editor()
    for char in "hi":
        editor.handle_key_event(KeyEvent(char))
    editor.handle_key_event(KeyEvent("X", KeyModifiers.SHIFT))
    assert editor.value == "hiX"
    assert editor.position == 3


def test_release_is_ignored():
    editor = _Editor()
    editor.handle_key_event(KeyEvent("a", kind=KeyEventKind.RELEASE))
    assert editor.value == ""


def test_alt_character_is_ignored():
    editor = _Editor()
    editor.handle_key_event(KeyEvent("a", KeyModifiers.ALT))
    assert editor.value == ""


@pytest.mark.parametrize(
    "event", [KeyEvent(KeyCode.ESC), KeyEvent("c", CTRL)]
)
def test_abort(event):
    editor = _Editor()
    editor.handle_key_event(event)
    assert editor.status is Status.ABORTED


def test_enter_completes():
    editor = _Editor()
    editor.handle_key_event(KeyEvent(KeyCode.ENTER, KeyModifiers.SHIFT))
    assert editor.status is Status.DONE


@pytest.mark.parametrize(
    ("event", "position"),
    [
        (KeyEvent(KeyCode.LEFT), 2),
        (KeyEvent("b", CTRL), 2),
        (KeyEvent(KeyCode.RIGHT), 4),
        (KeyEvent("f", CTRL), 4),
        (KeyEvent(KeyCode.HOME), 0),
        (KeyEvent("a", CTRL), 0),
        (KeyEvent(KeyCode.END), 5),
        (KeyEvent("e", CTRL), 5),
    ],
)
def test_movement_keys(event, position):
    editor = _Editor(value="hello", position=3)
    editor.handle_key_event(event)
    assert editor.position == position
    assert editor.value == "hello"


@pytest.mark.parametrize(
    ("event", "value", "position"),
    [
        (KeyEvent(KeyCode.BACKSPACE), "helo", 2),
        (KeyEvent("h", CTRL), "helo", 2),
        (KeyEvent(KeyCode.DELETE), "helo", 3),
        (KeyEvent("d", CTRL), "helo", 3),
        (KeyEvent("k", CTRL), "hel", 3),
        (KeyEvent("u", CTRL), "", 0),
    ],
)
def test_editing_keys(event, value, position):
    editor = _Editor(value="hello", position=3)
    editor.handle_key_event(event)
    assert (editor.value, editor.position) == (value, position)


def test_move_left_stops_at_start():
    editor = _Editor(value="ab")
    State.move_left(editor)
    assert editor.position == 0


def test_move_right_stops_at_end():
    editor = _Editor(value="ab", position=2)
    State.move_right(editor)
    assert editor.position == 2


def test_push_in_middle():
    editor = _Editor(value="ac", position=1)
    State.push(editor, "b")
    assert editor.value == "abc"
    assert editor.position == 2


def test_push_rejects_multiple_characters():
    with pytest.raises(ValueError):
        State.push(_Editor(), "ab")