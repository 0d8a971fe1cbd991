# termwidgets

Widgets for terminal user interfaces. They draw into an in-memory grid of
styled cells (`Buffer`). You can compare that grid in tests, or pass its
contents to whatever writes to your terminal.

## What is in the package

| Module                     | Contents |
|----------------------------|----------|
| `termwidgets.layout`       | `Position`, `Size`, `Rect` (`area`, `intersection`, `positions`, `rows`) |
| `termwidgets.style`        | `Color`, `Modifier`, `Style` (`patch`) |
| `termwidgets.text`         | `Span`, `Line`, `Paragraph`, `wrap_line` |
| `termwidgets.buffer`       | `Cell`, `Buffer`, `Frame` |
| `termwidgets.block`        | `Block`, `Borders` |
| `termwidgets.status`       | `Status`, `Symbols` |
| `termwidgets.prompt`       | `State`, `FocusState`, `KeyEvent`, `KeyCode`, `KeyModifiers`, `KeyEventKind` |
| `termwidgets.text_state`   | `TextState` |
| `termwidgets.text_prompt`  | `TextPrompt`, `TextRenderStyle` |
| `termwidgets.scroll_state` | `ScrollViewState` |
| `termwidgets.scrollbar`    | `Scrollbar`, `ScrollbarState`, `ScrollbarOrientation` |
| `termwidgets.scroll_view`  | `ScrollView`, `ScrollbarVisibility` |

## Installation

```
pip install termwidgets
```

The only runtime dependency is `wcwidth`, which supplies the display
width of each character.

## Buffers

`Buffer.empty(rect)` creates a grid of blank cells. Index it with absolute
`(x, y)` pairs or `Position` values. A position outside the area raises
`IndexError`. `Buffer.with_lines([...])` builds a buffer at the origin
from strings or `Line` objects. `buffer.lines()` returns the symbols of
each row as text. `set_string` and `set_style` write text and patch
styles into the grid.

`Frame` wraps a buffer. It renders widgets into the buffer and records a
cursor position set with `set_cursor_position`.

## A text prompt

```python
from termwidgets.buffer import Buffer
from termwidgets.layout import Rect
from termwidgets.prompt import KeyCode, KeyEvent
from termwidgets.text_prompt import TextPrompt
from termwidgets.text_state import TextState

state = TextState().with_value("hello")
state.focus()
state.handle_key_event(KeyEvent(KeyCode.END))
state.push("!")

buf = Buffer.empty(Rect(0, 0, 30, 1))
TextPrompt("Greeting").render(buf.area, buf, state)
print(buf.lines()[0])   # "? Greeting › hello!" padded to the width
print(state.cursor)     # the cell where the cursor belongs
```

Each rendered prompt line has the same parts, in order:

1. the status symbol: `?` in cyan, `✘` in red, or `✔` in green;
2. the message, in bold;
3. a dim cyan ` › `;
4. the value.

A line wider than the area wraps by character. Lines beyond the area's
height are dropped. `render` stores the cursor cell in `state.cursor`.
The cursor is clamped to the last cell of the area. An empty area
raises `ValueError`.

Options:

- `with_render_style(TextRenderStyle.PASSWORD)` shows the value as `*`
  characters.
- `with_render_style(TextRenderStyle.INVISIBLE)` hides the value.
- `with_block(Block(borders=Borders.ALL, title="Title"))` draws the
  prompt inside borders.

`TextPrompt.draw(frame, area, state)` renders into a `Frame`. It also
moves the frame's cursor, but only when the state is focused.

`TextState` holds `status`, `focus_state`, `position` (a character index
into `value`), `cursor` and `value`. Each of `with_status`, `with_focus`
and `with_value` returns a changed copy. `is_finished()` is true once
the status is `Status.DONE` or `Status.ABORTED`.

### Key bindings

`State.handle_key_event` applies these bindings:

| Key                  | Action                              |
|----------------------|-------------------------------------|
| Enter                | complete                            |
| Esc, Ctrl+C          | abort                               |
| Left, Ctrl+B         | move left                           |
| Right, Ctrl+F        | move right                          |
| Home, Ctrl+A         | move to start                       |
| End, Ctrl+E          | move to end                         |
| Backspace, Ctrl+H    | delete the character before cursor  |
| Delete, Ctrl+D       | delete the character at the cursor  |
| Ctrl+K               | delete from cursor to end           |
| Ctrl+U               | clear the line                      |

- A character key with no modifier, or with Shift only, is inserted at
  the cursor.
- Release events are ignored.
- Other keys are ignored.
- `push` raises `ValueError` for anything but a single character.

## A scroll view

```python
from termwidgets.buffer import Buffer
from termwidgets.layout import Rect, Size
from termwidgets.scroll_state import ScrollViewState
from termwidgets.scroll_view import ScrollView, ScrollbarVisibility
from termwidgets.text import Paragraph

view = ScrollView(Size(40, 100)).horizontal_scrollbar_visibility(
    ScrollbarVisibility.NEVER
)
view.render_widget(Paragraph("Lots of text ..."), view.area)

state = ScrollViewState()
state.scroll_down()
state.scroll_page_down()

screen = Buffer.empty(Rect(0, 0, 41, 20))
view.render(screen.area, screen, state)
```

A `ScrollView` owns a content buffer, `view.buf`, that starts at `(0, 0)`.
Draw into it with `render_widget` or `render_stateful_widget`.
`view.render(area, buf, state)` then does four things:

- copies the visible window into `buf`;
- clamps the offset so you cannot scroll past the end;
- resets the offset in any direction where the content fits with room
  to spare;
- records the content size and page size in the state.

`scroll_page_down`, `scroll_page_up` and `scroll_to_bottom` use the sizes
recorded in the state. Paging keeps one row of overlap.

Scrollbar visibility is set per direction with
`vertical_scrollbar_visibility` and `horizontal_scrollbar_visibility`,
or for both at once with `scrollbars_visibility`. Each takes one of
these values:

- `AUTOMATIC` (default) shows a scrollbar when the content does not fit.
  It also shows one when the content fits exactly but the other
  scrollbar takes away a line.
- `ALWAYS` always shows the scrollbar.
- `NEVER` never shows it.

Drawing a scrollbar into an area with no room for it raises
`ValueError("Scrollbar area is empty")`.

## What the package does not do

The package does not talk to a terminal:

- It does not read key presses. You build `KeyEvent` values yourself and
  pass them to `handle_key_event`.
- It does not write escape sequences, switch screens or enable raw mode.
- It draws only into a `Buffer`, and sets the cursor only on a `Frame`.

It also has no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```