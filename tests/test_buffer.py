import pytest

from termwidgets.buffer import Buffer, Cell, Frame
from termwidgets.layout import Position, Rect
from termwidgets.style import Color, Modifier, Style
from termwidgets.text import Line, Span


def test_empty_buffer_is_blank():
    area = Rect(0, 0, 4, 2)
    buf = Buffer.empty(area)
    assert buf.area == area
    assert all(cell == Cell() for cell in buf.content)
    assert buf.lines() == [" " * 4] * 2


def test_with_lines_round_trip():
    buf = Buffer.with_lines(["ab", "cd"])
    assert buf.area == Rect(0, 0, 2, 2)
    assert buf.lines() == ["ab", "cd"]


def test_with_lines_keeps_span_styles():
    buf = Buffer.with_lines([Line([Span("a").cyan(), Span("b").bold()])])
    assert buf[0, 0].fg is Color.CYAN
    assert Modifier.BOLD in buf[1, 0].modifier
    assert buf[1, 0].fg is Color.RESET


def test_set_style_matches_rendered_line():
    buf = Buffer.empty(Rect(0, 0, 15, 1))
    Line(
        [Span("?").cyan(), Span(" "), Span("prompt").bold(), Span(" › ").cyan().dim()]
    ).render(buf.area, buf)
    expected = Buffer.with_lines(["? prompt ›     "])
    expected.set_style(Rect(0, 0, 1, 1), Style(fg=Color.CYAN))
    expected.set_style(Rect(2, 0, 6, 1), Style(add_modifier=Modifier.BOLD))
    expected.set_style(Rect(8, 0, 3, 1), Style(fg=Color.CYAN, add_modifier=Modifier.DIM))
    assert buf == expected


def test_set_string_clips_at_right_edge():
    buf = Buffer.empty(Rect(0, 0, 3, 1))
    end = buf.set_string(0, 0, "abcdef", Style())
    assert buf.lines() == ["abc"]
    assert end == buf.area.right


def test_set_string_wide_character():
    buf = Buffer.empty(Rect(0, 0, 3, 1))
    buf.set_string(0, 0, "🔍x", Style())
    assert buf.lines() == ["🔍x"]
    assert buf[1, 0].symbol == " "
    assert buf[2, 0].symbol == "x"


def test_set_string_outside_rows_raises():
    buf = Buffer.empty(Rect(0, 0, 3, 1))
    with pytest.raises(IndexError):
        buf.set_string(0, 5, "a", Style())


def test_offset_buffer_indexing():
    buf = Buffer.empty(Rect(5, 6, 2, 2))
    buf[Position(5, 6)] = Cell("z")
    assert buf[5, 6].symbol == "z"
    with pytest.raises(IndexError):
        buf[0, 0]


def test_set_style_outside_area_is_ignored():
    buf = Buffer.empty(Rect(0, 0, 2, 1))
    buf.set_style(Rect(10, 10, 5, 5), Style(fg=Color.RED))
    assert buf == Buffer.empty(Rect(0, 0, 2, 1))


def test_frame_render_widget():
    frame = Frame(Buffer.empty(Rect(0, 0, 5, 1)))
    frame.render_widget(Span("hi"), frame.area)
    assert frame.buffer.lines() == ["hi" + " " * 3]
    assert frame.cursor_position is None


class _Recorder:
    def render(self, area, buf, state):
        state.append(area)
        buf.set_string(area.x, area.y, "x", Style())


def test_frame_render_stateful_widget():
    frame = Frame(Buffer.empty(Rect(0, 0, 2, 1)))
    calls = []
    frame.render_stateful_widget(_Recorder(), frame.area, calls)
    assert calls == [frame.area]
    assert frame.buffer[0, 0].symbol == "x"


def test_frame_set_cursor_position():
    frame = Frame(Buffer.empty(Rect(0, 0, 17, 2)))
    frame.set_cursor_position((11, 0))
    assert frame.cursor_position == Position(11, 0)