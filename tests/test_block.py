import pytest

from termwidgets.block import Block, Borders
from termwidgets.buffer import Buffer
from termwidgets.layout import Rect


def test_borders_all_renders_like_every_side():
    all_buf = Buffer.empty(Rect(0, 0, 6, 4))
    Block(borders=Borders.ALL).render(all_buf.area, all_buf)
    sides_buf = Buffer.empty(Rect(0, 0, 6, 4))
    sides = Borders.TOP | Borders.RIGHT | Borders.BOTTOM | Borders.LEFT
    Block(borders=sides).render(sides_buf.area, sides_buf)
    assert all_buf.lines() == sides_buf.lines()


@pytest.mark.parametrize("area", [Rect(0, 0, 15, 3), Rect(2, 4, 7, 9)])
def test_inner_without_borders_is_whole_area(area):
    assert Block().inner(area) == area


@pytest.mark.parametrize("area", [Rect(0, 0, 15, 3), Rect(2, 4, 7, 9)])
def test_inner_with_all_borders_shrinks_each_side(area):
    inner = Block(borders=Borders.ALL).inner(area)
    assert inner == Rect(area.x + 1, area.y + 1, area.width - 2, area.height - 2)


def test_inner_right_and_bottom_keeps_origin():
    area = Rect(3, 5, 10, 4)
    inner = Block(borders=Borders.RIGHT | Borders.BOTTOM).inner(area)
    assert (inner.x, inner.y) == (area.x, area.y)
    assert (inner.width, inner.height) == (area.width - 1, area.height - 1)


def test_inner_of_tiny_area_is_empty():
    inner = Block(borders=Borders.ALL).inner(Rect(0, 0, 1, 1))
    assert inner.area() == 0


def test_render_all_borders_with_title():
    buf = Buffer.empty(Rect(0, 0, 15, 3))
    Block(borders=Borders.ALL, title="Title").render(buf.area, buf)
    assert buf.lines() == [
        "┌Title────────┐",
        "│             │",
        "└─────────────┘",
    ]


def test_render_right_and_bottom():
    buf = Buffer.empty(Rect(0, 0, 5, 3))
    Block(borders=Borders.RIGHT | Borders.BOTTOM).render(buf.area, buf)
    lines = buf.lines()
    assert all(line.endswith("│") for line in lines[:-1])
    assert lines[-1] == "─" * 4 + "┘"


def test_render_leaves_inner_area_blank():
    buf = Buffer.empty(Rect(0, 0, 8, 5))
    block = Block(borders=Borders.ALL)
    block.render(buf.area, buf)
    inner = block.inner(buf.area)
    assert all(buf[position].symbol == " " for position in inner.positions())


def test_title_is_clipped_to_the_border():
    buf = Buffer.empty(Rect(0, 0, 6, 3))
    Block(borders=Borders.ALL, title="A long title").render(buf.area, buf)
    top = buf.lines()[0]
    assert top[0] == "┌"
    assert top[-1] == "┐"
    assert top[1:-1] == "A long title"[:4]


def test_render_is_clipped_to_buffer():
    buf = Buffer.empty(Rect(0, 0, 4, 4))
    Block(borders=Borders.ALL).render(Rect(2, 2, 10, 10), buf)
    assert buf[2, 2].symbol == "┌"
    assert buf[3, 3].symbol == " "
    assert buf[0, 0].symbol == " "