"""Tests for the Canvas and its tools."""

import pytest
from textual.geometry import Region

from textual_pixels.canvas import Canvas
from textual_pixels.graphics_primitives import flood_fill
from textual_pixels.pixel import BLACK, WHITE, Pixel
from textual_pixels.tool import Tool

RED = Pixel.from_rgb(237, 28, 36)
GLASS = Pixel.from_rgba(0, 0, 0, 0)


def changed_cells(before: Canvas | tuple[tuple[Pixel, ...], ...], after: Canvas) -> set[tuple[int, int]]:
    """Coordinates of the cells that differ between a snapshot and a canvas."""
    if isinstance(before, Canvas):
        before = before.pixels()
    return {
        (x, y)
        for y, (row_before, row_after) in enumerate(zip(before, after.pixels()))
        for x, (a, b) in enumerate(zip(row_before, row_after))
        if a != b
    }


def test_new_canvas():
    canvas = Canvas(5, 3)
    assert canvas.width == 5
    assert canvas.height == 3
    assert canvas.pixels() == ((WHITE,) * 5,) * 3
    assert canvas.current_color() == BLACK
    assert canvas.current_tool() == Tool.paintbrush

def test_negative_size():
    with pytest.raises(ValueError):
        Canvas(-1, 3)

def test_empty_canvas_ignores_interaction():
    canvas = Canvas(0, 0)
    canvas.set_tool(Tool.bucket)
    assert canvas.interact_with_pixel(0, 0) is None
    assert canvas.pixels() == ()

def test_pixels_is_a_snapshot():
    canvas = Canvas(2, 2)
    snapshot = canvas.pixels()
    canvas.interact_with_pixel(0, 0)
    assert snapshot[0][0] == WHITE
    assert canvas.pixels()[0][0] == BLACK

def test_tool_and_color_setters():
    canvas = Canvas(2, 2)
    canvas.set_tool(Tool.bucket)
    assert canvas.current_tool() == Tool.bucket
    canvas.set_color(GLASS)
    assert canvas.current_color() == GLASS

@pytest.mark.parametrize("x, y", [(0, 0), (4, 0), (0, 3), (2, 1), (4, 3)])
def test_paintbrush_changes_exactly_one_cell(x: int, y: int):
    canvas = Canvas(5, 4)
    canvas.set_color(RED)
    before = canvas.pixels()
    assert canvas.interact_with_pixel(x, y) == Region(x, y, 1, 1)
    assert changed_cells(before, canvas) == {(x, y)}
    assert canvas.pixel_at(x, y) == RED

def test_paintbrush_is_idempotent():
    canvas = Canvas(3, 3)
    canvas.interact_with_pixel(1, 1)
    after_once = canvas.pixels()
    canvas.interact_with_pixel(1, 1)
    assert canvas.pixels() == after_once

@pytest.mark.parametrize("tool", list(Tool))
@pytest.mark.parametrize("x, y", [(5, 0), (0, 4), (5, 4), (100, 100), (-1, 0), (0, -1)])
def test_out_of_bounds_is_a_no_op(tool: Tool, x: int, y: int):
    canvas = Canvas(5, 4)
    canvas.set_tool(tool)
    before = canvas.pixels()
    assert canvas.interact_with_pixel(x, y) is None
    assert canvas.pixels() == before

def test_fill_whole_canvas():
    canvas = Canvas(5, 5)
    canvas.set_tool(Tool.bucket)
    assert canvas.interact_with_pixel(2, 2) == Region(0, 0, 5, 5)
    assert canvas.pixels() == ((BLACK,) * 5,) * 5

def test_fill_stops_at_wall():
    canvas = Canvas(5, 5)
    # A vertical red wall down the middle column.
    canvas.set_color(RED)
    for y in range(5):
        canvas.interact_with_pixel(2, y)
    canvas.set_color(BLACK)
    canvas.set_tool(Tool.bucket)
    before = canvas.pixels()

    assert canvas.interact_with_pixel(0, 0) == Region(0, 0, 2, 5)

    assert changed_cells(before, canvas) == {(x, y) for x in range(2) for y in range(5)}
    for y in range(5):
        assert canvas.pixel_at(2, y) == RED
        assert canvas.pixel_at(3, y) == WHITE
        assert canvas.pixel_at(4, y) == WHITE

def test_fill_is_four_connected():
    canvas = Canvas(3, 3)
    # Paint a checkerboard, so the white cells only touch diagonally.
    for x, y in [(0, 0), (2, 0), (1, 1), (0, 2), (2, 2)]:
        canvas.interact_with_pixel(x, y)
    canvas.set_color(RED)
    canvas.set_tool(Tool.bucket)
    before = canvas.pixels()
    canvas.interact_with_pixel(1, 0)
    assert changed_cells(before, canvas) == {(1, 0)}

def test_fill_with_own_color_is_a_no_op():
    canvas = Canvas(4, 4)
    canvas.set_color(WHITE)
    canvas.set_tool(Tool.bucket)
    before = canvas.pixels()
    assert canvas.interact_with_pixel(1, 1) is None
    assert canvas.pixels() == before

def test_fill_is_idempotent():
    canvas = Canvas(4, 4)
    canvas.set_tool(Tool.bucket)
    canvas.interact_with_pixel(0, 0)
    after_once = canvas.pixels()
    assert canvas.interact_with_pixel(3, 3) is None
    assert canvas.pixels() == after_once

def test_fill_transparent_region():
    canvas = Canvas(3, 1)
    canvas.set_color(GLASS)
    canvas.set_tool(Tool.bucket)
    canvas.interact_with_pixel(0, 0)
    assert canvas.pixels() == ((GLASS,) * 3,)
    # Nearly the same color is still a different color.
    canvas.set_color(Pixel.from_rgba(0, 0, 0, 1))
    canvas.paint_pixel(1, 0)
    canvas.set_color(RED)
    canvas.interact_with_pixel(0, 0)
    assert canvas.pixels() == ((RED, Pixel.from_rgba(0, 0, 0, 1), GLASS),)

def test_fill_large_canvas_without_recursion():
    canvas = Canvas(400, 400)
    canvas.set_tool(Tool.bucket)
    assert canvas.interact_with_pixel(200, 200) == Region(0, 0, 400, 400)
    assert all(pixel == BLACK for row in canvas.pixels() for pixel in row)

def test_flood_fill_primitive_snake():
    pixels = [
        [WHITE, WHITE, WHITE, WHITE],
        [RED,   RED,   RED,   WHITE],
        [WHITE, WHITE, WHITE, WHITE],
        [WHITE, RED,   RED,   RED],
    ]
    assert flood_fill(pixels, 0, 0, BLACK) == Region(0, 0, 4, 4)
    assert pixels == [
        [BLACK, BLACK, BLACK, BLACK],
        [RED,   RED,   RED,   BLACK],
        [BLACK, BLACK, BLACK, BLACK],
        [BLACK, RED,   RED,   RED],
    ]

def test_flood_fill_primitive_stops_at_wall():
    # The last row is the same color as the seed, but walled off.
    pixels = [
        [WHITE, WHITE, WHITE, WHITE],
        [RED,   RED,   RED,   WHITE],
        [WHITE, WHITE, WHITE, WHITE],
        [RED,   RED,   RED,   RED],
        [WHITE, WHITE, WHITE, WHITE],
    ]
    assert flood_fill(pixels, 0, 0, BLACK) == Region(0, 0, 4, 3)
    assert pixels == [
        [BLACK, BLACK, BLACK, BLACK],
        [RED,   RED,   RED,   BLACK],
        [BLACK, BLACK, BLACK, BLACK],
        [RED,   RED,   RED,   RED],
        [WHITE, WHITE, WHITE, WHITE],
    ]

def test_flood_fill_primitive_out_of_bounds():
    pixels = [[WHITE]]
    assert flood_fill(pixels, 1, 0, BLACK) is None
    assert flood_fill(pixels, 0, -1, BLACK) is None
    assert flood_fill([], 0, 0, BLACK) is None
    assert pixels == [[WHITE]]
