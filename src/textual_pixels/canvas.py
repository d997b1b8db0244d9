"""The Canvas, holding the pixel grid and the drawing state."""

from textual import log
from textual.geometry import Region

from textual_pixels.graphics_primitives import flood_fill
from textual_pixels.pixel import BLACK, WHITE, Pixel
from textual_pixels.tool import Tool


class Canvas:
    """A fixed size grid of pixels, plus the color and tool to draw with.

    The grid is row-major with the origin at the top left, addressed as (x, y).
    It is never resized after construction.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize a blank white canvas, drawing in black with the paintbrush."""
        if width < 0 or height < 0:
            raise ValueError(f"Canvas size can't be negative: {width}x{height}")
        self.width = width
        self.height = height
        self._pixels: list[list[Pixel]] = [[WHITE] * width for _ in range(height)]
        self._current_color = BLACK
        self._current_tool = Tool.paintbrush

    def pixels(self) -> tuple[tuple[Pixel, ...], ...]:
        """Get a read-only snapshot of the grid, one tuple per row."""
        return tuple(tuple(row) for row in self._pixels)

    def pixel_at(self, x: int, y: int) -> Pixel|None:
        """Get the pixel at the given coordinates, or None if out of bounds."""
        if not self.contains(x, y):
            return None
        return self._pixels[y][x]

    def row(self, y: int) -> list[Pixel]:
        """Get a copy of one row of the grid, for rendering."""
        return list(self._pixels[y])

    def contains(self, x: int, y: int) -> bool:
        """Whether the coordinates address a pixel of the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def current_tool(self) -> Tool:
        return self._current_tool

    def set_tool(self, tool: Tool) -> None:
        if tool != self._current_tool:
            log.debug(f"Tool changed to {tool.get_name()}")
        self._current_tool = tool

    def current_color(self) -> Pixel:
        return self._current_color

    def set_color(self, color: Pixel) -> None:
        """Set the color to draw with. Colors that aren't fully opaque are allowed."""
        if color != self._current_color:
            log.debug(f"Color changed to {color.hex}")
        self._current_color = color

    def paint_pixel(self, x: int, y: int) -> Region|None:
        """Set a single pixel to the current color."""
        if not self.contains(x, y):
            return None
        self._pixels[y][x] = self._current_color
        return Region(x, y, 1, 1)

    def flood_fill_pixel(self, x: int, y: int) -> Region|None:
        """Fill the region of same-colored pixels around (x, y) with the current color."""
        region = flood_fill(self._pixels, x, y, self._current_color)
        if region:
            log.info(f"Filled {region} with {self._current_color.hex}")
        return region

    def interact_with_pixel(self, x: int, y: int) -> Region|None:
        """Apply the current tool at the given pixel.

        Coordinates outside of the grid are ignored.
        Returns the region that may have changed, or None if nothing did.
        """
        if not self.contains(x, y):
            return None
        if self._current_tool == Tool.paintbrush:
            return self.paint_pixel(x, y)
        return self.flood_fill_pixel(x, y)
