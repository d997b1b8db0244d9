"""Drawing utilities for use with pixel grids."""

from textual.geometry import Region

from textual_pixels.pixel import Pixel


def flood_fill(pixels: list[list[Pixel]], x: int, y: int, fill_color: Pixel) -> Region|None:
    """Flood fill algorithm.

    Replaces the 4-connected region of pixels matching the color at (x, y) with fill_color, in place.
    Returns the region affected by the fill, or None if nothing changed.

    There's no visited set: a filled pixel no longer matches the original color,
    since that differs from the fill color, so it's never filled twice.
    Pending spans are kept on a stack rather than recursing, so large fills can't overflow the call stack.
    """
    height = len(pixels)
    width = len(pixels[0]) if height else 0
    if x < 0 or x >= width or y < 0 or y >= height:
        return None

    # Get the original value of the pixel.
    # This is the color to be replaced.
    original_color = pixels[y][x]
    if original_color == fill_color:
        return None

    # Track the region affected by the fill.
    min_x = x
    min_y = y
    max_x = x
    max_y = y

    def inside(x: int, y: int) -> bool:
        """Returns true if the pixel at the given coordinates still has the color to be replaced."""
        if x < 0 or x >= width or y < 0 or y >= height:
            return False
        return pixels[y][x] == original_color

    def set_pixel(x: int, y: int) -> None:
        """Sets the pixel at the given coordinates to the fill color, and updates the region bounds."""
        pixels[y][x] = fill_color
        nonlocal min_x, min_y, max_x, max_y
        min_x = min(min_x, x)
        min_y = min(min_y, y)
        max_x = max(max_x, x)
        max_y = max(max_y, y)

    # The "final, combined-scan-and-fill span filler"
    # from https://en.wikipedia.org/wiki/Flood_fill
    stack: list[tuple[int, int, int, int]] = [(x, x, y, 1), (x, x, y - 1, -1)]
    while stack:
        x1, x2, y, dy = stack.pop()
        x = x1
        if inside(x, y):
            while inside(x - 1, y):
                set_pixel(x - 1, y)
                x = x - 1
            if x < x1:
                stack.append((x, x1 - 1, y - dy, -dy))
        while x1 <= x2:
            while inside(x1, y):
                set_pixel(x1, y)
                x1 = x1 + 1
            if x1 > x:
                stack.append((x, x1 - 1, y + dy, dy))
            if x1 - 1 > x2:
                stack.append((x2 + 1, x1 - 1, y - dy, -dy))
            x1 = x1 + 1
            while x1 < x2 and not inside(x1, y):
                x1 = x1 + 1
            x = x1

    return Region(min_x, min_y, max_x - min_x + 1, max_y - min_y + 1)
