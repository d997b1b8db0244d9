"""Color palette data for Textual Pixels."""

from textual_pixels.pixel import Pixel

PALETTE_COLUMNS = 10
PALETTE_ROWS = 2

# The order matters: a swatch is identified by its index.
PALETTE: tuple[Pixel, ...] = (
    Pixel.from_rgb(0, 0, 0),  # Black
    Pixel.from_rgb(120, 120, 120),  # Gray
    Pixel.from_rgb(153, 0, 48),  # Dark Red
    Pixel.from_rgb(237, 28, 36),  # Red
    Pixel.from_rgb(255, 126, 0),  # Orange
    Pixel.from_rgb(255, 242, 0),  # Yellow
    Pixel.from_rgb(34, 177, 76),  # Green
    Pixel.from_rgb(0, 183, 239),  # Turquoise
    Pixel.from_rgb(47, 54, 153),  # Indigo
    Pixel.from_rgb(111, 49, 152),  # Purple

    Pixel.from_rgb(255, 255, 255),  # White
    Pixel.from_rgb(180, 180, 180),  # Light Gray
    Pixel.from_rgb(156, 90, 60),  # Brown
    Pixel.from_rgb(255, 163, 177),  # Rose
    Pixel.from_rgb(255, 194, 14),  # Gold
    Pixel.from_rgb(245, 228, 156),  # Light Yellow
    Pixel.from_rgb(168, 230, 29),  # Lime
    Pixel.from_rgb(153, 217, 234),  # Light Turquoise
    Pixel.from_rgb(112, 154, 209),  # Blue Gray
    Pixel.from_rgb(181, 165, 213),  # Lavender
)
