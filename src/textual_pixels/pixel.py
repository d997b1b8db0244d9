"""The Pixel color value."""

from typing import NamedTuple

from rich.color import Color


class Pixel(NamedTuple):
    """An RGBA color, the atomic unit of the canvas.

    Equality is exact per channel. Pixels that aren't fully opaque
    are shown as the terminal's default background; alpha is never blended.

    Create pixels with `from_rgb` or `from_rgba`, which check that every channel
    fits in 8 bits. Calling `Pixel(...)` directly does no checking.
    """

    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int) -> "Pixel":
        """Create a pixel, checking that each channel fits in 8 bits."""
        for name, value in zip("rgba", (r, g, b, a)):
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name} out of range: {value}")
        return cls(r, g, b, a)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Pixel":
        """Create a fully opaque pixel."""
        return cls.from_rgba(r, g, b, 255)

    @property
    def is_opaque(self) -> bool:
        """Whether the pixel is drawn with its own color."""
        return self.a == 255

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"

    def to_color(self) -> Color:
        """Get the Rich color used to draw this pixel."""
        if not self.is_opaque:
            return Color.default()
        return Color.from_rgb(self.r, self.g, self.b)


WHITE = Pixel.from_rgb(255, 255, 255)
BLACK = Pixel.from_rgb(0, 0, 0)

# Annotations in the class body would become NamedTuple fields, so the constants are attached here.
Pixel.WHITE = WHITE  # type: ignore
Pixel.BLACK = BLACK  # type: ignore
