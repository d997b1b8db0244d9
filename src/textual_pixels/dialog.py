"""The tools and colors dialog drawn over the canvas, and its hit testing."""

from enum import Enum
from typing import NamedTuple

from rich.color import Color
from rich.style import Style
from textual import log
from textual.geometry import Offset, Region, Size

from textual_pixels.canvas import Canvas
from textual_pixels.palette_data import PALETTE, PALETTE_COLUMNS, PALETTE_ROWS
from textual_pixels.tool import Tool

BLANK_STYLE = Style(color=Color.default(), bgcolor=Color.default())
"""Style of the dialog backgrounds: the terminal's own colors."""
SELECTED_TOOL_STYLE = Style(bgcolor=Color.parse("white"))
"""Highlight behind the icon of the current tool."""


class BoundKind(Enum):
    """Which control of the dialog a bound belongs to."""
    toolbar = 1
    palette = 2


class Bound(NamedTuple):
    """A rectangle of the screen taken by a control, for hit testing.

    Half-open on both axes: the bottom row and right column are just outside,
    so bounds that share an edge never both claim it.
    """

    top: int
    left: int
    bottom: int
    right: int
    kind: BoundKind

    @classmethod
    def from_pos_size(cls, pos: tuple[int, int], size: tuple[int, int], kind: BoundKind) -> "Bound":
        """Create a bound from an (x, y) position and a (width, height) size."""
        x, y = pos
        width, height = size
        return cls(top=y, left=x, bottom=y + height, right=x + width, kind=kind)

    def contains(self, pos: tuple[int, int]) -> bool:
        """Whether the (x, y) screen position is inside the bound."""
        x, y = pos
        return self.left <= x < self.right and self.top <= y < self.bottom

    @property
    def region(self) -> Region:
        return Region(self.left, self.top, self.right - self.left, self.bottom - self.top)


class OverlaySpan(NamedTuple):
    """A run of styled text to draw over the canvas, at a screen position."""

    x: int
    y: int
    text: str
    style: Style


class DialogState:
    """Layout and state of the dialog holding the toolbar and the palette.

    Bounds are recomputed on every render, so they always match what was last drawn.
    The dialog starts out hidden.
    """

    TOOLBAR_SIZE = Size(4, 4)
    PALETTE_SIZE = Size(24, 4)
    TOOLBAR_MARGIN = 2
    """Columns left of the tool icons, which select nothing."""
    PALETTE_MARGIN = Offset(2, 1)
    """Offset of the first swatch from the palette's top left corner."""
    SWATCH_WIDTH = 2
    """Swatches are two cells wide, to look square-ish like the canvas pixels."""

    def __init__(self, terminal_size: Size) -> None:
        """Lay out the dialog near the bottom left of a terminal of the given size.

        The layout has a fixed size. In terminals narrower than it, the controls run past
        the right edge, where no pointer events arrive; the two columns left of the
        toolbar always stay free for the canvas.
        """
        self.hidden = True
        top = max(0, terminal_size.height - 5)
        self.toolbar_pos = Offset(2, top)
        self.palette_pos = Offset(self.toolbar_pos.x + self.TOOLBAR_SIZE.width, top)
        self._bounds: list[Bound] = []

    def bounds(self) -> list[Bound]:
        """The bounds from the last render, in the order the controls were drawn."""
        return self._bounds

    def toggle(self) -> None:
        """Show the dialog if it's hidden, and hide it otherwise."""
        self.hidden = not self.hidden

    def render(self, canvas: Canvas) -> list[OverlaySpan]:
        """Recompute the bounds, and describe what to draw over the canvas."""
        self._bounds.clear()
        if self.hidden:
            return []

        spans: list[OverlaySpan] = []

        self._bounds.append(Bound.from_pos_size(self.toolbar_pos, self.TOOLBAR_SIZE, BoundKind.toolbar))
        spans.extend(draw_dialog(self.toolbar_pos, self.TOOLBAR_SIZE))
        for row, tool in enumerate(Tool, start=1):
            style = SELECTED_TOOL_STYLE if canvas.current_tool() == tool else BLANK_STYLE
            spans.append(OverlaySpan(self.toolbar_pos.x + self.TOOLBAR_MARGIN, self.toolbar_pos.y + row, tool.get_icon(), style))

        spans.extend(self.render_palette())
        return spans

    def render_palette(self) -> list[OverlaySpan]:
        self._bounds.append(Bound.from_pos_size(self.palette_pos, self.PALETTE_SIZE, BoundKind.palette))
        spans = draw_dialog(self.palette_pos, self.PALETTE_SIZE)
        origin = self.palette_pos + self.PALETTE_MARGIN
        for index, color in enumerate(PALETTE):
            row, column = divmod(index, PALETTE_COLUMNS)
            spans.append(OverlaySpan(
                origin.x + column * self.SWATCH_WIDTH,
                origin.y + row,
                " " * self.SWATCH_WIDTH,
                Style(bgcolor=color.to_color()),
            ))
        return spans

    def interact(self, pos: tuple[int, int], canvas: Canvas) -> None:
        """Handle a pointer event at a screen position inside one of the bounds.

        Positions on a control's border or margin, or outside every bound, do nothing.
        """
        for bound in self._bounds:
            if bound.contains(pos):
                break
        else:
            return

        x, y = pos
        if bound.kind == BoundKind.toolbar:
            if x - self.toolbar_pos.x < self.TOOLBAR_MARGIN:
                return
            tool_row = y - self.toolbar_pos.y
            if tool_row == 1:
                canvas.set_tool(Tool.paintbrush)
            elif tool_row == 2:
                canvas.set_tool(Tool.bucket)
            return

        color_index = self.swatch_index_at(pos)
        if color_index is not None:
            canvas.set_color(PALETTE[color_index])

    def swatch_index_at(self, pos: tuple[int, int]) -> int|None:
        """Get the index in PALETTE of the swatch at a screen position, if any."""
        x, y = pos
        origin = self.palette_pos + self.PALETTE_MARGIN
        if x < origin.x or y < origin.y:
            return None
        column = (x - origin.x) // self.SWATCH_WIDTH
        row = y - origin.y
        if column >= PALETTE_COLUMNS or row >= PALETTE_ROWS:
            log.debug(f"No swatch at {pos}")
            return None
        return row * PALETTE_COLUMNS + column


def draw_dialog(position: Offset, size: Size) -> list[OverlaySpan]:
    """Describe a blank rectangle to draw behind a control."""
    return [
        OverlaySpan(position.x, y, " " * size.width, BLANK_STYLE)
        for y in range(position.y, position.y + size.height)
    ]
