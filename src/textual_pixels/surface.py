"""The PaintSurface widget."""

from typing import Any, Iterable, Optional

from rich.cells import cell_len
from rich.segment import Segment
from rich.style import Style
from textual import events
from textual.geometry import Region
from textual.message import Message
from textual.strip import Strip
from textual.widget import Widget

from textual_pixels.canvas import Canvas
from textual_pixels.dialog import BLANK_STYLE, OverlaySpan
from textual_pixels.dispatch import CELLS_PER_PIXEL, PointerKind


def scale_region(region: Region) -> Region:
    """Returns the screen region covered by a region of canvas pixels."""
    return Region(region.x * CELLS_PER_PIXEL, region.y, region.width * CELLS_PER_PIXEL, region.height)


def place_text(cells: list[tuple[str, Style]], x: int, text: str, style: Style) -> None:
    """Write text into a row of cells, one entry per cell.

    Wide characters take their cell plus an empty placeholder,
    and zero width characters (such as emoji variation selectors) join the character before them.
    Anything that doesn't fit in the row is dropped.
    """
    last_index: Optional[int] = None
    for char in text:
        char_width = cell_len(char)
        if char_width == 0:
            if last_index is not None:
                cells[last_index] = (cells[last_index][0] + char, style)
            continue
        if x >= 0 and x + char_width <= len(cells):
            cells[x] = (char, style)
            for i in range(1, char_width):
                cells[x + i] = ("", style)
            last_index = x
        else:
            last_index = None
        x += char_width


class PaintSurface(Widget):
    """The drawing surface widget. Displays a Canvas with the dialog overlay on top, and handles mouse events.

    Positions in messages are in terminal cells, relative to the screen;
    deciding what they hit is up to the app.
    """

    DEFAULT_CSS = """
    PaintSurface {
        width: 1fr;
        height: 1fr;
    }
    """

    class Pointer(Message):
        """Message when the mouse is pressed, dragged, or released."""

        def __init__(self, kind: PointerKind, button: int, x: int, y: int) -> None:
            self.kind = kind
            self.button = button
            self.x = x
            self.y = y
            super().__init__()

    def __init__(self, **kwargs: Any) -> None:
        """Initialize the surface."""
        super().__init__(**kwargs)
        self.canvas: Canvas|None = None
        self.overlay: list[OverlaySpan] = []
        self._overlay_rows: dict[int, list[OverlaySpan]] = {}
        self.pointer_active: bool = False
        self.which_button: Optional[int] = None

    def update_overlay(self, spans: Iterable[OverlaySpan], changed_region: Region|None = None) -> None:
        """Set what to draw over the canvas, and refresh what changed.

        `changed_region` is in canvas pixels. If the overlay is unchanged,
        only that region is refreshed; otherwise the whole widget is.
        """
        spans = list(spans)
        if spans != self.overlay:
            self.overlay = spans
            self._overlay_rows = {}
            for span in spans:
                self._overlay_rows.setdefault(span.y, []).append(span)
            self.refresh()
        elif changed_region is not None:
            self.refresh(scale_region(changed_region))

    def on_mouse_down(self, event: events.MouseDown) -> None:
        """Called when a mouse button is pressed."""
        self.post_message(self.Pointer(PointerKind.press, event.button, event.screen_x, event.screen_y))
        self.pointer_active = True
        self.which_button = event.button
        self.capture_mouse(True)

    def on_mouse_move(self, event: events.MouseMove) -> None:
        """Called when the mouse is moved. Only drags are reported."""
        if not self.pointer_active:
            return
        assert self.which_button is not None
        self.post_message(self.Pointer(PointerKind.drag, self.which_button, event.screen_x, event.screen_y))

    def on_mouse_up(self, event: events.MouseUp) -> None:
        """Called when a mouse button is released."""
        if self.pointer_active:
            self.post_message(self.Pointer(PointerKind.release, event.button, event.screen_x, event.screen_y))
        self.pointer_active = False
        self.which_button = None
        self.capture_mouse(False)

    def render_line(self, y: int) -> Strip:
        """Render a line of the widget. y is relative to the top of the widget."""
        width = self.size.width
        cells: list[tuple[str, Style]] = [(" ", BLANK_STYLE)] * width
        canvas = self.canvas
        if canvas is not None and y < canvas.height:
            for x, pixel in enumerate(canvas.row(y)):
                style = Style(bgcolor=pixel.to_color())
                for i in range(CELLS_PER_PIXEL):
                    cell_x = x * CELLS_PER_PIXEL + i
                    if cell_x < width:
                        cells[cell_x] = (" ", style)
        for span in self._overlay_rows.get(y, []):
            place_text(cells, span.x, span.text, span.style)
        segments = [Segment(text, style) for text, style in cells if text]
        return Strip(segments, width)
