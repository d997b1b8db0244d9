"""Routing of pointer input between the dialog and the canvas."""

from enum import Enum
from typing import NamedTuple

from textual import log
from textual.geometry import Offset, Region

from textual_pixels.canvas import Canvas
from textual_pixels.dialog import DialogState

PRIMARY_BUTTON = 1
"""Mouse button number of the primary (usually left) button."""

CELLS_PER_PIXEL = 2
"""Each canvas pixel is drawn as two terminal cells side by side, to look square-ish."""


class PointerKind(Enum):
    """What the pointer did."""
    press = 1
    drag = 2
    release = 3


class Target(Enum):
    """Where a pointer event ended up."""
    ignored = 1
    overlay = 2
    canvas = 3


class DispatchResult(NamedTuple):
    """The outcome of dispatching a pointer event."""

    target: Target
    changed_region: Region|None = None
    """The region of the canvas, in pixels, that may have changed."""


def terminal_to_canvas(pos: tuple[int, int]) -> Offset:
    """Convert a terminal cell position to the canvas pixel under it."""
    x, y = pos
    return Offset(x // CELLS_PER_PIXEL, y)


class InputDispatcher:
    """Sends pointer events to the dialog if they land on it, otherwise to the canvas."""

    def __init__(self, canvas: Canvas, dialog: DialogState) -> None:
        self.canvas = canvas
        self.dialog = dialog

    def pointer(self, kind: PointerKind, button: int, x: int, y: int) -> DispatchResult:
        """Handle a pointer event at a terminal cell position."""
        if kind == PointerKind.release or button != PRIMARY_BUTTON:
            return DispatchResult(Target.ignored)

        pos = (x, y)
        for bound in self.dialog.bounds():
            if bound.contains(pos):
                self.dialog.interact(pos, self.canvas)
                return DispatchResult(Target.overlay)

        # Coordinates can be negative while the mouse is captured and dragged off screen.
        if x < 0 or y < 0:
            return DispatchResult(Target.ignored)
        canvas_pos = terminal_to_canvas(pos)
        region = self.canvas.interact_with_pixel(*canvas_pos)
        if region is None:
            log.debug(f"Nothing to change at {canvas_pos}")
        return DispatchResult(Target.canvas, region)
