"""Textual Pixels, a pixel painting app for the terminal."""

import os

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.geometry import Region

from textual_pixels.args import args
from textual_pixels.canvas import Canvas
from textual_pixels.dialog import DialogState
from textual_pixels.dispatch import CELLS_PER_PIXEL, InputDispatcher, Target
from textual_pixels.surface import PaintSurface


class PixelPaintApp(App[None]):
    """Pixel painting with a paintbrush and a fill bucket, in the terminal."""

    # These call action_* methods on the app.
    # https://textual.textualize.io/guide/actions/
    BINDINGS = [
        Binding("q", "quit", "Quit"),
        # Ctrl+C isn't used for copying here, so let it quit like in most terminal programs.
        Binding("ctrl+c", "quit", "Quit", priority=True),
        Binding("t,ctrl+t", "toggle_dialog", "Toggle Tools and Colors"),
    ]

    def __init__(self, show_dialog: bool = False) -> None:
        super().__init__()
        self.show_dialog = show_dialog

    def compose(self) -> ComposeResult:
        """Add our widgets."""
        yield PaintSurface(id="surface")

    def on_mount(self) -> None:
        """Called when the app is mounted. Sets up the canvas to fit the terminal."""
        terminal_size = self.size
        self.canvas = Canvas(terminal_size.width // CELLS_PER_PIXEL, terminal_size.height)
        self.dialog = DialogState(terminal_size)
        self.dialog.hidden = not self.show_dialog
        self.dispatcher = InputDispatcher(self.canvas, self.dialog)
        self.surface = self.query_one("#surface", PaintSurface)
        self.surface.canvas = self.canvas
        self.log.info(f"Canvas is {self.canvas.width}x{self.canvas.height} for a terminal of {terminal_size}")
        self.redraw()

    def redraw(self, changed_region: Region|None = None) -> None:
        """Lay out the dialog again, and refresh the surface.

        This is the only place the dialog is rendered, so its bounds
        always match what's on screen.
        """
        self.surface.update_overlay(self.dialog.render(self.canvas), changed_region)

    def action_toggle_dialog(self) -> None:
        """Toggles the visibility of the tools and colors dialog."""
        self.dialog.toggle()
        self.log.debug(f"Dialog {'hidden' if self.dialog.hidden else 'shown'}")
        self.redraw()

    def on_paint_surface_pointer(self, event: PaintSurface.Pointer) -> None:
        """Called when the mouse is used on the surface."""
        result = self.dispatcher.pointer(event.kind, event.button, event.x, event.y)
        if result.target == Target.ignored:
            return
        self.redraw(result.changed_region)


def main() -> None:
    """Entry point for the textual-pixels CLI."""
    if args.clear_screen:
        os.system("cls||clear")
    app = PixelPaintApp(show_dialog=args.show_dialog)
    app.run()


if __name__ == "__main__":
    main()
