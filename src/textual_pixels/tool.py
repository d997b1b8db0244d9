"""Enumeration of the tools available in the Pixels app."""

import os
from enum import Enum

from rich.cells import set_cell_size

from textual_pixels.__init__ import PYTEST
from textual_pixels.args import args

ICON_WIDTH = 2
"""Width in cells that every tool icon is padded or cropped to."""


class Tool(Enum):
    """The tools available in the Pixels app."""
    paintbrush = 1
    bucket = 2

    def get_icon(self) -> str:
        """Get the icon for this tool, exactly ICON_WIDTH cells wide."""
        return set_cell_size(self._get_icon_text(), ICON_WIDTH)

    def _get_icon_text(self) -> str:
        if args.ascii_only_icons:
            return {
                Tool.paintbrush: "E)",
                Tool.bucket: "H?",
            }[self]
        if not PYTEST:
            # "🪣" shows as tofu or misaligns the row in some terminals.
            # Don't swap icons in pytest, so results don't vary across platforms.
            TERM_PROGRAM = os.environ.get("TERM_PROGRAM")
            if self == Tool.bucket and (
                TERM_PROGRAM in ("vscode", "iTerm.app") or os.environ.get("WT_SESSION")
            ):
                return "🌊"
            if self == Tool.paintbrush and os.environ.get("KITTY_WINDOW_ID"):
                return "▬▤"
        return {
            Tool.paintbrush: "🖌️",
            Tool.bucket: "🪣",
        }[self]

    def get_name(self) -> str:
        """Get the display name for this tool.

        Not to be confused with tool.name, which is an identifier.
        """
        return {
            Tool.paintbrush: "Paintbrush",
            Tool.bucket: "Fill With Color",
        }[self]
