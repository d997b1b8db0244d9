"""This file is loaded by pytest automatically. Fixtures defined here are available to all tests in the folder.

https://docs.pytest.org/en/7.1.x/reference/fixtures.html#conftest-py-sharing-fixtures-across-multiple-files
"""

import pytest

# Lets the tests run from a checkout without installing the package.
import sys, os; sys.path.insert(0, os.path.realpath(os.path.join(os.path.dirname(__file__), '../src/')))
from textual.geometry import Size

from textual_pixels.canvas import Canvas
from textual_pixels.dialog import DialogState

TERMINAL_SIZE = Size(80, 24)
"""Terminal size used for the app tests, in cells."""


@pytest.fixture(params=[False, True], ids=["unicode", "ascii"])
def each_icon_set(request: pytest.FixtureRequest):
    """Fixture to test with both the emoji and the ASCII tool icons."""
    from textual_pixels.args import args
    args.ascii_only_icons = request.param

    yield # run the test

    args.ascii_only_icons = False

@pytest.fixture
def canvas() -> Canvas:
    """A canvas sized for TERMINAL_SIZE, like the app creates."""
    return Canvas(TERMINAL_SIZE.width // 2, TERMINAL_SIZE.height)

@pytest.fixture
def dialog() -> DialogState:
    """A visible dialog laid out for TERMINAL_SIZE, not yet rendered."""
    dialog = DialogState(TERMINAL_SIZE)
    dialog.hidden = False
    return dialog
