"""Command line arguments for the app."""

import argparse
import sys

from textual_pixels.__init__ import __version__

PYTEST = "pytest" in sys.modules

parser = argparse.ArgumentParser(description='Paint pixels in the terminal.', usage='%(prog)s [options]', prog="textual-pixels")
parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
parser.add_argument('--ascii-only-icons', action='store_true', help='Use only ASCII characters for tool icons, no emoji or other Unicode symbols')
parser.add_argument('--show-dialog', action='store_true', help='Start with the tools and colors dialog visible (toggle it with T)')

dev_options = parser.add_argument_group('development options')
dev_options.add_argument('--clear-screen', action='store_true', help='Clear the screen before starting, to avoid seeing outdated errors')

args = parser.parse_args([]) if PYTEST else parser.parse_args()
"""Parsed command line arguments."""

__all__ = ["args"]
