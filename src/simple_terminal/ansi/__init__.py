"""ANSI escape code tables: colors, styles and the master reset."""

from simple_terminal.ansi.color import Color, ColorMode
from simple_terminal.ansi.constants import CSI, ESC, RESET
from simple_terminal.ansi.style import Style

__all__ = ["Color", "ColorMode", "Style", "RESET", "ESC", "CSI"]
