"""Box styles and frame layout."""

from simple_terminal.box.layout import BoxLayout, layout_box
from simple_terminal.box.styles import BOX_STYLES, BoxStyle

__all__ = ["BoxStyle", "BOX_STYLES", "BoxLayout", "layout_box"]
