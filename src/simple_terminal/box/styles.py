"""Predefined glyph sets for framed boxes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class BoxStyle:
    """
    The glyphs used to draw a box.

    Each field is expected to be a single-column glyph; the layout math
    assumes every border piece occupies exactly one cell.
    """
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str
    junction_left: str
    junction_right: str
    junction_horizontal: str

    ASCII: ClassVar["BoxStyle"]
    UNICODE: ClassVar["BoxStyle"]
    DOUBLE: ClassVar["BoxStyle"]
    ROUNDED: ClassVar["BoxStyle"]
    HEAVY: ClassVar["BoxStyle"]
    BLOCK: ClassVar["BoxStyle"]
    MINIMAL: ClassVar["BoxStyle"]

    @classmethod
    def from_name(cls, name: str | None) -> "BoxStyle":
        """Get a style by name (case-insensitive), falling back to ASCII."""
        if name is None:
            return cls.ASCII
        return BOX_STYLES.get(name.lower(), cls.ASCII)

    @staticmethod
    def names() -> list[str]:
        """Get list of available style names."""
        return list(BOX_STYLES.keys())

    @property
    def name(self) -> str | None:
        """Registry name of this style, or None for a custom glyph set."""
        for key, style in BOX_STYLES.items():
            if style == self:
                return key
        return None


BoxStyle.ASCII = BoxStyle("+", "+", "+", "+", "-", "|", "+", "+", "-")
BoxStyle.UNICODE = BoxStyle("┌", "┐", "└", "┘", "─", "│", "├", "┤", "─")
BoxStyle.DOUBLE = BoxStyle("╔", "╗", "╚", "╝", "═", "║", "╠", "╣", "═")
BoxStyle.ROUNDED = BoxStyle("╭", "╮", "╰", "╯", "─", "│", "├", "┤", "─")
BoxStyle.HEAVY = BoxStyle("┏", "┓", "┗", "┛", "━", "┃", "┣", "┫", "━")
BoxStyle.BLOCK = BoxStyle("█", "█", "█", "█", "█", "█", "█", "█", "█")
BoxStyle.MINIMAL = BoxStyle(" ", " ", " ", " ", " ", "|", " ", " ", " ")

# Registry of built-in styles
BOX_STYLES: dict[str, BoxStyle] = {
    "ascii": BoxStyle.ASCII,
    "unicode": BoxStyle.UNICODE,
    "double": BoxStyle.DOUBLE,
    "rounded": BoxStyle.ROUNDED,
    "heavy": BoxStyle.HEAVY,
    "block": BoxStyle.BLOCK,
    "minimal": BoxStyle.MINIMAL,
}
