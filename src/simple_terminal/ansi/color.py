"""Color representation for terminal output."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from simple_terminal.ansi.constants import COLORS_16, sgr
from simple_terminal.errors import InvalidArgumentError

_HEX = re.compile(r"#?([0-9a-fA-F]{6})")


class ColorMode(Enum):
    """Color mode for ANSI sequences."""
    STANDARD_16 = "16"      # Standard 16-color (SGR 30-37, 40-47, 90-97, 100-107)
    EXTENDED_256 = "256"    # Extended 256-color (SGR 38;5;n, 48;5;n)
    TRUE_COLOR = "rgb"      # 24-bit true color (SGR 38;2;r;g;b, 48;2;r;g;b)


@dataclass(frozen=True)
class Color:
    """
    A terminal color with both a foreground and a background escape sequence.

    Use the named constants for the 16 standard colors, or the factories
    for 256-color and true color values:

        >>> Color.RED.fg
        '\\x1b[31m'
        >>> Color.from_256(202).bg
        '\\x1b[48;5;202m'
    """
    mode: ColorMode
    value: int | tuple[int, int, int]

    # Standard 16 colors (index 0-15)
    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    BRIGHT_BLACK: ClassVar["Color"]
    BRIGHT_RED: ClassVar["Color"]
    BRIGHT_GREEN: ClassVar["Color"]
    BRIGHT_YELLOW: ClassVar["Color"]
    BRIGHT_BLUE: ClassVar["Color"]
    BRIGHT_MAGENTA: ClassVar["Color"]
    BRIGHT_CYAN: ClassVar["Color"]
    BRIGHT_WHITE: ClassVar["Color"]

    @classmethod
    def from_256(cls, code: int) -> "Color":
        """Create a Color from a 256-color palette index."""
        if not 0 <= code <= 255:
            raise InvalidArgumentError(f"256-color code must be 0-255, got {code}")
        return cls(ColorMode.EXTENDED_256, code)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values (true color)."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise InvalidArgumentError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorMode.TRUE_COLOR, (r, g, b))

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Create a true color from a ``#rrggbb`` string."""
        match = _HEX.fullmatch(value.strip())
        if not match:
            raise InvalidArgumentError(f"Expected a #rrggbb color, got {value!r}")
        digits = match.group(1)
        return cls.from_rgb(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    @classmethod
    def from_name(cls, name: str) -> "Color":
        """Look up one of the 16 named colors (case-insensitive)."""
        key = re.sub(r"[\s-]+", "_", name.strip().lower())
        if key not in COLORS_16:
            raise InvalidArgumentError(f"Unknown color name: {name!r}")
        return cls(ColorMode.STANDARD_16, COLORS_16[key])

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for the foreground color."""
        if self.mode == ColorMode.STANDARD_16:
            assert isinstance(self.value, int)
            if self.value < 8:
                return str(30 + self.value)
            return str(90 + self.value - 8)
        elif self.mode == ColorMode.EXTENDED_256:
            return f"38;5;{self.value}"
        else:  # TRUE_COLOR
            assert isinstance(self.value, tuple)
            r, g, b = self.value
            return f"38;2;{r};{g};{b}"

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for the background color."""
        if self.mode == ColorMode.STANDARD_16:
            assert isinstance(self.value, int)
            if self.value < 8:
                return str(40 + self.value)
            return str(100 + self.value - 8)
        elif self.mode == ColorMode.EXTENDED_256:
            return f"48;5;{self.value}"
        else:  # TRUE_COLOR
            assert isinstance(self.value, tuple)
            r, g, b = self.value
            return f"48;2;{r};{g};{b}"

    @property
    def fg(self) -> str:
        """Escape sequence selecting this color as foreground."""
        return sgr(self.to_sgr_fg())

    @property
    def bg(self) -> str:
        """Escape sequence selecting this color as background."""
        return sgr(self.to_sgr_bg())


# Initialize class-level color constants
Color.BLACK = Color(ColorMode.STANDARD_16, 0)
Color.RED = Color(ColorMode.STANDARD_16, 1)
Color.GREEN = Color(ColorMode.STANDARD_16, 2)
Color.YELLOW = Color(ColorMode.STANDARD_16, 3)
Color.BLUE = Color(ColorMode.STANDARD_16, 4)
Color.MAGENTA = Color(ColorMode.STANDARD_16, 5)
Color.CYAN = Color(ColorMode.STANDARD_16, 6)
Color.WHITE = Color(ColorMode.STANDARD_16, 7)
Color.BRIGHT_BLACK = Color(ColorMode.STANDARD_16, 8)
Color.BRIGHT_RED = Color(ColorMode.STANDARD_16, 9)
Color.BRIGHT_GREEN = Color(ColorMode.STANDARD_16, 10)
Color.BRIGHT_YELLOW = Color(ColorMode.STANDARD_16, 11)
Color.BRIGHT_BLUE = Color(ColorMode.STANDARD_16, 12)
Color.BRIGHT_MAGENTA = Color(ColorMode.STANDARD_16, 13)
Color.BRIGHT_CYAN = Color(ColorMode.STANDARD_16, 14)
Color.BRIGHT_WHITE = Color(ColorMode.STANDARD_16, 15)
