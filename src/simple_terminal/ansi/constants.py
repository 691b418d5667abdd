"""Shared constants for ANSI escape sequences."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# Standard 16-color ANSI palette (SGR offsets)
COLORS_16 = {
    # Standard colors (30-37 fg, 40-47 bg)
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
    # Bright colors (90-97 fg, 100-107 bg)
    "bright_black": 8,
    "bright_red": 9,
    "bright_green": 10,
    "bright_yellow": 11,
    "bright_blue": 12,
    "bright_magenta": 13,
    "bright_cyan": 14,
    "bright_white": 15,
}


def sgr(params: str) -> str:
    """Wrap SGR parameters in a complete escape sequence."""
    return f"{CSI}{params}m"
