"""
simple-terminal: styled console output and interactive prompts

Compose colored text, rules and framed boxes with a fluent builder, then
print them in one go. Ask validated questions over any line source.

Quick Start:
    >>> import simple_terminal as st
    >>> (st.create()
    ...     .color(st.Color.GREEN)
    ...     .style(st.Style.BOLD)
    ...     .text("Hello, world!")
    ...     .reset()
    ...     .flush_line())
    >>> st.create().box("Status", "All systems go", st.BoxStyle.ROUNDED).flush()
    >>> st.Prompt(st.create()).ask_yes_no("Continue?")

Features:
    - 16 named colors, 256-color palette and 24-bit true color
    - Text styles (bold, italic, underline, ...) and reset codes
    - Indentation-aware lines, rules and boxes in seven glyph styles
    - Prompts for integers, yes/no, menus, patterns and mapped values
    - English and German prompt messages
"""

__version__ = "0.1.0"

from simple_terminal.errors import (
    FormatError,
    InvalidArgumentError,
    MessageLookupError,
    SimpleTerminalError,
    ValidationFailure,
)

# Escape codes
from simple_terminal.ansi.color import Color
from simple_terminal.ansi.constants import RESET
from simple_terminal.ansi.style import Style

# Boxes
from simple_terminal.box.styles import BoxStyle

# Builder and configuration
from simple_terminal.core.builder import ConsoleBuilder
from simple_terminal.core.config import ConsoleConfig, load_config
from simple_terminal.core.streams import StreamLineSource

# Prompts
from simple_terminal.prompt.choice import Choice
from simple_terminal.prompt.prompt import Prompt, Reject


def create(config: ConsoleConfig | None = None) -> ConsoleBuilder:
    """Start composing console output with a fluent builder API."""
    return ConsoleBuilder(config)


__all__ = [
    # Version
    "__version__",
    # Escape codes
    "Color",
    "Style",
    "RESET",
    # Boxes
    "BoxStyle",
    # Builder
    "create",
    "ConsoleBuilder",
    "ConsoleConfig",
    "load_config",
    # Prompts
    "Prompt",
    "Choice",
    "Reject",
    "StreamLineSource",
    # Errors
    "SimpleTerminalError",
    "InvalidArgumentError",
    "FormatError",
    "ValidationFailure",
    "MessageLookupError",
]
