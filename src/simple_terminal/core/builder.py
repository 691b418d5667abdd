"""Fluent builder API for composing styled console output."""

from __future__ import annotations

import sys
from typing import Any, Callable, Optional

from simple_terminal.ansi.color import Color
from simple_terminal.ansi.constants import RESET
from simple_terminal.ansi.style import Style
from simple_terminal.box.layout import layout_box
from simple_terminal.box.styles import BoxStyle
from simple_terminal.core.config import ConsoleConfig
from simple_terminal.core.messages import MessageCatalog
from simple_terminal.core.streams import TextSink, flush_sink
from simple_terminal.errors import FormatError, InvalidArgumentError

NEWLINE = "\n"


class ConsoleBuilder:
    """
    Accumulate styled output in a buffer, then print it in one go.

    Every mutating method returns the builder itself so calls chain:

        >>> (ConsoleBuilder()
        ...     .color(Color.GREEN)
        ...     .style(Style.BOLD)
        ...     .text("Hello, world!")
        ...     .reset()
        ...     .flush_line())

    Defaults for rule width, indentation unit, locale and box style are
    copied from ``config`` when the builder is created; the ``set_*``
    methods change them for this instance only.
    """

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        sink: Optional[TextSink] = None,
    ) -> None:
        config = config or ConsoleConfig()
        self._buffer: list[str] = []
        self._sink = sink
        self._rule_width = config.rule_width
        self._indent_unit = config.indent_unit
        self._indent = 0
        self._box_style = config.box_style
        self._locale = config.locale
        self._messages = MessageCatalog.load(config.locale)

    # -- state -------------------------------------------------------------

    @property
    def rule_width(self) -> int:
        return self._rule_width

    @property
    def indent_unit(self) -> str:
        return self._indent_unit

    @property
    def indent_level(self) -> int:
        return self._indent

    @property
    def box_style(self) -> BoxStyle:
        return self._box_style

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def sink(self) -> TextSink:
        """Where flush() writes; standard output unless one was given."""
        return self._sink if self._sink is not None else sys.stdout

    def set_rule_width(self, width: int) -> "ConsoleBuilder":
        """Set the default rule width (must be > 0)."""
        if width <= 0:
            raise InvalidArgumentError(f"Rule width must be > 0, got {width}")
        self._rule_width = width
        return self

    def set_indent_unit(self, unit: str) -> "ConsoleBuilder":
        """Set the string used for one indentation level."""
        if not unit:
            raise InvalidArgumentError("Indent unit cannot be empty")
        self._indent_unit = unit
        return self

    def set_indent_level(self, levels: int) -> "ConsoleBuilder":
        """Set the indentation level; negative values clamp to 0."""
        self._indent = max(0, levels)
        return self

    def indent(self, levels: int = 1) -> "ConsoleBuilder":
        """Increase indentation by some levels."""
        return self.set_indent_level(self._indent + levels)

    def dedent(self, levels: int = 1) -> "ConsoleBuilder":
        """Decrease indentation by some levels, stopping at 0."""
        return self.set_indent_level(self._indent - levels)

    def set_box_style(self, style: BoxStyle | str) -> "ConsoleBuilder":
        """Set the default box style, by value or by name."""
        if isinstance(style, str):
            style = BoxStyle.from_name(style)
        self._box_style = style
        return self

    def set_locale(self, locale: str) -> "ConsoleBuilder":
        """Switch the message catalog used by msg()."""
        self._messages = MessageCatalog.load(locale)
        self._locale = locale
        return self

    def msg(self, key: str) -> str:
        """Return the localized message for key; raises MessageLookupError if absent."""
        return self._messages[key]

    def _current_indent(self) -> str:
        return self._indent_unit * self._indent

    # -- appending ---------------------------------------------------------

    def color(self, color: Color) -> "ConsoleBuilder":
        """Append a foreground color escape code."""
        self._buffer.append(color.fg)
        return self

    def background(self, color: Color) -> "ConsoleBuilder":
        """Append a background color escape code."""
        self._buffer.append(color.bg)
        return self

    def style(self, style: Style) -> "ConsoleBuilder":
        """Append a text style escape code."""
        self._buffer.append(str(style))
        return self

    def reset(self) -> "ConsoleBuilder":
        """Reset all colors and styles."""
        self._buffer.append(RESET)
        return self

    def text(self, text: str) -> "ConsoleBuilder":
        """Append text verbatim."""
        self._buffer.append(text)
        return self

    def space(self) -> "ConsoleBuilder":
        self._buffer.append(" ")
        return self

    def newline(self) -> "ConsoleBuilder":
        self._buffer.append(NEWLINE)
        return self

    def line(self, text: str) -> "ConsoleBuilder":
        """Append a line of text with the current indentation."""
        self._buffer.append(f"{self._current_indent()}{text}{NEWLINE}")
        return self

    def formatted_line(self, fmt: str, *args: Any, **kwargs: Any) -> "ConsoleBuilder":
        """Append ``fmt.format(*args, **kwargs)`` as a line."""
        try:
            text = fmt.format(*args, **kwargs)
        except (IndexError, KeyError, ValueError, TypeError, AttributeError) as exc:
            raise FormatError(f"Cannot format {fmt!r}: {exc}") from exc
        return self.line(text)

    def rule(self, char: str = "-", width: Optional[int] = None) -> "ConsoleBuilder":
        """
        Append a horizontal rule.

        Uses the builder's rule width when width is omitted; widths below 1
        still draw a single character.
        """
        if len(char) != 1:
            raise InvalidArgumentError(f"Rule character must be a single character, got {char!r}")
        width = self._rule_width if width is None else width
        self._buffer.append(f"{self._current_indent()}{char * max(1, width)}{NEWLINE}")
        return self

    def box(
        self,
        title: Optional[str],
        content: str,
        style: Optional[BoxStyle] = None,
    ) -> "ConsoleBuilder":
        """Append a framed box, indenting every row."""
        layout = layout_box(title, content, style or self._box_style)
        prefix = self._current_indent()
        for row in layout.rows:
            self._buffer.append(f"{prefix}{row}{NEWLINE}")
        return self

    def when(
        self, condition: bool, then: Callable[["ConsoleBuilder"], Any]
    ) -> "ConsoleBuilder":
        """
        Call ``then(self)`` only if condition is true.

        Lets conditional output stay inside a chain:

            >>> cb.text("Saved").when(warn, lambda b: b.text(" (with warnings)"))
        """
        if condition:
            then(self)
        return self

    # -- output ------------------------------------------------------------

    def build(self) -> str:
        """Return the accumulated output; the buffer is kept."""
        return "".join(self._buffer)

    def clear(self) -> "ConsoleBuilder":
        """Empty the buffer."""
        self._buffer.clear()
        return self

    def flush(self) -> None:
        """Write the buffer to the sink, then clear it."""
        sink = self.sink
        sink.write(self.build())
        flush_sink(sink)
        self.clear()

    def flush_line(self) -> None:
        """Append a newline, then flush()."""
        self.newline()
        self.flush()

    def __str__(self) -> str:
        return self.build()
