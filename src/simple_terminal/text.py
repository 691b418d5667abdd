"""ANSI text utilities - measuring, padding and splitting strings with escape codes."""

from __future__ import annotations

import re

from rich.cells import cell_len

# Pattern to match ANSI escape sequences (including ~ terminator for F-keys, etc.)
_ANSI_ESCAPE = re.compile(r'\x1b\[[0-9;]*[A-Za-z~]')

# Any line break sequence, CRLF counted as one break
_LINE_BREAK = re.compile(r'\r\n|[\n\r\v\f\x85\u2028\u2029]')


def strip_ansi(s: str) -> str:
    """Remove ANSI escape sequences from a string."""
    return _ANSI_ESCAPE.sub('', s)


def visible_len(s: str) -> int:
    """Get the number of terminal cells a string occupies (escape codes excluded)."""
    return cell_len(strip_ansi(s))


def pad_to_width(s: str, width: int, char: str = ' ') -> str:
    """Pad string with char to reach width visible cells. Never truncates."""
    current = visible_len(s)
    if current >= width:
        return s
    return s + char * (width - current)


def split_lines(s: str) -> list[str]:
    """
    Split text on any line break.

    Unlike ``str.splitlines`` a trailing break yields a trailing empty line,
    so ``"a\\n"`` becomes ``["a", ""]``.
    """
    return _LINE_BREAK.split(s)
