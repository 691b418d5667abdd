"""Output sink and line source protocols."""

from __future__ import annotations

import sys
from typing import Optional, Protocol, TextIO, runtime_checkable


@runtime_checkable
class TextSink(Protocol):
    """Anything that accepts text. ``sys.stdout`` and ``io.StringIO`` qualify."""

    def write(self, s: str, /) -> object:
        """Write text; may raise OSError."""
        ...


@runtime_checkable
class LineSource(Protocol):
    """Blocking source of input lines."""

    def readline(self) -> Optional[str]:
        """Return the next line without its terminator, or None at end of stream."""
        ...


class StreamLineSource:
    """
    Read lines from a text stream.

    The stream is resolved on every read when none is given, so a replaced
    ``sys.stdin`` is picked up. Reads are not synchronized: one logical
    conversation should own the stream at a time.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdin

    def readline(self) -> Optional[str]:
        line = self.stream.readline()
        if line == "":
            return None
        if line.endswith("\r\n"):
            return line[:-2]
        if line.endswith(("\n", "\r")):
            return line[:-1]
        return line


def flush_sink(sink: TextSink) -> None:
    """Flush a sink if it supports flushing."""
    flush = getattr(sink, "flush", None)
    if callable(flush):
        flush()
