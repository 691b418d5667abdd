"""Core output builder, configuration and message catalogs."""

from simple_terminal.core.builder import ConsoleBuilder
from simple_terminal.core.config import ConsoleConfig, load_config
from simple_terminal.core.messages import MessageCatalog
from simple_terminal.core.streams import LineSource, StreamLineSource, TextSink

__all__ = [
    "ConsoleBuilder",
    "ConsoleConfig",
    "load_config",
    "MessageCatalog",
    "LineSource",
    "StreamLineSource",
    "TextSink",
]
