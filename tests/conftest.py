"""Shared fixtures: in-memory output sink and scripted input."""

import io
from typing import Callable, Iterable, Optional

import pytest

from simple_terminal.core.builder import ConsoleBuilder
from simple_terminal.core.config import ConsoleConfig


class ScriptedSource:
    """Line source that replays a fixed list of answers, then reports end of input."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.reads = 0

    def readline(self) -> Optional[str]:
        self.reads += 1
        if not self._lines:
            return None
        return self._lines.pop(0)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep user config files and SIMPLE_TERMINAL_* variables out of tests."""
    for name in ("RULE_WIDTH", "INDENT_UNIT", "LOCALE", "BOX_STYLE"):
        monkeypatch.delenv(f"SIMPLE_TERMINAL_{name}", raising=False)
    monkeypatch.setenv("SIMPLE_TERMINAL_CONFIG", str(tmp_path / "missing.json"))


@pytest.fixture
def sink() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def builder(sink: io.StringIO) -> ConsoleBuilder:
    """Builder with default config writing into the sink fixture."""
    return ConsoleBuilder(sink=sink)


@pytest.fixture
def make_builder(sink: io.StringIO) -> Callable[..., ConsoleBuilder]:
    """Factory for builders with config overrides, all sharing the sink fixture."""

    def factory(**overrides: object) -> ConsoleBuilder:
        return ConsoleBuilder(ConsoleConfig().with_overrides(**overrides), sink=sink)

    return factory
