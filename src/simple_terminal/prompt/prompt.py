"""Interactive prompts that keep asking until the input is valid."""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional, Sequence, TypeVar

from simple_terminal.ansi.color import Color
from simple_terminal.core.builder import ConsoleBuilder
from simple_terminal.core.streams import LineSource, StreamLineSource
from simple_terminal.errors import ValidationFailure
from simple_terminal.prompt.choice import Choice

logger = logging.getLogger(__name__)

T = TypeVar("T")

_YES = frozenset({"y", "yes"})
_NO = frozenset({"n", "no"})

# Signed decimal digits within the 32-bit range
_INTEGER = re.compile(r"[+-]?\d+")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def parse_int(text: str) -> Optional[int]:
    """Parse a trimmed 32-bit integer; None if the text is not one."""
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        return None
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


class Reject:
    """
    Returned by an ``ask_mapped`` mapper to refuse the input without raising.

    ``reason``, when given, is shown instead of the prompt's error message.
    """

    __slots__ = ("reason",)

    def __init__(self, reason: Optional[str] = None) -> None:
        self.reason = reason

    def __repr__(self) -> str:
        return f"Reject({self.reason!r})"


class Prompt:
    """
    Read-validate-retry prompts on top of a ConsoleBuilder.

    Questions and error messages go through the builder's sink; answers come
    from ``source`` (standard input by default). Validation failures are
    reported and the question is asked again, without limit. When the
    source runs dry before a valid answer arrives, EOFError is raised.

    Example:
        >>> prompt = Prompt(ConsoleBuilder())
        >>> age = prompt.ask_int("Age?", lambda n: 0 <= n < 150, "Out of range")
    """

    def __init__(
        self,
        builder: Optional[ConsoleBuilder] = None,
        source: Optional[LineSource] = None,
    ) -> None:
        self.builder = builder if builder is not None else ConsoleBuilder()
        self.source = source if source is not None else StreamLineSource()

    def _error(self, message: str, color: Color = Color.RED) -> None:
        logger.debug("Rejected input: %s", message)
        self.builder.color(color).text(message).reset().flush_line()

    def _read(self, question: str) -> str:
        """ask(), but end of input is an error."""
        answer = self.ask(question)
        if answer is None:
            raise EOFError(f"Input ended while waiting for an answer to {question!r}")
        return answer

    def ask(
        self,
        question: str,
        validator: Optional[Callable[[Optional[str]], bool]] = None,
        error_message: str = "",
    ) -> Optional[str]:
        """
        Ask a question and return the raw answer.

        Without a validator the first line is returned as-is (None at end of
        input). With one, the question repeats until the validator accepts.
        """
        if validator is None:
            self.builder.color(Color.CYAN).text(question + " ").reset().flush()
            return self.source.readline()

        while True:
            answer = self.ask(question)
            if validator(answer):
                return answer
            if answer is None:
                raise EOFError(f"Input ended while waiting for an answer to {question!r}")
            self._error(error_message)

    def ask_int(
        self,
        question: str,
        validator: Optional[Callable[[int], bool]] = None,
        error_message: str = "",
    ) -> int:
        """Ask until the answer is an integer (accepted by validator, if given)."""
        while True:
            answer = self._read(question)
            value = parse_int(answer)
            if value is None:
                self._error(self.builder.msg("error.invalidInt"))
                continue
            if validator is None or validator(value):
                return value
            self._error(error_message)

    def ask_yes_no(self, question: str) -> bool:
        """Ask until the answer is y/yes or n/no (any case)."""
        while True:
            answer = self._read(question + " [y/n]").strip().lower()
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            self._error(self.builder.msg("error.yesno"), Color.YELLOW)

    def ask_choice(self, question: str, choices: Sequence[Choice[T]]) -> T:
        """List the choices numbered from 1 and return the value picked."""
        if not choices:
            raise ValidationFailure("No choices provided")

        self.builder.text(question).flush_line()
        for number, choice in enumerate(choices, start=1):
            self.builder.text(f"  {number}) {choice.label}").flush_line()

        while True:
            answer = self._read(self.builder.msg("prompt.choice"))
            number = parse_int(answer)
            index = -1 if number is None else number - 1
            if 0 <= index < len(choices):
                return choices[index].value
            self._error(self.builder.msg("error.invalidChoice"))

    def ask_pattern(
        self, question: str, pattern: str | re.Pattern[str], error_message: str
    ) -> str:
        """Ask until the whole answer matches the regular expression."""
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        while True:
            answer = self._read(question)
            if regex.fullmatch(answer):
                return answer
            self._error(error_message)

    def ask_mapped(
        self,
        question: str,
        mapper: Callable[[str], T | Reject],
        error_message: str,
    ) -> T:
        """
        Ask until ``mapper`` turns the answer into a value.

        The mapper refuses input by returning a Reject or by raising; both
        count as a failed attempt.
        """
        while True:
            answer = self._read(question)
            try:
                result = mapper(answer)
            except Exception as exc:
                logger.debug("Mapper raised %s for %r", type(exc).__name__, answer)
                self._error(error_message)
                continue
            if isinstance(result, Reject):
                self._error(result.reason or error_message)
                continue
            return result
