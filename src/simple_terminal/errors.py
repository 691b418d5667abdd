"""Exception hierarchy for simple-terminal."""


class SimpleTerminalError(Exception):
    """Base exception for simple-terminal."""

    pass


class InvalidArgumentError(SimpleTerminalError, ValueError):
    """An argument was out of range or empty (palette index, width, indent unit...)."""

    pass


class FormatError(SimpleTerminalError, ValueError):
    """A format template did not match its arguments."""

    pass


class ValidationFailure(SimpleTerminalError, ValueError):
    """A value failed a construction-time check (blank choice label, no choices)."""

    pass


class MessageLookupError(SimpleTerminalError, KeyError):
    """A message key is missing from the active catalog."""

    def __str__(self) -> str:
        # KeyError.__str__ repr()s its argument
        return str(self.args[0]) if self.args else ""
