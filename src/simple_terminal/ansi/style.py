"""Text style escape sequences."""

from enum import Enum


class Style(Enum):
    """
    Common ANSI text styles.

    Converting a member to ``str`` yields its escape sequence, so styles can
    be concatenated straight into output:

        >>> str(Style.BOLD) + "Bold text" + str(Style.RESET_ALL)
    """
    BOLD = "\x1b[1m"
    DIM = "\x1b[2m"
    ITALIC = "\x1b[3m"
    UNDERLINE = "\x1b[4m"
    INVERT = "\x1b[7m"
    STRIKETHROUGH = "\x1b[9m"
    DOUBLE_UNDERLINE = "\x1b[21m"

    RESET_ALL = "\x1b[0m"
    RESET_BOLD_DIM = "\x1b[22m"
    RESET_ITALIC = "\x1b[23m"
    RESET_UNDERLINE = "\x1b[24m"
    RESET_INVERT = "\x1b[27m"
    RESET_STRIKETHROUGH = "\x1b[29m"

    def __str__(self) -> str:
        return self.value
