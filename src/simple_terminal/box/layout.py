"""Box geometry: lay out a framed block of text."""

from __future__ import annotations

from dataclasses import dataclass

from simple_terminal.box.styles import BoxStyle
from simple_terminal.errors import InvalidArgumentError
from simple_terminal.text import pad_to_width, split_lines, visible_len


@dataclass(frozen=True)
class BoxLayout:
    """The computed rows of a box, without indentation or line terminators."""
    inner_width: int
    rows: list[str]
    has_title: bool

    @property
    def outer_width(self) -> int:
        """Cells per row: content plus one padding cell and one border glyph per side."""
        return self.inner_width + 4


def _has_title(title: str | None) -> bool:
    return title is not None and title.strip() != ""


def layout_box(title: str | None, content: str, style: BoxStyle) -> BoxLayout:
    """
    Compute the rows of a box around ``content``.

    Rows are: top border, an optional title row plus junction row (only for
    a non-blank title), one row per content line, bottom border. Every row
    has the same visible width; lines are padded with trailing spaces and
    never truncated.
    """
    if content is None:
        raise InvalidArgumentError("Box content cannot be None")

    lines = split_lines(content)
    titled = _has_title(title)

    widest = max((visible_len(line) for line in lines), default=0)
    if titled:
        widest = max(widest, visible_len(title))
    inner = max(0, widest)

    def framed(text: str) -> str:
        return f"{style.vertical} {pad_to_width(text, inner)} {style.vertical}"

    horizontal = style.horizontal * (inner + 2)
    rows = [style.top_left + horizontal + style.top_right]

    if titled:
        rows.append(framed(title))
        rows.append(
            style.junction_left
            + style.junction_horizontal * (inner + 2)
            + style.junction_right
        )

    rows.extend(framed(line) for line in lines)
    rows.append(style.bottom_left + horizontal + style.bottom_right)

    return BoxLayout(inner_width=inner, rows=rows, has_title=titled)
