"""Labelled values offered by ask_choice()."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from simple_terminal.errors import ValidationFailure

T = TypeVar("T")


@dataclass(frozen=True)
class Choice(Generic[T]):
    """A menu entry: the label shown to the user and the value returned."""
    label: str
    value: T

    def __post_init__(self) -> None:
        if self.label is None or not self.label.strip():
            raise ValidationFailure("Choice label cannot be empty")
