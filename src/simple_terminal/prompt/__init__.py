"""Interactive prompts with validation and retry."""

from simple_terminal.prompt.choice import Choice
from simple_terminal.prompt.prompt import Prompt, Reject

__all__ = ["Choice", "Prompt", "Reject"]
