"""Console configuration with Pydantic validation."""

from __future__ import annotations

import json
import logging
import os
import platform
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from simple_terminal.box.styles import BoxStyle

logger = logging.getLogger(__name__)

ENV_PREFIX = "SIMPLE_TERMINAL_"

# Accepted spellings per field; dotted names match the classic properties layout
_KEY_ALIASES: dict[str, tuple[str, ...]] = {
    "rule_width": ("rule_width", "rule.width"),
    "indent_unit": ("indent_unit", "indent.unit"),
    "locale": ("locale",),
    "box_style": ("box_style", "box.style"),
}


class ConsoleConfig(BaseModel):
    """
    Default values a ConsoleBuilder starts from.

    Instances are immutable; use ``with_overrides`` to derive a changed copy.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    rule_width: int = Field(default=80, ge=1)
    indent_unit: str = Field(default="  ", min_length=1)
    locale: str = Field(default="en", min_length=1)
    box_style: BoxStyle = Field(default=BoxStyle.UNICODE)

    @field_validator("box_style", mode="before")
    @classmethod
    def _resolve_box_style(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return BoxStyle.from_name(value)
        return value

    def with_overrides(self, **changes: Any) -> "ConsoleConfig":
        """Return a validated copy with some fields replaced."""
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(changes)
        return type(self).model_validate(data)

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], base: "ConsoleConfig | None" = None
    ) -> "ConsoleConfig":
        """
        Build a config from a flat mapping.

        Missing keys keep the values of ``base`` (or the defaults); unknown
        keys are ignored. A malformed ``rule_width`` raises a pydantic
        ``ValidationError``.
        """
        changes: dict[str, Any] = {}
        for field_name, aliases in _KEY_ALIASES.items():
            for alias in aliases:
                if alias in data:
                    changes[field_name] = data[alias]
                    break
        return (base or cls()).with_overrides(**changes)

    @classmethod
    def from_env(cls, base: "ConsoleConfig | None" = None) -> "ConsoleConfig":
        """Overlay ``SIMPLE_TERMINAL_*`` environment variables on a config."""
        data = {
            name: os.environ[ENV_PREFIX + name.upper()]
            for name in _KEY_ALIASES
            if ENV_PREFIX + name.upper() in os.environ
        }
        if data:
            logger.debug("Config from environment: %s", sorted(data))
        return cls.from_mapping(data, base=base)


def config_path() -> Path:
    """Default location of the JSON config file."""
    if env_path := os.environ.get(ENV_PREFIX + "CONFIG"):
        return Path(env_path).expanduser()
    if platform.system() == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "simple-terminal" / "config.json"
    return Path.home() / ".config" / "simple-terminal" / "config.json"


def load_config(path: str | Path | None = None, use_env: bool = True) -> ConsoleConfig:
    """
    Load configuration from a JSON file, then environment variables.

    A missing file leaves the defaults untouched. Malformed JSON or invalid
    values propagate to the caller.
    """
    path = Path(path) if path is not None else config_path()
    config = ConsoleConfig()

    if path.exists():
        raw = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")
        config = ConsoleConfig.from_mapping(raw)
        logger.debug("Loaded config from %s", path)
    else:
        logger.debug("No config file at %s, using defaults", path)

    if use_env:
        config = ConsoleConfig.from_env(base=config)
    return config
