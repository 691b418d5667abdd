"""Localized message catalogs."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from importlib import resources

from simple_terminal.errors import MessageLookupError

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"


def _candidates(locale: str) -> list[str]:
    """Catalog names to try for a locale, most specific first."""
    tag = locale.strip().replace("-", "_").lower()
    names: list[str] = []
    while tag:
        names.append(tag)
        tag = tag.rpartition("_")[0]
    if DEFAULT_LOCALE not in names:
        names.append(DEFAULT_LOCALE)
    return names


def _read_catalog(name: str) -> dict[str, str] | None:
    path = resources.files("simple_terminal.messages").joinpath(f"{name}.json")
    if not path.is_file():
        return None
    return json.loads(path.read_text(encoding="utf-8"))


@dataclass(frozen=True)
class MessageCatalog:
    """
    Messages for one locale.

    ``load("de-AT")`` tries ``de_at``, then ``de``, then the default ``en``
    catalog, so an unknown locale still resolves to English text.
    """
    locale: str
    messages: dict[str, str] = field(default_factory=dict)

    @classmethod
    def load(cls, locale: str = DEFAULT_LOCALE) -> "MessageCatalog":
        """Load the best matching bundled catalog for a locale."""
        for name in _candidates(locale):
            data = _read_catalog(name)
            if data is not None:
                if name != locale:
                    logger.debug("Locale %r resolved to catalog %r", locale, name)
                return cls(locale=locale, messages=data)
        raise MessageLookupError(f"No message catalog for locale {locale!r}")

    def __getitem__(self, key: str) -> str:
        try:
            return self.messages[key]
        except KeyError:
            raise MessageLookupError(
                f"Missing message {key!r} for locale {self.locale!r}"
            ) from None

    def __contains__(self, key: object) -> bool:
        return key in self.messages

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get a message, or default if the key is absent."""
        return self.messages.get(key, default)
