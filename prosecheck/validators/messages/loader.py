"""Message loader — reads the JSON template files in this directory.

Templates are keyed by ``<ValidatorIdentifier>.<argument arity>`` and use
``str.format`` positional fields (``{0}``, ``{1}``, ...).
"""

import json
from pathlib import Path
from typing import Iterable

from prosecheck.errors import ConfigurationError

MESSAGES_DIR = Path(__file__).parent

# Cache loaded locale files to avoid re-reading from disk
_locale_cache: dict[str, dict[str, str]] = {}


def _load_all_locales() -> dict[str, dict[str, str]]:
    """Load and cache all JSON locale files from the messages directory."""
    if _locale_cache:
        return _locale_cache

    for json_file in sorted(MESSAGES_DIR.glob("*.json")):
        data = json.loads(json_file.read_text(encoding="utf-8"))
        _locale_cache[data.get("locale", json_file.stem)] = dict(data["messages"])

    return _locale_cache


def message_key(validator: str, arity: int) -> str:
    return f"{validator}.{arity}"


class MessageCatalog:
    """Templates for one locale."""

    def __init__(self, locale: str, templates: dict[str, str]):
        self.locale = locale
        self._templates = templates

    def __contains__(self, key: str) -> bool:
        return key in self._templates

    def missing(self, keys: Iterable[str]) -> list[str]:
        return [key for key in keys if key not in self._templates]

    def format(self, validator: str, *args) -> str:
        """Render the template for ``validator`` with ``args``.

        Raises ConfigurationError for an unknown key instead of returning an
        empty message.
        """
        key = message_key(validator, len(args))
        try:
            template = self._templates[key]
        except KeyError:
            raise ConfigurationError(
                f"No message template '{key}' for locale '{self.locale}'", validator=validator
            ) from None
        return template.format(*args)


def load_messages(locale: str) -> MessageCatalog:
    """Return the message catalog for ``locale``.

    Raises:
        ConfigurationError: no template file declares this locale
    """
    locales = _load_all_locales()
    if locale not in locales:
        raise ConfigurationError(
            f"No message templates for locale '{locale}' (available: {', '.join(sorted(locales))})"
        )
    return MessageCatalog(locale, locales[locale])


def get_all_locales() -> list[str]:
    """List all available message locales."""
    return list(_load_all_locales().keys())
