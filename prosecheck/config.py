"""Application settings and validation run configuration.

Settings are process-wide and come from environment variables (or ``.env``).
A Configuration describes one rule set: which validators run, with which
options, for which language.
"""

from functools import lru_cache
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from prosecheck.symbols import Symbol


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Validation
    DEFAULT_LANG: str = "en"
    MESSAGE_LOCALE: Optional[str] = None  # falls back to the configuration language
    VALIDATOR_FAULT_POLICY: Literal["isolate", "abort"] = "isolate"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "PROSECHECK_"}


@lru_cache
def get_settings() -> Settings:
    return Settings()


AttributeValue = Union[bool, int, float, str, list[str]]


class ValidatorConfiguration(BaseModel):
    """One configured validator: its identifier plus raw options."""

    name: str = Field(min_length=1)
    attributes: dict[str, AttributeValue] = Field(default_factory=dict)

    def get(self, key: str) -> Optional[Any]:
        return self.attributes.get(key)


class Configuration(BaseModel):
    """A complete rule set for one language."""

    lang: str = "en"
    validators: list[ValidatorConfiguration] = Field(default_factory=list)
    symbols: list[Symbol] = Field(default_factory=list, description="Overrides for the language's default symbols")
    message_locale: Optional[str] = None

    @property
    def locale(self) -> str:
        return self.message_locale or self.lang

    def add_validator(self, name: str, **attributes: AttributeValue) -> "Configuration":
        """Append a validator entry; returns self for chaining."""
        self.validators.append(ValidatorConfiguration(name=name, attributes=attributes))
        return self


# ──────────────────────────────────────────────────────────────────────
# BUNDLED RULE SETS
# ──────────────────────────────────────────────────────────────────────

DEFAULT_VALIDATORS: dict[str, list[tuple[str, dict[str, AttributeValue]]]] = {
    "en": [
        ("SentenceLength", {"max_len": 200}),
        ("InvalidSymbol", {}),
        ("SymbolWithSpace", {}),
        ("SpaceBeginningOfSentence", {}),
        ("CommaNumber", {"max_num": 3}),
        ("WordNumber", {"max_num": 40}),
        ("InvalidWord", {}),
        ("Contraction", {}),
        ("SectionLength", {"max_num": 2000}),
        ("ParagraphNumber", {"max_num": 6}),
        ("GappedSection", {}),
    ],
    "ja": [
        ("SentenceLength", {"max_len": 100}),
        ("InvalidSymbol", {}),
        ("CommaNumber", {"max_num": 3}),
        ("SectionLength", {"max_num": 2000}),
        ("ParagraphNumber", {"max_num": 6}),
        ("GappedSection", {}),
    ],
}


def default_configuration(lang: str) -> Configuration:
    """Return the bundled rule set for ``lang`` (English when unknown)."""
    entries = DEFAULT_VALIDATORS.get(lang)
    if entries is None:
        lang, entries = "en", DEFAULT_VALIDATORS["en"]
    return Configuration(
        lang=lang,
        validators=[ValidatorConfiguration(name=name, attributes=dict(attrs)) for name, attrs in entries],
        message_locale=get_settings().MESSAGE_LOCALE,
    )
