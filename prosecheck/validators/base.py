"""Base validator — abstract class implementing the Strategy Pattern.

Each validator is a standalone, independently testable unit registered with
``register_validator`` under an identifier and a granularity. The engine
never inspects validator types; it only uses the registration data.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Optional, Pattern

from prosecheck.config import ValidatorConfiguration
from prosecheck.errors import ConfigurationError
from prosecheck.models.document import Sentence, Tokenizer
from prosecheck.models.validation import Finding
from prosecheck.symbols import SymbolTable
from prosecheck.tokenizer import WhiteSpaceTokenizer
from prosecheck.validators.messages import MessageCatalog, load_messages

_REQUIRED: Any = object()


class BaseValidator(ABC):
    """Abstract base for all rule validators.

    Contract:
        - validate() reads its block and returns a list of Finding (empty = no issues)
        - validate() never mutates the document; only preprocess() may touch a Sentence
        - configuration is read once in init(); validators are reused across a run
        - run-scoped counters, if any, are cleared in reset()
    """

    # Filled in by register_validator
    name: str = ""
    message_arities: tuple[int, ...] = ()

    def __init__(self) -> None:
        self._config = ValidatorConfiguration(name=self.name or type(self).__name__)
        self.symbol_table: Optional[SymbolTable] = None
        self.tokenizer: Tokenizer = WhiteSpaceTokenizer()
        self._messages: Optional[MessageCatalog] = None

    def setup(
        self,
        config: ValidatorConfiguration,
        symbol_table: SymbolTable,
        messages: MessageCatalog,
        tokenizer: Optional[Tokenizer] = None,
    ) -> None:
        """Attach shared resources and run the init() hook."""
        self._config = config
        self.symbol_table = symbol_table
        self._messages = messages
        if tokenizer is not None:
            self.tokenizer = tokenizer
        self.init()

    @classmethod
    def from_options(cls, lang: str = "en", **attributes: Any) -> "BaseValidator":
        """Build a configured instance outside a registry (tests, embedding)."""
        validator = cls()
        validator.setup(
            ValidatorConfiguration(name=cls.name or cls.__name__, attributes=attributes),
            SymbolTable.for_language(lang),
            load_messages(lang),
        )
        return validator

    def init(self) -> None:
        """Read typed options. Override in validators that take configuration."""

    def reset(self) -> None:
        """Clear run-scoped state. Called before each pre-processing pass."""

    @abstractmethod
    def validate(self, block) -> list[Finding]:
        """Run validation checks against one document, section or sentence.

        Returns:
            List of Finding (empty if no issues)
        """
        ...

    # ── Typed option getters ──

    def _raw(self, key: str, default: Any) -> tuple[Any, bool]:
        """Return (value, configured). Missing keys yield the default unconverted."""
        value = self._config.get(key)
        if value is None:
            if default is _REQUIRED:
                raise ConfigurationError(f"Required option '{key}' is missing", validator=self.name, key=key)
            return default, False
        return value, True

    def _invalid(self, key: str, expected: str, value: Any) -> ConfigurationError:
        return ConfigurationError(f"Option '{key}' must be {expected}, got {value!r}", validator=self.name, key=key)

    def get_int(self, key: str, default: Any = _REQUIRED) -> int:
        value, configured = self._raw(key, default)
        if not configured:
            return value
        if isinstance(value, (bool, list, float)):
            raise self._invalid(key, "an integer", value)
        try:
            return int(value)
        except ValueError:
            raise self._invalid(key, "an integer", value) from None

    def get_bool(self, key: str, default: Any = _REQUIRED) -> bool:
        value, configured = self._raw(key, default)
        if not configured or isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in {"true", "false"}:
            return value.strip().lower() == "true"
        raise self._invalid(key, "true or false", value)

    def get_string(self, key: str, default: Any = _REQUIRED) -> str:
        value, configured = self._raw(key, default)
        if not configured:
            return value
        if isinstance(value, (list, bool)):
            raise self._invalid(key, "a string", value)
        return str(value)

    def get_string_list(self, key: str, default: Any = _REQUIRED) -> list[str]:
        """Read a list option; a string value is split on commas."""
        value, configured = self._raw(key, default)
        if not configured:
            return list(value) if value is not None else value
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return [item.strip() for item in value if item.strip()]
        raise self._invalid(key, "a list of strings", value)

    def get_pattern(self, key: str, default: Any = _REQUIRED) -> Optional[Pattern[str]]:
        value, configured = self._raw(key, default)
        if value is None or isinstance(value, re.Pattern):
            return value
        if not isinstance(value, str):
            raise self._invalid(key, "a regular expression", value)
        try:
            return re.compile(value)
        except re.error as e:
            raise ConfigurationError(
                f"Option '{key}' is not a valid regular expression: {e}", validator=self.name, key=key
            ) from None

    # ── Helper Methods ──

    def _error(self, sentence: Optional[Sentence], *args: Any, position: Optional[int] = None) -> Finding:
        """Convenience method to create a Finding from this validator's message template."""
        if self._messages is None:
            self._messages = load_messages("en")
        return Finding(
            validator=self.name,
            message=self._messages.format(self.name, *args),
            sentence=sentence,
            position=position,
        )

    def _symbols(self) -> SymbolTable:
        if self.symbol_table is None:
            self.symbol_table = SymbolTable.for_language("en")
        return self.symbol_table

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._config.attributes!r})"
