"""Validator registry — resolves configured identifiers into ready validators.

Validators announce themselves with ``register_validator``. Registration is
where the granularity and the pre-processing capability are declared; the
registry turns that data into the precomputed lists the engine iterates,
so the engine never has to look at a validator's type.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

import structlog

from prosecheck.config import Configuration, ValidatorConfiguration
from prosecheck.errors import ConfigurationError
from prosecheck.models.document import Tokenizer
from prosecheck.models.validation import Granularity
from prosecheck.symbols import SymbolTable
from prosecheck.validators.base import BaseValidator
from prosecheck.validators.messages import MessageCatalog, load_messages
from prosecheck.validators.messages.loader import message_key

logger = structlog.get_logger()


@dataclass(frozen=True)
class ValidatorSpec:
    """Registration data for one validator identifier."""

    name: str
    factory: Callable[[], BaseValidator]
    granularity: Any                     # checked against Granularity when a registry is built
    preprocessor: bool = False
    messages: tuple[int, ...] = ()       # argument arities of the message templates used


VALIDATOR_CATALOG: dict[str, ValidatorSpec] = {}


def register_validator(
    name: str,
    *,
    granularity: Any,
    preprocessor: bool = False,
    messages: tuple[int, ...] = (),
    catalog: Optional[dict[str, ValidatorSpec]] = None,
):
    """Class decorator adding a validator to the catalog.

    Usage:
        @register_validator("SentenceLength", granularity=Granularity.SENTENCE, messages=(2,))
        class SentenceLengthValidator(BaseValidator):
            ...
    """

    def decorator(cls):
        cls.name = name
        cls.message_arities = tuple(messages)
        target = VALIDATOR_CATALOG if catalog is None else catalog
        target[name] = ValidatorSpec(
            name=name,
            factory=cls,
            granularity=granularity,
            preprocessor=preprocessor,
            messages=tuple(messages),
        )
        return cls

    return decorator


@dataclass(frozen=True)
class RegisteredValidator:
    """An initialized validator together with its registration data."""

    name: str
    validator: BaseValidator
    granularity: Granularity
    preprocessor: bool


class ValidatorRegistry:
    """Instantiates and initializes every validator of a Configuration.

    Any unknown identifier, unsupported granularity, missing message template
    or bad option raises ConfigurationError from the constructor; there is
    no partially built registry.
    """

    def __init__(
        self,
        configuration: Configuration,
        symbol_table: Optional[SymbolTable] = None,
        tokenizer: Optional[Tokenizer] = None,
        messages: Optional[MessageCatalog] = None,
        catalog: Optional[dict[str, ValidatorSpec]] = None,
    ):
        self.configuration = configuration
        self.symbol_table = symbol_table or SymbolTable.for_language(configuration.lang, configuration.symbols)
        self.messages = messages or load_messages(configuration.locale)
        self._tokenizer = tokenizer
        self._catalog = VALIDATOR_CATALOG if catalog is None else catalog

        self.entries: list[RegisteredValidator] = [self._load(config) for config in configuration.validators]

        self.document_validators = [e.validator for e in self.entries if e.granularity is Granularity.DOCUMENT]
        self.section_validators = [e.validator for e in self.entries if e.granularity is Granularity.SECTION]
        self.sentence_validators = [e.validator for e in self.entries if e.granularity is Granularity.SENTENCE]
        self.sentence_preprocessors = [
            e.validator for e in self.entries if e.granularity is Granularity.SENTENCE and e.preprocessor
        ]

        logger.info(
            "registry_built",
            lang=self.symbol_table.lang,
            locale=self.messages.locale,
            validators=[e.name for e in self.entries],
            preprocessors=len(self.sentence_preprocessors),
        )

    def _resolve(self, config: ValidatorConfiguration) -> ValidatorSpec:
        spec = self._catalog.get(config.name)
        if spec is None:
            raise ConfigurationError(
                f"Unknown validator (registered: {', '.join(sorted(self._catalog))})", validator=config.name
            )
        return spec

    def _load(self, config: ValidatorConfiguration) -> RegisteredValidator:
        spec = self._resolve(config)

        try:
            granularity = Granularity(spec.granularity)
        except ValueError:
            raise ConfigurationError(
                f"Unsupported granularity {spec.granularity!r}; expected one of "
                f"{', '.join(g.value for g in Granularity)}",
                validator=spec.name,
            ) from None

        if spec.preprocessor and (
            granularity is not Granularity.SENTENCE or not callable(getattr(spec.factory, "preprocess", None))
        ):
            raise ConfigurationError(
                "Declared as a pre-processor but does not provide a sentence preprocess()", validator=spec.name
            )

        missing = self.messages.missing(message_key(spec.name, arity) for arity in spec.messages)
        if missing:
            raise ConfigurationError(
                f"Missing message templates for locale '{self.messages.locale}': {', '.join(missing)}",
                validator=spec.name,
            )

        try:
            validator = spec.factory()
        except TypeError as e:
            raise ConfigurationError(f"Cannot instantiate validator: {e}", validator=spec.name) from e
        validator.setup(config, self.symbol_table, self.messages, self._tokenizer)

        return RegisteredValidator(
            name=spec.name,
            validator=validator,
            granularity=granularity,
            preprocessor=spec.preprocessor,
        )

    def __iter__(self) -> Iterator[RegisteredValidator]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
