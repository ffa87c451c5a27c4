"""Sentence Length Validator — flags sentences longer than a character limit."""

from prosecheck.models.document import Sentence
from prosecheck.models.validation import Finding, Granularity
from prosecheck.validators.base import BaseValidator
from prosecheck.validators.registry import register_validator

DEFAULT_MAX_LENGTH = 30


@register_validator("SentenceLength", granularity=Granularity.SENTENCE, messages=(2,))
class SentenceLengthValidator(BaseValidator):
    """Reports a sentence whose content exceeds ``max_len`` characters."""

    max_length: int = DEFAULT_MAX_LENGTH

    def init(self) -> None:
        self.max_length = self.get_int("max_len", DEFAULT_MAX_LENGTH)

    def validate(self, sentence: Sentence) -> list[Finding]:
        length = len(sentence.content)
        if length > self.max_length:
            return [self._error(sentence, length, self.max_length)]
        return []
