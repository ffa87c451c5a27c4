"""Comma Number Validator — flags sentences with too many commas."""

from prosecheck.models.document import Sentence
from prosecheck.models.validation import Finding, Granularity
from prosecheck.validators.base import BaseValidator
from prosecheck.validators.registry import register_validator

DEFAULT_MAX_COMMA_NUMBER = 3


@register_validator("CommaNumber", granularity=Granularity.SENTENCE, messages=(2,))
class CommaNumberValidator(BaseValidator):
    """Counts the language's COMMA symbol in each sentence."""

    max_num: int = DEFAULT_MAX_COMMA_NUMBER

    def init(self) -> None:
        self.max_num = self.get_int("max_num", DEFAULT_MAX_COMMA_NUMBER)

    def validate(self, sentence: Sentence) -> list[Finding]:
        comma = self._symbols().get("COMMA").value
        count = sentence.content.count(comma)
        if count > self.max_num:
            return [self._error(sentence, count, self.max_num)]
        return []
