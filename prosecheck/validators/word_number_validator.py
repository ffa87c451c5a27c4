"""Word Number Validator — flags sentences with too many words."""

from prosecheck.models.document import Sentence
from prosecheck.models.validation import Finding, Granularity
from prosecheck.validators.base import BaseValidator
from prosecheck.validators.registry import register_validator

DEFAULT_MAX_WORD_NUMBER = 30


@register_validator("WordNumber", granularity=Granularity.SENTENCE, preprocessor=True, messages=(2,))
class WordNumberValidator(BaseValidator):
    max_num: int = DEFAULT_MAX_WORD_NUMBER

    def init(self) -> None:
        self.max_num = self.get_int("max_num", DEFAULT_MAX_WORD_NUMBER)

    def preprocess(self, sentence: Sentence) -> None:
        sentence.ensure_tokens(self.tokenizer)

    def validate(self, sentence: Sentence) -> list[Finding]:
        tokens = sentence.tokens if sentence.tokens is not None else self.tokenizer.tokenize(sentence.content)
        if len(tokens) > self.max_num:
            return [self._error(sentence, len(tokens), self.max_num)]
        return []
