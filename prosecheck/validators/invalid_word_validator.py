"""Invalid Word Validator — flags configured words, matched token by token."""

from prosecheck.models.document import Sentence
from prosecheck.models.validation import Finding, Granularity
from prosecheck.validators.base import BaseValidator
from prosecheck.validators.reference_data import DEFAULT_INVALID_WORDS
from prosecheck.validators.registry import register_validator


@register_validator("InvalidWord", granularity=Granularity.SENTENCE, preprocessor=True, messages=(1,))
class InvalidWordValidator(BaseValidator):
    """Case-insensitive whole-token match against ``list`` (informal English by default)."""

    words: frozenset[str] = frozenset()

    def init(self) -> None:
        self.words = frozenset(w.lower() for w in self.get_string_list("list", list(DEFAULT_INVALID_WORDS)))

    def preprocess(self, sentence: Sentence) -> None:
        sentence.ensure_tokens(self.tokenizer)

    def validate(self, sentence: Sentence) -> list[Finding]:
        tokens = sentence.tokens if sentence.tokens is not None else self.tokenizer.tokenize(sentence.content)
        return [
            self._error(sentence, token.surface, position=token.offset)
            for token in tokens
            if token.surface.lower() in self.words
        ]
