"""Contraction Validator — flags contractions in text that mostly avoids them.

The pre-processing pass counts contracted ("he's") and expanded ("is",
"not", ...) forms over the whole run. Contractions are only reported when
expanded forms are strictly more frequent, i.e. when contractions are the
exception rather than the author's style.
"""

from prosecheck.models.document import Sentence
from prosecheck.models.validation import Finding, Granularity
from prosecheck.validators.base import BaseValidator
from prosecheck.validators.reference_data import CONTRACTIONS, NON_CONTRACTIONS
from prosecheck.validators.registry import register_validator


@register_validator("Contraction", granularity=Granularity.SENTENCE, preprocessor=True, messages=(1,))
class ContractionValidator(BaseValidator):

    def __init__(self) -> None:
        super().__init__()
        self.contraction_count = 0
        self.non_contraction_count = 0

    def reset(self) -> None:
        self.contraction_count = 0
        self.non_contraction_count = 0

    def preprocess(self, sentence: Sentence) -> None:
        for token in sentence.ensure_tokens(self.tokenizer):
            surface = token.surface.lower()
            if surface in CONTRACTIONS:
                self.contraction_count += 1
            elif surface in NON_CONTRACTIONS:
                self.non_contraction_count += 1

    def validate(self, sentence: Sentence) -> list[Finding]:
        if self.contraction_count >= self.non_contraction_count:
            return []
        tokens = sentence.tokens if sentence.tokens is not None else self.tokenizer.tokenize(sentence.content)
        return [
            self._error(sentence, token.surface, position=token.offset)
            for token in tokens
            if token.surface.lower() in CONTRACTIONS
        ]
