"""Suggest Expression Validator — regex match with a suggested replacement."""

from prosecheck.models.document import Sentence
from prosecheck.models.validation import Finding, Granularity
from prosecheck.validators.base import BaseValidator
from prosecheck.validators.registry import register_validator


@register_validator("SuggestExpression", granularity=Granularity.SENTENCE, messages=(2,))
class SuggestExpressionValidator(BaseValidator):
    """Both ``pattern`` and ``suggestion`` are required options."""

    def init(self) -> None:
        self.pattern = self.get_pattern("pattern")
        self.suggestion = self.get_string("suggestion")

    def validate(self, sentence: Sentence) -> list[Finding]:
        return [
            self._error(sentence, match.group(), self.suggestion, position=match.start())
            for match in self.pattern.finditer(sentence.content)
            if match.group()
        ]
