"""Invalid Expression Validator — flags configured phrases anywhere in a sentence."""

from prosecheck.models.document import Sentence
from prosecheck.models.validation import Finding, Granularity
from prosecheck.validators.base import BaseValidator
from prosecheck.validators.registry import register_validator


@register_validator("InvalidExpression", granularity=Granularity.SENTENCE, messages=(1,))
class InvalidExpressionValidator(BaseValidator):
    expressions: list[str] = []

    def init(self) -> None:
        self.expressions = self.get_string_list("list", [])

    def validate(self, sentence: Sentence) -> list[Finding]:
        errors = []
        for expression in self.expressions:
            position = sentence.content.find(expression)
            if position != -1:
                errors.append(self._error(sentence, expression, position=position))
        return errors
