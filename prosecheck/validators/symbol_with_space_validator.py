"""Symbol With Space Validator — checks required whitespace around symbols.

Whether a symbol needs a space before and/or after it is defined in the
language's symbol table (e.g. "(" needs a preceding space in English).
Only whitespace satisfies the requirement, so "(see above)." is flagged
for the missing space after ")".
"""

from typing import Optional

from prosecheck.models.document import Sentence
from prosecheck.models.validation import Finding, Granularity
from prosecheck.symbols import Symbol
from prosecheck.validators.base import BaseValidator
from prosecheck.validators.registry import register_validator


def _separated(char: str) -> bool:
    return char.isspace()


@register_validator("SymbolWithSpace", granularity=Granularity.SENTENCE, messages=(2,))
class SymbolWithSpaceValidator(BaseValidator):
    """Reports the first badly spaced occurrence of each symbol."""

    def validate(self, sentence: Sentence) -> list[Finding]:
        errors = []
        for symbol in self._symbols():
            if not (symbol.needs_before_space or symbol.needs_after_space):
                continue
            position = self._find_violation(sentence.content, symbol)
            if position is not None:
                errors.append(self._error(sentence, symbol.name, symbol.value, position=position))
        return errors

    @staticmethod
    def _find_violation(content: str, symbol: Symbol) -> Optional[int]:
        width = len(symbol.value)
        position = content.find(symbol.value)
        while position != -1:
            end = position + width
            if symbol.needs_before_space and position > 0 and not _separated(content[position - 1]):
                return position
            if symbol.needs_after_space and end < len(content) and not _separated(content[end]):
                return position
            position = content.find(symbol.value, end)
        return None
