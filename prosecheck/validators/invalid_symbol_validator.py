"""Invalid Symbol Validator — flags look-alike variants of the language's symbols.

For example a full-width "（" in an English sentence, where the symbol
table defines "(" as the valid form.
"""

from prosecheck.models.document import Sentence
from prosecheck.models.validation import Finding, Granularity
from prosecheck.validators.base import BaseValidator
from prosecheck.validators.registry import register_validator


@register_validator("InvalidSymbol", granularity=Granularity.SENTENCE, messages=(1,))
class InvalidSymbolValidator(BaseValidator):
    """Reports at most one invalid variant per symbol, in symbol-table order."""

    def validate(self, sentence: Sentence) -> list[Finding]:
        errors = []
        for symbol in self._symbols():
            for invalid in symbol.invalid_symbols:
                position = sentence.content.find(invalid)
                if position != -1:
                    errors.append(self._error(sentence, invalid, position=position))
                    break
        return errors
