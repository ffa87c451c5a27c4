"""Space Beginning Of Sentence Validator.

Every sentence except the first one of its paragraph, header or list
element must start with a space separating it from the previous sentence.
"""

from prosecheck.models.document import Sentence
from prosecheck.models.validation import Finding, Granularity
from prosecheck.validators.base import BaseValidator
from prosecheck.validators.registry import register_validator


@register_validator("SpaceBeginningOfSentence", granularity=Granularity.SENTENCE, messages=(0,))
class SpaceBeginningOfSentenceValidator(BaseValidator):

    def validate(self, sentence: Sentence) -> list[Finding]:
        content = sentence.content
        if not sentence.is_first_sentence and content and content[0] != " ":
            return [self._error(sentence, position=0)]
        return []
