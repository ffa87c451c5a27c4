"""Section Length Validator — flags sections with too many characters."""

from prosecheck.models.document import Section
from prosecheck.models.validation import Finding, Granularity
from prosecheck.validators.base import BaseValidator
from prosecheck.validators.registry import register_validator

DEFAULT_MAX_CHAR_NUMBER = 1000


@register_validator("SectionLength", granularity=Granularity.SECTION, messages=(2,))
class SectionLengthValidator(BaseValidator):
    """Counts the characters of every sentence in the section, header included."""

    max_num: int = DEFAULT_MAX_CHAR_NUMBER

    def init(self) -> None:
        self.max_num = self.get_int("max_num", DEFAULT_MAX_CHAR_NUMBER)

    def validate(self, section: Section) -> list[Finding]:
        length = sum(len(s.content) for s in section.iter_sentences())
        if length > self.max_num:
            header = section.headers[0] if section.headers else None
            return [self._error(header, length, self.max_num)]
        return []
