"""Paragraph Number Validator — flags sections with too many paragraphs."""

from prosecheck.models.document import Section
from prosecheck.models.validation import Finding, Granularity
from prosecheck.validators.base import BaseValidator
from prosecheck.validators.registry import register_validator

DEFAULT_MAX_PARAGRAPH_NUMBER = 5


@register_validator("ParagraphNumber", granularity=Granularity.SECTION, messages=(2,))
class ParagraphNumberValidator(BaseValidator):
    max_num: int = DEFAULT_MAX_PARAGRAPH_NUMBER

    def init(self) -> None:
        self.max_num = self.get_int("max_num", DEFAULT_MAX_PARAGRAPH_NUMBER)

    def validate(self, section: Section) -> list[Finding]:
        count = len(section.paragraphs)
        if count > self.max_num:
            header = section.headers[0] if section.headers else None
            return [self._error(header, count, self.max_num)]
        return []
