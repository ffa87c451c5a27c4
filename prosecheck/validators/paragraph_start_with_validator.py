"""Paragraph Start With Validator — every paragraph must open with a given prefix.

Typical use is an indentation convention such as a leading space or a
full-width space in Japanese text.
"""

from prosecheck.models.document import Section
from prosecheck.models.validation import Finding, Granularity
from prosecheck.validators.base import BaseValidator
from prosecheck.validators.registry import register_validator

DEFAULT_START_FROM = " "


@register_validator("ParagraphStartWith", granularity=Granularity.SECTION, messages=(1,))
class ParagraphStartWithValidator(BaseValidator):
    start_from: str = DEFAULT_START_FROM

    def init(self) -> None:
        self.start_from = self.get_string("start_from", DEFAULT_START_FROM)

    def validate(self, section: Section) -> list[Finding]:
        errors = []
        for paragraph in section.paragraphs:
            if not paragraph.sentences:
                continue
            first = paragraph.sentences[0]
            if not first.content.startswith(self.start_from):
                errors.append(self._error(first, self.start_from, position=0))
        return errors
