"""Section Count Validator — flags documents with too many sections."""

from prosecheck.models.document import Document
from prosecheck.models.validation import Finding, Granularity
from prosecheck.validators.base import BaseValidator
from prosecheck.validators.registry import register_validator

DEFAULT_MAX_SECTION_NUMBER = 50


@register_validator("SectionCount", granularity=Granularity.DOCUMENT, messages=(2,))
class SectionCountValidator(BaseValidator):
    max_num: int = DEFAULT_MAX_SECTION_NUMBER

    def init(self) -> None:
        self.max_num = self.get_int("max_num", DEFAULT_MAX_SECTION_NUMBER)

    def validate(self, document: Document) -> list[Finding]:
        count = len(document.sections)
        if count > self.max_num:
            return [self._error(None, count, self.max_num)]
        return []
