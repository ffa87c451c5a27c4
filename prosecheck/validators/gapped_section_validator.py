"""Gapped Section Validator — flags headings that skip a level.

A level-3 section directly after a level-1 section is reported; going back
up any number of levels is fine.
"""

from prosecheck.models.document import Document
from prosecheck.models.validation import Finding, Granularity
from prosecheck.validators.base import BaseValidator
from prosecheck.validators.registry import register_validator


@register_validator("GappedSection", granularity=Granularity.DOCUMENT, messages=(2,))
class GappedSectionValidator(BaseValidator):

    def validate(self, document: Document) -> list[Finding]:
        errors = []
        previous = None
        for section in document.sections:
            if previous is not None and section.level > previous.level + 1:
                header = section.headers[0] if section.headers else None
                errors.append(self._error(header, section.level, previous.level))
            previous = section
        return errors
