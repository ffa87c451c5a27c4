"""Validation models — granularity levels, fault policy, and the Finding record.

A Finding is the engine's normal output, not an error condition.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from prosecheck.models.document import Sentence


class Granularity(str, Enum):
    """Document level a validator is registered to operate over."""

    DOCUMENT = "document"
    SECTION = "section"
    SENTENCE = "sentence"


class FaultPolicy(str, Enum):
    """What the engine does when a validator raises unexpectedly."""

    ISOLATE = "isolate"  # log, record a ValidatorFault finding, keep going
    ABORT = "abort"      # stop the run with ValidatorRuntimeError


class Finding(BaseModel):
    """A single rule violation."""

    model_config = ConfigDict(frozen=True)

    validator: str = Field(description="Identifier of the validator that produced this finding")
    message: str
    sentence: Optional[Sentence] = None
    position: Optional[int] = None    # character offset inside the sentence
    file_name: Optional[str] = None   # stamped by the engine

    @property
    def line_number(self) -> Optional[int]:
        return self.sentence.position if self.sentence is not None else None

    def with_file_name(self, file_name: str) -> "Finding":
        """Return a copy stamped with the originating document's file name."""
        return self.model_copy(update={"file_name": file_name})

    def __str__(self) -> str:
        location = f"{self.file_name or ''}:{self.line_number if self.line_number is not None else '-'}"
        return f"{location} {self.validator}: {self.message}"
