"""API response models."""

from typing import Literal, Optional

from pydantic import BaseModel

from prosecheck.models.validation import Finding


class FindingResponse(BaseModel):
    """A single finding as returned over HTTP."""

    validator: str
    message: str
    sentence: Optional[str] = None
    line_number: Optional[int] = None
    position: Optional[int] = None
    file_name: Optional[str] = None

    @classmethod
    def from_finding(cls, finding: Finding) -> "FindingResponse":
        return cls(
            validator=finding.validator,
            message=finding.message,
            sentence=finding.sentence.content if finding.sentence is not None else None,
            line_number=finding.line_number,
            position=finding.position,
            file_name=finding.file_name,
        )


class ValidateDocumentResponse(BaseModel):
    """Findings for a validated document, in engine order."""

    document: str
    lang: str
    errors: list[FindingResponse] = []


class ValidatorInfo(BaseModel):
    """A registered validator."""

    name: str
    granularity: str
    preprocessor: bool


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "0.1.0"
    uptime_seconds: float
    languages_loaded: list[str] = []
    locales_available: list[str] = []
    validators_available: int = 0
