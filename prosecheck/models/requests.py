"""API request models."""

from pydantic import BaseModel, Field


class ValidateDocumentRequest(BaseModel):
    """Request to validate one plain-text document."""

    document: str = Field(
        ...,
        max_length=200_000,
        description="Plain text; paragraphs are separated by blank lines",
        examples=["He is a super man. He's also a business man.\n\nSecond paragraph."],
    )
    lang: str = Field(default="en", description="Language of the document (selects the rule set)")
    file_name: str = Field(default="", description="Name attached to every finding")
