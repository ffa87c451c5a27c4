"""Document model and its builder.

Usage:
    from prosecheck.models import DocumentCollectionBuilder

    collection = DocumentCollectionBuilder().add_document("a.txt").build()
"""

from prosecheck.models.builder import BuildState, DocumentCollectionBuilder
from prosecheck.models.document import (
    Document,
    DocumentCollection,
    ListBlock,
    ListElement,
    Paragraph,
    Section,
    Sentence,
    TokenElement,
    Tokenizer,
)

__all__ = [
    "BuildState",
    "DocumentCollectionBuilder",
    "Document",
    "DocumentCollection",
    "ListBlock",
    "ListElement",
    "Paragraph",
    "Section",
    "Sentence",
    "TokenElement",
    "Tokenizer",
]
