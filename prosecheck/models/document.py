"""Document model — the parsed tree a validation run reads.

DocumentCollection → Document → Section → (Paragraph | ListBlock → ListElement) → Sentence.

Containers are frozen and hold tuples; they are produced by
DocumentCollectionBuilder and never change afterwards. The single exception
is Sentence.tokens, which is filled in by the sentence pre-processing pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Protocol


@dataclass(frozen=True)
class TokenElement:
    """One token of a sentence, as produced by a tokenizer."""

    surface: str
    offset: int                  # character offset inside Sentence.content
    tags: tuple[str, ...] = ()


class Tokenizer(Protocol):
    def tokenize(self, content: str) -> list[TokenElement]: ...


@dataclass
class Sentence:
    content: str
    position: int = 0                 # source line of the sentence
    is_first_sentence: bool = False
    tokens: Optional[list[TokenElement]] = field(default=None, compare=False, repr=False)

    @property
    def is_tokenized(self) -> bool:
        return self.tokens is not None

    def ensure_tokens(self, tokenizer: Tokenizer) -> list[TokenElement]:
        """Attach tokens once; later calls return the already attached sequence."""
        if self.tokens is None:
            self.tokens = tokenizer.tokenize(self.content)
        return self.tokens


@dataclass(frozen=True)
class Paragraph:
    sentences: tuple[Sentence, ...] = ()

    def __len__(self) -> int:
        return len(self.sentences)


@dataclass(frozen=True)
class ListElement:
    level: int
    sentences: tuple[Sentence, ...] = ()


@dataclass(frozen=True)
class ListBlock:
    elements: tuple[ListElement, ...] = ()

    def __len__(self) -> int:
        return len(self.elements)


@dataclass(frozen=True)
class Section:
    """A heading-delimited region. Sections form a flat list tagged with their level."""

    level: int
    headers: tuple[Sentence, ...] = ()
    paragraphs: tuple[Paragraph, ...] = ()
    list_blocks: tuple[ListBlock, ...] = ()

    @property
    def header_text(self) -> str:
        return "".join(s.content for s in self.headers)

    def iter_sentence_groups(self) -> Iterator[tuple[Sentence, ...]]:
        """Yield sentence groups in the fixed sentence-phase traversal order.

        Paragraphs in order, then the section header, then every list
        element of every list block in order.
        """
        for paragraph in self.paragraphs:
            yield paragraph.sentences
        yield self.headers
        for list_block in self.list_blocks:
            for element in list_block.elements:
                yield element.sentences

    def iter_sentences(self) -> Iterator[Sentence]:
        for group in self.iter_sentence_groups():
            yield from group


@dataclass(frozen=True)
class Document:
    file_name: str
    sections: tuple[Section, ...] = ()

    def __iter__(self) -> Iterator[Section]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)


@dataclass(frozen=True)
class DocumentCollection:
    """The whole input batch. Order is significant; file names need not be unique."""

    documents: tuple[Document, ...] = ()

    def __iter__(self) -> Iterator[Document]:
        return iter(self.documents)

    def __len__(self) -> int:
        return len(self.documents)

    def __getitem__(self, index: int) -> Document:
        return self.documents[index]
