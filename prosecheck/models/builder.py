"""Document builder — stateful constructor for the document model.

Parsers drive the builder with an ordered grammar:

    collection = (
        DocumentCollectionBuilder()
        .add_document("README.md")
        .add_section(0, header="Usage")
        .add_paragraph()
        .add_sentence("This is the first sentence.", 1)
        .add_sentence(" This is the second one.", 1)
        .add_list_block()
        .add_list_element(0, "first item")
        .build()
    )

Every call is checked against a single transition table keyed by the
current BuildState. Adding a node before its ancestor has been started
raises BuilderStateError; the builder never guesses a parent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Union

from prosecheck.errors import BuilderStateError
from prosecheck.models.document import (
    Document,
    DocumentCollection,
    ListBlock,
    ListElement,
    Paragraph,
    Section,
    Sentence,
)


class BuildState(str, Enum):
    EMPTY = "empty"
    DOCUMENT = "document"
    SECTION = "section"
    PARAGRAPH = "paragraph"
    LIST_BLOCK = "list_block"
    BUILT = "built"


_IN_SECTION = frozenset({BuildState.SECTION, BuildState.PARAGRAPH, BuildState.LIST_BLOCK})
_OPEN = frozenset({BuildState.EMPTY, BuildState.DOCUMENT}) | _IN_SECTION

# operation -> states it may be called from
TRANSITIONS: dict[str, frozenset[BuildState]] = {
    "add_document": _OPEN,
    "add_section": _IN_SECTION | {BuildState.DOCUMENT},
    "add_section_header": _IN_SECTION,
    "add_paragraph": _IN_SECTION,
    "add_sentence": frozenset({BuildState.PARAGRAPH}),
    "add_list_block": _IN_SECTION,
    "add_list_element": frozenset({BuildState.LIST_BLOCK}),
    "build": _OPEN,
}


@dataclass
class _SectionDraft:
    level: int
    headers: list[Sentence] = field(default_factory=list)
    paragraphs: list[list[Sentence]] = field(default_factory=list)
    list_blocks: list[list[ListElement]] = field(default_factory=list)

    def freeze(self) -> Section:
        return Section(
            level=self.level,
            headers=tuple(self.headers),
            paragraphs=tuple(Paragraph(tuple(p)) for p in self.paragraphs),
            list_blocks=tuple(ListBlock(tuple(b)) for b in self.list_blocks),
        )


@dataclass
class _DocumentDraft:
    file_name: str
    sections: list[_SectionDraft] = field(default_factory=list)

    def freeze(self) -> Document:
        return Document(self.file_name, tuple(s.freeze() for s in self.sections))


@dataclass
class BuildContext:
    """Cursor threaded through the builder: the current state plus the open drafts."""

    state: BuildState = BuildState.EMPTY
    documents: list[_DocumentDraft] = field(default_factory=list)

    @property
    def document(self) -> _DocumentDraft:
        return self.documents[-1]

    @property
    def section(self) -> _SectionDraft:
        return self.document.sections[-1]


def _append_sentence(group: list[Sentence], content: str, position: int) -> None:
    group.append(Sentence(content=content, position=position, is_first_sentence=not group))


class DocumentCollectionBuilder:
    """Builds a DocumentCollection; consumed by build()."""

    def __init__(self) -> None:
        self._ctx = BuildContext()

    @property
    def state(self) -> BuildState:
        return self._ctx.state

    def _enter(self, operation: str) -> BuildContext:
        if self._ctx.state not in TRANSITIONS[operation]:
            raise BuilderStateError(operation, self._ctx.state.value)
        return self._ctx

    def add_document(self, file_name: str) -> "DocumentCollectionBuilder":
        ctx = self._enter("add_document")
        ctx.documents.append(_DocumentDraft(file_name))
        ctx.state = BuildState.DOCUMENT
        return self

    def add_section(self, level: int, header: Optional[str] = None) -> "DocumentCollectionBuilder":
        ctx = self._enter("add_section")
        ctx.document.sections.append(_SectionDraft(level))
        ctx.state = BuildState.SECTION
        if header is not None:
            _append_sentence(ctx.section.headers, header, 0)
        return self

    def add_section_header(self, content: str, position: int = 0) -> "DocumentCollectionBuilder":
        ctx = self._enter("add_section_header")
        _append_sentence(ctx.section.headers, content, position)
        return self

    def add_paragraph(self) -> "DocumentCollectionBuilder":
        ctx = self._enter("add_paragraph")
        ctx.section.paragraphs.append([])
        ctx.state = BuildState.PARAGRAPH
        return self

    def add_sentence(self, content: str, position: int = 0) -> "DocumentCollectionBuilder":
        ctx = self._enter("add_sentence")
        _append_sentence(ctx.section.paragraphs[-1], content, position)
        return self

    def add_list_block(self) -> "DocumentCollectionBuilder":
        ctx = self._enter("add_list_block")
        ctx.section.list_blocks.append([])
        ctx.state = BuildState.LIST_BLOCK
        return self

    def add_list_element(
        self,
        level: int,
        content: Union[str, Sequence[str]],
        position: int = 0,
    ) -> "DocumentCollectionBuilder":
        ctx = self._enter("add_list_element")
        contents = [content] if isinstance(content, str) else list(content)
        sentences: list[Sentence] = []
        for text in contents:
            _append_sentence(sentences, text, position)
        ctx.section.list_blocks[-1].append(ListElement(level, tuple(sentences)))
        return self

    def build(self) -> DocumentCollection:
        ctx = self._enter("build")
        collection = DocumentCollection(tuple(d.freeze() for d in ctx.documents))
        ctx.state = BuildState.BUILT
        ctx.documents = []
        return collection
