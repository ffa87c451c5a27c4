"""Unit tests for DocumentCollectionBuilder.

Tests cover:
- Happy-path construction of every node type
- is_first_sentence flags per paragraph, header and list element
- Hierarchy violations raising BuilderStateError
- The builder being consumed by build()
"""

import pytest

from prosecheck.errors import BuilderStateError
from prosecheck.models.builder import BuildState, DocumentCollectionBuilder

# =============================================================================
# Construction
# =============================================================================


class TestConstruction:
    def test_empty_collection(self, builder):
        """build() on a fresh builder returns an empty collection."""
        collection = builder.build()
        assert len(collection) == 0

    def test_full_tree(self, builder):
        """Every node type ends up in the right place, in insertion order."""
        collection = (
            builder.add_document("guide.md")
            .add_section(0, header="Introduction")
            .add_paragraph()
            .add_sentence("First sentence.", 1)
            .add_sentence(" Second sentence.", 1)
            .add_paragraph()
            .add_sentence("Another paragraph.", 3)
            .add_list_block()
            .add_list_element(0, "item one", 5)
            .add_list_element(1, ["nested item.", " with two sentences."], 6)
            .add_section(1)
            .add_section_header("Details", 8)
            .build()
        )

        assert len(collection) == 1
        document = collection[0]
        assert document.file_name == "guide.md"
        assert len(document) == 2

        intro, details = document.sections
        assert intro.level == 0
        assert intro.header_text == "Introduction"
        assert [len(p) for p in intro.paragraphs] == [2, 1]
        assert intro.paragraphs[1].sentences[0].position == 3
        assert len(intro.list_blocks) == 1
        elements = intro.list_blocks[0].elements
        assert [e.level for e in elements] == [0, 1]
        assert [s.content for s in elements[1].sentences] == ["nested item.", " with two sentences."]

        assert details.level == 1
        assert details.header_text == "Details"
        assert details.headers[0].position == 8

    def test_multiple_documents_keep_order(self, builder):
        """Documents appear in the order they were added; names may repeat."""
        collection = (
            builder.add_document("a.txt")
            .add_section(0)
            .add_document("b.txt")
            .add_document("a.txt")
            .build()
        )
        assert [d.file_name for d in collection] == ["a.txt", "b.txt", "a.txt"]

    def test_document_without_sections(self, builder):
        collection = builder.add_document("empty.txt").build()
        assert len(collection[0]) == 0


# =============================================================================
# First-sentence flags
# =============================================================================


class TestFirstSentence:
    def test_first_sentence_of_each_paragraph(self, builder):
        """Only the first sentence of each paragraph is flagged."""
        collection = (
            builder.add_document("f.txt")
            .add_section(0)
            .add_paragraph()
            .add_sentence("One.")
            .add_sentence(" Two.")
            .add_paragraph()
            .add_sentence("Three.")
            .build()
        )
        flags = [s.is_first_sentence for p in collection[0].sections[0].paragraphs for s in p.sentences]
        assert flags == [True, False, True]

    def test_first_sentence_of_header_and_list_element(self, builder):
        collection = (
            builder.add_document("f.txt")
            .add_section(0, header="Title")
            .add_section_header(" continued")
            .add_list_block()
            .add_list_element(0, ["a.", " b."])
            .build()
        )
        section = collection[0].sections[0]
        assert [s.is_first_sentence for s in section.headers] == [True, False]
        element = section.list_blocks[0].elements[0]
        assert [s.is_first_sentence for s in element.sentences] == [True, False]


# =============================================================================
# Hierarchy violations
# =============================================================================


class TestStateErrors:
    def test_section_before_document(self, builder):
        """A section without a document is rejected."""
        with pytest.raises(BuilderStateError) as exc_info:
            builder.add_section(0)
        assert exc_info.value.operation == "add_section"
        assert exc_info.value.state == "empty"

    def test_paragraph_before_section(self, builder):
        builder.add_document("x.txt")
        with pytest.raises(BuilderStateError):
            builder.add_paragraph()

    def test_sentence_before_paragraph(self, builder):
        builder.add_document("x.txt").add_section(0)
        with pytest.raises(BuilderStateError):
            builder.add_sentence("orphan")

    def test_sentence_inside_list_block(self, builder):
        """Sentences go into paragraphs; list content goes through add_list_element."""
        builder.add_document("x.txt").add_section(0).add_list_block()
        with pytest.raises(BuilderStateError):
            builder.add_sentence("not a paragraph")

    def test_list_element_before_list_block(self, builder):
        builder.add_document("x.txt").add_section(0).add_paragraph()
        with pytest.raises(BuilderStateError):
            builder.add_list_element(0, "item")

    def test_header_before_section(self, builder):
        builder.add_document("x.txt")
        with pytest.raises(BuilderStateError):
            builder.add_section_header("Title")

    def test_new_document_resets_section(self, builder):
        """After add_document, the previous document's section is no longer open."""
        builder.add_document("a.txt").add_section(0).add_paragraph().add_document("b.txt")
        with pytest.raises(BuilderStateError):
            builder.add_sentence("belongs nowhere")

    def test_builder_is_consumed_by_build(self, builder):
        builder.add_document("a.txt").build()
        assert builder.state is BuildState.BUILT
        with pytest.raises(BuilderStateError):
            builder.add_document("b.txt")
        with pytest.raises(BuilderStateError):
            builder.build()

    def test_error_message_names_operation_and_state(self):
        error = BuilderStateError("add_sentence", "section")
        assert str(error) == "Cannot add_sentence while builder is in state 'section'"


class TestImmutability:
    def test_built_containers_are_frozen(self, builder):
        collection = builder.add_document("a.txt").add_section(0).build()
        with pytest.raises(AttributeError):
            collection[0].file_name = "b.txt"

    def test_sentences_are_tuples(self, builder):
        collection = builder.add_document("a.txt").add_section(0).add_paragraph().add_sentence("x").build()
        assert isinstance(collection[0].sections[0].paragraphs[0].sentences, tuple)
