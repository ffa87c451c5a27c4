"""Unit tests for section- and document-level validators."""

from prosecheck.models.builder import DocumentCollectionBuilder
from prosecheck.validators.gapped_section_validator import GappedSectionValidator
from prosecheck.validators.paragraph_number_validator import ParagraphNumberValidator
from prosecheck.validators.paragraph_start_with_validator import ParagraphStartWithValidator
from prosecheck.validators.section_count_validator import SectionCountValidator
from prosecheck.validators.section_length_validator import SectionLengthValidator


def _section(header="Title", paragraphs=(("First.",),)):
    builder = DocumentCollectionBuilder().add_document("s.md").add_section(0, header=header)
    for sentences in paragraphs:
        builder.add_paragraph()
        for content in sentences:
            builder.add_sentence(content)
    return builder.build()[0].sections[0]


def _document(*levels):
    builder = DocumentCollectionBuilder().add_document("d.md")
    for level in levels:
        builder.add_section(level, header=f"Level {level}")
    return builder.build()[0]


class TestSectionLength:
    def test_counts_header_and_body(self):
        section = _section(header="12345", paragraphs=(("67890",),))
        errors = SectionLengthValidator.from_options(max_num=9).validate(section)
        assert len(errors) == 1
        assert "10" in errors[0].message
        assert errors[0].sentence.content == "12345"

    def test_within_limit(self):
        section = _section(header="12345", paragraphs=(("67890",),))
        assert SectionLengthValidator.from_options(max_num=10).validate(section) == []


class TestParagraphNumber:
    def test_too_many_paragraphs(self):
        section = _section(paragraphs=(("a.",), ("b.",), ("c.",)))
        errors = ParagraphNumberValidator.from_options(max_num=2).validate(section)
        assert len(errors) == 1

    def test_within_limit(self):
        section = _section(paragraphs=(("a.",), ("b.",)))
        assert ParagraphNumberValidator.from_options(max_num=2).validate(section) == []


class TestParagraphStartWith:
    def test_paragraph_without_indent(self):
        section = _section(paragraphs=((" indented.",), ("flush.",)))
        errors = ParagraphStartWithValidator.from_options().validate(section)
        assert len(errors) == 1
        assert errors[0].sentence.content == "flush."

    def test_custom_prefix(self):
        section = _section(paragraphs=(("　全角。",),))
        assert ParagraphStartWithValidator.from_options(lang="ja", start_from="　").validate(section) == []


class TestGappedSection:
    def test_skipped_level(self):
        """Going from level 1 straight to level 3 is reported on the level-3 header."""
        errors = GappedSectionValidator.from_options().validate(_document(1, 3))
        assert len(errors) == 1
        assert errors[0].sentence.content == "Level 3"

    def test_returning_up_is_fine(self):
        assert GappedSectionValidator.from_options().validate(_document(1, 2, 3, 1, 2)) == []

    def test_first_section_any_level(self):
        assert GappedSectionValidator.from_options().validate(_document(2)) == []


class TestSectionCount:
    def test_too_many_sections(self):
        errors = SectionCountValidator.from_options(max_num=2).validate(_document(0, 0, 0))
        assert len(errors) == 1
        assert errors[0].sentence is None

    def test_within_limit(self):
        assert SectionCountValidator.from_options(max_num=3).validate(_document(0, 0, 0)) == []
