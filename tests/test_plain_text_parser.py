"""Tests for the plain text parser and the whitespace tokenizer."""

from prosecheck.parsers.plain_text import PlainTextParser
from prosecheck.symbols import SymbolTable
from prosecheck.tokenizer import WhiteSpaceTokenizer


def _parse(text, lang="en"):
    return PlainTextParser(SymbolTable.for_language(lang)).parse(text, file_name="p.txt").build()[0]


class TestPlainTextParser:
    def test_single_section_level_zero(self):
        document = _parse("One sentence.")
        assert document.file_name == "p.txt"
        assert len(document) == 1
        assert document.sections[0].level == 0
        assert document.sections[0].headers == ()

    def test_sentences_keep_leading_space(self):
        paragraph = _parse("First one. Second one? Third!").sections[0].paragraphs[0]
        assert [s.content for s in paragraph.sentences] == ["First one.", " Second one?", " Third!"]
        assert [s.is_first_sentence for s in paragraph.sentences] == [True, False, False]

    def test_blank_lines_split_paragraphs(self):
        section = _parse("Para one.\n\n\nPara two.\nStill two.").sections[0]
        assert len(section.paragraphs) == 2
        assert [s.content for s in section.paragraphs[1].sentences] == ["Para two.", " Still two."]

    def test_line_numbers(self):
        section = _parse("First.\n\nSecond line starts\nand ends here.").sections[0]
        assert section.paragraphs[0].sentences[0].position == 1
        assert section.paragraphs[1].sentences[0].position == 3

    def test_period_inside_token_does_not_split(self):
        paragraph = _parse("Version 1.5 is out.").sections[0].paragraphs[0]
        assert [s.content for s in paragraph.sentences] == ["Version 1.5 is out."]

    def test_trailing_text_without_terminator(self):
        paragraph = _parse("Done. and then").sections[0].paragraphs[0]
        assert [s.content for s in paragraph.sentences] == ["Done.", " and then"]

    def test_japanese_full_stop(self):
        paragraph = _parse("これはペンです。あれは本です。", lang="ja").sections[0].paragraphs[0]
        assert [s.content for s in paragraph.sentences] == ["これはペンです。", "あれは本です。"]

    def test_empty_text(self):
        assert _parse("").sections[0].paragraphs == ()

    def test_appends_to_existing_builder(self):
        parser = PlainTextParser(SymbolTable.for_language("en"))
        builder = parser.parse("a.", file_name="1.txt")
        parser.parse("b.", file_name="2.txt", builder=builder)
        assert [d.file_name for d in builder.build()] == ["1.txt", "2.txt"]


class TestWhiteSpaceTokenizer:
    def test_strips_punctuation(self):
        tokens = WhiteSpaceTokenizer().tokenize('He said "hello," then left.')
        assert [t.surface for t in tokens] == ["He", "said", "hello", "then", "left"]

    def test_offsets_point_into_content(self):
        content = "  (wrapped) word"
        for token in WhiteSpaceTokenizer().tokenize(content):
            assert content[token.offset:token.offset + len(token.surface)] == token.surface

    def test_apostrophes_kept(self):
        tokens = WhiteSpaceTokenizer().tokenize("it's fine")
        assert tokens[0].surface == "it's"

    def test_punctuation_only_tokens_dropped(self):
        tokens = WhiteSpaceTokenizer().tokenize("a ... b !")
        assert [(t.surface, t.offset) for t in tokens] == [("a", 0), ("b", 6)]
