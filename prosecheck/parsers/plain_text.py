"""Plain text parser — turns raw text into a single-section document.

Paragraphs are separated by blank lines. A sentence ends at the language's
full stop, question mark or exclamation mark when it is followed by
whitespace or the end of a line (full-width marks end a sentence
immediately). Whitespace after a sentence end stays at the start of the
next sentence, and a line break inside a paragraph counts as one space.
"""

from typing import Optional

from prosecheck.models.builder import DocumentCollectionBuilder
from prosecheck.symbols import SymbolTable

TERMINATOR_SYMBOLS = ("FULL_STOP", "QUESTION_MARK", "EXCLAMATION_MARK")


class PlainTextParser:

    def __init__(self, symbol_table: SymbolTable):
        self.terminators = frozenset(
            symbol_table.get(name).value for name in TERMINATOR_SYMBOLS if name in symbol_table
        )

    def parse(
        self,
        text: str,
        file_name: str = "",
        builder: Optional[DocumentCollectionBuilder] = None,
    ) -> DocumentCollectionBuilder:
        """Append one document built from ``text`` to ``builder`` and return it."""
        builder = builder or DocumentCollectionBuilder()
        builder.add_document(file_name).add_section(0)

        paragraph: list[tuple[int, str]] = []
        for line_no, line in enumerate(text.splitlines(), start=1):
            if line.strip():
                paragraph.append((line_no, line))
            elif paragraph:
                self._add_paragraph(builder, paragraph)
                paragraph = []
        if paragraph:
            self._add_paragraph(builder, paragraph)
        return builder

    def _add_paragraph(self, builder: DocumentCollectionBuilder, lines: list[tuple[int, str]]) -> None:
        builder.add_paragraph()
        for content, position in self.split_sentences(lines):
            builder.add_sentence(content, position)

    def split_sentences(self, lines: list[tuple[int, str]]) -> list[tuple[str, int]]:
        """Split numbered lines of one paragraph into (sentence, starting line) pairs."""
        sentences: list[tuple[str, int]] = []
        buffer = ""
        start = lines[0][0] if lines else 0

        for index, (line_no, line) in enumerate(lines):
            if index > 0:
                if not buffer:
                    start = line_no
                buffer += " "
            for i, char in enumerate(line):
                if not buffer:
                    start = line_no
                buffer += char
                if char in self.terminators and self._ends_sentence(char, line, i):
                    sentences.append((buffer, start))
                    buffer = ""

        if buffer.strip():
            sentences.append((buffer, start))
        return sentences

    @staticmethod
    def _ends_sentence(char: str, line: str, index: int) -> bool:
        if not char.isascii():
            return True
        return index + 1 == len(line) or line[index + 1].isspace()
