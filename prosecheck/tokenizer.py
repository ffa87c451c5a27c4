"""Whitespace tokenizer used by pre-processing validators.

Stands in for a real language-specific tokenizer: any object with a
``tokenize(content) -> list[TokenElement]`` method can replace it.
"""

import re

from prosecheck.models.document import TokenElement

_TOKEN_RE = re.compile(r"\S+")
_TRIM = ".,!?;:\"()[]{}"


class WhiteSpaceTokenizer:
    """Splits on whitespace and trims surrounding punctuation from each token."""

    def tokenize(self, content: str) -> list[TokenElement]:
        tokens = []
        for match in _TOKEN_RE.finditer(content):
            raw = match.group()
            surface = raw.strip(_TRIM)
            if not surface:
                continue
            offset = match.start() + (len(raw) - len(raw.lstrip(_TRIM)))
            tokens.append(TokenElement(surface=surface, offset=offset))
        return tokens
