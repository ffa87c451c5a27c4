"""Symbol tables — per-language punctuation and spacing rules.

A SymbolTable is selected once per language when a registry is built and
is shared by reference with every validator of that registry. It is never
mutated after construction.
"""

from typing import Iterable, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field

from prosecheck.errors import ConfigurationError


class Symbol(BaseModel):
    """One configured punctuation rule."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str = Field(min_length=1)
    needs_before_space: bool = False
    needs_after_space: bool = False
    invalid_symbols: tuple[str, ...] = ()


def _sym(name, value, invalid=(), before=False, after=False) -> Symbol:
    return Symbol(
        name=name,
        value=value,
        invalid_symbols=tuple(invalid),
        needs_before_space=before,
        needs_after_space=after,
    )


# ──────────────────────────────────────────────────────────────────────
# DEFAULT TABLES
# ──────────────────────────────────────────────────────────────────────

ENGLISH_SYMBOLS: tuple[Symbol, ...] = (
    _sym("SPACE", " ", ["　"]),
    _sym("EXCLAMATION_MARK", "!", ["！"]),
    _sym("NUMBER_SIGN", "#", ["＃"]),
    _sym("DOLLAR_SIGN", "$", ["＄"]),
    _sym("PERCENT_SIGN", "%", ["％"]),
    _sym("QUESTION_MARK", "?", ["？"]),
    _sym("AMPERSAND", "&", ["＆"]),
    _sym("LEFT_PARENTHESIS", "(", ["（"], before=True),
    _sym("RIGHT_PARENTHESIS", ")", ["）"], after=True),
    _sym("ASTERISK", "*", ["＊"]),
    _sym("COMMA", ",", ["、", "，"], after=True),
    _sym("FULL_STOP", ".", ["．", "。"]),
    _sym("SLASH", "/", ["／"]),
    _sym("COLON", ":", ["："]),
    _sym("SEMICOLON", ";", ["；"], after=True),
    _sym("LEFT_SQUARE_BRACKET", "[", ["［"]),
    _sym("RIGHT_SQUARE_BRACKET", "]", ["］"]),
    _sym("LEFT_CURLY_BRACKET", "{", ["｛"]),
    _sym("RIGHT_CURLY_BRACKET", "}", ["｝"]),
)

JAPANESE_SYMBOLS: tuple[Symbol, ...] = (
    _sym("SPACE", "　", [" "]),
    _sym("EXCLAMATION_MARK", "！", ["!"]),
    _sym("QUESTION_MARK", "？", ["?"]),
    _sym("LEFT_PARENTHESIS", "（", ["("]),
    _sym("RIGHT_PARENTHESIS", "）", [")"]),
    _sym("COMMA", "、", ["，", ","]),
    _sym("FULL_STOP", "。", ["．", "."]),
    _sym("COLON", "：", [":"]),
    _sym("LEFT_SQUARE_BRACKET", "「", []),
    _sym("RIGHT_SQUARE_BRACKET", "」", []),
)

DEFAULT_SYMBOLS: dict[str, tuple[Symbol, ...]] = {
    "en": ENGLISH_SYMBOLS,
    "ja": JAPANESE_SYMBOLS,
}


class SymbolTable:
    """Read-only lookup of symbols by name, in definition order."""

    def __init__(self, lang: str, symbols: Iterable[Symbol]):
        self.lang = lang
        self._symbols: dict[str, Symbol] = {s.name: s for s in symbols}

    @classmethod
    def for_language(cls, lang: str, overrides: Optional[Iterable[Symbol]] = None) -> "SymbolTable":
        """Load the default table for ``lang`` and replace/add any overridden symbols."""
        if lang not in DEFAULT_SYMBOLS:
            raise ConfigurationError(
                f"No symbol table for language '{lang}' (available: {', '.join(sorted(DEFAULT_SYMBOLS))})"
            )
        symbols = {s.name: s for s in DEFAULT_SYMBOLS[lang]}
        for symbol in overrides or ():
            symbols[symbol.name] = symbol
        return cls(lang, symbols.values())

    def get(self, name: str) -> Symbol:
        try:
            return self._symbols[name]
        except KeyError:
            raise KeyError(f"Symbol '{name}' is not defined for language '{self.lang}'") from None

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols.values())

    def __len__(self) -> int:
        return len(self._symbols)

    @property
    def names(self) -> list[str]:
        return list(self._symbols)
