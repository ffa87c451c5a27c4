"""Reference data — word lists shared by the English validators."""

# ──────────────────────────────────────────────────────────────────────
# CONTRACTIONS
# ──────────────────────────────────────────────────────────────────────

CONTRACTIONS: frozenset[str] = frozenset({
    "aren't", "can't", "couldn't", "didn't", "doesn't", "don't", "hadn't",
    "hasn't", "haven't", "he'd", "he'll", "he's", "i'd", "i'll", "i'm",
    "i've", "isn't", "it's", "let's", "mightn't", "mustn't", "shan't",
    "she'd", "she'll", "she's", "shouldn't", "that's", "there's", "they'd",
    "they'll", "they're", "they've", "we'd", "we'll", "we're", "we've",
    "weren't", "what'll", "what're", "what's", "what've", "where's",
    "who'd", "who'll", "who're", "who's", "who've", "won't", "wouldn't",
    "you'd", "you'll", "you're", "you've",
})

# Expanded forms whose presence means the author avoids contractions
NON_CONTRACTIONS: frozenset[str] = frozenset({
    "am", "are", "can", "could", "did", "do", "does", "had", "has", "have",
    "is", "might", "must", "not", "shall", "should", "was", "were", "will",
    "would",
})


# ──────────────────────────────────────────────────────────────────────
# INVALID WORDS (informal English)
# ──────────────────────────────────────────────────────────────────────

DEFAULT_INVALID_WORDS: tuple[str, ...] = (
    "ain't",
    "gonna",
    "gotta",
    "kinda",
    "sorta",
    "wanna",
    "y'all",
)
