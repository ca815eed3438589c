from auction_lint.constants.known_brands import KNOWN_BRANDS
from auction_lint.constants.misspellings import (
    CATEGORY_DISPLAY_NAMES,
    DEFAULT_DISPLAY_CATEGORY,
    DICTIONARY_CONFIDENCE,
    MISSPELLING_ENTRIES,
)
from auction_lint.constants.name_terms import (
    ARTIST_OBJECT_TYPES,
    DESCRIPTIVE_PATTERNS,
    DESIGNER_OBJECT_TYPES,
    EXCLUDED_NAMES,
    INFORMAL_SKIP_WORDS,
    NAME_PARTICLES,
    NON_NAME_WORDS,
)
from auction_lint.constants.stop_words import BRAND_STOP_WORDS, STOP_WORDS
from auction_lint.constants.text_patterns import (
    DEFAULT_OBJECT_TYPE,
    FOUND_IN_TITLE,
    FOUND_IN_TITLE_REPEAT,
    LOWER,
    NAME_WORD,
    PERIOD_PATTERNS,
    UNTITLED_FALLBACK,
    UPPER,
)
from auction_lint.constants.whitelist import AUCTION_TERM_WHITELIST

__all__ = [
    "KNOWN_BRANDS",
    "CATEGORY_DISPLAY_NAMES",
    "DEFAULT_DISPLAY_CATEGORY",
    "DICTIONARY_CONFIDENCE",
    "MISSPELLING_ENTRIES",
    "ARTIST_OBJECT_TYPES",
    "DESCRIPTIVE_PATTERNS",
    "DESIGNER_OBJECT_TYPES",
    "EXCLUDED_NAMES",
    "INFORMAL_SKIP_WORDS",
    "NAME_PARTICLES",
    "NON_NAME_WORDS",
    "BRAND_STOP_WORDS",
    "STOP_WORDS",
    "DEFAULT_OBJECT_TYPE",
    "FOUND_IN_TITLE",
    "FOUND_IN_TITLE_REPEAT",
    "LOWER",
    "NAME_WORD",
    "PERIOD_PATTERNS",
    "UNTITLED_FALLBACK",
    "UPPER",
    "AUCTION_TERM_WHITELIST",
]
