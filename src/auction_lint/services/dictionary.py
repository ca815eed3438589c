"""
Static lookup tables for spellchecking.

Whitelist, misspelling map, stop words and the brand table are built once on
first use and shared for the life of the process. Nothing here changes after
construction.
"""

import logging
from dataclasses import dataclass
from functools import cached_property, lru_cache
from typing import Dict, FrozenSet, List, Optional, Tuple

from auction_lint.constants import (
    AUCTION_TERM_WHITELIST,
    CATEGORY_DISPLAY_NAMES,
    DEFAULT_DISPLAY_CATEGORY,
    DICTIONARY_CONFIDENCE,
    KNOWN_BRANDS,
    MISSPELLING_ENTRIES,
    STOP_WORDS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Correction:
    correct: str
    category: str
    confidence: float


@dataclass(frozen=True)
class Brand:
    name: str
    variants: Tuple[str, ...]
    category: str
    confidence: float


class SpellcheckDictionary:
    def __init__(
        self,
        whitelist=AUCTION_TERM_WHITELIST,
        misspelling_entries=MISSPELLING_ENTRIES,
        stop_words=STOP_WORDS,
        brands=KNOWN_BRANDS,
    ):
        self._whitelist_source = whitelist
        self._misspelling_source = misspelling_entries
        self._stop_word_source = stop_words
        self._brand_source = brands

    @cached_property
    def whitelist(self) -> FrozenSet[str]:
        return frozenset(term.lower() for term in self._whitelist_source)

    @cached_property
    def corrections(self) -> Dict[str, Correction]:
        corrections: Dict[str, Correction] = {}
        for entry in self._misspelling_source:
            for misspelling in entry["misspellings"]:
                corrections[misspelling.lower()] = Correction(
                    correct=entry["correct"],
                    category=entry["category"],
                    confidence=entry.get("confidence", DICTIONARY_CONFIDENCE),
                )
        logger.debug(f"Loaded {len(corrections)} misspellings")
        return corrections

    @cached_property
    def stop_words(self) -> FrozenSet[str]:
        return frozenset(word.lower() for word in self._stop_word_source)

    @cached_property
    def brands(self) -> List[Brand]:
        return [
            Brand(
                name=brand["name"],
                variants=tuple(brand["variants"]),
                category=brand["category"],
                confidence=brand["confidence"],
            )
            for brand in self._brand_source
        ]

    def is_whitelisted(self, word: str) -> bool:
        return word.lower() in self.whitelist

    def get_misspelling_correction(self, word: str) -> Optional[Correction]:
        return self.corrections.get(word.lower())

    def is_stop_word(self, word: str) -> bool:
        return word.lower() in self.stop_words

    def whitelist_for_prompt(self) -> str:
        return ", ".join(sorted(self.whitelist))

    @staticmethod
    def category_display_name(category: str) -> str:
        return CATEGORY_DISPLAY_NAMES.get(category, DEFAULT_DISPLAY_CATEGORY)


@lru_cache(maxsize=1)
def get_dictionary() -> SpellcheckDictionary:
    return SpellcheckDictionary()
