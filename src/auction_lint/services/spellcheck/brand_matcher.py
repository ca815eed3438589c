import logging
import re
from typing import List, Optional

from rapidfuzz.distance import Levenshtein

from auction_lint.config import Settings, settings as default_settings
from auction_lint.constants import BRAND_STOP_WORDS
from auction_lint.models import IssueSource, IssueType, SpellIssue
from auction_lint.services.dictionary import SpellcheckDictionary, get_dictionary

logger = logging.getLogger(__name__)

BRAND_DISPLAY_CATEGORY = "märke"

TOKEN_PATTERN = re.compile(r"[^\W\d_]+(?:[&'-][^\W\d_]+)*")


def check_brands(
    text: str,
    dictionary: Optional[SpellcheckDictionary] = None,
    settings: Optional[Settings] = None,
) -> List[SpellIssue]:
    """
    Fuzzy-match word n-grams against known brand variants.

    A span is flagged when it is close to a known misspelling variant but not
    already close to the canonical spelling. Brands whose canonical name is
    already present in the text are left alone.
    """
    if not text:
        return []
    dictionary = dictionary or get_dictionary()
    settings = settings or default_settings

    tokens = list(TOKEN_PATTERN.finditer(text))
    text_lower = text.lower()
    issues: List[SpellIssue] = []

    for brand in dictionary.brands:
        canonical = brand.name.lower()
        if canonical in text_lower:
            continue

        match = _find_variant_span(text, tokens, brand.variants, canonical, settings)
        if match is None:
            continue

        logger.debug(f"Brand candidate {match!r} -> {brand.name}")
        issues.append(
            SpellIssue(
                original=match,
                corrected=brand.name,
                confidence=brand.confidence,
                source=IssueSource.BRAND_FUZZY,
                category=brand.category,
                type=IssueType.BRAND,
                display_category=BRAND_DISPLAY_CATEGORY,
            )
        )
    return issues


def _find_variant_span(text, tokens, variants, canonical: str, settings: Settings) -> Optional[str]:
    for variant in variants:
        size = len(variant.split())
        variant_lower = variant.lower()
        for i in range(len(tokens) - size + 1):
            if tokens[i].group(0).lower() in BRAND_STOP_WORDS:
                continue
            span = text[tokens[i].start():tokens[i + size - 1].end()]
            span_lower = span.lower()
            if (
                Levenshtein.normalized_similarity(span_lower, variant_lower) > settings.brand_similarity_threshold
                and Levenshtein.normalized_similarity(span_lower, canonical) < settings.brand_correct_similarity
            ):
                return span
    return None
