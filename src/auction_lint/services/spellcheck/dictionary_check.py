import re
from typing import List, Optional

from auction_lint.models import IssueSource, IssueType, SpellIssue
from auction_lint.services.dictionary import SpellcheckDictionary, get_dictionary

# alphabetic runs of 4+ letters, diacritics included
WORD_PATTERN = re.compile(r"(?<![^\W\d_])[^\W\d_]{4,}(?![^\W\d_])")


def check_dictionary(text: str, dictionary: Optional[SpellcheckDictionary] = None) -> List[SpellIssue]:
    """Known misspellings found in the text, first occurrence of each word only."""
    if not text:
        return []
    dictionary = dictionary or get_dictionary()

    issues: List[SpellIssue] = []
    seen = set()
    for word in WORD_PATTERN.findall(text):
        lower = word.lower()
        if lower in seen or dictionary.is_stop_word(lower) or dictionary.is_whitelisted(lower):
            continue

        correction = dictionary.get_misspelling_correction(lower)
        if correction is None:
            continue

        seen.add(lower)
        issues.append(
            SpellIssue(
                original=word,
                corrected=correction.correct,
                confidence=correction.confidence,
                source=IssueSource.DICTIONARY,
                category=correction.category,
                type=IssueType.SPELLING,
                display_category=dictionary.category_display_name(correction.category),
            )
        )
    return issues
