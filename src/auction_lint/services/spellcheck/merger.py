from typing import Dict, Iterable, List, Optional

from auction_lint.models import SessionContext, SpellIssue
from auction_lint.services.artist_detection.name_classifier import is_likely_proper_name
from auction_lint.services.dictionary import SpellcheckDictionary, get_dictionary
from auction_lint.services.text_utils import differ_only_in_diacritics

PROPER_NAME_MIN_CONFIDENCE = 0.95


def deduplicate_issues(issues: Iterable[SpellIssue]) -> List[SpellIssue]:
    """One issue per case-folded original; a later issue wins only with strictly higher confidence."""
    kept: Dict[str, SpellIssue] = {}
    for issue in issues:
        key = issue.original.casefold()
        existing = kept.get(key)
        if existing is None or issue.confidence > existing.confidence:
            kept[key] = issue
    return list(kept.values())


def _in_artist_field(original: str, artist_field_value: str) -> bool:
    if not artist_field_value:
        return False
    artist = artist_field_value.casefold()
    word = original.casefold()
    return word in artist or word in artist.split()


def filter_false_positives(
    issues: Iterable[SpellIssue],
    text: str,
    context: SessionContext,
    dictionary: Optional[SpellcheckDictionary] = None,
) -> List[SpellIssue]:
    dictionary = dictionary or get_dictionary()
    kept = []
    for issue in issues:
        if issue.original.casefold() in context.ignored_terms:
            continue
        if dictionary.is_whitelisted(issue.original):
            continue
        if _in_artist_field(issue.original, context.artist_field_value):
            continue
        if is_likely_proper_name(issue.original, text):
            if differ_only_in_diacritics(issue.original, issue.corrected):
                continue
            if issue.confidence < PROPER_NAME_MIN_CONFIDENCE:
                continue
        kept.append(issue)
    return kept
