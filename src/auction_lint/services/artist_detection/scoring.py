from typing import Optional

from auction_lint.constants import ARTIST_OBJECT_TYPES, DESIGNER_OBJECT_TYPES

BASE_CONFIDENCE = 0.7
MIN_CONFIDENCE = 0.1
MAX_CONFIDENCE = 0.9


def score_candidate(candidate_name: str, object_type: Optional[str]) -> float:
    """Confidence that a rule-found name really is a misplaced artist."""
    confidence = BASE_CONFIDENCE
    object_upper = (object_type or "").upper()

    if object_upper in ARTIST_OBJECT_TYPES:
        confidence += 0.2

    # chairs, lamps, vases legitimately carry designer names in the title
    if object_upper in DESIGNER_OBJECT_TYPES:
        confidence -= 0.3

    return round(max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, confidence)), 2)
