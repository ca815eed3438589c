from auction_lint.services.artist_detection.name_classifier import (
    is_likely_proper_name,
    looks_like_person_name,
)
from auction_lint.services.artist_detection.orchestrator import (
    ArtistDetectionOrchestrator,
    detect_misplaced_artist,
)
from auction_lint.services.artist_detection.patterns import (
    PATTERN_TABLE,
    extract_candidates,
    find_first_candidate,
    find_informal_artist,
)
from auction_lint.services.artist_detection.scoring import score_candidate

__all__ = [
    "ArtistDetectionOrchestrator",
    "PATTERN_TABLE",
    "detect_misplaced_artist",
    "extract_candidates",
    "find_first_candidate",
    "find_informal_artist",
    "is_likely_proper_name",
    "looks_like_person_name",
    "score_candidate",
]
