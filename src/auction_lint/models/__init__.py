from auction_lint.models.domain import (
    ArtistVerification,
    DetectionOutcome,
    DetectionResult,
    DetectionSource,
    FieldType,
    IssueSource,
    IssueType,
    PatternFamily,
    SessionContext,
    SpellIssue,
    TitleCandidate,
)

__all__ = [
    "ArtistVerification",
    "DetectionOutcome",
    "DetectionResult",
    "DetectionSource",
    "FieldType",
    "IssueSource",
    "IssueType",
    "PatternFamily",
    "SessionContext",
    "SpellIssue",
    "TitleCandidate",
]
