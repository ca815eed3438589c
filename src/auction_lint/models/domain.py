"""
Domain models for artist detection and spellchecking.

These are the transient values the engine produces on every call; none of
them is mutated after construction, and all serialize to plain JSON via
``to_dict``.
"""

import enum
from dataclasses import asdict, dataclass, field
from typing import FrozenSet, Optional


class DetectionSource(str, enum.Enum):
    RULES = "rules"
    RULES_INFORMAL = "rules-informal"
    AI = "ai"
    AI_BOOSTED = "ai-boosted"


class IssueSource(str, enum.Enum):
    DICTIONARY = "dictionary"
    AI_SPELLCHECK = "ai_spellcheck"
    BRAND_FUZZY = "brand_fuzzy"
    AI_BRAND = "ai_brand"
    AI_ARTIST_NAME = "ai_artist_name"
    ARTIST_CASE = "artist_case"


class IssueType(str, enum.Enum):
    SPELLING = "spelling"
    BRAND = "brand"
    ARTIST_CASE = "artist_case"
    ARTIST_SPELLING = "artist_spelling"


class FieldType(str, enum.Enum):
    TITLE = "title"
    DESCRIPTION = "description"
    CONDITION = "condition"
    ARTIST = "artist"


class PatternFamily(enum.IntEnum):
    CAPS_NAME_PERIOD = 1
    INFORMAL_START = 2
    COMMA_INVERTED = 3
    NAME_AT_END = 4
    EMBEDDED = 5


@dataclass(frozen=True)
class TitleCandidate:
    """One structural reading of a title: object type, candidate name, and what is left."""
    object_type: str
    candidate_name: str
    remainder: str
    pattern_id: int
    family: PatternFamily

    @property
    def suggested_title(self) -> str:
        if self.family == PatternFamily.CAPS_NAME_PERIOD or not self.object_type:
            title = self.remainder
        elif not self.remainder:
            title = self.object_type
        else:
            title = f"{self.object_type}, {self.remainder}"
        title = title.strip()
        return title[:1].upper() + title[1:]


@dataclass(frozen=True)
class ArtistVerification:
    is_verified: bool
    biography: Optional[str] = None
    confidence: Optional[float] = None


@dataclass(frozen=True)
class DetectionResult:
    """An artist name found in the title, with the title it should become."""
    detected_artist: str
    suggested_title: str
    confidence: float
    source: DetectionSource
    found_in: str
    reasoning: Optional[str] = None
    object_type: Optional[str] = None
    verification: Optional[ArtistVerification] = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["source"] = self.source.value
        return data


@dataclass(frozen=True)
class DetectionOutcome:
    """Result of one detection request: zero or one result, plus why."""
    result: Optional[DetectionResult] = None
    reason: Optional[str] = None

    @property
    def results(self) -> list:
        return [self.result] if self.result else []

    def to_dict(self) -> dict:
        return {
            "results": [r.to_dict() for r in self.results],
            "reason": self.reason,
        }


@dataclass(frozen=True)
class SpellIssue:
    original: str
    corrected: str
    confidence: float
    source: IssueSource
    category: str
    type: IssueType = IssueType.SPELLING
    display_category: str = "stavning"

    def to_dict(self) -> dict:
        data = asdict(self)
        data["source"] = self.source.value
        data["type"] = self.type.value
        return data


@dataclass(frozen=True)
class SessionContext:
    """Caller-owned state passed into each call; the engine never mutates it."""
    ignored_terms: FrozenSet[str] = field(default_factory=frozenset)
    artist_field_value: str = ""
    title_value: str = ""
    description: str = ""

    def __post_init__(self):
        object.__setattr__(
            self,
            "ignored_terms",
            frozenset(term.casefold() for term in self.ignored_terms),
        )
