from typing import List, Optional

from pydantic import BaseModel, Field

from auction_lint.models.domain import FieldType, SessionContext


class SessionPayload(BaseModel):
    ignored_terms: List[str] = Field(default_factory=list)
    artist_field_value: str = ""
    title_value: str = ""
    description: str = ""

    def to_context(self) -> SessionContext:
        return SessionContext(
            ignored_terms=frozenset(self.ignored_terms),
            artist_field_value=self.artist_field_value,
            title_value=self.title_value,
            description=self.description,
        )


class ArtistDetectionRequest(BaseModel):
    title: str = Field(..., max_length=2000)
    artist_field_value: str = ""
    description: str = ""
    force_re_detection: bool = False
    session: SessionPayload = Field(default_factory=SessionPayload)


class ArtistVerificationResponse(BaseModel):
    is_verified: bool
    biography: Optional[str] = None
    confidence: Optional[float] = None


class DetectionResultResponse(BaseModel):
    detected_artist: str
    suggested_title: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    source: str
    found_in: str
    reasoning: Optional[str] = None
    object_type: Optional[str] = None
    verification: Optional[ArtistVerificationResponse] = None


class ArtistDetectionResponse(BaseModel):
    results: List[DetectionResultResponse]
    reason: Optional[str] = None


class SpellcheckRequest(BaseModel):
    text: str = Field(..., max_length=20000)
    field_type: FieldType = FieldType.DESCRIPTION
    session: SessionPayload = Field(default_factory=SessionPayload)


class ArtistFieldCheckRequest(BaseModel):
    text: str = Field(..., max_length=500)
    session: SessionPayload = Field(default_factory=SessionPayload)


class SpellIssueResponse(BaseModel):
    original: str
    corrected: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    source: str
    category: str
    type: str
    display_category: str


class SpellcheckResponse(BaseModel):
    issues: List[SpellIssueResponse]
