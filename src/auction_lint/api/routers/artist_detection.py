from typing import Optional

from fastapi import APIRouter, Depends

from auction_lint.api.dependencies import get_oracle
from auction_lint.models.schemas import ArtistDetectionRequest, ArtistDetectionResponse
from auction_lint.services.artist_detection import ArtistDetectionOrchestrator
from auction_lint.services.oracle import AIOracle

router = APIRouter()


@router.post("/artist-detection", response_model=ArtistDetectionResponse)
async def detect_artist(
    payload: ArtistDetectionRequest,
    oracle: Optional[AIOracle] = Depends(get_oracle),
) -> ArtistDetectionResponse:
    """Find an artist name typed into the title instead of the artist field."""
    orchestrator = ArtistDetectionOrchestrator(oracle=oracle)
    outcome = await orchestrator.detect(
        payload.title,
        artist_field_value=payload.artist_field_value,
        force_re_detection=payload.force_re_detection,
        description=payload.description,
        context=payload.session.to_context(),
    )
    return ArtistDetectionResponse(**outcome.to_dict())
