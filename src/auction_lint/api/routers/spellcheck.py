from typing import Optional

from fastapi import APIRouter, Depends

from auction_lint.api.dependencies import get_oracle
from auction_lint.models.schemas import (
    ArtistFieldCheckRequest,
    SpellcheckRequest,
    SpellcheckResponse,
)
from auction_lint.services.oracle import AIOracle
from auction_lint.services.spellcheck import SpellcheckEngine

router = APIRouter()


@router.post("/spellcheck", response_model=SpellcheckResponse)
async def spellcheck(
    payload: SpellcheckRequest,
    oracle: Optional[AIOracle] = Depends(get_oracle),
) -> SpellcheckResponse:
    """Spelling and brand issues in one form field, ranked by confidence."""
    engine = SpellcheckEngine(oracle=oracle)
    issues = await engine.check(payload.text, payload.field_type, payload.session.to_context())
    return SpellcheckResponse(issues=[issue.to_dict() for issue in issues])


@router.post("/spellcheck/artist-field", response_model=SpellcheckResponse)
async def spellcheck_artist_field(
    payload: ArtistFieldCheckRequest,
    oracle: Optional[AIOracle] = Depends(get_oracle),
) -> SpellcheckResponse:
    """Capitalization and name-spelling issues in the artist field."""
    engine = SpellcheckEngine(oracle=oracle)
    issues = await engine.check_artist_field(payload.text, payload.session.to_context())
    return SpellcheckResponse(issues=[issue.to_dict() for issue in issues])
