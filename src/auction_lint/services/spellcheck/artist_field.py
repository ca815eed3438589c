"""Checks for text typed into the artist/designer field itself."""

import logging
from typing import List, Optional

from auction_lint.models import IssueSource, IssueType, SessionContext, SpellIssue
from auction_lint.services.oracle import (
    AIOracle,
    OracleError,
    OracleRequest,
    OracleTask,
    reported_confidence,
)
from auction_lint.services.text_utils import title_case_artist

logger = logging.getLogger(__name__)

ARTIST_CASE_CONFIDENCE = 0.95
ARTIST_SPELLING_CONFIDENCE = 0.9
ARTIST_CATEGORY = "artist"


async def check_artist_field(
    text: str,
    context: Optional[SessionContext] = None,
    oracle: Optional[AIOracle] = None,
) -> List[SpellIssue]:
    text = (text or "").strip()
    if not text:
        return []
    context = context or SessionContext()

    issues: List[SpellIssue] = []
    title_cased = title_case_artist(text)
    if title_cased != text:
        issues.append(
            SpellIssue(
                original=text,
                corrected=title_cased,
                confidence=ARTIST_CASE_CONFIDENCE,
                source=IssueSource.ARTIST_CASE,
                category=ARTIST_CATEGORY,
                type=IssueType.ARTIST_CASE,
                display_category="versaler",
            )
        )

    spelling = await _check_spelling(text, oracle)
    if spelling is not None:
        # a real spelling fix also covers capitalization
        issues = [issue for issue in issues if issue.type != IssueType.ARTIST_CASE]
        issues.append(spelling)

    return [issue for issue in issues if issue.original.casefold() not in context.ignored_terms]


async def _check_spelling(text: str, oracle: Optional[AIOracle]) -> Optional[SpellIssue]:
    if oracle is None:
        return None
    try:
        data = await oracle.ask(OracleRequest(task=OracleTask.CHECK_ARTIST_NAME, artist_name=text))
    except OracleError as e:
        logger.warning(f"Artist name check failed for {text!r}: {e}")
        return None

    corrected = data.get("corrected")
    if not isinstance(corrected, str) or not corrected.strip():
        return None
    corrected = corrected.strip()
    if corrected.lower() == text.lower():
        return None

    confidence = reported_confidence(data.get("confidence"), ARTIST_SPELLING_CONFIDENCE)
    if confidence is None:
        return None
    return SpellIssue(
        original=text,
        corrected=corrected,
        confidence=confidence,
        source=IssueSource.AI_ARTIST_NAME,
        category=ARTIST_CATEGORY,
        type=IssueType.ARTIST_SPELLING,
        display_category="konstnärsnamn",
    )
