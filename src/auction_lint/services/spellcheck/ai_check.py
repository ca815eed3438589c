import logging
from typing import List, Optional

from auction_lint.config import Settings, settings as default_settings
from auction_lint.constants import DEFAULT_DISPLAY_CATEGORY
from auction_lint.models import FieldType, IssueSource, IssueType, SessionContext, SpellIssue
from auction_lint.services.dictionary import SpellcheckDictionary, get_dictionary
from auction_lint.services.oracle import (
    AIOracle,
    OracleError,
    OracleRequest,
    OracleTask,
    reported_confidence,
)

logger = logging.getLogger(__name__)

MIN_AI_TEXT_LENGTH = 5
DEFAULT_AI_CONFIDENCE = 0.9
AI_CATEGORY = "general"


async def check_with_oracle(
    text: str,
    field_type: FieldType,
    context: SessionContext,
    oracle: Optional[AIOracle],
    dictionary: Optional[SpellcheckDictionary] = None,
    settings: Optional[Settings] = None,
) -> List[SpellIssue]:
    """Ask the oracle for spelling errors; any oracle failure yields no issues."""
    if oracle is None or not text or len(text) < MIN_AI_TEXT_LENGTH:
        return []
    dictionary = dictionary or get_dictionary()
    settings = settings or default_settings

    # non-title fields get the title as cross-field reference
    title_context = context.title_value if field_type != FieldType.TITLE else None

    try:
        data = await oracle.ask(
            OracleRequest(
                task=OracleTask.SPELLCHECK,
                text=text,
                field_type=field_type.value,
                whitelist=dictionary.whitelist_for_prompt(),
                title_context=title_context,
            )
        )
    except OracleError as e:
        logger.warning(f"AI spellcheck unavailable: {e}")
        return []

    issues = []
    for item in data["issues"]:
        original = str(item["original"]).strip()
        corrected = str(item["corrected"]).strip()
        confidence = reported_confidence(item.get("confidence"), DEFAULT_AI_CONFIDENCE)

        if confidence is None:
            logger.debug(f"Dropping AI issue {original!r} with confidence {item.get('confidence')!r}")
            continue
        if original.lower() == corrected.lower():
            continue
        if confidence < settings.ai_spellcheck_min_confidence:
            continue
        if dictionary.is_whitelisted(original):
            continue

        issues.append(
            SpellIssue(
                original=original,
                corrected=corrected,
                confidence=confidence,
                source=IssueSource.AI_SPELLCHECK,
                category=AI_CATEGORY,
                type=IssueType.SPELLING,
                display_category=DEFAULT_DISPLAY_CATEGORY,
            )
        )
    return issues
