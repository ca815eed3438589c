import logging
from typing import List, Optional

from auction_lint.config import Settings, settings as default_settings
from auction_lint.models import IssueSource, IssueType, SessionContext, SpellIssue
from auction_lint.services.dictionary import SpellcheckDictionary, get_dictionary
from auction_lint.services.oracle import (
    AIOracle,
    OracleError,
    OracleRequest,
    OracleTask,
    reported_confidence,
)
from auction_lint.services.spellcheck.brand_matcher import BRAND_DISPLAY_CATEGORY

logger = logging.getLogger(__name__)

UNKNOWN_BRAND_CATEGORY = "unknown"


async def check_brands_with_oracle(
    text: str,
    context: SessionContext,
    oracle: Optional[AIOracle],
    dictionary: Optional[SpellcheckDictionary] = None,
    settings: Optional[Settings] = None,
) -> List[SpellIssue]:
    """
    Ask the oracle for misspelled brand names the variant table does not know.

    Replies without a confidence count as zero and are dropped, as is anything
    the oracle claims is misspelled but which does not occur in the text.
    """
    if oracle is None or not text:
        return []
    dictionary = dictionary or get_dictionary()
    settings = settings or default_settings

    try:
        data = await oracle.ask(
            OracleRequest(
                task=OracleTask.CHECK_BRANDS,
                text=text,
                title_context=context.title_value or None,
            )
        )
    except OracleError as e:
        logger.warning(f"AI brand validation unavailable: {e}")
        return []

    text_lower = text.lower()
    issues = []
    for item in data["issues"]:
        original = item["original"].strip()
        suggested = item["suggested"].strip()
        confidence = reported_confidence(item.get("confidence"), 0.0)

        if confidence is None or confidence < settings.ai_brand_min_confidence:
            continue
        if original.lower() == suggested.lower() or original.lower() not in text_lower:
            continue

        issues.append(
            SpellIssue(
                original=original,
                corrected=suggested,
                confidence=confidence,
                source=IssueSource.AI_BRAND,
                category=_infer_category(suggested, dictionary),
                type=IssueType.BRAND,
                display_category=BRAND_DISPLAY_CATEGORY,
            )
        )
    return issues


def _infer_category(brand_name: str, dictionary: SpellcheckDictionary) -> str:
    name = brand_name.lower()
    for brand in dictionary.brands:
        if brand.name.lower() in name:
            return brand.category
    return UNKNOWN_BRAND_CATEGORY
