"""
Spellcheck pipeline: dictionary, AI spelling, brand fuzzy-match and AI brand
checks run concurrently, then merged into one ranked, deduplicated list of
issues.
"""

import asyncio
import logging
from typing import List, Optional

from auction_lint.config import Settings, settings as default_settings
from auction_lint.models import FieldType, SessionContext, SpellIssue
from auction_lint.services.dictionary import SpellcheckDictionary, get_dictionary
from auction_lint.services.oracle import AIOracle
from auction_lint.services.spellcheck.ai_brand_check import check_brands_with_oracle
from auction_lint.services.spellcheck.ai_check import check_with_oracle
from auction_lint.services.spellcheck.artist_field import check_artist_field
from auction_lint.services.spellcheck.brand_matcher import check_brands
from auction_lint.services.spellcheck.dictionary_check import check_dictionary
from auction_lint.services.spellcheck.merger import deduplicate_issues, filter_false_positives

logger = logging.getLogger(__name__)

MIN_TEXT_LENGTH = 3


class SpellcheckEngine:
    def __init__(
        self,
        oracle: Optional[AIOracle] = None,
        dictionary: Optional[SpellcheckDictionary] = None,
        settings: Optional[Settings] = None,
    ):
        self.oracle = oracle
        self.dictionary = dictionary or get_dictionary()
        self.settings = settings or default_settings

    async def check(
        self,
        text: str,
        field_type: FieldType = FieldType.DESCRIPTION,
        context: Optional[SessionContext] = None,
    ) -> List[SpellIssue]:
        if not text or len(text) < MIN_TEXT_LENGTH:
            return []
        context = context or SessionContext()

        results = await asyncio.gather(
            self._dictionary_check(text),
            check_with_oracle(text, field_type, context, self.oracle, self.dictionary, self.settings),
            self._brand_check(text),
            check_brands_with_oracle(text, context, self.oracle, self.dictionary, self.settings),
            return_exceptions=True,
        )

        collected: List[SpellIssue] = []
        for name, result in zip(("dictionary", "ai", "brand", "ai-brand"), results):
            if isinstance(result, BaseException):
                logger.error(f"Spellcheck {name} sub-check failed: {result!r}")
                continue
            collected.extend(result)

        merged = deduplicate_issues(collected)
        filtered = filter_false_positives(merged, text, context, self.dictionary)
        return sorted(filtered, key=lambda issue: issue.confidence, reverse=True)

    def check_dictionary_only(self, text: str, context: Optional[SessionContext] = None) -> List[SpellIssue]:
        """Synchronous dictionary pass with the same merge and filtering, no oracle involved."""
        if not text or len(text) < MIN_TEXT_LENGTH:
            return []
        context = context or SessionContext()
        issues = deduplicate_issues(check_dictionary(text, self.dictionary))
        filtered = filter_false_positives(issues, text, context, self.dictionary)
        return sorted(filtered, key=lambda issue: issue.confidence, reverse=True)

    async def check_artist_field(self, text: str, context: Optional[SessionContext] = None) -> List[SpellIssue]:
        return await check_artist_field(text, context, self.oracle)

    async def _dictionary_check(self, text: str) -> List[SpellIssue]:
        return check_dictionary(text, self.dictionary)

    async def _brand_check(self, text: str) -> List[SpellIssue]:
        return check_brands(text, self.dictionary, self.settings)
