from auction_lint.services.spellcheck.ai_brand_check import check_brands_with_oracle
from auction_lint.services.spellcheck.ai_check import check_with_oracle
from auction_lint.services.spellcheck.artist_field import check_artist_field
from auction_lint.services.spellcheck.brand_matcher import check_brands
from auction_lint.services.spellcheck.dictionary_check import check_dictionary
from auction_lint.services.spellcheck.engine import SpellcheckEngine
from auction_lint.services.spellcheck.merger import deduplicate_issues, filter_false_positives

__all__ = [
    "SpellcheckEngine",
    "check_artist_field",
    "check_brands",
    "check_brands_with_oracle",
    "check_dictionary",
    "check_with_oracle",
    "deduplicate_issues",
    "filter_false_positives",
]
