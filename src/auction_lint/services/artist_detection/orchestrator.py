"""
Artist detection: decide between the AI oracle and the local pattern rules.

The oracle is authoritative whenever it answers. A "no artist" reply, an
implausible name, or a low-confidence "yes" all end the request without
consulting the rules. Rules run only when the oracle failed or none is
configured. Artists the user dismissed earlier in the session are never
reported again.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Union

from auction_lint.config import Settings, settings as default_settings
from auction_lint.constants import FOUND_IN_TITLE, FOUND_IN_TITLE_REPEAT
from auction_lint.models import (
    ArtistVerification,
    DetectionOutcome,
    DetectionResult,
    DetectionSource,
    PatternFamily,
    SessionContext,
    TitleCandidate,
)
from auction_lint.services.artist_detection.name_classifier import looks_like_person_name
from auction_lint.services.artist_detection.patterns import find_first_candidate
from auction_lint.services.artist_detection.scoring import score_candidate
from auction_lint.services.oracle import AIOracle, OracleError, OracleRequest, OracleTask
from auction_lint.services.text_utils import (
    extract_object_type,
    extract_period,
    generate_suggested_title,
)

logger = logging.getLogger(__name__)

MIN_TITLE_LENGTH = 10
MIN_ARTIST_FIELD_LENGTH = 2
INFORMAL_RULE_CONFIDENCE = 0.8
BOOST_AMOUNT = 0.2
BOOST_CEILING = 0.85


@dataclass(frozen=True)
class Accepted:
    result: DetectionResult


@dataclass(frozen=True)
class Rejected:
    reason: str


@dataclass(frozen=True)
class NeedsFallback:
    reason: str


Arbitration = Union[Accepted, Rejected, NeedsFallback]


def _capitalize_first(text: str) -> str:
    text = text.strip()
    return text[:1].upper() + text[1:]


def _normalize_artist(name: str) -> str:
    return " ".join(name.split()).casefold()


class ArtistDetectionOrchestrator:
    def __init__(self, oracle: Optional[AIOracle] = None, settings: Optional[Settings] = None):
        self.oracle = oracle
        self.settings = settings or default_settings

    async def detect(
        self,
        title: str,
        artist_field_value: str = "",
        force_re_detection: bool = False,
        description: str = "",
        context: Optional[SessionContext] = None,
    ) -> DetectionOutcome:
        title = (title or "").strip()
        artist_field_value = (artist_field_value or "").strip()

        if len(artist_field_value) > MIN_ARTIST_FIELD_LENGTH and not force_re_detection:
            return DetectionOutcome(reason="artist field already filled")
        if len(title) < MIN_TITLE_LENGTH:
            return DetectionOutcome(reason="title too short")

        found_in = FOUND_IN_TITLE_REPEAT if force_re_detection else FOUND_IN_TITLE

        try:
            informal = find_first_candidate(title, families=(PatternFamily.INFORMAL_START,))
            informal_candidate = informal[1] if informal else None

            fallback_reason = "no oracle configured"
            if self.oracle is not None:
                decision = await self._consult_oracle(
                    title,
                    "" if force_re_detection else artist_field_value,
                    description,
                    informal_candidate,
                    found_in,
                )
                if isinstance(decision, Accepted):
                    return self._unless_ignored(decision.result, context)
                if isinstance(decision, Rejected):
                    return DetectionOutcome(reason=decision.reason)
                fallback_reason = decision.reason

            logger.info(f"Rule-based artist detection ({fallback_reason})")
            result = self._detect_with_rules(title, informal_candidate, found_in)
            if result is None:
                return DetectionOutcome(reason=f"no candidate found ({fallback_reason})")
            return self._unless_ignored(result, context)
        except Exception as e:
            logger.exception(f"Artist detection failed for {title!r}: {e}")
            return DetectionOutcome(reason=f"detection error: {e}")

    def _unless_ignored(
        self, result: DetectionResult, context: Optional[SessionContext]
    ) -> DetectionOutcome:
        if context is not None:
            ignored = {_normalize_artist(term) for term in context.ignored_terms}
            if _normalize_artist(result.detected_artist) in ignored:
                logger.info(f"Artist {result.detected_artist!r} was dismissed this session")
                return DetectionOutcome(reason="artist ignored for this session")
        return DetectionOutcome(result=result)

    async def _consult_oracle(
        self,
        title: str,
        artist_field: str,
        description: str,
        informal_candidate: Optional[TitleCandidate],
        found_in: str,
    ) -> Arbitration:
        object_type = extract_object_type(title)
        try:
            data = await self.oracle.ask(
                OracleRequest(
                    task=OracleTask.DETECT_ARTIST,
                    title=title,
                    object_type=object_type,
                    artist_field=artist_field,
                    description=description,
                )
            )
        except OracleError as e:
            logger.warning(f"Oracle artist detection failed, falling back to rules: {e}")
            return NeedsFallback(reason=f"oracle error: {e}")

        artist_name = (data.get("artistName") or "").strip() if data["hasArtist"] else ""
        if not artist_name:
            return Rejected(reason="oracle found no artist")
        if not looks_like_person_name(artist_name):
            logger.info(f"Oracle name {artist_name!r} rejected by name classifier")
            return Rejected(reason="oracle name is not a person name")

        confidence = float(data["confidence"])
        reasoning = data.get("reasoning") or None
        suggested_title = data.get("suggestedTitle") or generate_suggested_title(title, artist_name)

        threshold = (
            self.settings.ai_artist_informal_threshold
            if informal_candidate
            else self.settings.ai_artist_threshold
        )
        if confidence > threshold:
            return Accepted(
                DetectionResult(
                    detected_artist=artist_name,
                    suggested_title=suggested_title,
                    confidence=confidence,
                    source=DetectionSource.AI,
                    found_in=found_in,
                    reasoning=reasoning,
                    object_type=object_type,
                    verification=await self._verify(artist_name, title, object_type),
                )
            )

        if informal_candidate and informal_candidate.candidate_name.casefold() in artist_name.casefold():
            logger.info(f"Boosting low-confidence oracle answer {artist_name!r} ({confidence})")
            return Accepted(
                DetectionResult(
                    detected_artist=artist_name,
                    suggested_title=suggested_title,
                    confidence=round(min(BOOST_CEILING, confidence + BOOST_AMOUNT), 2),
                    source=DetectionSource.AI_BOOSTED,
                    found_in=found_in,
                    reasoning=f"{reasoning or ''} (förstärkt av informellt mönster)".strip(),
                    object_type=object_type,
                )
            )

        return Rejected(reason=f"oracle confidence {confidence} below threshold {threshold}")

    async def _verify(
        self, artist_name: str, title: str, object_type: Optional[str]
    ) -> Optional[ArtistVerification]:
        if not self.settings.enable_artist_verification:
            return None
        try:
            data = await self.oracle.ask(
                OracleRequest(
                    task=OracleTask.VERIFY_ARTIST,
                    artist_name=artist_name,
                    object_type=object_type,
                    period=extract_period(title),
                )
            )
        except OracleError as e:
            logger.warning(f"Artist verification failed for {artist_name!r}: {e}")
            return None

        confidence = data.get("confidence")
        return ArtistVerification(
            is_verified=data["isVerified"],
            biography=data.get("biography") or None,
            confidence=float(confidence) if isinstance(confidence, (int, float)) else None,
        )

    def _detect_with_rules(
        self, title: str, informal_candidate: Optional[TitleCandidate], found_in: str
    ) -> Optional[DetectionResult]:
        if informal_candidate:
            name = informal_candidate.candidate_name
            name_pattern = r"\s+".join(re.escape(part) for part in name.split())
            remainder = re.sub(rf"^{name_pattern}\s+", "", title, flags=re.IGNORECASE)
            return DetectionResult(
                detected_artist=name,
                suggested_title=_capitalize_first(remainder),
                confidence=INFORMAL_RULE_CONFIDENCE,
                source=DetectionSource.RULES_INFORMAL,
                found_in=found_in,
                object_type=informal_candidate.object_type,
            )
        return detect_misplaced_artist(title, found_in)


def detect_misplaced_artist(title: str, found_in: str = FOUND_IN_TITLE) -> Optional[DetectionResult]:
    """Run the full pattern cascade and score the first plausible name."""
    found = find_first_candidate(title)
    if found is None:
        return None
    descriptor, candidate = found
    confidence = descriptor.fixed_confidence or score_candidate(
        candidate.candidate_name, candidate.object_type
    )
    logger.debug(f"Pattern {descriptor.pattern_id} matched {candidate.candidate_name!r}")
    return DetectionResult(
        detected_artist=candidate.candidate_name,
        suggested_title=candidate.suggested_title,
        confidence=confidence,
        source=DetectionSource.RULES,
        found_in=found_in,
        object_type=candidate.object_type,
    )
