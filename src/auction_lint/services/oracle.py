"""
AI oracle: the external text-completion service consulted for artist
detection, spellchecking, brand validation and artist verification.

The oracle raises ``OracleError`` subclasses; callers decide what a failure
means (rule fallback for detection, zero issues for spellcheck).
"""

import enum
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import httpx
from openai import OpenAIError

from auction_lint.config import Settings, settings
from auction_lint.prompts import load_prompt, load_system_prompt
from auction_lint.services.chat_client import BaseChatService, get_chat_service
from auction_lint.services.text_utils import _parse_json_response

logger = logging.getLogger(__name__)


class OracleError(Exception):
    """Any failure to obtain a usable answer from the oracle."""


class OracleTransportError(OracleError):
    """Network, auth or configuration failure calling the oracle."""


class OracleMalformedResponse(OracleError):
    """The reply was not JSON or lacked the keys the task requires."""


class OracleTask(str, enum.Enum):
    DETECT_ARTIST = "detect-artist"
    SPELLCHECK = "spellcheck"
    VERIFY_ARTIST = "verify-artist"
    CHECK_ARTIST_NAME = "check-artist-name"
    CHECK_BRANDS = "check-brands"


@dataclass(frozen=True)
class OracleRequest:
    task: OracleTask
    title: Optional[str] = None
    object_type: Optional[str] = None
    artist_field: Optional[str] = None
    description: Optional[str] = None
    text: Optional[str] = None
    field_type: Optional[str] = None
    whitelist: Optional[str] = None
    artist_name: Optional[str] = None
    period: Optional[str] = None
    title_context: Optional[str] = None


class AIOracle(ABC):
    @abstractmethod
    async def ask(self, request: OracleRequest) -> dict:
        """Return the parsed JSON reply for the request's task, or raise OracleError."""


FIELD_LABELS = {
    "title": "titel",
    "condition": "konditionsrapport",
}
DEFAULT_FIELD_LABEL = "beskrivning"

PROMPT_IDS = {
    OracleTask.DETECT_ARTIST: "detect_artist",
    OracleTask.SPELLCHECK: "spellcheck",
    OracleTask.VERIFY_ARTIST: "verify_artist",
    OracleTask.CHECK_ARTIST_NAME: "check_artist_name",
    OracleTask.CHECK_BRANDS: "check_brands",
}


def field_label(field_type: Optional[str]) -> str:
    return FIELD_LABELS.get(field_type or "", DEFAULT_FIELD_LABEL)


def reported_confidence(value, default: float) -> Optional[float]:
    """
    Confidence as reported in an oracle reply.

    Missing or non-numeric values fall back to ``default``; numbers outside
    [0, 1] are not confidences at all and yield None so the caller drops the item.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if not 0 <= value <= 1:
        return None
    return float(value)


def _validate_detect_artist(data: dict) -> dict:
    if not isinstance(data.get("hasArtist"), bool):
        raise OracleMalformedResponse("detect-artist reply lacks boolean 'hasArtist'")
    confidence = data.get("confidence")
    if data["hasArtist"]:
        if not isinstance(confidence, (int, float)) or not 0 <= confidence <= 1:
            raise OracleMalformedResponse("detect-artist reply lacks a confidence in [0, 1]")
    return data


def _validate_spellcheck(data: dict) -> dict:
    issues = data.get("issues")
    if not isinstance(issues, list):
        raise OracleMalformedResponse("spellcheck reply lacks an 'issues' list")
    data["issues"] = [
        issue for issue in issues
        if isinstance(issue, dict) and issue.get("original") and issue.get("corrected")
    ]
    return data


def _validate_verify_artist(data: dict) -> dict:
    # older prompt revisions answered with isRealArtist
    if "isVerified" not in data and "isRealArtist" in data:
        data["isVerified"] = data["isRealArtist"]
    if not isinstance(data.get("isVerified"), bool):
        raise OracleMalformedResponse("verify-artist reply lacks boolean 'isVerified'")
    return data


def _validate_check_artist_name(data: dict) -> dict:
    if "corrected" not in data:
        raise OracleMalformedResponse("check-artist-name reply lacks 'corrected'")
    return data


def _validate_check_brands(data: dict) -> dict:
    issues = data.get("issues")
    if not isinstance(issues, list):
        raise OracleMalformedResponse("check-brands reply lacks an 'issues' list")
    data["issues"] = [
        issue for issue in issues
        if isinstance(issue, dict)
        and isinstance(issue.get("original"), str)
        and isinstance(issue.get("suggested"), str)
        and issue["original"].strip()
        and issue["suggested"].strip()
    ]
    return data


VALIDATORS = {
    OracleTask.DETECT_ARTIST: _validate_detect_artist,
    OracleTask.SPELLCHECK: _validate_spellcheck,
    OracleTask.VERIFY_ARTIST: _validate_verify_artist,
    OracleTask.CHECK_ARTIST_NAME: _validate_check_artist_name,
    OracleTask.CHECK_BRANDS: _validate_check_brands,
}


class LLMOracle(AIOracle):
    def __init__(self, service: BaseChatService):
        self.service = service

    def _render(self, request: OracleRequest) -> tuple[str, Optional[str]]:
        prompt_id = PROMPT_IDS[request.task]
        prompt = load_prompt(
            prompt_id,
            title=request.title or None,
            object_type=request.object_type or None,
            artist_field=request.artist_field or None,
            description=request.description or None,
            text=request.text,
            field_label=field_label(request.field_type),
            title_context=request.title_context or None,
            whitelist=request.whitelist,
            artist_name=request.artist_name,
            period=request.period or None,
        )
        return prompt, load_system_prompt(prompt_id)

    async def ask(self, request: OracleRequest) -> dict:
        try:
            prompt, system_prompt = self._render(request)
            answer, tokens_in, tokens_out, latency = await self.service.query(prompt, system_prompt)
        except (httpx.HTTPError, OpenAIError, ValueError) as e:
            raise OracleTransportError(f"{request.task.value}: {e}") from e
        except (KeyError, IndexError, TypeError) as e:
            raise OracleMalformedResponse(f"{request.task.value}: unexpected completion shape: {e}") from e

        logger.debug(
            f"Oracle {request.task.value}: {tokens_in} in / {tokens_out} out tokens in {latency:.2f}s"
        )

        data = _parse_json_response(answer)
        if data is None:
            raise OracleMalformedResponse(f"{request.task.value}: reply is not a JSON object")
        return VALIDATORS[request.task](data)


def build_oracle(config: Optional[Settings] = None) -> Optional[AIOracle]:
    """The configured oracle, or None when no API key is set."""
    config = config or settings
    if not config.oracle_api_key:
        logger.info("No oracle API key configured; running rules only")
        return None
    return LLMOracle(get_chat_service(config))
