"""
Text helpers shared by artist detection and spellchecking.

Covers title parsing (object type, period), name capitalization,
diacritic folding, and parsing JSON out of LLM replies.
"""

import json
import re
from typing import Optional

from auction_lint.constants import (
    NAME_PARTICLES,
    PERIOD_PATTERNS,
    UNTITLED_FALLBACK,
    UPPER,
    LOWER,
)

_DIACRITIC_TABLE = str.maketrans({
    "ä": "a", "à": "a", "á": "a", "â": "a", "ã": "a", "å": "a",
    "ö": "o", "ò": "o", "ó": "o", "ô": "o", "õ": "o",
    "ü": "u", "ù": "u", "ú": "u", "û": "u",
    "é": "e", "è": "e", "ê": "e", "ë": "e",
})


def capitalize_name(name: str) -> str:
    """'rolf LIDBERG' -> 'Rolf Lidberg'."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in name.split())


def title_case_artist(text: str) -> str:
    """Upper-case the first letter of each lower-case word, leaving name particles alone."""
    def _fix(match: re.Match) -> str:
        word = match.group(0)
        if word in NAME_PARTICLES:
            return word
        return word[0].upper() + word[1:]

    return re.sub(rf"(?<![^\W\d_])[{LOWER}][{LOWER}]*(?![^\W\d_])", _fix, text)


def normalize_diacritics(word: str) -> str:
    return word.lower().translate(_DIACRITIC_TABLE)


def differ_only_in_diacritics(word1: str, word2: str) -> bool:
    """True for pairs like 'Hermes'/'Hermès': equal once accents are folded, different before."""
    if not word1 or not word2:
        return False
    return (
        normalize_diacritics(word1) == normalize_diacritics(word2)
        and word1.lower() != word2.lower()
    )


def extract_object_type(title: str) -> Optional[str]:
    if not title:
        return None
    match = re.match(rf"^([{UPPER}]+)(?![{LOWER}])", title)
    if match and len(match.group(1)) > 1:
        return match.group(1)
    match = re.match(rf"^([{UPPER}][{LOWER}]+)", title)
    if match:
        return match.group(1).upper()
    return None


def extract_period(title: str) -> Optional[str]:
    for pattern in PERIOD_PATTERNS:
        match = re.search(pattern, title or "")
        if match:
            return match.group(1)
    return None


def generate_suggested_title(original_title: str, artist_name: str) -> str:
    """Remove the artist name from a title, leading 'Name,' form first."""
    name_pattern = r"\s+".join(re.escape(part) for part in artist_name.split())
    cleaned = re.sub(rf"^{name_pattern},?\s*", "", original_title, flags=re.IGNORECASE)
    cleaned = re.sub(name_pattern, "", cleaned, count=1, flags=re.IGNORECASE)
    cleaned = re.sub(r",\s*,", ",", cleaned)
    cleaned = re.sub(r"\s{2,}", " ", cleaned).strip(" ,")
    return cleaned or UNTITLED_FALLBACK


def _parse_json_response(response: str) -> dict | None:
    """Parse a JSON object out of an LLM reply."""
    response = (response or "").strip()

    if response.startswith("```json"):
        response = response[7:]
    if response.startswith("```"):
        response = response[3:]
    if response.endswith("```"):
        response = response[:-3]
    response = response.strip()

    try:
        parsed = json.loads(response)
        return parsed if isinstance(parsed, dict) else None
    except json.JSONDecodeError:
        json_match = re.search(r"\{[\s\S]*\}", response)
        if json_match:
            try:
                parsed = json.loads(json_match.group(0))
                return parsed if isinstance(parsed, dict) else None
            except json.JSONDecodeError:
                pass

    return None
