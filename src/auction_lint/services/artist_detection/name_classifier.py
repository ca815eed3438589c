"""
Person-name plausibility checks.

``looks_like_person_name`` decides whether a short token sequence could be an
artist's name. ``is_likely_proper_name`` decides, from surrounding text,
whether a single flagged word is part of a name and should be left alone by
the spellchecker.
"""

import re

from auction_lint.constants import (
    DESCRIPTIVE_PATTERNS,
    EXCLUDED_NAMES,
    LOWER,
    NON_NAME_WORDS,
    UPPER,
)


def looks_like_person_name(name: str) -> bool:
    if not name or not isinstance(name, str):
        return False

    trimmed = name.strip()
    words = trimmed.split()
    if len(words) < 2 or len(words) > 3:
        return False

    if any(len(word) < 2 for word in words):
        return False

    # lower-case is fine, informal entries are capitalized later
    if not all(word[0].isalpha() for word in words):
        return False

    lowered = " ".join(words).lower()
    if lowered in EXCLUDED_NAMES:
        return False

    if any(word.lower() in NON_NAME_WORDS for word in words):
        return False

    if any(pattern.search(trimmed) for pattern in DESCRIPTIVE_PATTERNS):
        return False

    return True


def is_likely_proper_name(word: str, full_text: str) -> bool:
    if not word or len(word) < 2:
        return False

    # ALL CAPS words are object types (TAVLA, STOL), not names
    if word == word.upper():
        return False

    escaped = re.escape(word)
    text = full_text or ""

    # initial + surname, "E. Jarup"
    if re.search(rf"(?<![^\W\d_])[{UPPER}]\.\s*{escaped}(?![^\W\d_])", text):
        return True

    if re.match(rf"^[{UPPER}][{LOWER}]", word):
        if re.search(rf",\s*{escaped}(?![^\W\d_])", text):
            return True
        adjacent = (
            rf"[{UPPER}][{LOWER}]+\s+{escaped}(?![^\W\d_])"
            rf"|(?<![^\W\d_]){escaped}\s+[{UPPER}][{LOWER}]+"
        )
        if re.search(adjacent, text):
            return True

    return False
