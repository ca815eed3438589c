"""
Structural patterns for finding a person's name inside a catalog title.

Patterns are grouped into five families tried in strict priority order:

1. ALL-CAPS name followed by a period ("LISA LARSON. Skulptur...")
2. informal name typed at the very start ("rolf lidberg papper litografi")
3. comma-inverted "Lastname, Firstname ..." at the start
4. name at the end, after the final period ("FAT, stengods, ... Danmark. Niels Thorsson")
5. name embedded between commas, optionally with life dates or a quoted work title

Within a family every template is expanded into a 3-word and a 2-word
variant, longest first, so a middle name is never cut off. The informal
family is the exception: nothing marks where an unpunctuated name ends, so
the 2-word reading goes first and the 3-word one is only reached when the
classifier rejects it ("carl gustaf malmsten"). The first candidate the
name classifier accepts wins; this is a cascade, not a best-match search.
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple

from auction_lint.constants import (
    DEFAULT_OBJECT_TYPE,
    INFORMAL_SKIP_WORDS,
    LOWER,
    NAME_WORD,
    UPPER,
)
from auction_lint.models import PatternFamily, TitleCandidate
from auction_lint.services.artist_detection.name_classifier import looks_like_person_name
from auction_lint.services.text_utils import capitalize_name, extract_object_type

NAME_ARITIES = (3, 2)
INFORMAL_ARITIES = (2, 3)

_AFTER_NAME = re.compile(r"\s*(?:\([^)]*\))?\s*,?\s*")
_LEADING_WORD = re.compile(rf"^([{UPPER}{LOWER}]+),?\s*", re.IGNORECASE)


@dataclass(frozen=True)
class PatternDescriptor:
    pattern_id: int
    family: PatternFamily
    regex: re.Pattern
    roles: Tuple[str, ...]
    arity: Optional[int]
    fixed_confidence: Optional[float] = None

    def group_for(self, role: str) -> int:
        return self.roles.index(role) + 1


def _name(arity: int) -> str:
    return rf"({NAME_WORD}(?:\s+{NAME_WORD}){{{arity - 1}}})"


def _informal_name(arity: int) -> str:
    return rf"([{LOWER}]+(?:\s+[{LOWER}]+){{{arity - 1}}})"


_OBJ = rf"([{UPPER}]+)"
_INFORMAL_REST = rf"\s+[{LOWER}\s\d-]+"

# (family, template(arity) or fixed regex, roles, flags, fixed confidence)
_TEMPLATES: List[Tuple[PatternFamily, object, Tuple[str, ...], int, Optional[float]]] = [
    (PatternFamily.CAPS_NAME_PERIOD,
     rf"^([{UPPER}\s]{{4,40}})\.\s+(.+)$", ("name", "rest"), 0, 0.9),

    (PatternFamily.INFORMAL_START,
     lambda n: rf"^{_informal_name(n)}{_INFORMAL_REST}", ("name",), re.IGNORECASE, None),

    # middle names belong to the firstname group: "Lindberg, Stig Erik akvarell"
    (PatternFamily.COMMA_INVERTED,
     lambda n: rf"^({NAME_WORD}),\s*{_name(n - 1)}{_INFORMAL_REST}", ("lastname", "firstname"), re.IGNORECASE, None),

    (PatternFamily.NAME_AT_END,
     lambda n: rf"^{_OBJ},\s*[{LOWER}\s]+,\s*[{UPPER}][^,]+,\s*[{UPPER}][^.]+\.\s*{_name(n)}$",
     ("object", "name"), re.IGNORECASE, None),
    (PatternFamily.NAME_AT_END,
     lambda n: rf"^{_OBJ},\s*\d+\s*st,\s*[{LOWER}\s]+,\s*[^.]+\.\s*{_name(n)}$",
     ("object", "name"), re.IGNORECASE, None),
    (PatternFamily.NAME_AT_END,
     lambda n: rf"^{_OBJ},\s*[{LOWER}\s]+,\s*[^,]+,\s*[^.]+\.\s*{_name(n)}$",
     ("object", "name"), re.IGNORECASE, None),
    (PatternFamily.NAME_AT_END,
     lambda n: rf"^{_OBJ},\s*[^.]+\.\s*{_name(n)}$",
     ("object", "name"), re.IGNORECASE, None),
    (PatternFamily.NAME_AT_END,
     lambda n: rf"^(.+)\.\s*{_name(n)}$",
     ("content", "name"), 0, None),

    # SEJDLAR, 8 st, glas, "Droppring" Timo Sarpaneva, Iittala, Finland.
    (PatternFamily.EMBEDDED,
     lambda n: rf'^{_OBJ},\s*\d+\s*st,\s*[{LOWER}]+,\s*"[^"]+"\s*{_name(n)},\s*.+',
     ("object", "name"), re.IGNORECASE, None),
    # unclosed quote: TAVLA, olja, "Sommar, Anna Berg
    (PatternFamily.EMBEDDED,
     lambda n: rf'^{_OBJ},\s*[^,]+,\s*"[^,"]+,\s*{_name(n)}',
     ("object", "name"), re.IGNORECASE, None),
    (PatternFamily.EMBEDDED,
     lambda n: rf"^{_OBJ},\s*[{LOWER}\s]+,\s*[{LOWER}\s]+,\s*{_name(n)},\s*.+",
     ("object", "name"), re.IGNORECASE, None),
    # MATTA, rölakan, Anna Johanna Ångström Axeco.192 x 138 cm.
    (PatternFamily.EMBEDDED,
     lambda n: rf"^{_OBJ},\s*[{LOWER}]+,\s*{_name(n)}\s+[{UPPER}][{LOWER}]+\.\d+",
     ("object", "name"), re.IGNORECASE, None),
    # BÖCKER och LITOGRAFI, 3 st böcker Lennart Sand, ...
    (PatternFamily.EMBEDDED,
     lambda n: rf"^([{UPPER}]+\s+och\s+[{UPPER}]+),\s*\d+\s+st\s+[{LOWER}]+\s+{_name(n)},\s*.+",
     ("object", "name"), re.IGNORECASE, None),
    (PatternFamily.EMBEDDED,
     lambda n: rf'^{_OBJ},\s*{_name(n)},\s*"[^"]+"',
     ("object", "name"), re.IGNORECASE, None),
    # POKAL silver, Lars Löfgren (1797-1853), Hudiksvall. 17/1800-tal.
    (PatternFamily.EMBEDDED,
     lambda n: rf"^{_OBJ}\s+[{LOWER}]+,\s*{_name(n)}\s*(?:\([^)]+\))?,\s*.+",
     ("object", "name"), re.IGNORECASE, None),
    (PatternFamily.EMBEDDED,
     lambda n: rf"^{_OBJ},\s*{_name(n)}\s*(?:\([^)]+\))?,\s*.+",
     ("object", "name"), re.IGNORECASE, None),
    # TAVLA, olja på duk, Pablo Picasso, kubistisk stil
    (PatternFamily.EMBEDDED,
     lambda n: rf"^{_OBJ},\s*[{LOWER}\s]+,\s*{_name(n)},\s*.+",
     ("object", "name"), re.IGNORECASE, None),
    (PatternFamily.EMBEDDED,
     lambda n: rf"^{_OBJ},\s*[{LOWER}\s]+,\s*[{LOWER}]+,\s*{_name(n)},\s*.+",
     ("object", "name"), re.IGNORECASE, None),
]


def _build_table() -> List[PatternDescriptor]:
    table: List[PatternDescriptor] = []
    for family, template, roles, flags, fixed_confidence in _TEMPLATES:
        if callable(template):
            arities = INFORMAL_ARITIES if family == PatternFamily.INFORMAL_START else NAME_ARITIES
            variants = [(template(n), n) for n in arities]
        else:
            variants = [(template, None)]
        for source, arity in variants:
            table.append(
                PatternDescriptor(
                    pattern_id=len(table) + 1,
                    family=family,
                    regex=re.compile(source, flags),
                    roles=roles,
                    arity=arity,
                    fixed_confidence=fixed_confidence,
                )
            )
    return table


PATTERN_TABLE: List[PatternDescriptor] = _build_table()


def _split_object_from_rest(rest: str) -> Tuple[str, str]:
    """Pick the first meaningful word of a free-text remainder as object type."""
    words = rest.split()
    meaningful = [
        word.strip(",.;:")
        for word in words
        if len(word.strip(",.;:")) > 2
        and not word[0].isdigit()
        and word.strip(",.;:").lower() not in INFORMAL_SKIP_WORDS
    ]
    if not meaningful:
        return DEFAULT_OBJECT_TYPE, " ".join(words)
    object_type = meaningful[0].upper()
    if words and words[0].strip(",.;:").upper() == object_type:
        words = words[1:]
    return object_type, " ".join(words).lstrip(",; ")


def _cut_name(title: str, object_end: int, name_start: int, name_end: int) -> str:
    before = title[object_end:name_start].strip(" ,")
    after = title[_AFTER_NAME.match(title, name_end).end():].strip()
    return ", ".join(part for part in (before, after) if part)


def _build_caps(match: re.Match, descriptor: PatternDescriptor, title: str) -> Optional[TitleCandidate]:
    rest = match.group(descriptor.group_for("rest")).strip()
    return TitleCandidate(
        object_type=extract_object_type(rest) or DEFAULT_OBJECT_TYPE,
        candidate_name=match.group(descriptor.group_for("name")).strip(),
        remainder=rest,
        pattern_id=descriptor.pattern_id,
        family=descriptor.family,
    )


def _build_informal(match: re.Match, descriptor: PatternDescriptor, title: str) -> Optional[TitleCandidate]:
    name_group = descriptor.group_for("name")
    object_type, remainder = _split_object_from_rest(title[match.end(name_group):].strip())
    return TitleCandidate(
        object_type=object_type,
        candidate_name=capitalize_name(match.group(name_group)),
        remainder=remainder,
        pattern_id=descriptor.pattern_id,
        family=descriptor.family,
    )


def _build_comma_inverted(match: re.Match, descriptor: PatternDescriptor, title: str) -> Optional[TitleCandidate]:
    lastname = match.group(descriptor.group_for("lastname"))
    # "TAVLA, olja ..." is an object type, not a surname
    if lastname.isupper():
        return None
    first_group = descriptor.group_for("firstname")
    object_type, remainder = _split_object_from_rest(title[match.end(first_group):].strip())
    return TitleCandidate(
        object_type=object_type,
        candidate_name=capitalize_name(f"{match.group(first_group)} {lastname}"),
        remainder=remainder,
        pattern_id=descriptor.pattern_id,
        family=descriptor.family,
    )


def _build_name_at_end(match: re.Match, descriptor: PatternDescriptor, title: str) -> Optional[TitleCandidate]:
    name_group = descriptor.group_for("name")
    content = title[:match.start(name_group)].strip()
    object_type = extract_object_type(content) or DEFAULT_OBJECT_TYPE

    leading = _LEADING_WORD.match(content)
    if leading and leading.group(1).upper() == object_type:
        content = content[leading.end():]
    remainder = content.strip().rstrip(".").strip()

    return TitleCandidate(
        object_type=object_type,
        candidate_name=match.group(name_group).strip(),
        remainder=remainder,
        pattern_id=descriptor.pattern_id,
        family=descriptor.family,
    )


def _build_embedded(match: re.Match, descriptor: PatternDescriptor, title: str) -> Optional[TitleCandidate]:
    object_group = descriptor.group_for("object")
    name_group = descriptor.group_for("name")
    return TitleCandidate(
        object_type=match.group(object_group),
        candidate_name=match.group(name_group).strip(),
        remainder=_cut_name(title, match.end(object_group), match.start(name_group), match.end(name_group)),
        pattern_id=descriptor.pattern_id,
        family=descriptor.family,
    )


_BUILDERS: dict[PatternFamily, Callable[[re.Match, PatternDescriptor, str], Optional[TitleCandidate]]] = {
    PatternFamily.CAPS_NAME_PERIOD: _build_caps,
    PatternFamily.INFORMAL_START: _build_informal,
    PatternFamily.COMMA_INVERTED: _build_comma_inverted,
    PatternFamily.NAME_AT_END: _build_name_at_end,
    PatternFamily.EMBEDDED: _build_embedded,
}


def extract_candidates(
    title: str,
    families: Optional[Tuple[PatternFamily, ...]] = None,
) -> Iterator[Tuple[PatternDescriptor, TitleCandidate]]:
    """Yield every structural reading of the title, in priority order."""
    if not title:
        return
    for descriptor in PATTERN_TABLE:
        if families and descriptor.family not in families:
            continue
        match = descriptor.regex.match(title)
        if not match:
            continue
        candidate = _BUILDERS[descriptor.family](match, descriptor, title)
        if candidate is not None:
            yield descriptor, candidate


def find_first_candidate(
    title: str,
    families: Optional[Tuple[PatternFamily, ...]] = None,
) -> Optional[Tuple[PatternDescriptor, TitleCandidate]]:
    """Short-circuit the cascade at the first candidate that looks like a person."""
    for descriptor, candidate in extract_candidates(title, families):
        if looks_like_person_name(candidate.candidate_name):
            return descriptor, candidate
    return None


def find_informal_artist(title: str) -> Optional[str]:
    """Name typed without structure at the start of the title, capitalized, or None."""
    found = find_first_candidate(title, families=(PatternFamily.INFORMAL_START,))
    return found[1].candidate_name if found else None
