UPPER = "A-ZÅÄÖÜ"
LOWER = "a-zåäöü"

# Title-Case word, e.g. "Lidberg"
NAME_WORD = rf"[{UPPER}][{LOWER}]+"

PERIOD_PATTERNS = [
    r"(\d{4})",
    r"(\d{2,4}-tal)",
    r"(\d{2}/\d{4}-tal)",
]

FOUND_IN_TITLE = "titel"
FOUND_IN_TITLE_REPEAT = "titel (upprepad sökning)"
UNTITLED_FALLBACK = "Titel utan konstnärsnamn"
DEFAULT_OBJECT_TYPE = "OBJEKT"
