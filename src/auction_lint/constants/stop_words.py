STOP_WORDS = {
    # articles, prepositions, pronouns
    "en", "ett", "den", "det", "de", "på", "i", "av", "för", "med",
    "till", "från", "om", "vid", "under", "över", "genom",
    "och", "eller", "men", "att", "som", "när", "där", "här",
    "var", "vad", "hur", "varför",
    # units and abbreviations
    "cm", "mm", "m", "kg", "g", "st", "stk", "ca", "cirka", "c:a",
    # very common words
    "är", "har", "kan", "ska", "blir", "blev", "been",
    "göra", "ha", "se", "få",
}

# Words never treated as the start of a brand candidate
BRAND_STOP_WORDS = {
    "och", "med", "för", "från", "till", "som", "var", "är",
    "den", "det", "att", "på", "av", "cm", "mm", "st", "stk",
}
