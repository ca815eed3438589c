import re

# Full phrases (case-insensitive) that look like names but are places,
# manufacturers, styles or historical subjects.
EXCLUDED_NAMES = {
    # places
    "stockholm", "göteborg", "malmö", "uppsala", "västerås", "örebro", "linköping",
    "helsingborg", "jönköping", "norrköping", "lund", "umeå", "gävle", "borås",
    # historical figures depicted, not makers
    "napoleon bonaparte", "gustav vasa", "carl gustaf", "victoria bernadotte",
    # manufacturers
    "gustavsberg porslin", "rörstrand porcelain", "orrefors glasbruk", "kosta boda",
    "arabia finland", "royal copenhagen", "bing grondahl", "bing grøndahl",
    "svenskt tenn", "louis vuitton", "patek philippe", "vacheron constantin",
    # styles and periods
    "art deco", "art nouveau", "louis philippe", "carl johan", "gustav iii",
    "jugend stil", "empire stil", "rokoko stil", "barock stil",
    # object and material pairs from hurried entries
    "pappaer litografi", "litografi pappaer", "olja duk", "duk olja",
    "keramik figurin", "figurin keramik", "glas vas", "vas glas",
}

# Single tokens that never occur in a person's name in catalog titles.
NON_NAME_WORDS = {
    # cities
    "stockholm", "göteborg", "malmö", "uppsala", "lund", "danmark", "sverige",
    "finland", "norge", "paris", "london",
    # manufacturers
    "gustavsberg", "rörstrand", "orrefors", "kosta", "boda", "arabia", "royal",
    "copenhagen", "ikea", "lammhults", "källemo", "artek", "iittala", "grondahl",
    "grøndahl", "axeco", "upsala", "ekeby", "vuitton", "hermès", "rolex", "omega",
    "napoleon", "empire",
    # object types
    "tavla", "målning", "akvarell", "litografi", "etsning", "teckning", "skulptur",
    "figurin", "figur", "vas", "skål", "fat", "tallrik", "kopp", "kanna", "karaff",
    "ljusstake", "ljusstakar", "stol", "stolar", "bord", "lampa", "bordslampa",
    "golvlampa", "taklampa", "byrå", "skåp", "spegel", "fåtölj", "soffa", "matta",
    "pokal", "sejdel", "sejdlar", "glas", "bägare", "bricka", "dosa", "armbandsur",
    "fickur", "halsband", "armband", "brosch", "bok", "böcker", "affisch",
    "servis", "urna", "kruka", "ask", "mugg", "plakett", "relief",
    # materials and techniques
    "pappaer", "papper", "olja", "duk", "pannå", "keramik", "stengods", "lergods",
    "fajans", "porslin", "kristall", "silver", "guld", "mässing", "koppar", "tenn",
    "brons", "järn", "trä", "ek", "teak", "björk", "furu", "mahogny", "marmor",
    "emalj", "gouache", "tusch", "blyerts", "pastell", "textil",
    "ull", "rölakan", "glasyr",
    # descriptive nouns from figurine and motif titles
    "kvinna", "man", "flicka", "pojke", "barn", "dame", "herre", "fru", "herr",
    "kvinnor", "män", "flickor", "pojkar", "damer", "herrar",
    "hundar", "katter", "hästar", "fåglar", "blommor", "träd", "hus", "båt",
    "bil", "cykel", "landskap", "motiv", "stilleben", "porträtt",
    # dating and attribution
    "signerad", "osignerad", "daterad", "omkring", "cirka", "troligen", "sekel",
    # prepositions and conjunctions
    "med", "och", "vid", "på", "under", "över", "utan", "för", "till", "från",
    "som", "av", "i", "ur", "mot", "genom", "mellan", "bland", "hos", "åt",
}

# "<noun> med <noun>", "<word> och <word>" and friends describe a motif.
DESCRIPTIVE_PATTERNS = [
    re.compile(r"\b(?:kvinna|man|flicka|pojke|barn|dame|herre)\s+med\b", re.IGNORECASE),
    re.compile(r"\w+\s+med\s+\w+", re.IGNORECASE),
    re.compile(r"\w+\s+och\s+\w+", re.IGNORECASE),
    re.compile(r"\w+\s+vid\s+\w+", re.IGNORECASE),
    re.compile(r"\w+\s+på\s+\w+", re.IGNORECASE),
    re.compile(r"\w+\s+under\s+\w+", re.IGNORECASE),
]

ARTIST_OBJECT_TYPES = {"TAVLA", "MÅLNING", "AKVARELL", "LITOGRAFI", "ETSNING", "SKULPTUR", "TECKNING"}

DESIGNER_OBJECT_TYPES = {"STOL", "BORD", "LAMPA", "VAS", "SKÅL", "FAT"}

# Skipped when picking the object type out of an informal remainder
INFORMAL_SKIP_WORDS = {"och", "på", "i", "av", "med", "för"}

# Lower-case name particles kept as-is when title-casing an artist name
NAME_PARTICLES = {"av", "af", "de", "le", "la", "di", "du", "von", "van", "den", "der", "del"}
