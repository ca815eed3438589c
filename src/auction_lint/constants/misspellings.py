DICTIONARY_CONFIDENCE = 0.85

MISSPELLING_ENTRIES = [
    # colors
    {"correct": "blå", "misspellings": ["blåa"], "category": "color"},
    {"correct": "grön", "misspellings": ["groen"], "category": "color"},
    {"correct": "gul", "misspellings": ["guhl"], "category": "color"},
    {"correct": "vit", "misspellings": ["vhit"], "category": "color"},
    {"correct": "svart", "misspellings": ["swart", "svat"], "category": "color"},
    # materials
    {"correct": "silver", "misspellings": ["sylver", "silwer"], "category": "material"},
    {"correct": "guld", "misspellings": ["gull"], "category": "material"},
    {"correct": "koppar", "misspellings": ["kopar"], "category": "material"},
    {"correct": "mässing", "misspellings": ["masing", "mesing"], "category": "material"},
    {"correct": "porslin", "misspellings": ["porlin", "porslinn"], "category": "material"},
    {"correct": "kristall", "misspellings": ["krystal", "cristall"], "category": "material"},
    {"correct": "marmor", "misspellings": ["marmur"], "category": "material"},
    {"correct": "granit", "misspellings": ["granitt", "graniet"], "category": "material"},
    # condition
    {"correct": "skador", "misspellings": ["skadoor"], "category": "condition"},
    {"correct": "repor", "misspellings": ["reppar", "repar"], "category": "condition"},
    {"correct": "fläckar", "misspellings": ["fleckar", "flackar"], "category": "condition"},
    {"correct": "sprickor", "misspellings": ["sprikor"], "category": "condition"},
    {"correct": "slitage", "misspellings": ["slitasje"], "category": "condition"},
    # periods
    {"correct": "sekel", "misspellings": ["säkel", "sekkel"], "category": "period"},
    {"correct": "århundrade", "misspellings": ["aarhundrade", "arrhundrade"], "category": "period"},
    {"correct": "antik", "misspellings": ["antikk"], "category": "period"},
    {"correct": "vintage", "misspellings": ["vintange", "wintage"], "category": "period"},
    # descriptions
    {"correct": "signerad", "misspellings": ["signeradt"], "category": "description"},
    {"correct": "märkt", "misspellings": ["markt", "märt"], "category": "description"},
    {"correct": "daterad", "misspellings": ["dateradt", "datered"], "category": "description"},
    {"correct": "handmålad", "misspellings": ["handmalad"], "category": "description"},
    {"correct": "förgylld", "misspellings": ["forgylld", "förgöld"], "category": "description"},
    {"correct": "oxiderad", "misspellings": ["oxyderad"], "category": "description"},
    # measurements
    {"correct": "diameter", "misspellings": ["diamater", "diameeter"], "category": "measurement"},
    {"correct": "höjd", "misspellings": ["hojd", "hojt"], "category": "measurement"},
    {"correct": "längd", "misspellings": ["langd", "lenght"], "category": "measurement"},
    {"correct": "vikt", "misspellings": ["viktt"], "category": "measurement"},
    # general
    {"correct": "tillverkad", "misspellings": ["tilverkad"], "category": "general"},
    {"correct": "ursprung", "misspellings": ["ursprumg"], "category": "general"},
    {"correct": "exemplar", "misspellings": ["examplar", "exemplaar"], "category": "general"},
    {"correct": "kollektion", "misspellings": ["kollection"], "category": "general"},
    {"correct": "provenienser", "misspellings": ["proveniense"], "category": "general"},
    {"correct": "balja", "misspellings": ["ballja"], "category": "general"},
    {"correct": "kandelaber", "misspellings": ["kandelabrer"], "category": "general"},
    # auction
    {"correct": "utropspris", "misspellings": ["utropris", "utroppris"], "category": "auction"},
    {"correct": "estimat", "misspellings": ["estimaat"], "category": "auction"},
    {"correct": "klubbslag", "misspellings": ["klubslag", "clubslag"], "category": "auction"},
    {"correct": "budgivning", "misspellings": ["budgiwning"], "category": "auction"},
    {"correct": "försäljning", "misspellings": ["forsaljning", "försäljnig"], "category": "auction"},
    {"correct": "katalog", "misspellings": ["katlog"], "category": "auction"},
    # art
    {"correct": "oljemålning", "misspellings": ["oljemalning"], "category": "art"},
    {"correct": "akvarell", "misspellings": ["aquarell", "akwarelle"], "category": "art"},
    {"correct": "litografi", "misspellings": ["lithografi", "litograaf"], "category": "art"},
    {"correct": "etsning", "misspellings": ["etsninng"], "category": "art"},
    {"correct": "skulptur", "misspellings": ["skulptrur"], "category": "art"},
    {"correct": "målning", "misspellings": ["malning"], "category": "art"},
    {"correct": "tavla", "misspellings": ["tavlla"], "category": "art"},
    # furniture
    {"correct": "möbler", "misspellings": ["mobler"], "category": "furniture"},
    {"correct": "uppsättning", "misspellings": ["upsättning", "uppsettning"], "category": "furniture"},
    {"correct": "stoppning", "misspellings": ["stopning", "stoppninng"], "category": "furniture"},
    {"correct": "polstring", "misspellings": ["polstreing", "polstrig"], "category": "furniture"},
    {"correct": "byrå", "misspellings": ["byråa"], "category": "furniture"},
    {"correct": "skåp", "misspellings": ["skåpp"], "category": "furniture"},
    {"correct": "bord", "misspellings": ["bordd"], "category": "furniture"},
    {"correct": "spegel", "misspellings": ["spegell"], "category": "furniture"},
    {"correct": "fåtölj", "misspellings": ["fåtöllj"], "category": "furniture"},
    # jewelry
    {"correct": "smycken", "misspellings": ["smyken"], "category": "jewelry"},
    {"correct": "berlocker", "misspellings": ["berloker", "berlocks"], "category": "jewelry"},
    {"correct": "diamanter", "misspellings": ["diaments"], "category": "jewelry"},
    {"correct": "edelstenar", "misspellings": ["adelstenar", "edelstener"], "category": "jewelry"},
]

CATEGORY_DISPLAY_NAMES = {
    "color": "färg",
    "material": "material",
    "condition": "skick",
    "period": "tidsperiod",
    "description": "beskrivning",
    "measurement": "mått",
    "general": "allmänt",
    "auction": "auktionstermer",
    "art": "konsttermer",
    "furniture": "möbeltermer",
    "jewelry": "smyckestermer",
    "watches": "klocktermer",
    "glass": "glastermer",
    "ceramics": "keramiktermer",
    "textiles": "textiltermer",
    "luxury": "märken",
}

DEFAULT_DISPLAY_CATEGORY = "stavning"
