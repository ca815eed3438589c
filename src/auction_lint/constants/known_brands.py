KNOWN_BRANDS = [
    # swiss watches
    {"name": "Lemania", "variants": ["Lemonia", "Lemaina", "Lemenia"], "category": "watches", "confidence": 0.95},
    {"name": "Omega", "variants": ["Omaga", "Omege"], "category": "watches", "confidence": 0.95},
    {"name": "Rolex", "variants": ["Rollex", "Roleex"], "category": "watches", "confidence": 0.95},
    {"name": "Patek Philippe", "variants": ["Pateck Philippe", "Patek Philip"], "category": "watches", "confidence": 0.95},
    {"name": "Vacheron Constantin", "variants": ["Vacheron Konstatin"], "category": "watches", "confidence": 0.95},
    # scandinavian glass
    {"name": "Orrefors", "variants": ["Orefors", "Orrefross"], "category": "glass", "confidence": 0.90},
    {"name": "Kosta Boda", "variants": ["Kosta", "Kostaboda"], "category": "glass", "confidence": 0.90},
    {"name": "Iittala", "variants": ["Itala", "Iitala"], "category": "glass", "confidence": 0.90},
    {"name": "Nuutajärvi", "variants": ["Nuutajarvi", "Nutajarvi"], "category": "glass", "confidence": 0.85},
    # scandinavian ceramics
    {"name": "Gustavsberg", "variants": ["Gustavberg", "Gustavsber"], "category": "ceramics", "confidence": 0.90},
    {"name": "Rörstrand", "variants": ["Rorstrand", "Rörstran"], "category": "ceramics", "confidence": 0.90},
    {"name": "Arabia", "variants": ["Arabie", "Aravia"], "category": "ceramics", "confidence": 0.90},
    {"name": "Royal Copenhagen", "variants": ["Royal Kopenhagen", "Rojal Copenhagen"], "category": "ceramics", "confidence": 0.95},
    {"name": "Bing & Grøndahl", "variants": ["Bing Grondahl", "Bing Gröndahl"], "category": "ceramics", "confidence": 0.90},
    # furniture and design
    {"name": "Svenskt Tenn", "variants": ["Svensk Tenn", "Svenskttenn"], "category": "furniture", "confidence": 0.85},
    {"name": "Källemo", "variants": ["Kallemo", "Kälemo"], "category": "furniture", "confidence": 0.85},
    {"name": "Lammhults", "variants": ["Lamhults", "Lammmhults"], "category": "furniture", "confidence": 0.85},
    # international luxury
    {"name": "Hermès", "variants": ["Hermes", "Hermés"], "category": "luxury", "confidence": 0.95},
    {"name": "Louis Vuitton", "variants": ["Louis Vitton", "Luis Vuitton"], "category": "luxury", "confidence": 0.95},
    {"name": "Cartier", "variants": ["Cartie", "Cartier"], "category": "luxury", "confidence": 0.95},
]
