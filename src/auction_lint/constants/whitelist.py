AUCTION_TERM_WHITELIST = {
    # watches and clocks
    "boett", "boetten", "boettens", "urtavla", "urtavlan",
    "krona", "kronor", "tryckare", "lunett", "lünett",
    "guillocherad", "guillochering", "savonett", "lépine",
    "regulatör", "remontoir", "kronograf", "datumvisning",
    # jewelry
    "rivière", "entourage", "solitär", "cabochon", "pavé",
    "baguette", "marquise", "briljant", "briljanter",
    "karneol", "onyx", "agat", "citrin", "ametist",
    "turmalin", "peridot", "topas", "opal", "safir",
    "rubin", "smaragd", "akvamarinsten", "beryll",
    # furniture
    "plymå", "plymåer", "chiffonjé", "chiffonjer",
    "rocaille", "akantus", "baluster", "pilaster",
    "intarsia", "fanér", "marketeri", "furnering",
    "dragspelsstol", "klaffbord", "piedestal",
    "sekretär", "étagère", "kommod", "guéridon",
    "skänk", "pendyl", "dosa", "dosor",
    # ceramics and glass
    "chamotte", "chamottelera", "glasyr", "glasering",
    "craquelé", "craquelure", "fajans", "flintgods",
    "stengods", "lergods", "terrakotta", "majolika",
    "karott", "karotter", "karaff", "karaffer",
    "terrin", "terriner", "konfektskål", "sockerskål",
    "kandelaber", "girandol", "sockerdricka",
    # art
    "tuschlavering", "lavering", "gouache", "akvarell",
    "litografi", "etsning", "mezzotint", "torrnål",
    "xylografi", "serigrafi", "collografi",
    "psykemålning", "bonadsväv", "tablå",
    "plaquette", "applique", "appliqué",
    "krakelyrer", "krakeleringar",
    # textiles
    "röllakan", "rölakan", "rya", "gobelängteknik",
    "kelim", "flossa", "halvflossa",
    # materials
    "tenn", "emalj", "porfyr", "alabaster",
    "mahogny", "jakaranda", "palisander", "valnöt",
    "björk", "ek", "alm", "ask", "furu",
    "steatit", "serpentin",
    # valid inflections that look like misspellings
    "blått", "rött", "grönt", "gult", "vitt", "brunt", "grått",
    "brett", "djupt", "bred", "djup",
    "tillverkat", "oxiderat", "signerat",
    "gold", "deco", "nouveau",
    # auction terminology
    "bricka", "bägare", "pokal",
}
