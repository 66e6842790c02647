"""Keyword tables used to classify and normalize catalogue wines."""

SPARKLING_INDICATORS = ("champagne", "prosecco", "cava", "sparkling", "crémant")

ROSE_INDICATORS = ("rosé", "rose")
ROSE_EXACT = ("rosato",)

DESSERT_INDICATORS = ("port", "sherry", "madeira", "moscato", "ice wine", "late harvest")

WHITE_GRAPES = (
    "chardonnay",
    "sauvignon blanc",
    "riesling",
    "pinot grigio",
    "pinot gris",
    "gewürztraminer",
    "viognier",
    "albariño",
    "grüner veltliner",
    "chenin blanc",
    "white blend",
    "trebbiano",
    "vermentino",
    "muscadet",
    "sémillon",
    "müller-thurgau",
    "torrontés",
    "verdejo",
    "fiano",
    "arneis",
    "cortese",
    "verdicchio",
    "friulano",
    "garganega",
    "pecorino",
    "greco",
    "falanghina",
    "malvasia",
    "marsanne",
    "roussanne",
    "melon",
    "silvaner",
    "scheurebe",
)

RED_GRAPES = (
    "cabernet sauvignon",
    "merlot",
    "pinot noir",
    "syrah",
    "shiraz",
    "zinfandel",
    "malbec",
    "tempranillo",
    "sangiovese",
    "nebbiolo",
    "barbera",
    "primitivo",
    "grenache",
    "mourvèdre",
    "petite sirah",
    "carménère",
    "red blend",
    "bordeaux",
    "rioja",
    "chianti",
    "barolo",
    "brunello",
    "amarone",
    "valpolicella",
    "montepulciano",
    "nero d'avola",
    "aglianico",
    "dolcetto",
    "corvina",
    "tannat",
    "pinotage",
    "touriga",
    "gamay",
    "mencía",
    "carignan",
)

GENERIC_RED_INDICATORS = ("red", "rouge", "tinto", "rosso")
GENERIC_WHITE_INDICATORS = ("white", "blanc", "bianco")

# Year tokens 1900-2099 embedded in a title
VINTAGE_PATTERN = r"\b(?:19|20)\d{2}\b"

# Winemag critic score key in WineReference.critic_scores
CRITIC_SCORE_KEY = "wine_enthusiast"
