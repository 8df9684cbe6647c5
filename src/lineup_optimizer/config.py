from src.scoring.config import BATTLESHIP, CARRIER, FAST_ATTACK, HEAVY_CRUISER

# Vehicles need strictly more than 10 battles to be considered
DEFAULT_MIN_BATTLES = 11

# Max difference between the lowest and highest selected tier
DEFAULT_MAX_TIER_SPREAD = 2

DEFAULT_MODE = "default"

# Team composition presets by game mode
MODE_COMPOSITIONS = {
    "random": {
        "required_classes": {FAST_ATTACK: 2, HEAVY_CRUISER: 3, BATTLESHIP: 2, CARRIER: 1},
        "min_tier": 5,
        "max_tier": 10,
    },
    "ranked": {
        "required_classes": {FAST_ATTACK: 2, HEAVY_CRUISER: 2, BATTLESHIP: 3},
        "min_tier": 8,
        "max_tier": 10,
        "max_tier_spread": 1,
    },
    "clan": {
        "required_classes": {FAST_ATTACK: 2, HEAVY_CRUISER: 2, BATTLESHIP: 3},
        "min_tier": 10,
        "max_tier": 10,
    },
    "brawl": {
        "required_classes": {FAST_ATTACK: 1, HEAVY_CRUISER: 1, BATTLESHIP: 1},
        "min_tier": 9,
        "max_tier": 10,
    },
    DEFAULT_MODE: {
        "required_classes": {FAST_ATTACK: 2, HEAVY_CRUISER: 2, BATTLESHIP: 3},
        "min_tier": 8,
        "max_tier": 10,
    },
}
