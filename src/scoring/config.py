"""Reference values for the quality-score model.

The baseline table holds the expected per-battle performance of an
average vehicle at each tier and class. Scores are ratios against these
values, so a vehicle playing exactly at baseline scores 100.
"""

from types import MappingProxyType

from src.scoring.models import Baseline

# Canonical class tags
FAST_ATTACK = "fast-attack"
HEAVY_CRUISER = "heavy-cruiser"
BATTLESHIP = "battleship"
CARRIER = "carrier"
SUBMARINE = "submarine"

VEHICLE_CLASSES = (FAST_ATTACK, HEAVY_CRUISER, BATTLESHIP, CARRIER, SUBMARINE)

# Used when a tier has no baseline for the requested class
DEFAULT_VEHICLE_CLASS = HEAVY_CRUISER

# Component weights (sum to 1.0)
SCORE_WEIGHTS = MappingProxyType({
    "win_rate": 0.35,
    "survival_rate": 0.15,
    "damage": 0.35,
    "frags": 0.15,
})

SCORE_SCALE = 100.0

# Frag ratio used when no frag average is available
NEUTRAL_FRAG_RATIO = 1.0

# Reliability discount thresholds (battle counts)
LOW_SAMPLE_BATTLES = 10
FULL_CONFIDENCE_BATTLES = 50
LOW_SAMPLE_FLOOR = 0.8
LOW_SAMPLE_RAMP = 0.2  # floor + ramp reaches 1.0 at FULL_CONFIDENCE_BATTLES


def _tier(**by_class):
    return MappingProxyType({cls: Baseline(*values) for cls, values in by_class.items()})


# tier -> class -> (win_rate %, survival_rate %, damage, frags)
BASELINE_TABLE = MappingProxyType({
    5: _tier(**{
        FAST_ATTACK: (50, 30, 25000, 0.7),
        HEAVY_CRUISER: (51, 35, 35000, 0.8),
        BATTLESHIP: (52, 40, 45000, 0.6),
        CARRIER: (50, 60, 40000, 1.0),
    }),
    6: _tier(**{
        FAST_ATTACK: (50, 30, 30000, 0.8),
        HEAVY_CRUISER: (51, 35, 40000, 0.9),
        BATTLESHIP: (52, 40, 55000, 0.7),
        CARRIER: (50, 60, 45000, 1.1),
    }),
    7: _tier(**{
        FAST_ATTACK: (50, 30, 35000, 0.9),
        HEAVY_CRUISER: (51, 35, 45000, 1.0),
        BATTLESHIP: (52, 40, 65000, 0.8),
        CARRIER: (50, 60, 55000, 1.2),
    }),
    8: _tier(**{
        FAST_ATTACK: (50, 30, 40000, 1.0),
        HEAVY_CRUISER: (51, 35, 55000, 1.1),
        BATTLESHIP: (52, 40, 75000, 0.9),
        CARRIER: (50, 60, 65000, 1.3),
    }),
    9: _tier(**{
        FAST_ATTACK: (50, 30, 45000, 1.1),
        HEAVY_CRUISER: (51, 35, 65000, 1.2),
        BATTLESHIP: (52, 40, 85000, 1.0),
        CARRIER: (50, 60, 75000, 1.4),
    }),
    10: _tier(**{
        FAST_ATTACK: (50, 30, 50000, 1.2),
        HEAVY_CRUISER: (51, 35, 75000, 1.3),
        BATTLESHIP: (52, 40, 100000, 1.1),
        CARRIER: (50, 60, 85000, 1.5),
    }),
})
