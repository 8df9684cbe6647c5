from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
PROCESSED_DATA_DIR = DATA_DIR / "processed"

# Columns every roster CSV must provide
ROSTER_COLUMNS = [
    "vehicle_id", "player_id", "name", "tier", "vehicle_class",
    "battles", "wins", "survived", "avg_damage",
]

# Columns filled with NaN / "" when absent
OPTIONAL_COLUMNS = ["player_name", "avg_frags"]

NUMERIC_COLUMNS = ["tier", "battles", "wins", "survived", "avg_damage", "avg_frags"]

# Count columns stored as integers after cleaning
INTEGER_COLUMNS = ["tier", "battles", "wins", "survived"]
