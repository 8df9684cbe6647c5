"""CSV ingestion for roster exports.

A roster CSV has one row per player-owned vehicle, as dumped by the
data-refresh job. Handles the usual export quirks:
- Comma-formatted numbers (e.g., "85,310.5")
- Quoted / padded string cells
- Blank rows
- Missing optional columns (player_name, avg_frags)
"""

import logging
from pathlib import Path

import pandas as pd

from src.data_pipeline.config import NUMERIC_COLUMNS, OPTIONAL_COLUMNS, ROSTER_COLUMNS

logger = logging.getLogger(__name__)


class IngestionError(Exception):
    """Raised when CSV ingestion fails."""


def _parse_numeric(value):
    """Parse a numeric string that may contain commas (e.g., '3,904.1' -> 3904.1)."""
    if pd.isna(value):
        return float("nan")
    if isinstance(value, (int, float)):
        return float(value)
    s = str(value).replace(",", "").strip().strip('"')
    if s == "" or s.isspace():
        return float("nan")
    try:
        return float(s)
    except ValueError:
        return float("nan")


class RosterIngester:
    """Reads a roster CSV into a DataFrame with parsed numeric columns."""

    def __init__(self, roster_file: Path):
        self.roster_file = Path(roster_file)

    def read_vehicles(self) -> pd.DataFrame:
        """Read the roster file.

        Returns DataFrame with columns:
            vehicle_id, player_id, player_name, name, tier, vehicle_class,
            battles, wins, survived, avg_damage, avg_frags

        Raises:
            FileNotFoundError: If the roster file does not exist.
            IngestionError: If the file cannot be parsed or lacks
                required columns.
        """
        if not self.roster_file.exists():
            raise FileNotFoundError(f"Roster file not found: {self.roster_file}")

        logger.info("Reading roster: %s", self.roster_file.name)
        try:
            df = pd.read_csv(self.roster_file, dtype=str, quotechar='"')
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
            raise IngestionError(f"Failed to read {self.roster_file}: {e}") from e

        df.columns = [str(c).strip().lower() for c in df.columns]

        missing = [c for c in ROSTER_COLUMNS if c not in df.columns]
        if missing:
            raise IngestionError(
                f"{self.roster_file.name} is missing required columns: {', '.join(missing)}"
            )

        # Every column is read as text; strip padding and stray quotes
        for col in df.columns:
            df[col] = df[col].str.strip('"').str.strip()

        if "player_name" not in df.columns:
            df["player_name"] = ""
        if "avg_frags" not in df.columns:
            df["avg_frags"] = float("nan")

        # Drop rows where vehicle_id is missing or blank
        df = df[df["vehicle_id"].notna() & (df["vehicle_id"] != "")]
        df = df.reset_index(drop=True)

        for col in NUMERIC_COLUMNS:
            df[col] = df[col].apply(_parse_numeric).astype(float)

        df["player_name"] = df["player_name"].fillna("")

        logger.info("Loaded %d vehicle rows", len(df))
        return df[ROSTER_COLUMNS + OPTIONAL_COLUMNS]
