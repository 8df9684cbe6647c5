"""Data cleaning for roster exports.

Handles standardization before scoring:
- Map vehicle class codes and API names to canonical class tags
  (DD -> fast-attack, Battleship -> battleship, ...)
- Drop rows with no usable class or tier
- Coerce counts to integers and keep wins/survivals within battles
- De-duplicate vehicle rows
"""

import logging
from typing import Optional

import pandas as pd

from src.data_pipeline.config import INTEGER_COLUMNS
from src.scoring.config import (
    BATTLESHIP,
    CARRIER,
    FAST_ATTACK,
    HEAVY_CRUISER,
    SUBMARINE,
    VEHICLE_CLASSES,
)

logger = logging.getLogger(__name__)

# Short codes and stats-API type names -> canonical class tag (lowercase keys)
VEHICLE_CLASS_ALIASES = {
    "dd": FAST_ATTACK,
    "destroyer": FAST_ATTACK,
    "ca": HEAVY_CRUISER,
    "cruiser": HEAVY_CRUISER,
    "bb": BATTLESHIP,
    "battleship": BATTLESHIP,
    "cv": CARRIER,
    "aircarrier": CARRIER,
    "ss": SUBMARINE,
    "submarine": SUBMARINE,
}


class VehicleDataCleaner:
    """Cleans and standardizes roster rows for scoring."""

    # ------------------------------------------------------------------
    # Class helpers
    # ------------------------------------------------------------------
    @staticmethod
    def normalize_vehicle_class(raw_class) -> Optional[str]:
        """Map a raw class label to its canonical tag.

        Examples:
            "DD"          -> "fast-attack"
            "AirCarrier"  -> "carrier"
            "battleship"  -> "battleship"
            "Frigate"     -> None
        """
        if pd.isna(raw_class):
            return None

        label = str(raw_class).strip().strip('"')
        if label == "":
            return None

        key = label.lower()
        if key in VEHICLE_CLASSES:
            return key
        return VEHICLE_CLASS_ALIASES.get(key.replace(" ", "").replace("_", ""))

    # ------------------------------------------------------------------
    # DataFrame-level cleaning
    # ------------------------------------------------------------------
    def clean(self, df: pd.DataFrame) -> pd.DataFrame:
        """Clean a roster DataFrame from :class:`RosterIngester`.

        Returns a copy where ``vehicle_class`` holds canonical tags,
        ``tier``/``battles``/``wins``/``survived`` are ints and
        ``vehicle_id`` is unique (last row wins).
        """
        out = df.copy()
        out["vehicle_class"] = out["vehicle_class"].apply(self.normalize_vehicle_class)

        unknown = out["vehicle_class"].isna()
        if unknown.any():
            logger.warning(
                "Dropping %d rows with unrecognized vehicle class: %s",
                unknown.sum(),
                df.loc[unknown, "vehicle_id"].tolist(),
            )
            out = out[~unknown]

        no_tier = out["tier"].isna()
        if no_tier.any():
            logger.warning(
                "Dropping %d rows with no tier: %s",
                no_tier.sum(),
                out.loc[no_tier, "vehicle_id"].tolist(),
            )
            out = out[~no_tier]

        for col in INTEGER_COLUMNS:
            out[col] = out[col].fillna(0).astype(int)
        out["battles"] = out["battles"].clip(lower=0)
        out["wins"] = out["wins"].clip(lower=0, upper=out["battles"])
        out["survived"] = out["survived"].clip(lower=0, upper=out["battles"])
        out["avg_damage"] = out["avg_damage"].fillna(0.0)

        dupes = out["vehicle_id"].duplicated(keep="last")
        if dupes.any():
            logger.warning("Dropping %d duplicate vehicle rows", dupes.sum())
            out = out[~dupes]

        out = out.reset_index(drop=True)
        logger.info("Cleaned roster: %d rows", len(out))
        return out
