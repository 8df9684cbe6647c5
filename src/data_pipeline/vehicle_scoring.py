"""Quality-score calculation over a cleaned roster DataFrame.

Applies the per-vehicle quality-score model row by row and converts the
result into the ScoredVehicle objects the lineup optimizer consumes.
"""

import logging
import math
from typing import List, Optional

import pandas as pd

from src.scoring.models import ScoredVehicle, VehicleRecord
from src.scoring.quality_score import score_vehicle

logger = logging.getLogger(__name__)

_SCORE_COLUMNS = (
    "win_rate", "survival_rate", "quality_score", "expected_damage", "damage_ratio",
)


def _safe(val, default=None):
    """Return *default* when *val* is NaN/None/pd.NA, else the value."""
    if val is None or val is pd.NA:
        return default
    if isinstance(val, float) and math.isnan(val):
        return default
    return val


def _optional_float(val) -> Optional[float]:
    val = _safe(val)
    return None if val is None else float(val)


class VehicleFrameScorer:
    """Add quality scores to a cleaned roster DataFrame."""

    def score_frame(self, vehicles_df: pd.DataFrame) -> pd.DataFrame:
        """Add score columns to *vehicles_df*.

        Args:
            vehicles_df: Output of :meth:`VehicleDataCleaner.clean`.

        Returns:
            Copy of *vehicles_df* with added columns ``win_rate``,
            ``survival_rate``, ``quality_score``, ``expected_damage`` and
            ``damage_ratio``.
        """
        out = vehicles_df.copy()
        scored = [score_vehicle(record) for record in self.to_records(out)]

        out["win_rate"] = [v.win_rate for v in scored]
        out["survival_rate"] = [v.survival_rate for v in scored]
        out["quality_score"] = [v.quality_score for v in scored]
        out["expected_damage"] = [float(v.expected_damage) for v in scored]
        out["damage_ratio"] = [v.damage_ratio for v in scored]

        if not out.empty:
            logger.debug(
                "Quality score range=[%.1f, %.1f], mean=%.1f",
                out["quality_score"].min(),
                out["quality_score"].max(),
                out["quality_score"].mean(),
            )
        logger.info("Scored %d vehicles", len(out))
        return out

    @staticmethod
    def to_records(vehicles_df: pd.DataFrame) -> List[VehicleRecord]:
        """Convert cleaned rows to VehicleRecords, in row order."""
        return [
            VehicleRecord(
                vehicle_id=str(row["vehicle_id"]),
                player_id=str(row["player_id"]),
                name=str(row["name"]),
                tier=int(row["tier"]),
                vehicle_class=str(row["vehicle_class"]),
                battles=int(row["battles"]),
                wins=int(row["wins"]),
                survived=int(row["survived"]),
                avg_damage=float(row["avg_damage"]),
                avg_frags=_optional_float(row.get("avg_frags")),
                player_name=str(_safe(row.get("player_name"), "")),
            )
            for _, row in vehicles_df.iterrows()
        ]

    def to_scored_vehicles(self, vehicles_df: pd.DataFrame) -> List[ScoredVehicle]:
        """Convert rows to ScoredVehicles.

        Uses the score columns when :meth:`score_frame` has already been
        applied, otherwise scores each record on the fly.
        """
        records = self.to_records(vehicles_df)
        if not all(col in vehicles_df.columns for col in _SCORE_COLUMNS):
            return [score_vehicle(r) for r in records]

        return [
            ScoredVehicle(
                record=record,
                quality_score=float(row["quality_score"]),
                win_rate=float(row["win_rate"]),
                survival_rate=float(row["survival_rate"]),
                avg_damage=record.avg_damage,
                expected_damage=float(row["expected_damage"]),
                damage_ratio=float(row["damage_ratio"]),
            )
            for record, (_, row) in zip(records, vehicles_df.iterrows())
        ]
