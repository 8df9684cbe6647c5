from src.scoring.models import Baseline, ScoredVehicle, VehicleMetrics, VehicleRecord
from src.scoring.quality_score import (
    calculate_quality_score,
    damage_ratio,
    expected_damage,
    reliability_factor,
    resolve_baseline,
    score_vehicle,
    score_vehicles,
)

__all__ = [
    "Baseline",
    "ScoredVehicle",
    "VehicleMetrics",
    "VehicleRecord",
    "calculate_quality_score",
    "damage_ratio",
    "expected_damage",
    "reliability_factor",
    "resolve_baseline",
    "score_vehicle",
    "score_vehicles",
]
