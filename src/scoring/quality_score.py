"""Quality score for a single vehicle.

Each of four performance components is expressed as a ratio against the
expected value for the vehicle's tier and class, combined with fixed
weights and scaled so that baseline performance scores 100. A reliability
discount is applied for small battle samples.
"""

import logging
from typing import Iterable, List, Mapping

from src.scoring.config import (
    BASELINE_TABLE,
    DEFAULT_VEHICLE_CLASS,
    FULL_CONFIDENCE_BATTLES,
    LOW_SAMPLE_BATTLES,
    LOW_SAMPLE_FLOOR,
    LOW_SAMPLE_RAMP,
    NEUTRAL_FRAG_RATIO,
    SCORE_SCALE,
    SCORE_WEIGHTS,
)
from src.scoring.models import Baseline, ScoredVehicle, VehicleMetrics, VehicleRecord

logger = logging.getLogger(__name__)


def resolve_baseline(
    tier: int,
    vehicle_class: str,
    table: Mapping[int, Mapping[str, Baseline]] = BASELINE_TABLE,
) -> Baseline:
    """Look up the expected baseline for a tier and class.

    Resolution order:

    1. Exact tier, else the nearest tier by absolute distance. Tiers are
       scanned in ascending order, so a tie goes to the lower tier.
    2. The requested class within that tier, else
       :data:`DEFAULT_VEHICLE_CLASS`.
    """
    if tier in table:
        resolved_tier = tier
    else:
        resolved_tier = min(sorted(table), key=lambda t: abs(t - tier))
        logger.debug("No baseline for tier %s, using tier %s", tier, resolved_tier)

    by_class = table[resolved_tier]
    if vehicle_class in by_class:
        return by_class[vehicle_class]

    logger.debug(
        "No tier %s baseline for class %r, using %r",
        resolved_tier, vehicle_class, DEFAULT_VEHICLE_CLASS,
    )
    return by_class[DEFAULT_VEHICLE_CLASS]


def reliability_factor(battles: int) -> float:
    """Multiplier that discounts scores built on few battles.

    Formula::

        battles < 10:        battles / 10
        10 <= battles < 50:  0.8 + 0.2 * (battles - 10) / 40
        battles >= 50:       1.0
    """
    if battles < LOW_SAMPLE_BATTLES:
        return battles / LOW_SAMPLE_BATTLES
    if battles < FULL_CONFIDENCE_BATTLES:
        span = FULL_CONFIDENCE_BATTLES - LOW_SAMPLE_BATTLES
        return LOW_SAMPLE_FLOOR + LOW_SAMPLE_RAMP * (battles - LOW_SAMPLE_BATTLES) / span
    return 1.0


def calculate_quality_score(metrics: VehicleMetrics) -> float:
    """Compute the quality score for one vehicle.

    Args:
        metrics: Per-vehicle performance inputs. ``avg_frags`` may be None,
            in which case the frag component counts as exactly baseline.

    Returns:
        The weighted, scaled and reliability-discounted score. A vehicle at
        baseline with 50+ battles scores 100.
    """
    expected = resolve_baseline(metrics.tier, metrics.vehicle_class)

    if metrics.avg_frags is None:
        frag_ratio = NEUTRAL_FRAG_RATIO
    else:
        frag_ratio = metrics.avg_frags / expected.frags

    weighted = (
        metrics.win_rate / expected.win_rate * SCORE_WEIGHTS["win_rate"]
        + metrics.survival_rate / expected.survival_rate * SCORE_WEIGHTS["survival_rate"]
        + metrics.avg_damage / expected.damage * SCORE_WEIGHTS["damage"]
        + frag_ratio * SCORE_WEIGHTS["frags"]
    )

    return weighted * SCORE_SCALE * reliability_factor(metrics.battles)


def expected_damage(tier: int, vehicle_class: str) -> float:
    """Expected average damage for a tier and class."""
    return resolve_baseline(tier, vehicle_class).damage


def damage_ratio(avg_damage: float, tier: int, vehicle_class: str) -> float:
    """Actual average damage divided by the expected damage."""
    return avg_damage / expected_damage(tier, vehicle_class)


def score_vehicle(record: VehicleRecord) -> ScoredVehicle:
    """Score a stored vehicle record, returning a new ScoredVehicle."""
    metrics = record.to_metrics()
    return ScoredVehicle(
        record=record,
        quality_score=calculate_quality_score(metrics),
        win_rate=metrics.win_rate,
        survival_rate=metrics.survival_rate,
        avg_damage=metrics.avg_damage,
        expected_damage=expected_damage(record.tier, record.vehicle_class),
        damage_ratio=damage_ratio(record.avg_damage, record.tier, record.vehicle_class),
    )


def score_vehicles(records: Iterable[VehicleRecord]) -> List[ScoredVehicle]:
    """Score many records, preserving input order."""
    scored = [score_vehicle(r) for r in records]
    logger.debug("Scored %d vehicles", len(scored))
    return scored

